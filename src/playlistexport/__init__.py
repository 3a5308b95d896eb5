"""YouTube playlist export tool."""

__version__ = "0.1.0"

# Import all public components
from .api import YouTubeAPI, fetch_all
from .errors import FetchError, InputFileError, OutputError, PlaylistExportError
from .export import export_playlists, export_watch_later
from .html_extract import extract
from .logging_config import configure_logging, get_logger
from .models import Playlist, PlaylistItem, SimplePlaylistItem
from .normalize import normalize_item, normalize_playlist
from .sink import FileSink, StreamSink, create_sink
from .utils import get_text, split_video_id

# Get logger for this module
logger = get_logger(__name__)
