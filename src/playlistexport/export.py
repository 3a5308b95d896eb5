"""Export runs for API playlists and saved playlist pages."""

import json
from typing import List, Sequence, Union

from tqdm import tqdm

from .api import YouTubeAPI
from .errors import FetchError, log_error
from .html_extract import extract, read_snapshot
from .logging_config import get_logger
from .models import Playlist, SimplePlaylistItem
from .normalize import normalize_item, normalize_playlist
from .sink import OutputSink

logger = get_logger(__name__)

FORMATS = ("json", "text")

PLAYLIST_LINE = "{title} ({id}) [{status}] by {channel_title}, published {published_at}"
TAGS_LINE = "  tags: {tags}"
ITEM_LINE = "  {position_in_playlist}. {title} - {link}"
SIMPLE_ITEM_LINE = "{title} - {channel_name} - {link}"

Record = Union[Playlist, SimplePlaylistItem]


def playlist_lines(playlist: Playlist) -> List[str]:
    """Render a playlist and its items as text lines."""
    lines = [PLAYLIST_LINE.format(**playlist.to_dict())]
    if playlist.tags:
        lines.append(TAGS_LINE.format(tags=playlist.tags))
    for item in playlist.items:
        lines.append(ITEM_LINE.format(**item.to_dict()))
    return lines


def simple_item_lines(item: SimplePlaylistItem) -> List[str]:
    """Render a scraped playlist entry as text lines."""
    return [SIMPLE_ITEM_LINE.format(**item.to_dict())]


def emit_records(records: Sequence[Record], sink: OutputSink, fmt: str = "json") -> None:
    """Serialize records to a sink.

    Args:
        records: Records to serialize
        sink: Destination for the output
        fmt: "json" for one JSON array, "text" for one line template per record

    Raises:
        ValueError: If the format is unknown
    """
    if fmt == "json":
        sink.emit(json.dumps([record.to_dict() for record in records], ensure_ascii=False))
    elif fmt == "text":
        for record in records:
            if isinstance(record, Playlist):
                lines = playlist_lines(record)
            else:
                lines = simple_item_lines(record)
            for line in lines:
                sink.emit(line)
    else:
        raise ValueError(f"Unknown output format: {fmt}")


def collect_playlists(api: YouTubeAPI, progress: bool = True) -> List[Playlist]:
    """Fetch all playlists of the user along with their items.

    Playlists without an ID, or whose items cannot be fetched, are skipped.

    Args:
        api: YouTube API wrapper
        progress: Whether to show a progress bar on stderr

    Returns:
        Playlists in the order returned by the API

    Raises:
        FetchError: If the playlists cannot be listed
    """
    playlists = []
    remote_playlists = api.list_playlists()
    logger.info("Found %d playlists", len(remote_playlists))

    for remote in tqdm(remote_playlists, desc="Playlists", unit="playlist", disable=not progress):
        playlist_id = remote.get("id")
        if not playlist_id:
            logger.error("Failed to get playlist id from playlist: %r", remote)
            continue

        try:
            remote_items = api.list_playlist_items(playlist_id)
        except FetchError as e:
            log_error(e, "Skipping playlist")
            continue

        playlist = normalize_playlist(remote)
        playlist.items = [normalize_item(item) for item in remote_items]
        playlists.append(playlist)

    return playlists


def export_playlists(
    api: YouTubeAPI, sink: OutputSink, fmt: str = "json", progress: bool = True
) -> List[Playlist]:
    """Export all playlists of the user to a sink.

    Args:
        api: YouTube API wrapper
        sink: Destination for the output
        fmt: Output format
        progress: Whether to show a progress bar on stderr

    Returns:
        The exported playlists

    Raises:
        FetchError: If the playlists cannot be listed
        OutputError: If the output file cannot be written
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown output format: {fmt}")

    playlists = collect_playlists(api, progress=progress)
    emit_records(playlists, sink, fmt)
    sink.finalize()
    return playlists


def export_watch_later(html_path: str, sink: OutputSink, fmt: str = "json") -> List[SimplePlaylistItem]:
    """Export the entries of a saved playlist page to a sink.

    Args:
        html_path: Path to the saved HTML page
        sink: Destination for the output
        fmt: Output format

    Returns:
        The exported entries

    Raises:
        InputFileError: If the page cannot be read
        OutputError: If the output file cannot be written
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown output format: {fmt}")

    items = extract(read_snapshot(html_path))
    emit_records(items, sink, fmt)
    sink.finalize()
    return items
