"""Extraction of playlist entries from a saved playlist page.

The Watch Later playlist is not reachable through the API, so its entries are
read from an HTML snapshot of the playlist page saved from a browser. Each
entry of the page is a ``#content`` block holding a ``#video-title`` element,
a ``#text`` element with the channel name and a direct ``<a>`` child linking
to the video.
"""

from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag

from .errors import InputFileError
from .logging_config import get_logger
from .models import SimplePlaylistItem
from .utils import split_video_id

logger = get_logger(__name__)

ITEM_SELECTOR = "#content"
TITLE_SELECTOR = "#video-title"
CHANNEL_SELECTOR = "#text"


def read_snapshot(path: str) -> bytes:
    """Read a saved HTML page.

    The raw bytes are returned so that the parser can detect the page encoding.

    Args:
        path: Path to the HTML file

    Returns:
        The file contents

    Raises:
        InputFileError: If the file is missing or unreadable
    """
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise InputFileError(path, str(e)) from e


def _element_text(block: Tag, selector: str) -> Optional[str]:
    element = block.select_one(selector)
    if element is None:
        return None
    return element.get_text().strip()


def _parse_block(block: Tag) -> SimplePlaylistItem:
    title = _element_text(block, TITLE_SELECTOR)
    if title is None:
        logger.warning("No title?")
        title = ""
    logger.debug("Title: %r", title)

    channel = _element_text(block, CHANNEL_SELECTOR)
    if channel is None:
        logger.warning("No channel title?")
        channel = ""
    logger.debug("Channel: %r", channel)

    anchor = block.find("a", recursive=False)
    if anchor is None:
        logger.warning("No video_link?")
        link = ""
    else:
        link = anchor.get("href", "")
    video_id = split_video_id(link) if link else ""
    logger.debug("Link: %r (id %r)", link, video_id)

    return SimplePlaylistItem(title=title, channel_name=channel, link=link, id=video_id)


def extract(html_text: Union[str, bytes]) -> List[SimplePlaylistItem]:
    """Extract playlist entries from a saved playlist page.

    Malformed entries are kept with empty fields; entries without a video
    ID are dropped.

    Args:
        html_text: Contents of the HTML page, as text or raw bytes

    Returns:
        Entries in page order
    """
    soup = BeautifulSoup(html_text, "html.parser")

    items = [_parse_block(block) for block in soup.select(ITEM_SELECTOR)]
    logger.debug("Found %d content blocks", len(items))

    return [item for item in items if item.id]
