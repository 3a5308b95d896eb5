"""Utility functions for resolving remote fields and video links."""

from typing import Optional, TypeVar

from .logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

WATCH_URL = "https://www.youtube.com/watch?v={}"
VIDEO_MARKER = "watch?v="
LIST_MARKER = "&list="


def get_text(value: Optional[T], default: T) -> T:
    """Return value if present, otherwise default.

    Args:
        value: Optional value read from a remote object
        default: Value to use when it is absent

    Returns:
        The value or the default
    """
    if value is None:
        return default
    return value


def watch_link(video_id: str) -> str:
    """Build the canonical watch URL for a video."""
    return WATCH_URL.format(video_id)


def split_video_id(link: str) -> str:
    """Extract the video ID from a playlist watch link.

    The ID is the text between ``watch?v=`` and ``&list=``. A link without
    ``&list=`` yields everything after ``watch?v=``.

    Args:
        link: A link such as ``/watch?v=ABC123&list=WL&index=1``

    Returns:
        The video ID, or an empty string if the link has no ``watch?v=``
    """
    _, found, rest = link.partition(VIDEO_MARKER)
    if not found:
        logger.debug("No video id in link %r", link)
        return ""
    return rest.split(LIST_MARKER, 1)[0]
