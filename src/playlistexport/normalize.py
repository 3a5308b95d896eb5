"""Conversion of YouTube API resources into canonical records."""

from typing import Dict

from .models import Playlist, PlaylistItem
from .utils import get_text, watch_link

UNKNOWN_STATUS = "Unknown"
NO_TITLE = "NO_TITLE"


def normalize_playlist(playlist: Dict) -> Playlist:
    """Build a Playlist record from a playlist resource.

    Items are not fetched here; the returned record has an empty item list.

    Args:
        playlist: Playlist resource as returned by ``playlists().list``

    Returns:
        Playlist with every field resolved to a value or its default
    """
    status = get_text(playlist.get("status"), {})
    info = Playlist(
        id=get_text(playlist.get("id"), ""),
        status=get_text(status.get("privacyStatus"), UNKNOWN_STATUS),
    )

    snippet = get_text(playlist.get("snippet"), {})
    info.title = get_text(snippet.get("title"), NO_TITLE)
    info.description = get_text(snippet.get("description"), "")
    info.channel_title = get_text(snippet.get("channelTitle"), NO_TITLE)
    info.tags = ", ".join(get_text(snippet.get("tags"), []))
    info.published_at = get_text(snippet.get("publishedAt"), NO_TITLE)

    return info


def normalize_item(item: Dict) -> PlaylistItem:
    """Build a PlaylistItem record from a playlist item resource.

    Args:
        item: Playlist item resource as returned by ``playlistItems().list``

    Returns:
        PlaylistItem with every field resolved to a value or its default
    """
    info = PlaylistItem()

    snippet = item.get("snippet")
    if snippet is None:
        return info

    info.title = get_text(snippet.get("title"), "")

    details = item.get("contentDetails")
    if details is not None:
        info.published_at = get_text(details.get("videoPublishedAt"), "")
        info.link = watch_link(get_text(details.get("videoId"), ""))

    info.position_in_playlist = get_text(snippet.get("position"), 0)
    # Snippet timestamp takes precedence over the video's
    info.published_at = get_text(snippet.get("publishedAt"), "")
    info.description = get_text(snippet.get("description"), "")

    return info
