"""YouTube API wrapper."""

from typing import Any, Dict, List, Optional

from .config import MAX_RESULTS
from .errors import FetchError
from .logging_config import get_logger

logger = get_logger(__name__)


def fetch_all(
    resource: Any,
    description: str,
    parent_id: Optional[str] = None,
    **params: Any,
) -> List[Dict]:
    """Fetch every page of a cursor-based listing.

    Args:
        resource: YouTube API collection, e.g. ``youtube.playlists()``
        description: Name of the listing, used in error messages
        parent_id: ID of the playlist being queried, for item-level fetches
        **params: Extra query parameters passed to ``list``

    Returns:
        All items of all pages, in page order

    Raises:
        FetchError: If any listing call fails
    """
    items = []
    page_token = None

    while True:
        try:
            request = resource.list(
                maxResults=MAX_RESULTS,
                pageToken=page_token,
                **params,
            )
            response = request.execute()
        except Exception as e:
            raise FetchError(description, parent_id, str(e)) from e

        page = response.get("items") or []
        items.extend(page)
        logger.debug("Fetched %d %s (%d total)", len(page), description, len(items))

        # An empty page can still carry a cursor
        page_token = response.get("nextPageToken")
        if not page_token:
            break

    return items


class YouTubeAPI:
    """Wrapper for YouTube API listing operations."""

    def __init__(self, youtube):
        """Initialize API wrapper.

        Args:
            youtube: YouTube API client
        """
        self.youtube = youtube

    def list_playlists(self) -> List[Dict]:
        """Get all playlists owned by the authenticated user.

        Returns:
            List of playlist resources

        Raises:
            FetchError: If API request fails
        """
        return fetch_all(
            self.youtube.playlists(),
            "playlists",
            part="snippet,status",
            mine=True,
        )

    def list_playlist_items(self, playlist_id: str) -> List[Dict]:
        """Get all items in a playlist.

        Args:
            playlist_id: ID of playlist to get items from

        Returns:
            List of playlist item resources

        Raises:
            FetchError: If API request fails
        """
        return fetch_all(
            self.youtube.playlistItems(),
            "playlist items",
            parent_id=playlist_id,
            part="snippet,contentDetails",
            playlistId=playlist_id,
        )
