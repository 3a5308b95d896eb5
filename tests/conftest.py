"""Common test fixtures and utilities."""

import pytest
from unittest.mock import MagicMock


@pytest.fixture
def remote_playlist() -> dict:
    """Playlist resource with every optional field present."""
    return {
        "id": "PL1",
        "snippet": {
            "title": "Playlist 1",
            "description": "Description 1",
            "channelTitle": "Channel 1",
            "tags": ["a", "b", "c"],
            "publishedAt": "2020-01-01T00:00:00Z",
        },
        "status": {"privacyStatus": "private"},
    }


@pytest.fixture
def remote_item() -> dict:
    """Playlist item resource with every optional field present."""
    return {
        "id": "item1",
        "snippet": {
            "title": "Video 1",
            "description": "Video description 1",
            "position": 3,
            "publishedAt": "2021-06-01T12:00:00Z",
        },
        "contentDetails": {
            "videoId": "vid1",
            "videoPublishedAt": "2019-05-05T05:05:05Z",
        },
    }


@pytest.fixture
def youtube_client(remote_playlist, remote_item) -> MagicMock:
    """Create a mock YouTube API client.

    Returns:
        MagicMock: Mock client returning one playlist holding one item
    """
    mock = MagicMock()
    mock.playlists.return_value.list.return_value.execute.return_value = {
        "items": [remote_playlist]
    }
    mock.playlistItems.return_value.list.return_value.execute.return_value = {
        "items": [remote_item]
    }
    return mock


def content_block(title=None, channel=None, href=None) -> str:
    """Build one ``#content`` block of a saved playlist page."""
    parts = ['<div id="content">']
    if href is not None:
        parts.append(f'<a class="thumbnail" href="{href}"><img src="t.jpg"></a>')
    parts.append('<div id="meta">')
    if title is not None:
        parts.append(f'<h3><span id="video-title">\n    {title}\n  </span></h3>')
    if channel is not None:
        parts.append(f'<div id="channel-name"><span id="text"> {channel} </span></div>')
    parts.append("</div></div>")
    return "".join(parts)


def snapshot_page(*blocks: str) -> str:
    """Wrap content blocks in a playlist page."""
    return "<html><body><div id='contents'>" + "".join(blocks) + "</div></body></html>"


@pytest.fixture
def watch_later_html() -> str:
    """A saved Watch Later page with five entries, two without a video ID."""
    return snapshot_page(
        content_block("First", "Chan A", "/watch?v=AAA111&list=WL&index=1"),
        content_block("No link", "Chan B"),
        content_block("Second", "Chan C", "/watch?v=BBB222&list=WL&index=3"),
        content_block("Not a video", "Chan D", "/playlist?list=WL"),
        content_block("Third", "Chan E", "/watch?v=CCC333&list=WL&index=5"),
    )


@pytest.fixture
def make_block():
    """Factory for ``#content`` blocks."""
    return content_block


@pytest.fixture
def make_page():
    """Factory for saved playlist pages."""
    return snapshot_page
