"""Canonical playlist records."""

from dataclasses import asdict, dataclass, field
from typing import Dict, List


@dataclass
class PlaylistItem:
    """A video entry of a playlist fetched from the API."""

    title: str = ""
    link: str = ""
    published_at: str = ""
    position_in_playlist: int = 0
    description: str = ""

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class Playlist:
    """A playlist fetched from the API, with its items."""

    title: str = ""
    description: str = ""
    channel_title: str = ""
    tags: str = ""
    published_at: str = ""
    id: str = ""
    status: str = ""
    items: List[PlaylistItem] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class SimplePlaylistItem:
    """A video entry scraped from a saved playlist page."""

    title: str = ""
    channel_name: str = ""
    link: str = ""
    id: str = ""

    def to_dict(self) -> Dict:
        return asdict(self)
