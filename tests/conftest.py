from typing import Dict, List, Optional, Sequence

import pytest

from weathermood import config
from weathermood.core import CollectionRef, Track


def make_track(track_id: str) -> Track:
    """
    Helper to build a minimal Track for tests.
    """
    return Track(
        id=track_id,
        name=f"Track {track_id}",
        artists=["Test Artist"],
        album="Test Album",
        uri=f"spotify:track:{track_id}",
    )


def make_tracks(count: int, prefix: str = "t") -> List[Track]:
    return [make_track(f"{prefix}{i}") for i in range(count)]


class FakeCatalog:
    """
    In-memory catalog capability that records every call.

    - search   : term -> tracks (missing terms return [])
    - failing  : method names (or "search:<term>") that raise instead
    """

    def __init__(
        self,
        search: Optional[Dict[str, Sequence[Track]]] = None,
        saved: Sequence[Track] = (),
        top: Sequence[Track] = (),
        featured: Sequence[CollectionRef] = (),
        collection_items: Optional[Dict[str, Sequence[Track]]] = None,
        failing: Sequence[str] = (),
    ):
        self.search = search or {}
        self.saved = list(saved)
        self.top = list(top)
        self.featured = list(featured)
        self.collection_items = collection_items or {}
        self.failing = set(failing)
        self.calls: List[tuple] = []
        self.closed = False

    def _maybe_fail(self, key: str) -> None:
        if key in self.failing:
            raise RuntimeError(f"{key} unavailable")

    def search_by_keyword(self, term: str, limit: int) -> List[Track]:
        self.calls.append(("search_by_keyword", term, limit))
        self._maybe_fail("search_by_keyword")
        self._maybe_fail(f"search:{term}")
        return list(self.search.get(term, []))

    def list_saved_items(self, limit: int) -> List[Track]:
        self.calls.append(("list_saved_items", limit))
        self._maybe_fail("list_saved_items")
        return list(self.saved)

    def list_top_items(self, limit: int, time_range: str) -> List[Track]:
        self.calls.append(("list_top_items", limit, time_range))
        self._maybe_fail("list_top_items")
        return list(self.top)

    def list_featured_collections(self, limit: int) -> List[CollectionRef]:
        self.calls.append(("list_featured_collections", limit))
        self._maybe_fail("list_featured_collections")
        return list(self.featured)

    def list_collection_items(self, collection_id: str, limit: int) -> List[Track]:
        self.calls.append(("list_collection_items", collection_id, limit))
        self._maybe_fail("list_collection_items")
        return list(self.collection_items.get(collection_id, []))

    def close(self) -> None:
        self.closed = True

    def methods_called(self) -> List[str]:
        return [call[0] for call in self.calls]

    def search_terms(self) -> List[str]:
        return [call[1] for call in self.calls if call[0] == "search_by_keyword"]


@pytest.fixture
def token_file(tmp_path, monkeypatch):
    """
    Point the Spotify token store at a temporary file.
    """
    path = tmp_path / "cache" / "spotify_token.json"
    monkeypatch.setattr(config, "SPOTIFY_TOKEN_FILE", str(path))
    return path
