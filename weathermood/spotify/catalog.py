"""Spotify-backed catalog capability.

SpotifyCatalog binds one user's access token and exposes the five calls the
fallback retriever needs. Every call applies HTTP_TIMEOUT_SECONDS and raises
on non-2xx responses; the retriever decides what a failure means.
"""

from typing import Any, Dict, List, Optional

import requests

from weathermood import config
from weathermood.core import CollectionRef, Track

from .auth import spotify_headers
from .tracks import tracks_from_spotify


class SpotifyCatalog:
    def __init__(
        self,
        access_token: str,
        session: Optional[requests.Session] = None,
        market: str = config.SPOTIFY_MARKET,
    ):
        self.access_token = access_token
        self.session = session or requests.Session()
        self.market = market

    def close(self) -> None:
        """Release the pooled connections of the underlying session."""
        self.session.close()

    def __enter__(self) -> "SpotifyCatalog":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict:
        r = self.session.get(
            f"{config.SPOTIFY_API_BASE}{path}",
            headers=spotify_headers(self.access_token),
            params=params,
            timeout=config.HTTP_TIMEOUT_SECONDS,
        )
        r.raise_for_status()
        return r.json()

    def search_by_keyword(self, term: str, limit: int) -> List[Track]:
        data = self._get(
            "/search",
            {
                "q": f"genre:{term}",
                "type": "track",
                "limit": limit,
                "market": self.market,
            },
        )
        return tracks_from_spotify(data["tracks"]["items"])

    def search_tracks(self, query: str, limit: int = 20) -> List[Track]:
        """Free-text track search (no genre filter)."""
        data = self._get(
            "/search",
            {"q": query, "type": "track", "limit": limit, "market": self.market},
        )
        return tracks_from_spotify(data["tracks"]["items"])

    def list_saved_items(self, limit: int) -> List[Track]:
        data = self._get("/me/tracks", {"limit": limit})
        return tracks_from_spotify(data["items"], wrapped=True)

    def list_top_items(self, limit: int, time_range: str) -> List[Track]:
        data = self._get("/me/top/tracks", {"limit": limit, "time_range": time_range})
        return tracks_from_spotify(data["items"])

    def list_featured_collections(self, limit: int) -> List[CollectionRef]:
        data = self._get("/browse/featured-playlists", {"limit": limit})
        return [
            CollectionRef(id=p["id"], name=p.get("name"))
            for p in data["playlists"]["items"]
            if isinstance(p, dict) and p.get("id")
        ]

    def list_collection_items(self, collection_id: str, limit: int) -> List[Track]:
        data = self._get(f"/playlists/{collection_id}/tracks", {"limit": limit})
        return tracks_from_spotify(data["items"], wrapped=True)
