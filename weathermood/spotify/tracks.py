"""Normalization of raw Spotify track payloads into Track objects."""

from typing import Any, Dict, Iterable, List, Optional

from weathermood.core import Track


def track_from_spotify(raw: Optional[Dict[str, Any]]) -> Optional[Track]:
    """
    Build a Track from a Spotify track object.

    Returns None for payloads without an id (local files, removed tracks,
    `null` playlist entries).
    """
    if not isinstance(raw, dict) or not raw.get("id"):
        return None

    album = raw.get("album") or {}
    images = album.get("images") or []
    return Track(
        id=raw["id"],
        name=raw.get("name") or "",
        artists=[a.get("name", "") for a in raw.get("artists") or []],
        album=album.get("name"),
        image=images[0].get("url") if images else None,
        preview_url=raw.get("preview_url"),
        external_url=(raw.get("external_urls") or {}).get("spotify"),
        duration_ms=raw.get("duration_ms"),
        uri=raw.get("uri"),
    )


def tracks_from_spotify(items: Iterable[Any], wrapped: bool = False) -> List[Track]:
    """
    Normalize a list of track objects, skipping unusable entries.

    With wrapped=True each item is a saved-track / playlist-track wrapper
    ({"added_at": ..., "track": {...}}) and the inner track is used.
    """
    tracks: List[Track] = []
    for item in items:
        raw = item.get("track") if wrapped and isinstance(item, dict) else item
        track = track_from_spotify(raw)
        if track is not None:
            tracks.append(track)
    return tracks
