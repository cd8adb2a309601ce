from dataclasses import dataclass
from typing import List, Optional

import requests

from weathermood import config
from weathermood.core import log_step, log_success

from .auth import get_current_user, spotify_headers


@dataclass
class CreatedPlaylist:
    id: str
    name: str
    url: Optional[str]
    track_count: int


def _chunks(items: List[str], size: int) -> List[List[str]]:
    return [items[i : i + size] for i in range(0, len(items), size)]


def create_playlist(
    access_token: str,
    name: str,
    track_uris: List[str],
    description: Optional[str] = None,
    public: bool = True,
) -> CreatedPlaylist:
    """
    Create a playlist in the current user's library and fill it.

    Steps:
      1. look up the user id
      2. create an empty playlist
      3. add the track URIs, at most PLAYLIST_ADD_CHUNK_SIZE per request

    HTTP failures propagate as requests.HTTPError.
    """
    log_step(f"Creating playlist '{name}'...")
    headers = spotify_headers(access_token)
    user_id = get_current_user(access_token)["id"]

    r = requests.post(
        f"{config.SPOTIFY_API_BASE}/users/{user_id}/playlists",
        headers=headers,
        json={
            "name": name,
            "description": description or config.PLAYLIST_DEFAULT_DESCRIPTION,
            "public": public,
        },
        timeout=config.HTTP_TIMEOUT_SECONDS,
    )
    r.raise_for_status()
    created = r.json()
    playlist_id = created["id"]
    playlist_url = (created.get("external_urls") or {}).get("spotify")

    for chunk in _chunks(track_uris, config.PLAYLIST_ADD_CHUNK_SIZE):
        r = requests.post(
            f"{config.SPOTIFY_API_BASE}/playlists/{playlist_id}/tracks",
            headers=headers,
            json={"uris": chunk},
            timeout=config.HTTP_TIMEOUT_SECONDS,
        )
        r.raise_for_status()

    log_success(f"Playlist created successfully: {playlist_url}")
    return CreatedPlaylist(
        id=playlist_id,
        name=name,
        url=playlist_url,
        track_count=len(track_uris),
    )
