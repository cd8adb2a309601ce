"""Public façade for the weathermood.spotify package.

This module exposes the Spotify Web API integration: authentication and token
storage, the catalog capability used by the fallback retriever, and playlist
creation. Callers should import these symbols from this façade instead of the
internal auth, catalog or playlists modules.
"""

from .auth import (
    SpotifyAuthError,
    SpotifyTokenMissing,
    build_spotify_auth_url,
    clear_spotify_token,
    exchange_code_for_token,
    get_current_user,
    load_spotify_token,
    refresh_spotify_token,
    spotify_headers,
)
from .catalog import SpotifyCatalog
from .playlists import CreatedPlaylist, create_playlist
from .tracks import track_from_spotify, tracks_from_spotify

__all__ = [
    "SpotifyAuthError",
    "SpotifyTokenMissing",
    "build_spotify_auth_url",
    "clear_spotify_token",
    "exchange_code_for_token",
    "get_current_user",
    "load_spotify_token",
    "refresh_spotify_token",
    "spotify_headers",
    "SpotifyCatalog",
    "CreatedPlaylist",
    "create_playlist",
    "track_from_spotify",
    "tracks_from_spotify",
]
