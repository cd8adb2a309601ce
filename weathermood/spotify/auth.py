import time
from typing import Dict, Optional
from urllib.parse import urlencode

import requests

from weathermood import config
from weathermood.core import (
    log_step,
    log_success,
    log_warning,
    read_json,
    remove_file,
    write_json,
)


class SpotifyAuthError(Exception):
    """Spotify authorization could not be completed."""


class SpotifyTokenMissing(SpotifyAuthError):
    """No usable Spotify token is available; the user must log in."""


def build_spotify_auth_url() -> str:
    """
    Authorization-code URL the browser is redirected to on login.
    """
    params = {
        "response_type": "code",
        "client_id": config.SPOTIFY_CLIENT_ID,
        "scope": " ".join(config.SCOPES),
        "redirect_uri": config.SPOTIFY_REDIRECT_URI,
    }
    return f"{config.SPOTIFY_AUTH_URL}?{urlencode(params)}"


def _request_token(data: Dict[str, str]) -> Dict:
    r = requests.post(
        config.SPOTIFY_TOKEN_URL,
        data=data,
        auth=(config.SPOTIFY_CLIENT_ID or "", config.SPOTIFY_CLIENT_SECRET or ""),
        timeout=config.HTTP_TIMEOUT_SECONDS,
    )
    r.raise_for_status()
    token_info = r.json()
    if not token_info.get("access_token"):
        raise SpotifyAuthError("No access token received from Spotify.")
    token_info["expires_at"] = int(time.time()) + int(
        token_info.get("expires_in", 3600)
    )
    return token_info


def save_spotify_token(token_info: Dict) -> None:
    write_json(config.SPOTIFY_TOKEN_FILE, token_info)


def clear_spotify_token() -> bool:
    """
    Forget the stored token (logout). Returns True if one was stored.
    """
    return remove_file(config.SPOTIFY_TOKEN_FILE)


def exchange_code_for_token(code: str) -> Dict:
    """
    Exchange an authorization code for access/refresh tokens and persist them.
    """
    log_step("Exchanging code for access token...")
    token_info = _request_token(
        {
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": config.SPOTIFY_REDIRECT_URI,
        }
    )
    save_spotify_token(token_info)
    log_success("User logged in successfully")
    return token_info


def refresh_spotify_token(refresh_token: str) -> Dict:
    log_step("Refreshing Spotify token...")
    token_info = _request_token(
        {"grant_type": "refresh_token", "refresh_token": refresh_token}
    )
    # Spotify only sometimes rotates the refresh token
    token_info.setdefault("refresh_token", refresh_token)
    save_spotify_token(token_info)
    log_success("Token refreshed successfully")
    return token_info


def _is_expiring(token_info: Dict, now: Optional[int] = None) -> bool:
    now = int(time.time()) if now is None else now
    expires_at = token_info.get("expires_at") or 0
    return now >= int(expires_at) - config.TOKEN_REFRESH_MARGIN_SECONDS


def load_spotify_token() -> Dict:
    """
    Load the stored token, refreshing it when it expires within five minutes.

    Raises SpotifyTokenMissing when there is no token, or when the refresh
    fails (the stale token is cleared in that case).
    """
    token_info = read_json(config.SPOTIFY_TOKEN_FILE, default=None)
    if not isinstance(token_info, dict) or not token_info.get("access_token"):
        raise SpotifyTokenMissing("Please login with Spotify first.")

    if not _is_expiring(token_info):
        return token_info

    refresh_token = token_info.get("refresh_token")
    if not refresh_token:
        clear_spotify_token()
        raise SpotifyTokenMissing("Spotify session expired. Please login again.")

    try:
        return refresh_spotify_token(refresh_token)
    except (requests.RequestException, SpotifyAuthError) as e:
        log_warning(f"Token refresh failed: {e}")
        clear_spotify_token()
        raise SpotifyTokenMissing(
            "Spotify session expired. Please login again."
        ) from e


def spotify_headers(access_token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {access_token}"}


def get_current_user(access_token: str) -> Dict:
    """
    Profile snapshot of the logged-in user: id, name, email, image.
    """
    r = requests.get(
        f"{config.SPOTIFY_API_BASE}/me",
        headers=spotify_headers(access_token),
        timeout=config.HTTP_TIMEOUT_SECONDS,
    )
    r.raise_for_status()
    data = r.json()
    images = data.get("images") or []
    return {
        "id": data["id"],
        "name": data.get("display_name"),
        "email": data.get("email"),
        "image": images[0].get("url") if images else None,
    }
