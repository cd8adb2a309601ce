from typing import Optional
from urllib.parse import urlencode

import requests
from fastapi import APIRouter, Query, Response
from fastapi.responses import HTMLResponse, RedirectResponse

from weathermood import config
from weathermood.core import log_error, log_info
from weathermood.spotify import (
    SpotifyAuthError,
    SpotifyTokenMissing,
    build_spotify_auth_url,
    clear_spotify_token,
    exchange_code_for_token,
    load_spotify_token,
)

router = APIRouter()

CALLBACK_PAGE = """
<html>
  <body>
    <h1>{title}</h1>
    <p>{message}</p>
  </body>
</html>
"""


def _callback_result(error: Optional[str]) -> Response:
    if config.FRONTEND_URL:
        url = config.FRONTEND_URL
        if error:
            separator = "&" if "?" in url else "?"
            url = f"{url}{separator}{urlencode({'error': error})}"
        return RedirectResponse(url)

    if error:
        return HTMLResponse(
            CALLBACK_PAGE.format(
                title="Spotify authorization failed",
                message=f"Reason: {error}. Please try logging in again.",
            ),
            status_code=400,
        )
    return HTMLResponse(
        CALLBACK_PAGE.format(
            title="Spotify authorization complete ✅",
            message="You can close this window and return to the application.",
        )
    )


@router.get("/login")
def login() -> RedirectResponse:
    """
    Send the browser to Spotify's authorization page.
    """
    return RedirectResponse(build_spotify_auth_url())


@router.get("/url")
def get_auth_url() -> dict:
    return {"auth_url": build_spotify_auth_url()}


@router.get("/callback")
def auth_callback(
    code: Optional[str] = Query(default=None),
    error: Optional[str] = Query(default=None),
) -> Response:
    """
    Spotify redirect target: exchange the code and store the token.

    With FRONTEND_URL set the browser is sent back there, failures carrying
    an `error` query parameter (auth_failed, no_code, timeout, spotify_api).
    Without it a small HTML page reports the result.
    """
    if error:
        log_error(f"Spotify auth error: {error}")
        return _callback_result("auth_failed")

    if not code:
        log_error("No authorization code received")
        return _callback_result("no_code")

    try:
        exchange_code_for_token(code)
    except requests.Timeout:
        log_error("Spotify API timeout during code exchange")
        return _callback_result("timeout")
    except (requests.RequestException, SpotifyAuthError) as e:
        log_error(f"Callback error: {e}")
        return _callback_result("spotify_api")

    return _callback_result(None)


@router.get("/status")
def auth_status() -> dict:
    try:
        token_info = load_spotify_token()
    except SpotifyTokenMissing:
        return {
            "authenticated": False,
            "reason": "missing_or_invalid_token",
            "expires_at": None,
        }

    return {
        "authenticated": True,
        "reason": None,
        "expires_at": token_info.get("expires_at"),
    }


@router.post("/logout")
def logout() -> dict:
    removed = clear_spotify_token()
    log_info(f"Logout (token removed={removed}).")
    return {"message": "Logged out successfully"}
