"""Shared FastAPI dependencies: request inputs and the caller's Spotify token.

Input checks are declared before the token dependencies on each route so a
malformed request gets its 400 before any auth lookup.
"""

from typing import Iterator, NoReturn, Optional

from fastapi import Depends, Header, HTTPException, Query

from weathermood.spotify import (
    SpotifyCatalog,
    SpotifyTokenMissing,
    build_spotify_auth_url,
    load_spotify_token,
)


def require_condition(condition: Optional[str] = Query(default=None)) -> str:
    if not condition or not condition.strip():
        raise HTTPException(status_code=400, detail="Weather condition is required")
    return condition


def require_search_query(q: Optional[str] = Query(default=None)) -> str:
    if not q or not q.strip():
        raise HTTPException(status_code=400, detail="Search query is required")
    return q


def raise_unauth(e: SpotifyTokenMissing) -> NoReturn:
    raise HTTPException(
        status_code=401,
        detail={
            "status": "unauthenticated",
            "message": str(e) or "Please login with Spotify first.",
            "auth_url": build_spotify_auth_url(),
        },
    )


def get_access_token(authorization: Optional[str] = Header(default=None)) -> str:
    """
    Bearer token for the current request.

    An `Authorization: Bearer ...` header wins; otherwise the stored token
    from the login flow is used (refreshed if it is about to expire).
    """
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token.strip():
            return token.strip()

    try:
        token_info = load_spotify_token()
    except SpotifyTokenMissing as e:
        raise_unauth(e)
    return token_info["access_token"]


def get_catalog(
    access_token: str = Depends(get_access_token),
) -> Iterator[SpotifyCatalog]:
    """
    Per-request catalog; its HTTP session is closed once the request is done.
    """
    catalog = SpotifyCatalog(access_token)
    try:
        yield catalog
    finally:
        catalog.close()
