from typing import NoReturn

import requests
from fastapi import APIRouter, Depends, HTTPException

from weathermood.core import log_error, log_step
from weathermood.spotify import SpotifyCatalog, create_playlist, get_current_user

from ..deps import get_access_token, get_catalog, require_search_query
from ..music.routes import to_track_infos
from .schemas import (
    CreatePlaylistRequest,
    CreatePlaylistResponse,
    PlaylistInfo,
    SearchResponse,
    UserProfile,
)

router = APIRouter()


def _raise_upstream(action: str, e: Exception) -> NoReturn:
    log_error(f"{action} failed: {e}")
    raise HTTPException(status_code=502, detail=f"Spotify {action} failed.")


@router.get("/me", response_model=UserProfile)
def get_me(access_token: str = Depends(get_access_token)) -> UserProfile:
    try:
        profile = get_current_user(access_token)
    except requests.RequestException as e:
        _raise_upstream("profile lookup", e)
    return UserProfile(**profile)


@router.get("/search", response_model=SearchResponse)
def search(
    q: str = Depends(require_search_query),
    catalog: SpotifyCatalog = Depends(get_catalog),
) -> SearchResponse:
    log_step(f"Searching Spotify for '{q}'...")
    try:
        tracks = catalog.search_tracks(q, limit=20)
    except (requests.RequestException, KeyError, TypeError) as e:
        _raise_upstream("search", e)
    return SearchResponse(query=q, tracks=to_track_infos(tracks))


@router.post("/create-playlist", response_model=CreatePlaylistResponse)
def post_create_playlist(
    body: CreatePlaylistRequest,
    access_token: str = Depends(get_access_token),
) -> CreatePlaylistResponse:
    """
    Save a list of track URIs as a new playlist in the user's library.
    """
    if not body.playlistName or body.trackUris is None:
        raise HTTPException(
            status_code=400, detail="Playlist name and tracks are required"
        )

    try:
        created = create_playlist(
            access_token,
            name=body.playlistName,
            track_uris=body.trackUris,
            description=body.description,
            public=body.isPublic is not False,
        )
    except requests.RequestException as e:
        _raise_upstream("playlist creation", e)

    return CreatePlaylistResponse(
        playlist=PlaylistInfo(
            id=created.id,
            name=created.name,
            url=created.url,
            trackCount=created.track_count,
        ),
        message="Playlist created successfully! 🎉",
    )
