from typing import List, Optional

from pydantic import BaseModel

from ..music.schemas import TrackInfo


class UserProfile(BaseModel):
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    image: Optional[str] = None


class SearchResponse(BaseModel):
    success: bool = True
    query: str
    tracks: List[TrackInfo]


class CreatePlaylistRequest(BaseModel):
    playlistName: Optional[str] = None
    description: Optional[str] = None
    trackUris: Optional[List[str]] = None
    isPublic: Optional[bool] = None


class PlaylistInfo(BaseModel):
    id: str
    name: str
    url: Optional[str] = None
    trackCount: int


class CreatePlaylistResponse(BaseModel):
    success: bool = True
    playlist: PlaylistInfo
    message: str
