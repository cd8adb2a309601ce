from typing import List, Optional

from pydantic import BaseModel


class TrackInfo(BaseModel):
    id: str
    name: str
    artists: List[str]
    album: Optional[str] = None
    image: Optional[str] = None
    preview_url: Optional[str] = None
    external_url: Optional[str] = None
    duration_ms: Optional[int] = None
    uri: Optional[str] = None


class RecommendationsResponse(BaseModel):
    success: bool = True
    mood: str
    description: str
    category: str
    condition: str
    method: str
    searchTerm: Optional[str] = None
    tracks: List[TrackInfo]


class MusicCheckResponse(BaseModel):
    success: bool
    method: Optional[str] = None
    tracksCount: int = 0
    firstTrack: Optional[str] = None
    error: Optional[str] = None
