from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Track:
    """
    A catalog track as returned to API callers.

    The retrieval chain never looks inside a Track; it only checks whether a
    strategy produced any.
    """

    id: str
    name: str
    artists: List[str] = field(default_factory=list)
    album: Optional[str] = None
    image: Optional[str] = None
    preview_url: Optional[str] = None
    external_url: Optional[str] = None
    duration_ms: Optional[int] = None
    uri: Optional[str] = None


@dataclass(frozen=True)
class CollectionRef:
    """Reference to a featured playlist in the catalog."""

    id: str
    name: Optional[str] = None


@dataclass(frozen=True)
class MoodQuery:
    """
    Mood category derived from a weather condition.

    - category : "sunny", "rainy", ... or "popular" for the catch-all
    - terms    : search vocabulary, most specific first
    """

    category: str
    terms: Tuple[str, ...]


class StrategyUsed(str, Enum):
    """Which retrieval strategy produced a RetrievalOutcome."""

    SEARCH = "search"
    SAVED_TRACKS = "saved_tracks"
    TOP_TRACKS = "top_tracks"
    FEATURED_PLAYLISTS = "featured_playlists"
    FALLBACK_SEARCH = "fallback_search"


@dataclass(frozen=True)
class RetrievalOutcome:
    """
    Result of one run of the fallback chain.

    `tracks` is never empty and holds at most MAX_TRACKS items.
    `term_used` is only set for the keyword-search strategies.
    """

    mood: MoodQuery
    tracks: Tuple[Track, ...]
    strategy_used: StrategyUsed
    term_used: Optional[str] = None
