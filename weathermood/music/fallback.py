"""Fallback track retrieval.

Given a weather condition and a catalog capability, try an ordered list of
retrieval strategies and return the first non-empty result:

  1. keyword search, once per mood search term (in priority order)
  2. the caller's saved tracks
  3. the caller's top tracks (short term)
  4. the first featured playlist's tracks
  5. keyword search for a fixed default term

A strategy that raises (timeout, HTTP error, malformed payload) counts as an
empty result: it is logged and the chain moves on. Only total exhaustion is
reported to the caller, as NoResultsFound.

The chain is strictly sequential and keeps no state between calls.
"""

from typing import Callable, List, Optional, Sequence, Tuple

from weathermood.config import FALLBACK_SEARCH_TERM, MAX_TRACKS, TOP_TRACKS_TIME_RANGE
from weathermood.core import (
    MoodQuery,
    RetrievalOutcome,
    StrategyUsed,
    Track,
    classify_condition,
    log_step,
    log_success,
    log_warning,
)

from .capability import CatalogCapability

Fetch = Callable[[CatalogCapability], Optional[Sequence[Track]]]
Step = Tuple[StrategyUsed, Optional[str], Fetch]


class NoResultsFound(Exception):
    """Every retrieval strategy came back empty."""

    def __init__(self, condition: str):
        super().__init__(f"Could not find any music tracks for '{condition}'.")
        self.condition = condition


def _search(term: str, limit: int) -> Fetch:
    return lambda catalog: catalog.search_by_keyword(term, limit)


def _saved(limit: int) -> Fetch:
    return lambda catalog: catalog.list_saved_items(limit)


def _top(limit: int) -> Fetch:
    return lambda catalog: catalog.list_top_items(limit, TOP_TRACKS_TIME_RANGE)


def _featured(limit: int) -> Fetch:
    def fetch(catalog: CatalogCapability) -> Sequence[Track]:
        collections = catalog.list_featured_collections(limit)
        if not collections:
            return []
        return catalog.list_collection_items(collections[0].id, limit)

    return fetch


def build_strategy_chain(mood: MoodQuery, limit: int = MAX_TRACKS) -> List[Step]:
    """
    Return the ordered (strategy, term, fetch) steps for a mood.
    """
    steps: List[Step] = [
        (StrategyUsed.SEARCH, term, _search(term, limit)) for term in mood.terms
    ]
    steps.append((StrategyUsed.SAVED_TRACKS, None, _saved(limit)))
    steps.append((StrategyUsed.TOP_TRACKS, None, _top(limit)))
    steps.append((StrategyUsed.FEATURED_PLAYLISTS, None, _featured(limit)))
    steps.append(
        (
            StrategyUsed.FALLBACK_SEARCH,
            FALLBACK_SEARCH_TERM,
            _search(FALLBACK_SEARCH_TERM, limit),
        )
    )
    return steps


def _attempt(
    catalog: CatalogCapability,
    strategy: StrategyUsed,
    term: Optional[str],
    fetch: Fetch,
) -> List[Track]:
    label = f"{strategy.value} ({term})" if term else strategy.value
    log_step(f"Trying {label}...")
    try:
        tracks = fetch(catalog)
    except Exception as e:
        log_warning(f"Strategy {label} failed: {e}")
        return []
    return list(tracks or [])


def retrieve(
    condition: str,
    catalog: CatalogCapability,
    max_tracks: int = MAX_TRACKS,
) -> RetrievalOutcome:
    """
    Run the fallback chain for a weather condition.

    Returns a RetrievalOutcome with 1..max_tracks tracks, tagged with the
    strategy (and search term, if any) that produced them.

    Raises ValueError for a blank condition or a max_tracks below 1, and
    NoResultsFound when every strategy is exhausted.
    """
    if max_tracks < 1:
        raise ValueError("max_tracks must be at least 1.")
    mood = classify_condition(condition)
    log_step(f"Getting music for weather '{condition}' (mood: {mood.category})")

    for strategy, term, fetch in build_strategy_chain(mood, limit=max_tracks):
        tracks = _attempt(catalog, strategy, term, fetch)
        if tracks:
            log_success(f"Found {len(tracks)} tracks using {strategy.value}")
            return RetrievalOutcome(
                mood=mood,
                tracks=tuple(tracks[:max_tracks]),
                strategy_used=strategy,
                term_used=term,
            )

    raise NoResultsFound(condition)
