from dataclasses import asdict
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from weathermood.core import Track, describe_mood, log_error, log_success
from weathermood.music import NoResultsFound, retrieve
from weathermood.spotify import SpotifyCatalog

from ..deps import get_catalog, require_condition
from .schemas import MusicCheckResponse, RecommendationsResponse, TrackInfo

router = APIRouter()

TRY_AGAIN_MESSAGE = (
    "We're having trouble getting music right now. "
    "Please try again in a few minutes."
)


def to_track_infos(tracks: List[Track]) -> List[TrackInfo]:
    return [TrackInfo(**asdict(t)) for t in tracks]


@router.get("/recommendations", response_model=RecommendationsResponse)
def get_recommendations(
    condition: str = Depends(require_condition),
    catalog: SpotifyCatalog = Depends(get_catalog),
) -> RecommendationsResponse:
    """
    Tracks matching the mood of a weather condition (e.g. "Rain").

    The response carries provenance: `method` is the strategy that produced
    the tracks and `searchTerm` the keyword, when one was used.
    """
    try:
        outcome = retrieve(condition, catalog)
    except NoResultsFound as e:
        log_error(str(e))
        raise HTTPException(status_code=503, detail=TRY_AGAIN_MESSAGE)

    log_success(
        f"Got {len(outcome.tracks)} tracks using method: "
        f"{outcome.strategy_used.value}"
    )
    mood = describe_mood(outcome.mood.category)
    return RecommendationsResponse(
        mood=mood.label,
        description=mood.description,
        category=outcome.mood.category,
        condition=condition,
        method=outcome.strategy_used.value,
        searchTerm=outcome.term_used,
        tracks=to_track_infos(list(outcome.tracks)),
    )


@router.get("/test-music", response_model=MusicCheckResponse)
def check_music(catalog: SpotifyCatalog = Depends(get_catalog)) -> MusicCheckResponse:
    """
    Quick end-to-end check of the retrieval chain with a sunny condition.
    """
    try:
        outcome = retrieve("sunny", catalog)
    except NoResultsFound as e:
        return MusicCheckResponse(success=False, error=str(e))

    return MusicCheckResponse(
        success=True,
        method=outcome.strategy_used.value,
        tracksCount=len(outcome.tracks),
        firstTrack=outcome.tracks[0].name,
    )
