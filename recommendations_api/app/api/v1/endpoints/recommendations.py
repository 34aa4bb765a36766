"""
Recommendation endpoints for API v1.

These routes let clients submit recommendations, vote on them and
read them back as a recent page, a top list, a single record or a
random pick.  Business errors raised by the service are translated to
HTTP errors whose ``detail`` is the error's ``{type, message}`` dict.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from recommendations_api.app.core.errors import ServiceError
from recommendations_api.app.schemas.recommendation import (
    RecommendationCreate,
    RecommendationRead,
    RecommendationVote,
)
from recommendations_api.app.services.recommendation_service import (
    RecommendationService,
    get_recommendation_service,
)

router = APIRouter()


def _to_http(exc: ServiceError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.to_dict())


@router.post("/", response_model=RecommendationRead, status_code=status.HTTP_201_CREATED)
async def create_recommendation(
    recommendation_in: RecommendationCreate,
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationRead:
    """Submit a new recommendation.

    Returns HTTP 409 if the name is already used.
    """
    try:
        return await service.insert(recommendation_in)
    except ServiceError as e:
        raise _to_http(e) from e


@router.get("/", response_model=List[RecommendationRead])
async def list_recommendations(
    service: RecommendationService = Depends(get_recommendation_service),
) -> List[RecommendationRead]:
    """Return the most recently submitted recommendations."""
    return await service.get()


# Fixed paths are declared before ``/{recommendation_id}`` so they are
# not captured by it.
@router.get("/random", response_model=RecommendationRead)
async def random_recommendation(
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationRead:
    """Return a random recommendation, favouring well rated ones.

    Returns HTTP 404 when the drawn tier has no recommendations.
    """
    try:
        return await service.get_random()
    except ServiceError as e:
        raise _to_http(e) from e


@router.get("/top/{amount}", response_model=List[RecommendationRead])
async def top_recommendations(
    amount: int = Path(..., ge=1),
    service: RecommendationService = Depends(get_recommendation_service),
) -> List[RecommendationRead]:
    """Return up to ``amount`` recommendations ordered by score."""
    return await service.get_top(amount)


@router.get("/{recommendation_id}", response_model=RecommendationRead)
async def get_recommendation(
    recommendation_id: int,
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationRead:
    try:
        return await service.get_by_id(recommendation_id)
    except ServiceError as e:
        raise _to_http(e) from e


@router.post("/{recommendation_id}/upvote", response_model=RecommendationVote)
async def upvote_recommendation(
    recommendation_id: int,
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationVote:
    try:
        return await service.upvote(recommendation_id)
    except ServiceError as e:
        raise _to_http(e) from e


@router.post("/{recommendation_id}/downvote", response_model=RecommendationVote)
async def downvote_recommendation(
    recommendation_id: int,
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationVote:
    """Downvote a recommendation.

    A downvote that takes the score below -5 deletes the
    recommendation; the response then has ``removed`` set.
    """
    try:
        return await service.downvote(recommendation_id)
    except ServiceError as e:
        raise _to_http(e) from e
