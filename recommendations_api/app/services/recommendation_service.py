"""
Business logic for recommendations.

``RecommendationService`` enforces name uniqueness and record
existence, applies votes through the scoring rules and picks random
recommendations through the selection rules.  Storage is delegated to
a ``RecommendationRepository`` and randomness to a ``random.Random``;
both are injected so tests can replace them.
"""

from __future__ import annotations

import logging
import random
import sqlite3
from typing import List, Optional

from recommendations_api.app.core.errors import ConflictError, NotFoundError
from recommendations_api.app.repositories.recommendation_repository import RecommendationRepository
from recommendations_api.app.schemas.recommendation import (
    RecommendationCreate,
    RecommendationRead,
    RecommendationVote,
)
from recommendations_api.app.services import scoring, selection


logger = logging.getLogger(__name__)

DUPLICATE_NAME_MESSAGE = "Recommendations names must be unique"


class RecommendationService:
    """Service for submitting, voting on and reading recommendations."""

    def __init__(
        self,
        repository: Optional[RecommendationRepository] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.repository = repository or RecommendationRepository()
        self.rng = rng or random.Random()

    async def insert(self, data: RecommendationCreate) -> RecommendationRead:
        """Create a recommendation with a score of zero.

        Raises ``ConflictError`` if a recommendation with the same name
        exists.  The unique index on ``name`` catches the case where two
        inserts pass the lookup concurrently.
        """
        if self.repository.find_by_name(data.name) is not None:
            raise ConflictError(DUPLICATE_NAME_MESSAGE)
        try:
            recommendation = self.repository.create(data)
        except sqlite3.IntegrityError as exc:
            raise ConflictError(DUPLICATE_NAME_MESSAGE) from exc
        logger.info("Created recommendation %s (%r)", recommendation.id, recommendation.name)
        return recommendation

    async def upvote(self, recommendation_id: int) -> RecommendationVote:
        self._get_or_raise(recommendation_id)
        updated = self._apply_vote(recommendation_id, scoring.UPVOTE)
        logger.info("Upvoted recommendation %s, score is now %s", updated.id, updated.score)
        return RecommendationVote(id=updated.id, score=updated.score)

    async def downvote(self, recommendation_id: int) -> RecommendationVote:
        """Lower the score by one, deleting the record below the threshold.

        The deletion is part of this call; the returned vote reports it
        with ``removed=True`` and the score that triggered it.
        """
        self._get_or_raise(recommendation_id)
        updated = self._apply_vote(recommendation_id, scoring.DOWNVOTE)
        if scoring.is_eliminated(updated.score):
            self.repository.remove(recommendation_id)
            logger.info(
                "Removed recommendation %s after its score fell to %s",
                recommendation_id,
                updated.score,
            )
            return RecommendationVote(id=updated.id, score=updated.score, removed=True)
        logger.info("Downvoted recommendation %s, score is now %s", updated.id, updated.score)
        return RecommendationVote(id=updated.id, score=updated.score)

    async def get(self) -> List[RecommendationRead]:
        """Return the most recent recommendations (one page)."""
        return self.repository.find_all()

    async def get_by_id(self, recommendation_id: int) -> RecommendationRead:
        return self._get_or_raise(recommendation_id)

    async def get_top(self, amount: int) -> List[RecommendationRead]:
        """Return up to ``amount`` recommendations, highest score first."""
        return self.repository.get_amount_by_score(amount)

    async def get_random(self) -> RecommendationRead:
        """Return one recommendation chosen by the tiered random policy.

        Only the tier picked by the draw is queried.  If it is empty a
        ``NotFoundError`` is raised even when the other tier has
        records.
        """
        tier = selection.pick_tier(self.rng.random())
        candidates = self.repository.find_all(where=tier, limit=None)
        if not candidates:
            raise NotFoundError()
        return selection.choose(candidates, self.rng)

    def _get_or_raise(self, recommendation_id: int) -> RecommendationRead:
        recommendation = self.repository.find(recommendation_id)
        if recommendation is None:
            raise NotFoundError()
        return recommendation

    def _apply_vote(self, recommendation_id: int, increment: int) -> RecommendationRead:
        updated = self.repository.update_score(recommendation_id, increment)
        if updated is None:
            # Deleted between the lookup and the update.
            raise NotFoundError()
        return updated


_service = RecommendationService()


def get_recommendation_service() -> RecommendationService:
    """FastAPI dependency returning the shared service instance."""
    return _service
