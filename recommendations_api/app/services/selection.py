"""
Weighted random selection of recommendations.

Recommendations are split into two tiers at ``TIER_BOUNDARY``.  Most
draws go to the high tier so well rated content is shown more often,
the rest go to the low tier so new or unpopular content still gets
seen.  Within a tier every record is equally likely.
"""

import random
from typing import Sequence, TypeVar

from recommendations_api.app.repositories.recommendation_repository import ScoreFilter

T = TypeVar("T")

HIGH_TIER_PROBABILITY = 0.7
TIER_BOUNDARY = 10


def pick_tier(draw: float) -> ScoreFilter:
    """Map a uniform draw in ``[0, 1)`` to the score filter of a tier."""
    if draw < HIGH_TIER_PROBABILITY:
        return ScoreFilter(score_filter="gt", score=TIER_BOUNDARY)
    return ScoreFilter(score_filter="lte", score=TIER_BOUNDARY)


def choose(candidates: Sequence[T], rng: random.Random) -> T:
    """Pick one of ``candidates`` uniformly.  ``candidates`` must not be empty."""
    return rng.choice(candidates)
