"""
Score rules for recommendations.

A vote moves a score by exactly one point.  Once a downvote takes a
score below ``ELIMINATION_THRESHOLD`` the recommendation is removed.
"""

UPVOTE = 1
DOWNVOTE = -1

ELIMINATION_THRESHOLD = -5


def is_eliminated(score: int) -> bool:
    """Return whether a recommendation with ``score`` must be deleted.

    The comparison is strict: a score of exactly ``-5`` survives.
    """
    return score < ELIMINATION_THRESHOLD
