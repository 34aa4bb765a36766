"""
Persistence for recommendations.

``RecommendationRepository`` is the only code that issues SQL against
the ``recommendations`` table.  Every method opens its own connection
and closes it before returning, so a repository instance holds no
state and can be shared between requests.

All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from typing import Any, List, Literal, Optional

from recommendations_api.app.core.config import settings
from recommendations_api.app.core.db import get_connection
from recommendations_api.app.schemas.recommendation import RecommendationCreate, RecommendationRead


logger = logging.getLogger(__name__)

_COLUMNS = "id, name, media_link, score"

_OPERATORS = {"gt": ">", "lte": "<="}

# Largest value SQLite can store in an INTEGER column.
MAX_ID = 2**63 - 1

# Default for ``find_all(limit=...)``; resolved to ``settings.page_size`` per call.
_PAGE_SIZE = object()


@dataclass(frozen=True)
class ScoreFilter:
    """Restricts a listing to records whose score compares to ``score``.

    Attributes:
        score_filter: ``"gt"`` for ``score > value``, ``"lte"`` for
            ``score <= value``.
        score: The value to compare against.
    """

    score_filter: Literal["gt", "lte"]
    score: int


class RecommendationRepository:
    """Data access layer for the ``recommendations`` table."""

    def find(self, recommendation_id: int) -> Optional[RecommendationRead]:
        if not _is_storable_id(recommendation_id):
            return None
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM recommendations WHERE id = ?",
                (recommendation_id,),
            ).fetchone()
            return self._row_to_recommendation(row) if row else None
        finally:
            conn.close()

    def find_by_name(self, name: str) -> Optional[RecommendationRead]:
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM recommendations WHERE name = ?",
                (name,),
            ).fetchone()
            return self._row_to_recommendation(row) if row else None
        finally:
            conn.close()

    def create(self, data: RecommendationCreate) -> RecommendationRead:
        """Insert a recommendation with a zero score and return it.

        Raises ``sqlite3.IntegrityError`` when the name is already
        taken.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO recommendations (name, media_link) VALUES (?, ?)",
                (data.name, data.media_link),
            )
            recommendation_id = cursor.lastrowid
            conn.commit()
            return RecommendationRead(
                id=recommendation_id,
                name=data.name,
                media_link=data.media_link,
                score=0,
            )
        finally:
            conn.close()

    def update_score(self, recommendation_id: int, increment: int) -> Optional[RecommendationRead]:
        """Add ``increment`` to the score and return the updated record.

        The update and the read-back happen inside one write
        transaction, so concurrent votes on the same record cannot
        overwrite each other.  Returns ``None`` if no such record
        exists.
        """
        if not _is_storable_id(recommendation_id):
            return None
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "UPDATE recommendations SET score = score + ? WHERE id = ?",
                (increment, recommendation_id),
            )
            if cursor.rowcount == 0:
                conn.rollback()
                return None
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM recommendations WHERE id = ?",
                (recommendation_id,),
            ).fetchone()
            conn.commit()
            return self._row_to_recommendation(row)
        finally:
            conn.close()

    def remove(self, recommendation_id: int) -> bool:
        """Delete a recommendation.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        if not _is_storable_id(recommendation_id):
            return False
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM recommendations WHERE id = ?", (recommendation_id,))
            affected = cursor.rowcount
            conn.commit()
            return affected > 0
        finally:
            conn.close()

    def find_all(
        self,
        where: Optional[ScoreFilter] = None,
        limit: Any = _PAGE_SIZE,
    ) -> List[RecommendationRead]:
        """Return recommendations, newest first.

        ``where`` narrows the result to one side of a score boundary.
        ``limit`` caps the number of rows; pass ``None`` to fetch every
        matching record.
        """
        if limit is _PAGE_SIZE:
            limit = settings.page_size
        query = f"SELECT {_COLUMNS} FROM recommendations"
        params: list = []
        if where is not None:
            operator = _OPERATORS.get(where.score_filter)
            if operator is None:
                raise ValueError(f"Unknown score filter {where.score_filter!r}")
            query += f" WHERE score {operator} ?"
            params.append(where.score)
        query += " ORDER BY id DESC"
        if limit is not None:
            query += " LIMIT ?"
            params.append(limit)
        conn = get_connection()
        try:
            rows = conn.execute(query, tuple(params)).fetchall()
            return [self._row_to_recommendation(row) for row in rows]
        finally:
            conn.close()

    def get_amount_by_score(self, amount: int) -> List[RecommendationRead]:
        """Return up to ``amount`` recommendations, highest score first.

        Ties keep insertion order.  A non-positive ``amount`` returns an empty
        list; SQLite would read a negative LIMIT as no limit at all.
        """
        conn = get_connection()
        try:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM recommendations ORDER BY score DESC, id ASC LIMIT ?",
                (max(amount, 0),),
            ).fetchall()
            return [self._row_to_recommendation(row) for row in rows]
        finally:
            conn.close()

    @staticmethod
    def _row_to_recommendation(row: sqlite3.Row) -> RecommendationRead:
        return RecommendationRead(
            id=row["id"],
            name=row["name"],
            media_link=row["media_link"],
            score=row["score"],
        )


def _is_storable_id(recommendation_id: int) -> bool:
    # sqlite3 raises OverflowError for ints outside the 64-bit range;
    # no stored record can have such an id.
    return -MAX_ID - 1 <= recommendation_id <= MAX_ID
