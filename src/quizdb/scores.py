"""Per-user quiz results."""

import logging
import sqlite3
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreEntry:
    quiz_id: int
    score: int
    quiz_title: str | None = None


class ScoreRecorder:
    """Persist and list the correct-answer count of each finished attempt."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def record_score(self, user_id: int, quiz_id: int, score: int) -> bool:
        try:
            with self.conn:
                self.conn.execute(
                    "INSERT INTO scores (user_id, quiz_id, score) VALUES (?, ?, ?)",
                    (user_id, quiz_id, score),
                )
        except sqlite3.Error as e:
            logger.error("Error recording score: %s", e)
            return False
        return True

    def list_scores(self, user_id: int) -> list[ScoreEntry]:
        """A user's past scores, oldest first."""
        try:
            rows = self.conn.execute(
                """
                SELECT s.quiz_id, s.score, q.title
                FROM scores s
                LEFT JOIN quizzes q ON q.id = s.quiz_id
                WHERE s.user_id = ?
                ORDER BY s.id
                """,
                (user_id,),
            ).fetchall()
        except sqlite3.Error as e:
            logger.error("Error listing scores for user %s: %s", user_id, e)
            return []
        return [
            ScoreEntry(quiz_id=row["quiz_id"], score=row["score"], quiz_title=row["title"])
            for row in rows
        ]
