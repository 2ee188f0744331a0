"""Quiz catalog and question store."""

import logging
import sqlite3
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quiz:
    """A named collection of questions."""

    id: int
    title: str


@dataclass(frozen=True)
class Question:
    """A prompt with ordered options and the text of the correct option."""

    id: int
    quiz_id: int
    question: str
    options: list[str]
    answer: str

    def is_correct(self, selection: int) -> bool:
        """Check a 1-based option selection against the stored answer.

        Selections outside the option range are simply wrong.
        """
        if not 1 <= selection <= len(self.options):
            return False
        return self.options[selection - 1] == self.answer


def split_options(options_csv: str | None) -> list[str]:
    """Split a comma-separated option string, keeping order and spacing.

    Trailing empty items are dropped ("a,b," -> ["a", "b"]), but an empty
    string is a single empty option.
    """
    if options_csv is None:
        return []
    if options_csv == "":
        return [""]
    options = options_csv.split(",")
    while options and options[-1] == "":
        options.pop()
    return options


class QuizCatalog:
    """Read and append quizzes and questions."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def list_quizzes(self) -> list[Quiz]:
        """All quizzes in storage order."""
        try:
            rows = self.conn.execute(
                "SELECT id, title FROM quizzes ORDER BY id"
            ).fetchall()
        except sqlite3.Error as e:
            logger.error("Error listing quizzes: %s", e)
            return []
        return [Quiz(id=row["id"], title=row["title"]) for row in rows]

    def list_questions(self, quiz_id: int) -> list[Question]:
        """All questions belonging to a quiz, in insertion order."""
        try:
            rows = self.conn.execute(
                "SELECT id, quiz_id, question, options, answer FROM questions "
                "WHERE quiz_id = ? ORDER BY id",
                (quiz_id,),
            ).fetchall()
        except sqlite3.Error as e:
            logger.error("Error listing questions for quiz %s: %s", quiz_id, e)
            return []
        return [
            Question(
                id=row["id"],
                quiz_id=row["quiz_id"],
                question=row["question"],
                options=split_options(row["options"]),
                answer=row["answer"],
            )
            for row in rows
        ]

    def add_question(
        self, quiz_id: int, question: str, options_csv: str, answer: str
    ) -> bool:
        """Append a question to an existing quiz.

        The quiz id is checked against the current catalog. The answer is
        stored as given; if it matches none of the options, the question
        can never be answered correctly.
        """
        if quiz_id not in {quiz.id for quiz in self.list_quizzes()}:
            logger.warning("Rejected question for unknown quiz %s", quiz_id)
            return False
        try:
            with self.conn:
                self.conn.execute(
                    "INSERT INTO questions (quiz_id, question, options, answer) "
                    "VALUES (?, ?, ?, ?)",
                    (quiz_id, question, options_csv, answer),
                )
        except sqlite3.Error as e:
            logger.error("Error adding question: %s", e)
            return False
        return True

    def add_quiz(self, title: str) -> int | None:
        """Create a quiz and return its id."""
        try:
            with self.conn:
                cursor = self.conn.execute(
                    "INSERT INTO quizzes (title) VALUES (?)", (title,)
                )
        except sqlite3.Error as e:
            logger.error("Error adding quiz %r: %s", title, e)
            return None
        return cursor.lastrowid

    def question_counts(self) -> dict[int, int]:
        """Number of questions per quiz id (quizzes without questions are absent)."""
        try:
            rows = self.conn.execute(
                "SELECT quiz_id, COUNT(*) AS total FROM questions GROUP BY quiz_id"
            ).fetchall()
        except sqlite3.Error as e:
            logger.error("Error counting questions: %s", e)
            return {}
        return {row["quiz_id"]: row["total"] for row in rows}
