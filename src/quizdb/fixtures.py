"""Sample quizzes for a fresh database.

Loaded by `quizdb seed`. Options are stored comma-separated exactly as
written here, so option text must not contain commas.
"""

import sqlite3
from typing import TypedDict

from .catalog import QuizCatalog


class QuestionData(TypedDict):
    question: str
    options: list[str]
    answer: str


class QuizData(TypedDict):
    title: str
    questions: list[QuestionData]


def _q(question: str, options: list[str], answer: str) -> QuestionData:
    return {"question": question, "options": options, "answer": answer}


SAMPLE_QUIZZES: list[QuizData] = [
    {
        "title": "Math",
        "questions": [
            _q("2+2?", ["3", "4", "5"], "4"),
            _q("7*6?", ["36", "42", "48", "54"], "42"),
            _q("Square root of 81?", ["7", "8", "9"], "9"),
        ],
    },
    {
        "title": "Geography",
        "questions": [
            _q("Capital of France?", ["Berlin", "Madrid", "Paris", "Rome"], "Paris"),
            _q("Largest ocean?", ["Atlantic", "Indian", "Pacific"], "Pacific"),
            _q("Longest river in Africa?", ["Congo", "Niger", "Nile", "Zambezi"], "Nile"),
        ],
    },
    {
        "title": "Python",
        "questions": [
            _q("Which type is immutable?", ["list", "dict", "set", "tuple"], "tuple"),
            _q("Keyword that defines a function?", ["func", "def", "lambda", "fn"], "def"),
            _q("Result of len('abc')?", ["2", "3", "4"], "3"),
        ],
    },
]


def verify_sample_quizzes() -> bool:
    """Every sample answer must be one of its own options."""
    return all(
        q["answer"] in q["options"] and not any("," in opt for opt in q["options"])
        for quiz in SAMPLE_QUIZZES
        for q in quiz["questions"]
    )


def load_sample_quizzes(conn: sqlite3.Connection) -> int:
    """Insert the sample quizzes; returns the number of questions added."""
    catalog = QuizCatalog(conn)
    added = 0
    for quiz in SAMPLE_QUIZZES:
        quiz_id = catalog.add_quiz(quiz["title"])
        if quiz_id is None:
            continue
        for q in quiz["questions"]:
            if catalog.add_question(quiz_id, q["question"], ",".join(q["options"]), q["answer"]):
                added += 1
    return added
