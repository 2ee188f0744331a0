"""Pytest configuration and fixtures.

This module provides:
- An initialized in-memory database per test
- Stores bound to that database
- A scripted console that replays canned input and records output
"""

import sqlite3
from collections.abc import Iterator, Sequence

import pytest

from quizdb.catalog import QuizCatalog
from quizdb.credentials import CredentialStore
from quizdb.db import open_connection
from quizdb.schema import initialize
from quizdb.scores import ScoreRecorder


class ScriptedConsole:
    """Console fake fed from a list of answers.

    Integers answer option prompts, strings answer text prompts.
    Everything shown to the user is collected in `messages`.
    """

    __test__ = False

    def __init__(self, inputs: Sequence[int | str] = ()):
        self.inputs = list(inputs)
        self.messages: list[str] = []
        self.prompts: list[str] = []
        self.shown_options: list[list[tuple[int, str]]] = []

    def _next(self, prompt: str) -> int | str:
        self.prompts.append(prompt)
        if not self.inputs:
            raise AssertionError(f"Unexpected prompt: {prompt!r}")
        return self.inputs.pop(0)

    def present_options(self, prompt: str, options: Sequence[tuple[int, str]]) -> int:
        self.shown_options.append(list(options))
        value = self._next(prompt)
        assert isinstance(value, int), f"Expected int for {prompt!r}, got {value!r}"
        return value

    def present_text(self, prompt: str) -> str:
        value = self._next(prompt)
        assert isinstance(value, str), f"Expected str for {prompt!r}, got {value!r}"
        return value

    def present_message(self, text: str) -> None:
        self.messages.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.messages)


@pytest.fixture
def conn() -> Iterator[sqlite3.Connection]:
    """Fresh in-memory database with the schema applied."""
    connection = open_connection(":memory:")
    initialize(connection)
    yield connection
    connection.close()


@pytest.fixture
def credentials(conn) -> CredentialStore:
    return CredentialStore(conn)


@pytest.fixture
def catalog(conn) -> QuizCatalog:
    return QuizCatalog(conn)


@pytest.fixture
def scores(conn) -> ScoreRecorder:
    return ScoreRecorder(conn)


@pytest.fixture
def math_quiz(catalog) -> int:
    """Quiz 1 "Math" with the single question 2+2? (3,4,5 -> 4)."""
    quiz_id = catalog.add_quiz("Math")
    assert catalog.add_question(quiz_id, "2+2?", "3,4,5", "4")
    return quiz_id


@pytest.fixture
def broken_conn() -> sqlite3.Connection:
    """A connection that has already been closed; every query raises."""
    connection = open_connection(":memory:")
    initialize(connection)
    connection.close()
    return connection
