"""Database schema for the quiz application.

Tables:
- users: accounts (username is unique, password stored as entered)
- quizzes: named collections of questions
- questions: one prompt with comma-separated options and the answer text
- scores: correct-answer count for one attempt by one user

Passwords are stored in plaintext. This mirrors the existing data files and
must be replaced with a password hash before the app is exposed to anyone.
"""

import sqlite3

TABLES = ("users", "quizzes", "questions", "scores")

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT UNIQUE NOT NULL,
    password TEXT
);

CREATE TABLE IF NOT EXISTS quizzes (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT
);

CREATE TABLE IF NOT EXISTS questions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    quiz_id INTEGER,
    question TEXT,
    options TEXT,
    answer TEXT,
    FOREIGN KEY (quiz_id) REFERENCES quizzes(id)
);

CREATE TABLE IF NOT EXISTS scores (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id INTEGER,
    quiz_id INTEGER,
    score INTEGER,
    FOREIGN KEY (user_id) REFERENCES users(id),
    FOREIGN KEY (quiz_id) REFERENCES quizzes(id)
);
"""


def initialize(conn: sqlite3.Connection) -> None:
    """Create the four tables if they don't exist yet.

    Safe to call on every startup. Errors are not caught here: a database
    that can't be initialized is fatal for the caller.
    """
    conn.executescript(SCHEMA_SQL)
    conn.commit()


def table_counts(conn: sqlite3.Connection) -> dict[str, int]:
    """Return the number of rows in each table."""
    return {
        table: conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
        for table in TABLES
    }
