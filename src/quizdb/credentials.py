"""User accounts: sign-up and login against the users table."""

import logging
import sqlite3

logger = logging.getLogger(__name__)


class CredentialStore:
    """Validates and registers username/password pairs.

    Comparison is an exact, case-sensitive match on the stored plaintext.
    """

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def login(self, username: str, password: str) -> bool:
        """Return True if a user with exactly this username and password exists."""
        try:
            row = self.conn.execute(
                "SELECT id FROM users WHERE username = ? AND password = ?",
                (username, password),
            ).fetchone()
        except sqlite3.Error as e:
            logger.error("Error during login: %s", e)
            return False
        return row is not None

    def sign_up(self, username: str, password: str) -> bool:
        """Register a new account.

        Returns False if the insert fails for any reason, including a
        username that is already taken.
        """
        try:
            with self.conn:
                self.conn.execute(
                    "INSERT INTO users (username, password) VALUES (?, ?)",
                    (username, password),
                )
        except sqlite3.Error as e:
            logger.error("Error during sign up: %s", e)
            return False
        return True

    def user_id(self, username: str) -> int | None:
        """Look up the id of a registered user."""
        try:
            row = self.conn.execute(
                "SELECT id FROM users WHERE username = ?", (username,)
            ).fetchone()
        except sqlite3.Error as e:
            logger.error("Error looking up user %r: %s", username, e)
            return None
        return row["id"] if row else None
