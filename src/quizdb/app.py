"""Interactive menus: the logged-out main menu and the per-user menu."""

import logging
import sqlite3

from .catalog import QuizCatalog, split_options
from .console import Console
from .credentials import CredentialStore
from .scores import ScoreRecorder
from .session import take_quiz

logger = logging.getLogger(__name__)

MAIN_MENU = [(1, "Log in"), (2, "Sign up"), (3, "Exit")]
USER_MENU = [
    (1, "Take Quiz"),
    (2, "View Scores"),
    (3, "Add Questions (Admin)"),
    (4, "Log out"),
]


class QuizApp:
    """All stores share the one connection handed in at construction."""

    def __init__(self, conn: sqlite3.Connection, console: Console):
        self.console = console
        self.credentials = CredentialStore(conn)
        self.catalog = QuizCatalog(conn)
        self.scores = ScoreRecorder(conn)

    def run(self) -> None:
        """Main menu loop; returns when the user chooses Exit."""
        while True:
            self.console.present_message("\nWelcome to Online Quiz Application")
            choice = self.console.present_options("Choose an option", MAIN_MENU)
            if choice == 3:
                self.console.present_message("Exiting... Goodbye!")
                return
            if choice == 1:
                self.log_in()
            elif choice == 2:
                self.sign_up()
            else:
                self.console.present_message("Invalid choice. Try again.")

    def log_in(self) -> None:
        username = self.console.present_text("Enter username")
        password = self.console.present_text("Enter password")
        if not self.credentials.login(username, password):
            self.console.present_message("Invalid credentials. Try again.")
            return
        self.console.present_message("Login successful!\n")
        self.user_menu(self.credentials.user_id(username))

    def sign_up(self) -> None:
        username = self.console.present_text("Choose a username")
        password = self.console.present_text("Choose a password")
        if self.credentials.sign_up(username, password):
            self.console.present_message("Account created successfully! You can now log in.")
        else:
            self.console.present_message("Sign up failed. Username might already exist.")

    def user_menu(self, user_id: int | None) -> None:
        while True:
            self.console.present_message("\nUser Menu:")
            choice = self.console.present_options("Choose an option", USER_MENU)
            if choice == 1:
                self.take_quiz(user_id)
            elif choice == 2:
                self.view_scores(user_id)
            elif choice == 3:
                self.add_questions()
            elif choice == 4:
                self.console.present_message("Logging out...")
                return
            else:
                self.console.present_message("Invalid choice. Try again.")

    def take_quiz(self, user_id: int | None) -> None:
        """Run one attempt and save its score if it reached the end.

        A quiz with no questions still finishes, and is saved as a score of 0.
        """
        result = take_quiz(self.catalog, self.console)
        if not result.completed:
            return
        if user_id is None:
            logger.warning("No user id for finished quiz %s; score not saved", result.quiz_id)
            return
        if not self.scores.record_score(user_id, result.quiz_id, result.correct):
            self.console.present_message("Your score could not be saved.")

    def view_scores(self, user_id: int | None) -> None:
        entries = self.scores.list_scores(user_id) if user_id is not None else []
        if not entries:
            self.console.present_message("No scores recorded yet.")
            return
        self.console.present_message("\nYour Scores:")
        for entry in entries:
            title = entry.quiz_title or f"Quiz {entry.quiz_id}"
            self.console.present_message(f"  {title}: {entry.score}")

    def add_questions(self) -> None:
        quizzes = self.catalog.list_quizzes()
        if not quizzes:
            self.console.present_message("No quizzes available.")
            return

        self.console.present_message("\nAvailable Quizzes:")
        quiz_id = self.console.present_options(
            "Enter quiz ID to add questions to", [(quiz.id, quiz.title) for quiz in quizzes]
        )
        if quiz_id not in {quiz.id for quiz in quizzes}:
            self.console.present_message("Invalid quiz ID.")
            return

        question = self.console.present_text("Enter question")
        options = self.console.present_text("Enter options (comma-separated)")
        answer = self.console.present_text("Enter correct answer")
        if answer not in split_options(options):
            # Stored anyway; the question just can't be answered correctly
            self.console.present_message(
                f"Warning: '{answer}' is not one of the options."
            )

        if self.catalog.add_question(quiz_id, question, options, answer):
            self.console.present_message("Question added successfully.")
        else:
            self.console.present_message("Error adding question.")
