"""The take-quiz flow.

A quiz attempt moves through three states:

    SelectQuiz -> AnsweringQuestion(0..n-1) -> Finished

An empty catalog or an unknown quiz id ends the attempt early without a
score. Every question that is reached counts toward the total, and a
selection outside the option range counts as a wrong answer.
"""

from dataclasses import dataclass
from enum import Enum

from .catalog import Question, QuizCatalog
from .console import Console


class QuizStatus(Enum):
    COMPLETED = "completed"
    NO_QUIZZES = "no_quizzes"
    INVALID_SELECTION = "invalid_selection"


@dataclass(frozen=True)
class QuizResult:
    """Outcome of one attempt. Only COMPLETED results carry a tally."""

    status: QuizStatus
    quiz_id: int | None = None
    correct: int = 0
    total: int = 0

    @property
    def completed(self) -> bool:
        return self.status is QuizStatus.COMPLETED

    @property
    def tally(self) -> tuple[int, int]:
        return self.correct, self.total


class QuizSession:
    """Drives one quiz attempt through a Console."""

    def __init__(self, catalog: QuizCatalog, console: Console):
        self.catalog = catalog
        self.console = console

    def run(self) -> QuizResult:
        quizzes = self.catalog.list_quizzes()
        if not quizzes:
            self.console.present_message("No quizzes available.")
            return QuizResult(QuizStatus.NO_QUIZZES)

        self.console.present_message("\nAvailable Quizzes:")
        quiz_id = self.console.present_options(
            "Enter quiz ID to start", [(quiz.id, quiz.title) for quiz in quizzes]
        )
        if quiz_id not in {quiz.id for quiz in quizzes}:
            self.console.present_message("Invalid quiz ID.")
            return QuizResult(QuizStatus.INVALID_SELECTION)

        questions = self.catalog.list_questions(quiz_id)
        correct = sum(self.ask(question) for question in questions)

        self.console.present_message(
            f"\nQuiz finished! Your score: {correct}/{len(questions)}"
        )
        return QuizResult(
            QuizStatus.COMPLETED, quiz_id=quiz_id, correct=correct, total=len(questions)
        )

    def ask(self, question: Question) -> bool:
        """Present one question and report whether it was answered correctly."""
        self.console.present_message(f"\n{question.question}")
        selection = self.console.present_options(
            "Enter your answer", list(enumerate(question.options, start=1))
        )
        if question.is_correct(selection):
            self.console.present_message("Correct!")
            return True
        self.console.present_message(f"Incorrect. Correct answer: {question.answer}")
        return False


def take_quiz(catalog: QuizCatalog, console: Console) -> QuizResult:
    """Run a single quiz attempt."""
    return QuizSession(catalog, console).run()
