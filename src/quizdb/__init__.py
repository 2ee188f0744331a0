"""Console quiz application backed by a local SQLite database."""

from .cli import cli

__all__ = ["cli", "main"]


def main() -> None:
    """Entry point for the quizdb CLI."""
    cli()
