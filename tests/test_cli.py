"""Tests for the quizdb command group."""

import sqlite3
import tomllib

import pytest
from click.testing import CliRunner

from quizdb.cli import cli
from quizdb.fixtures import SAMPLE_QUIZZES


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "quiz.db"


def invoke(runner, db_path, *args, input=None):
    return runner.invoke(cli, ["--db", str(db_path), *args], input=input)


class TestInit:
    def test_creates_database(self, runner, db_path):
        result = invoke(runner, db_path, "init")

        assert result.exit_code == 0, result.output
        assert "Database ready" in result.output
        with sqlite3.connect(db_path) as conn:
            tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master")}
        assert {"users", "quizzes", "questions", "scores"} <= tables

    def test_unopenable_database_is_fatal(self, runner, tmp_path):
        bad = tmp_path / "quiz.db"
        bad.write_bytes(b"garbage" * 200)

        result = invoke(runner, bad, "init")

        assert result.exit_code != 0
        assert "Database error" in result.output


class TestQuizCommands:
    def test_add_quiz_and_list(self, runner, db_path):
        result = invoke(runner, db_path, "add-quiz", "Math")
        assert result.exit_code == 0, result.output
        assert "Created quiz 1: Math" in result.output

        result = invoke(runner, db_path, "list")
        assert result.exit_code == 0
        assert "1. Math (0 questions)" in result.output

    def test_list_empty(self, runner, db_path):
        result = invoke(runner, db_path, "list")
        assert "(none)" in result.output

    def test_seed(self, runner, db_path):
        result = invoke(runner, db_path, "seed")

        assert result.exit_code == 0, result.output
        expected = sum(len(quiz["questions"]) for quiz in SAMPLE_QUIZZES)
        assert f"Loaded {expected} sample questions." in result.output

        listing = invoke(runner, db_path, "list").output
        for quiz in SAMPLE_QUIZZES:
            assert quiz["title"] in listing

    def test_seed_refuses_non_empty_catalog(self, runner, db_path):
        invoke(runner, db_path, "add-quiz", "Math")
        result = invoke(runner, db_path, "seed")
        assert result.exit_code != 0
        assert "not empty" in result.output

    def test_info(self, runner, db_path):
        invoke(runner, db_path, "seed")
        result = invoke(runner, db_path, "info")
        assert result.exit_code == 0, result.output
        assert f"quizzes: {len(SAMPLE_QUIZZES)}" in result.output
        assert "users: 0" in result.output

    def test_info_missing_database(self, runner, db_path):
        result = invoke(runner, db_path, "info")
        assert result.exit_code != 0
        assert "Database not found" in result.output


class TestInteractiveRun:
    def test_full_session(self, runner, db_path):
        invoke(runner, db_path, "add-quiz", "Math")
        with sqlite3.connect(db_path) as conn:
            conn.execute(
                "INSERT INTO questions (quiz_id, question, options, answer) VALUES (1, '2+2?', '3,4,5', '4')"
            )

        keystrokes = "\n".join(
            ["2", "alice", "secret", "1", "alice", "secret", "1", "1", "2", "2", "4", "3"]
        )
        result = invoke(runner, db_path, "run", input=keystrokes + "\n")

        assert result.exit_code == 0, result.output
        assert "Account created successfully!" in result.output
        assert "1. Math" in result.output
        assert "2. 4" in result.output
        assert "Quiz finished! Your score: 1/1" in result.output
        assert "Math: 1" in result.output
        assert "Exiting... Goodbye!" in result.output

    def test_no_subcommand_starts_menu(self, runner, db_path):
        result = invoke(runner, db_path, input="3\n")
        assert result.exit_code == 0, result.output
        assert "Welcome to Online Quiz Application" in result.output

    def test_non_numeric_choice_reprompts(self, runner, db_path):
        result = invoke(runner, db_path, "run", input="abc\n3\n")
        assert result.exit_code == 0, result.output
        assert "is not a valid integer" in result.output


class TestUse:
    @pytest.fixture
    def project(self, tmp_path, monkeypatch):
        (tmp_path / "pyproject.toml").write_text("[project]\nname = 'demo'\n")
        monkeypatch.chdir(tmp_path)
        return tmp_path

    def test_writes_override(self, runner, project):
        result = runner.invoke(cli, ["use", "data/practice.db"])

        assert result.exit_code == 0, result.output
        with open(project / "config.toml", "rb") as f:
            assert tomllib.load(f) == {"database": {"path": "data/practice.db"}}

    def test_override_is_used(self, runner, project):
        runner.invoke(cli, ["use", "data/practice.db"])
        result = runner.invoke(cli, ["init"])

        assert result.exit_code == 0, result.output
        assert (project / "data" / "practice.db").exists()

    def test_default_removes_override_and_keeps_other_keys(self, runner, project):
        (project / "config.toml").write_text(
            '# local settings\n[database]\npath = "x.db"\n\n[ui]\ncolor = true\n'
        )

        result = runner.invoke(cli, ["use", "default"])

        assert result.exit_code == 0, result.output
        text = (project / "config.toml").read_text()
        assert "# local settings" in text
        with open(project / "config.toml", "rb") as f:
            assert tomllib.load(f) == {"ui": {"color": True}}

    def test_default_without_override(self, runner, project):
        result = runner.invoke(cli, ["use", "default"])
        assert "No database override" in result.output

    def test_malformed_config_is_reported(self, runner, project):
        (project / "config.toml").write_text("[database\npath = broken\n")

        result = runner.invoke(cli, ["use", "default"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, tomllib.TOMLDecodeError)
        assert "Cannot parse" in result.output
        assert (project / "config.toml").read_text() == "[database\npath = broken\n"

    def test_malformed_config_does_not_block_commands(self, runner, project):
        (project / "config.toml").write_text("[database\npath = broken\n")

        result = runner.invoke(cli, ["init"])

        assert result.exit_code == 0, result.output
        assert (project / "quiz.db").exists()
