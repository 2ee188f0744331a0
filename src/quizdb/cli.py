"""Command-line interface for the quiz application."""

import logging
import sqlite3
from pathlib import Path

import click
import tomlkit
import tomlkit.exceptions

from . import paths
from .app import QuizApp
from .catalog import QuizCatalog
from .console import ClickConsole
from .db import connect
from .fixtures import load_sample_quizzes
from .schema import initialize, table_counts


def _db_path(ctx: click.Context) -> Path:
    return ctx.obj["db_path"]


def _open(ctx: click.Context) -> sqlite3.Connection:
    """Open and initialize the database for a command.

    The connection is closed when the click context is torn down.
    """
    db_path = _db_path(ctx)
    try:
        conn = ctx.with_resource(connect(db_path))
        initialize(conn)
    except sqlite3.Error as e:
        raise click.ClickException(f"Database error ({db_path}): {e}") from e
    return conn


@click.group(invoke_without_command=True)
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Database file (default: from config.toml, .env, or ./quiz.db).",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging on stderr.")
@click.version_option(package_name="quizdb")
@click.pass_context
def cli(ctx: click.Context, db_path: Path | None, verbose: bool) -> None:
    """Online quiz application.

    Without a sub-command, starts the interactive menu.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["db_path"] = db_path or paths.get_active_db()

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@cli.command()
@click.pass_context
def run(ctx: click.Context) -> None:
    """Start the interactive menu (log in, sign up, take quizzes)."""
    conn = _open(ctx)
    QuizApp(conn, ClickConsole()).run()


@cli.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Create the database tables if they don't exist."""
    _open(ctx)
    click.echo(click.style(f"Database ready: {_db_path(ctx)}", fg="green"))


@cli.command("add-quiz")
@click.argument("title")
@click.pass_context
def add_quiz(ctx: click.Context, title: str) -> None:
    """Create a new quiz with the given TITLE.

    Questions are added afterwards from the interactive menu
    (Add Questions).
    """
    quiz_id = QuizCatalog(_open(ctx)).add_quiz(title)
    if quiz_id is None:
        raise click.ClickException(f"Could not create quiz: {title}")
    click.echo(click.style(f"Created quiz {quiz_id}: {title}", fg="green"))


@cli.command("list")
@click.pass_context
def list_quizzes(ctx: click.Context) -> None:
    """List quizzes and how many questions each has."""
    catalog = QuizCatalog(_open(ctx))
    quizzes = catalog.list_quizzes()
    click.echo(click.style("Quizzes:", bold=True))
    if not quizzes:
        click.echo("  (none)")
        return
    counts = catalog.question_counts()
    for quiz in quizzes:
        click.echo(f"  {quiz.id:>3}. {quiz.title} ({counts.get(quiz.id, 0)} questions)")


@cli.command()
@click.pass_context
def seed(ctx: click.Context) -> None:
    """Load the sample quizzes into an empty catalog."""
    conn = _open(ctx)
    if QuizCatalog(conn).list_quizzes():
        raise click.ClickException("Catalog is not empty; refusing to seed.")
    added = load_sample_quizzes(conn)
    click.echo(click.style(f"Loaded {added} sample questions.", fg="green"))


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show the active database and its row counts."""
    db_path = _db_path(ctx)
    if not Path(db_path).exists():
        raise click.ClickException(f"Database not found: {db_path}")

    conn = _open(ctx)
    click.echo(click.style("=== Database Info ===", bold=True))
    click.echo(f"Active database: {db_path}")
    size_kb = Path(db_path).stat().st_size / 1024
    click.echo(f"Size: {size_kb:.1f} KB")
    click.echo()
    for table, count in table_counts(conn).items():
        click.echo(f"  {table}: {count}")


@cli.command()
@click.argument("path")
def use(path: str) -> None:
    """Point the project at a different database file.

    Writes the path to config.toml in the project root. Use 'default'
    to remove the override and go back to quiz.db.

    Examples:

        quizdb use data/practice.db

        quizdb use default
    """
    config_path = paths.config_toml()
    if config_path.exists():
        with open(config_path) as f:
            try:
                config = tomlkit.load(f)
            except tomlkit.exceptions.ParseError as e:
                raise click.ClickException(f"Cannot parse {config_path}: {e}") from e
    else:
        config = tomlkit.document()

    if path == "default":
        if "database" not in config:
            click.echo("No database override in config.toml")
            return
        del config["database"]
        click.echo("Removed database override from config.toml")
    else:
        database = config.get("database")
        if database is None:
            database = tomlkit.table()
            config["database"] = database
        database["path"] = path
        click.echo(click.style(f"Switched to: {path}", fg="green"))

    with open(config_path, "w") as f:
        tomlkit.dump(config, f)
