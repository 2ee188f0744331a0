"""Locating the project root and the active database file.

The database path is resolved in this order:
1. config.toml: [database] path = "..."
2. .env: DATABASE_PATH=...
3. quiz.db in the project root

Relative paths are taken from the project root.
"""

import logging
import tomllib
from pathlib import Path

import pyrootutils

logger = logging.getLogger(__name__)

ROOT_INDICATORS = ["pyproject.toml", "config.toml", ".git"]
DEFAULT_DB_NAME = "quiz.db"


def project_root() -> Path:
    """Find the project root by walking up from the working directory."""
    try:
        return pyrootutils.find_root(search_from=Path.cwd(), indicator=ROOT_INDICATORS)
    except FileNotFoundError:
        return Path.cwd()


def config_toml(root: Path | None = None) -> Path:
    return (root or project_root()) / "config.toml"


def _from_config_toml(root: Path) -> str | None:
    path = config_toml(root)
    if not path.exists():
        return None
    with open(path, "rb") as f:
        try:
            config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.warning("Ignoring malformed %s: %s", path, e)
            return None
    return config.get("database", {}).get("path")


def _from_env_file(root: Path) -> str | None:
    env_file = root / ".env"
    if not env_file.exists():
        return None
    with open(env_file) as f:
        for line in f:
            line = line.strip()
            if line.startswith("DATABASE_PATH="):
                return line.split("=", 1)[1].strip().strip('"').strip("'")
    return None


def get_active_db(root: Path | None = None) -> Path:
    """Get the currently configured database path."""
    root = root or project_root()
    configured = _from_config_toml(root) or _from_env_file(root)
    if configured:
        return root / configured
    return root / DEFAULT_DB_NAME
