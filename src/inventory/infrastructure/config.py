"""Runtime configuration read from the environment.

A ``.env`` file in the working directory is loaded first (without
overriding variables that are already set), then the ``INVENTORY_*``
variables are parsed into an immutable Settings object.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

BACKENDS = ("json", "sql")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """An environment variable holds a value we cannot use."""


@dataclass(frozen=True)
class Settings:
    backend: str = "json"
    data_dir: Path = DEFAULT_DATA_DIR
    database_url: str | None = None
    max_retries: int = 3
    log_level: str = "INFO"
    log_file: Path | None = None

    @property
    def json_path(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def sql_url(self) -> str:
        if self.database_url:
            return normalize_database_url(self.database_url)
        return f"sqlite:///{self.data_dir / 'inventory.db'}"


def normalize_database_url(raw_url: str) -> str:
    """Point bare postgres URLs at the psycopg driver SQLAlchemy expects."""
    url = raw_url.strip()
    if url.startswith("postgres://"):
        return "postgresql+psycopg://" + url[len("postgres://"):]
    if url.startswith("postgresql://"):
        return "postgresql+psycopg://" + url[len("postgresql://"):]
    return url


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from ``environ`` (defaults to ``os.environ``)."""
    if environ is None:
        load_dotenv(override=False)
        environ = os.environ

    backend = environ.get("INVENTORY_BACKEND", "json").strip().lower()
    if backend not in BACKENDS:
        raise ConfigurationError(
            f"INVENTORY_BACKEND must be one of {', '.join(BACKENDS)}, got {backend!r}"
        )

    raw_retries = environ.get("INVENTORY_MAX_RETRIES", "3")
    try:
        max_retries = int(raw_retries)
    except ValueError:
        raise ConfigurationError(
            f"INVENTORY_MAX_RETRIES must be an integer, got {raw_retries!r}"
        )
    if max_retries < 0:
        raise ConfigurationError(
            f"INVENTORY_MAX_RETRIES must be >= 0, got {max_retries}"
        )

    log_level = environ.get("INVENTORY_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ConfigurationError(
            f"INVENTORY_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
        )

    data_dir = environ.get("INVENTORY_DATA_DIR")
    log_file = environ.get("INVENTORY_LOG_FILE")
    return Settings(
        backend=backend,
        data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR,
        database_url=environ.get("INVENTORY_DATABASE_URL") or None,
        max_retries=max_retries,
        log_level=log_level,
        log_file=Path(log_file) if log_file else None,
    )
