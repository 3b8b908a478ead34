"""Database engine creation with connection retries."""

from __future__ import annotations

import logging
import time
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError

log = logging.getLogger(__name__)

MAX_OPEN_CONNECTIONS = 25
CONNECTION_MAX_LIFETIME_SECONDS = 2 * 60 * 60


class DatabaseConnectionError(Exception):
    """Raised when the database cannot be reached after every attempt."""


def _normalise(dsn: str) -> str:
    if dsn.startswith("postgres://"):
        return "postgresql://" + dsn[len("postgres://"):]
    return dsn


def _engine_options(dsn: str) -> dict[str, Any]:
    if make_url(dsn).get_backend_name() == "sqlite":
        return {}
    return {
        "pool_size": MAX_OPEN_CONNECTIONS,
        "max_overflow": 0,
        "pool_recycle": CONNECTION_MAX_LIFETIME_SECONDS,
        "pool_pre_ping": True,
    }


def connect(dsn: str, max_attempts: int = 10, delay: float = 3.0) -> Engine:
    """Create an engine for ``dsn`` and check it answers, retrying on failure."""
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    url = _normalise(dsn)
    last_error: SQLAlchemyError | None = None
    for attempt in range(1, max_attempts + 1):
        engine: Engine | None = None
        try:
            engine = create_engine(url, **_engine_options(url))
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return engine
        except SQLAlchemyError as exc:
            if engine is not None:
                engine.dispose()
            last_error = exc
            log.warning("Attempt %d: Could not connect to DB: %s", attempt, exc)
            time.sleep(delay)

    raise DatabaseConnectionError(
        f"failed to connect to DB after {max_attempts} attempts: {last_error}"
    ) from last_error