"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from . import settings

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None

# Failures that mean "the database could not do what we asked".
_DB_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)


class StorageError(RuntimeError):
    """
    The database could not serve a request.

    The message is safe to show to API clients; the driver error is kept
    as `__cause__` and logged here.
    """

    def __init__(self, message: str = "Storage error.") -> None:
        super().__init__(message)


def _storage_error(exc: BaseException) -> StorageError:
    logger.error("db_query_failed error_type=%s error=%s", type(exc).__name__, exc)
    return StorageError()


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    return _sanitize_database_url(settings.database_url())


async def _create_pool() -> asyncpg.Pool:
    return await asyncpg.create_pool(
        dsn=database_url(),
        min_size=settings.db_pool_min_size(),
        max_size=settings.db_pool_max_size(),
        command_timeout=settings.db_command_timeout_s(),
    )


async def init_pool() -> None:
    """
    Create the pool, retrying with exponential backoff while the database
    is still starting up.
    """
    global _pool
    if _pool is not None:
        return None

    attempts = settings.db_connect_retries()
    delay = settings.db_connect_backoff_s()
    for attempt in range(1, attempts + 1):
        try:
            _pool = await _create_pool()
        except _DB_ERRORS as exc:
            if attempt == attempts:
                raise StorageError(f"Could not connect to database after {attempts} attempts.") from exc
            logger.warning(
                "db_connect_failed attempt=%s/%s retry_in_s=%.2f error=%s",
                attempt,
                attempts,
                delay,
                exc,
            )
            await asyncio.sleep(delay)
            delay *= 2
        else:
            logger.info("db_pool_ready attempt=%s", attempt)
            return None


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        logger.error("db_pool_not_initialized hint=call init_pool() on startup")
        raise StorageError()
    return _pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    try:
        row = await pool().fetchrow(sql, *args)
    except _DB_ERRORS as exc:
        raise _storage_error(exc) from exc
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await pool().fetch(sql, *args)
    except _DB_ERRORS as exc:
        raise _storage_error(exc) from exc
    return [_record_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> None:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
    """
    try:
        await pool().execute(sql, *args)
    except _DB_ERRORS as exc:
        raise _storage_error(exc) from exc
