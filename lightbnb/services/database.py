import logging
from typing import Any

import asyncpg

from lightbnb.config import Settings
from lightbnb.exceptions.custom import DatabaseError

logger = logging.getLogger(__name__)

_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


def create_pool(settings: Settings) -> asyncpg.Pool:
    """Return an unopened pool; open it with ``async with`` or ``await``."""
    return asyncpg.create_pool(
        user=settings.db_user,
        password=settings.db_password,
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_name,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )


def _translate(exc: Exception) -> DatabaseError:
    sqlstate = getattr(exc, "sqlstate", None)
    logger.error("Query failed: %s (sqlstate=%s)", exc, sqlstate)
    return DatabaseError(str(exc) or type(exc).__name__, sqlstate=sqlstate)


async def fetch_one(pool: asyncpg.Pool, query: str, *args: Any) -> dict[str, Any] | None:
    logger.debug("fetch_one: %s %s", query.strip(), args)
    try:
        row = await pool.fetchrow(query, *args)
    except _DRIVER_ERRORS as exc:
        raise _translate(exc) from exc
    return dict(row) if row is not None else None


async def fetch_all(pool: asyncpg.Pool, query: str, *args: Any) -> list[dict[str, Any]]:
    logger.debug("fetch_all: %s %s", query.strip(), args)
    try:
        rows = await pool.fetch(query, *args)
    except _DRIVER_ERRORS as exc:
        raise _translate(exc) from exc
    return [dict(row) for row in rows]
