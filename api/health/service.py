"""
Database health check.
"""

from __future__ import annotations

import enum
import logging

from core import db

logger = logging.getLogger(__name__)


class DbStatus(str, enum.Enum):
    UP = "UP"
    DOWN = "DOWN"


async def check() -> DbStatus:
    try:
        await db.fetch_one("SELECT 1 AS ok")
    except Exception as exc:
        logger.warning("health_check_failed error=%s", exc)
        return DbStatus.DOWN
    return DbStatus.UP
