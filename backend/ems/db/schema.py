"""Schema Bootstrap — idempotent table creation on startup.

Invariants:
    - create_all uses checkfirst: existing tables are left untouched
    - All models imported before metadata is used

Design Decisions:
    - No migration tool: the schema is a single table created once
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from ems.db.base import Base
import ems.models  # noqa: F401

logger = logging.getLogger(__name__)


async def create_schema(engine: AsyncEngine) -> None:
    """Create every table that does not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(
        "Schema ready",
        extra={"tables": sorted(Base.metadata.tables)},
    )
