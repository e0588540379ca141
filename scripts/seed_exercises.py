"""Insert the predefined exercise catalog. Existing names are left untouched."""

import asyncio
import logging

from sqlalchemy import select

from liftlog.core.default_exercises import DEFAULT_EXERCISES
from liftlog.db.session import dispose_engine, get_session_maker
from liftlog.models.exercise import Exercise

logger = logging.getLogger("seed_exercises")


async def main() -> None:
    async with get_session_maker()() as session:
        result = await session.execute(select(Exercise.name))
        existing = set(result.scalars().all())
        added = 0
        for data in DEFAULT_EXERCISES:
            if data["name"] in existing:
                continue
            session.add(Exercise(**data))
            added += 1
        await session.commit()
    logger.info("Seeded %d exercises (%d already present)", added, len(existing))
    await dispose_engine()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
