#!/usr/bin/env python
"""Initialize database tables."""
import asyncio

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from player_registry.db.connection import create_engine
from player_registry.db.models import Base
from player_registry.main import validate_environment


async def init_db() -> None:
    engine = create_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()
    print("✓ Player tables created successfully")


if __name__ == "__main__":
    validate_environment()
    asyncio.run(init_db())
