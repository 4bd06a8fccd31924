from pathlib import Path

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from justmyluck.platform.config import Settings
from justmyluck.platform.db.base import Base
from justmyluck.platform.logger import get_logger

logger = get_logger("db")


def create_engine_for(app_settings: Settings) -> AsyncEngine:
    return create_async_engine(
        app_settings.database_url,
        echo=False,
        future=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False, autocommit=False)


async def init_db(bind: AsyncEngine):
    """Create the database directory and the `subscribers` table if missing."""
    from justmyluck.features.signup.models.subscriber import Subscriber  # noqa: F401

    if bind.url.database:
        Path(bind.url.database).parent.mkdir(parents=True, exist_ok=True)

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Database ready at {bind.url.database}")


async def get_db(request: Request):
    # The factory belongs to the app built by create_app
    async with request.app.state.session_factory() as session:
        yield session
