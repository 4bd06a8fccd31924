from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from justmyluck.features.health.routes.health import router as health_router
from justmyluck.features.signup.routes.subscribe import router as subscribe_router
from justmyluck.middlewares.origin import OriginGuardMiddleware
from justmyluck.platform.config import Settings, settings
from justmyluck.platform.db.session import create_engine_for, create_session_factory, init_db
from justmyluck.platform.exceptions import add_exception_handlers
from justmyluck.platform.logger import get_logger
from justmyluck.platform.services.email import create_transport

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db(app.state.engine)
    yield
    await app.state.engine.dispose()


def create_app(app_settings: Settings = settings) -> FastAPI:
    app = FastAPI(
        title="JustMyLuck API",
        description="Signup backend for the Just My Luck landing page",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Store, mail transport and settings are per app; dependencies read them from app.state
    app.state.settings = app_settings
    app.state.engine = create_engine_for(app_settings)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.mail_transport = create_transport(app_settings)

    allowed_origins = app_settings.allowed_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins or ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added last so it runs before CORSMiddleware, preflights included
    app.add_middleware(OriginGuardMiddleware, allowed_origins=allowed_origins)

    add_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(subscribe_router)

    return app


app = create_app()


def run():
    logger.info(f"JustMyLuck backend listening on {settings.PORT}")
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
