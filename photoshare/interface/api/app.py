"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from photoshare.config import Settings
from photoshare.interface.api.routes import (
    auth,
    health,
    messages,
    photos,
    tags,
    votes,
)
from photoshare.util.di.container import create_container, setup_di
from photoshare.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does, and passes in a container with mocks.

    Args:
        container: DI container; the production one is built if omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Photoshare API",
        description="Photoshare API: upload, tag, search and vote on photos",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # The session token is exposed so browser clients can read it
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
            settings.auth.token_header,
        ],
        expose_headers=["Content-Length", "Content-Type", settings.auth.token_header],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    # Static paths under /photos are registered before /photos/{photo_id}
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(photos.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(messages.router)

    # Stored originals and thumbnails, by filename
    storage = settings.storage
    app_instance.mount(
        storage.thumbnail_url,
        StaticFiles(directory=storage.thumbnail_dir, check_dir=False),
        name="thumbnails",
    )
    app_instance.mount(
        storage.upload_url,
        StaticFiles(directory=storage.upload_dir, check_dir=False),
        name="uploads",
    )

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
