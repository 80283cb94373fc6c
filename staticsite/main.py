"""Static site server: index page routes plus public/ assets."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from staticsite.config import Settings, settings as default_settings
from staticsite.api.routes_pages import router as pages_router
from staticsite.api.static import mount_static

# Configure logging
logging.basicConfig(
    level=default_settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("App is starting...")

    yield

    logger.info("Server shutting down...")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app. Page routes are registered before the static mount."""
    settings = settings or default_settings

    app = FastAPI(
        title="staticsite",
        version="1.0.0",
        lifespan=lifespan,
        # Generated docs would shadow static files named docs/redoc
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    app.include_router(pages_router)
    mount_static(app, settings)

    return app


app = create_app()
