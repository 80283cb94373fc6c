"""Static asset mount for the public directory."""

import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from staticsite.config import Settings

logger = logging.getLogger(__name__)


def mount_static(app: FastAPI, settings: Settings):
    """Mount the public directory at / so it catches paths no route matched.

    Must run after the page routers are included. When the directory is
    missing nothing is mounted and unmatched paths fall through to 404.
    """
    public_path = settings.public_path
    if not public_path.is_dir():
        logger.warning(f"Public directory not found, static files disabled: {public_path}")
        return

    app.mount("/", StaticFiles(directory=public_path, html=True), name="static")
    logger.info(f"Serving static files from {public_path}")
