"""Page endpoints that return the site's index file."""

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse

router = APIRouter(tags=["pages"])

logger = logging.getLogger(__name__)


def index_response(request: Request) -> FileResponse:
    """Send index.html from the root directory, or 404 if it is missing."""
    index_path = request.app.state.settings.index_path
    if not index_path.is_file():
        logger.warning(f"Index file not found: {index_path}")
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(index_path)


@router.api_route("/", methods=["GET", "HEAD"])
async def home(request: Request):
    return index_response(request)


@router.api_route("/deprecated", methods=["GET", "HEAD"])
async def deprecated(request: Request):
    """Legacy path kept for old links; same response as /."""
    return index_response(request)
