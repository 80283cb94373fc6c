"""Entrypoint: bind uvicorn to HOST/PORT from the environment (PORT defaults to 3000)."""
import logging
import sys

import uvicorn
from uvicorn.main import STARTUP_FAILURE

from staticsite.config import Settings

logger = logging.getLogger("staticsite.run")


class StaticSiteServer(uvicorn.Server):
    """uvicorn server that announces the port only after the bind succeeds."""

    async def startup(self, sockets=None):
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(f"Server running on {self.config.port}")


def main():
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info(f"Starting server on {settings.host}:{settings.port}")

    config = uvicorn.Config("staticsite.main:app", host=settings.host, port=settings.port)
    server = StaticSiteServer(config)
    server.run()
    if not server.started:
        sys.exit(STARTUP_FAILURE)


if __name__ == "__main__":
    main()
