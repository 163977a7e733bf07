"""FastAPI application entry point."""

import logging

import uvicorn

from tronics.application import create_app
from tronics.config import settings

app = create_app()

__all__ = ["app", "run"]

logger = logging.getLogger(__name__)


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""

    logger.info("Listening on port %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
