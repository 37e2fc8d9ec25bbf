# This project was developed with assistance from AI tools.
"""Run the API server: ``python -m mortgage_api``."""

import logging

import uvicorn

from .core.config import settings


def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    uvicorn.run(
        "mortgage_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
