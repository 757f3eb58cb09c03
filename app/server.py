"""
Run the API with uvicorn on HOST:PORT from settings:

  python -m app.server
"""

import logging

import uvicorn

from app.core.config import get_settings
from app.core.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, debug=settings.DEBUG)
    logger.info(
        "Task Tracker API starting on http://%s:%s in %s mode",
        settings.HOST,
        settings.PORT,
        settings.APP_ENV,
    )
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.APP_ENV == "dev" and settings.DEBUG,
    )


if __name__ == "__main__":
    main()
