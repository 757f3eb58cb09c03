"""Process-wide logging setup (stdlib logging)."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def configure_logging(level: str = "INFO", debug: bool = False) -> None:
    """Configure the root logger once; safe to call again (basicConfig is a no-op then)."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
    # SQL echo is controlled by DEBUG on the engine; keep the logger quiet otherwise.
    if not debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
