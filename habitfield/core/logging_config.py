"""
Logging setup for the habit CLI.

All modules log through `logging.getLogger(__name__)`, which places them under
the `habitfield` package logger configured here. Output goes to stderr so it
never mixes with the listing on stdout.
"""
import logging
import sys

LOGGER_NAME = "habitfield"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(LOGGER_NAME)


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach one stderr handler to the package logger. Calling again only changes the level."""
    level = _resolve_level(level)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    # SQL echo only at DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if level <= logging.DEBUG else logging.WARNING
    )
    return logger
