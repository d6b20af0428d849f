import logging
import os

LOG_LEVEL_ENV = "QOICODEC_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_log_level(name) -> tuple[int, bool]:
    """
    Map a level name such as "debug" to its logging constant.

    :return: (level, known) where unknown or empty names give (logging.INFO, False).
    """
    level = logging.getLevelName((name or "").strip().upper())
    if isinstance(level, int):
        return level, True
    return logging.INFO, False


def setup_logging(level_name: str = None) -> int:
    """
    Configure the root logger for the converter.

    An explicit level_name wins over the QOICODEC_LOG_LEVEL environment variable.
    """
    requested = level_name or os.getenv(LOG_LEVEL_ENV, "INFO")
    level, known = resolve_log_level(requested)

    logging.basicConfig(level=level, format=LOG_FORMAT)
    # Pillow reports each plugin it loads at DEBUG
    logging.getLogger("PIL").setLevel(max(level, logging.INFO))

    if not known:
        logging.getLogger(__name__).warning(
            "Unknown log level %r, using INFO", requested
        )
    return level
