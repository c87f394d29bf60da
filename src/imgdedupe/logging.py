import logging
import os

PACKAGE_LOGGER = "imgdedupe"
LOG_LEVEL_ENV = "IMGDEDUPE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _install_package_handler() -> None:
    """Attach the single stream handler that every module logger propagates to."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)


def _default_level(name: str) -> int:
    # The CLI reports progress; library modules only report problems.
    fallback = logging.INFO if name.endswith(".cli") else logging.WARNING

    level_name = os.getenv(LOG_LEVEL_ENV)
    if not level_name:
        return fallback

    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else fallback


def get_logger(name: str) -> logging.Logger:
    _install_package_handler()

    logger = logging.getLogger(name)
    if logger.level == logging.NOTSET:
        logger.setLevel(_default_level(name))
    return logger
