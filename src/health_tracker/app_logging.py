"""Logging configuration helpers."""

import logging

APP_LOGGER = "health_tracker"
# httpx logs full request URLs at INFO, and FDC requests carry the API key.
QUIET_LOGGERS = ("httpx", "httpcore", "openai", "google")


def configure_logging(level: int = logging.INFO) -> None:
    """Install one stream handler on the app logger and quiet client libraries."""
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
