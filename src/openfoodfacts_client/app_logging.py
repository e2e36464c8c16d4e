"""Logging configuration helpers."""

import logging

LOGGER_NAME = "openfoodfacts_client"


def configure_logging(level: int = logging.INFO) -> None:
    """Attach a single stream handler to the library logger.

    The library never calls this itself; applications opt in.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
