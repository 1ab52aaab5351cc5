"""Logging setup for the API process."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "info") -> None:
    """Configure root logging once for the application.

    Args:
        level: Level name, case-insensitive; unknown names fall back to INFO
    """
    logging.basicConfig(format=LOG_FORMAT)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
