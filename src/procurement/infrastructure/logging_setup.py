"""Logging configuration shared by every CLI command."""

from __future__ import annotations

import logging


def setup_logging(level: str = "WARNING", debug: bool = False) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-7s %(name)s: %(message)s")
    )
    root_logger.addHandler(handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
