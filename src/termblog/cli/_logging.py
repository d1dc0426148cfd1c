"""Logging setup for CLI runs.

The library itself never configures handlers; only the command line
does, once, before building the app.
"""

import logging


def configure_logging(level: str) -> None:
    """Send ``termblog.*`` records to stderr at *level*."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("termblog").setLevel(numeric)
