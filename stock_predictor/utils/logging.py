"""
Logging configuration for the stock predictor.

CLI results such as prediction points and comparison rows go through the
root logger on stdout. Model fits log at DEBUG under a
``[Linear]``/``[Polynomial]`` prefix, and the singular 3x3 fallback logs a
WARNING.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Configure logging for the command line and scripts.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
