"""
Logging configuration for listing extraction.
"""

import logging
import sys

from config import Config

# Create logger
logger = logging.getLogger('listing_parser')
logger.setLevel(getattr(logging, Config.LOG_LEVEL, logging.INFO))

# Console handler with formatting
if not logger.handlers:
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        '%(asctime)s | %(levelname)-5s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    console.setFormatter(formatter)

    logger.addHandler(console)


# Component-specific loggers
def get_logger(name):
    """Get a child logger for a specific component."""
    return logger.getChild(name)


# URL normalization trace hooks
def no_trace(rule, src, result):
    pass


def log_trace(rule, src, result):
    """Trace hook that reports each normalization at debug level."""
    logger.getChild('urls').debug(f"{rule}: {src} -> {result}")
