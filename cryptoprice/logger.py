# cryptoprice/logger.py
import logging
import sys
from .config import get_config


def setup_logging():
    """Sets up logging for the price tracker."""
    log_level_str = get_config("logging", "level", "LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_str, logging.INFO)
    log_file = get_config("logging", "file", "LOG_FILE", "")

    # stdout is reserved for console price output
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )
