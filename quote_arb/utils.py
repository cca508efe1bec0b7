"""
Common helpers: structured loggers, JSON serialization and formatting.
"""

import json
import logging
from typing import Any, Union


# Logging utilities
def get_logger(name: str, level: Union[str, int] = logging.INFO) -> logging.Logger:
    """
    Get a logger with the package's structured line format.

    Args:
        name: Logger name (typically __name__)
        level: Logging level, applied only if the logger has none yet

    Returns:
        Logger with a stream handler attached
    """
    logger = logging.getLogger(name)

    if logger.level == logging.NOTSET:
        logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(handler)

    return logger


# JSON utilities
def safe_json_dump(data: Any, **kwargs) -> str:
    """
    Serialize data to JSON, keeping non-ASCII symbols as-is.

    Args:
        data: Data to serialize
        **kwargs: Additional arguments to json.dumps

    Returns:
        JSON string
    """
    defaults = {"ensure_ascii": False}
    defaults.update(kwargs)
    return json.dumps(data, **defaults)


def format_amount(value: float, symbol: str = "", places: int = 2) -> str:
    """Format a token amount with thousands separators, e.g. '2,010.50 USDC'."""
    text = f"{value:,.{places}f}"
    return f"{text} {symbol}" if symbol else text
