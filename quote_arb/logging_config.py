"""
Logging configuration for cleaner console output.

Usage:
    from quote_arb import logging_config
    logging_config.setup()
"""

import logging
import sys


def setup(level=logging.INFO):
    """
    Configure logging for cleaner, more readable output.

    - Routes all package loggers through one root handler
    - Uses shorter timestamp format (HH:MM:SS instead of full datetime)
    - Suppresses verbose HTTP/RPC request logs
    """

    # Root logger - minimal format
    root = logging.getLogger()
    root.setLevel(level)

    # Clear existing handlers
    root.handlers.clear()

    # Create console handler on stderr so stdout stays clean for reports
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(message)s", datefmt="%H:%M:%S"
    )
    console.setFormatter(formatter)
    root.addHandler(console)

    # Package loggers propagate to the root handler instead of their own
    for name in list(logging.root.manager.loggerDict):
        if name == "quote_arb" or name.startswith("quote_arb."):
            pkg_logger = logging.getLogger(name)
            pkg_logger.handlers.clear()
            pkg_logger.setLevel(level)

    # Suppress noisy loggers
    logging.getLogger("web3").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
