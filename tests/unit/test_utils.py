"""Tests for logging, JSON and formatting helpers."""

import io
import json
import logging

from quote_arb import logging_config
from quote_arb.utils import format_amount, get_logger, safe_json_dump


def test_get_logger_basic():
    logger = get_logger(__name__)
    assert isinstance(logger, logging.Logger)
    assert logger.name == __name__


def test_get_logger_with_level():
    logger = get_logger(__name__ + ".level", level=logging.DEBUG)
    assert logger.level == logging.DEBUG


def test_get_logger_structured_format():
    logger_name = __name__ + ".format"
    logger = get_logger(logger_name, level=logging.INFO)

    captured = io.StringIO()
    handler = logger.handlers[0]
    original_stream = handler.stream
    handler.stream = captured
    try:
        logger.info("Test message")
    finally:
        handler.stream = original_stream

    output = captured.getvalue()
    assert "INFO" in output
    assert logger_name in output
    assert "Test message" in output
    assert "|" in output


def test_get_logger_no_duplicate_handlers():
    logger_name = __name__ + ".dupes"
    logger1 = get_logger(logger_name)
    logger2 = get_logger(logger_name)

    assert logger1 is logger2
    assert len(logger1.handlers) == 1


def test_logging_setup_routes_package_loggers_to_root():
    pkg_logger = get_logger("quote_arb.test_setup")
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        logging_config.setup(logging.DEBUG)

        assert pkg_logger.handlers == []
        assert pkg_logger.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert logging.getLogger("web3").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_safe_json_dump():
    data = json.loads(safe_json_dump({"profit": 90.0, "venue": "QuickSwap"}))
    assert data == {"profit": 90.0, "venue": "QuickSwap"}


def test_format_amount():
    assert format_amount(2010.5, "USDC") == "2,010.50 USDC"
    assert format_amount(-5.0) == "-5.00"
    assert format_amount(0.123456, "WETH", places=4) == "0.1235 WETH"
