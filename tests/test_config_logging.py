"""Tests for configuration defaults and logging setup."""

import logging

from kata_pkg import config
from kata_pkg.logging_config import StructuredFormatter, get_logger, setup_logging
from kata_pkg.types import ValidationError


def test_config_defaults_are_sane():
    assert config.MAX_INPUT_LENGTH > 0
    assert config.MAX_EXPANSIONS > 0
    assert config.GLYPH_WIDTH == 3
    assert config.GLYPH_HEIGHT == 3
    assert config.WRAP_LONG_WORDS in config.WRAP_LONG_WORD_POLICIES
    assert isinstance(config.VERSION, str)


def test_get_logger_namespaced():
    assert get_logger("braces").name == "kata.braces"
    assert get_logger("kata.ocr").name == "kata.ocr"
    assert get_logger().name == "kata"


def test_setup_logging_level_and_file(tmp_path):
    log_file = tmp_path / "kata.log"
    logger = setup_logging(level="DEBUG", log_file=str(log_file))
    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        get_logger("test").debug("hello %s", "world")
        for handler in logger.handlers:
            handler.flush()
        content = log_file.read_text()
        assert "[DEBUG] kata.test: hello world" in content
    finally:
        setup_logging(level="WARNING")


def test_setup_logging_replaces_handlers():
    setup_logging(level="INFO")
    logger = setup_logging(level="ERROR")
    assert len(logger.handlers) == 1
    assert logger.level == logging.ERROR
    setup_logging(level="WARNING")


def test_structured_formatter():
    record = logging.LogRecord("kata.x", logging.WARNING, __file__, 1, "msg %d", (3,), None)
    line = StructuredFormatter().format(record)
    assert line.endswith("[WARNING] kata.x: msg 3")


def test_validation_error_carries_code():
    error = ValidationError("bad input", "SOME_CODE")
    assert error.code == "SOME_CODE"
    assert str(error) == "bad input"
    assert isinstance(error, ValueError)
    assert ValidationError("x").code == "VALIDATION_ERROR"
