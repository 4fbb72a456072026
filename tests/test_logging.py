"""Tests for package logging setup."""

import logging

import linepager
from linepager import configure_logging


def test_version():
    assert linepager.__version__ == "0.1.0"


def test_configure_logging_replaces_handlers():
    logger = logging.getLogger("linepager")
    try:
        configure_logging(logging.DEBUG)
        configure_logging(logging.DEBUG)

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


def test_navigation_logs_at_debug(caplog):
    viewport = linepager.Viewport(height=2)
    viewport.set_content("a\nb\nc\nd\ne")

    with caplog.at_level(logging.DEBUG, logger="linepager.viewport"):
        viewport.line_down(1)

    assert "Line down 1 to offset 1" in caplog.text
