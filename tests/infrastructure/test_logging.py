"""Tests for the structlog configuration used by the CLI."""

import pytest
import structlog

from shopcart.infrastructure.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_structlog():
    yield
    structlog.reset_defaults()


def _emit_all_levels():
    logger = structlog.get_logger("shopcart.test")
    logger.debug("debug event")
    logger.info("info event")
    logger.warning("warning event")


class TestConfigureLogging:

    def test_default_keeps_warnings_only(self, capsys):
        configure_logging(0)
        _emit_all_levels()

        captured = capsys.readouterr()
        assert "warning event" in captured.err
        assert "info event" not in captured.err
        assert "debug event" not in captured.err
        assert captured.out == ""

    def test_single_verbose_adds_info(self, capsys):
        configure_logging(1)
        _emit_all_levels()

        err = capsys.readouterr().err
        assert "info event" in err
        assert "debug event" not in err

    def test_double_verbose_adds_debug(self, capsys):
        configure_logging(2)
        _emit_all_levels()

        assert "debug event" in capsys.readouterr().err
