"""Tests for svcgen._logging."""

import logging

import pytest
from rich.logging import RichHandler

from svcgen._logging import get_logger, setup_logging


@pytest.fixture
def base_logger():
    base = logging.getLogger("svcgen")
    saved = (list(base.handlers), base.level, base.propagate)
    base.handlers.clear()
    yield base
    base.handlers[:] = saved[0]
    base.setLevel(saved[1])
    base.propagate = saved[2]


class TestGetLogger:
    def test_base(self):
        assert get_logger().name == "svcgen"
        assert get_logger("svcgen").name == "svcgen"

    def test_prefixes_short_names(self):
        assert get_logger("x").name == "svcgen.x"

    def test_keeps_qualified_names(self):
        assert get_logger("svcgen.generator").name == "svcgen.generator"

    def test_does_not_match_lookalike_prefix(self):
        assert get_logger("svcgenerator").name == "svcgen.svcgenerator"


class TestSetupLogging:
    def test_quiet_by_default(self, base_logger):
        setup_logging()
        assert base_logger.level == logging.WARNING
        assert not base_logger.propagate

    def test_verbose_enables_debug(self, base_logger):
        setup_logging(verbose=True)
        assert base_logger.level == logging.DEBUG

    def test_installs_one_rich_handler(self, base_logger):
        setup_logging()
        setup_logging(verbose=True)

        assert len(base_logger.handlers) == 1
        assert isinstance(base_logger.handlers[0], RichHandler)
        assert base_logger.level == logging.DEBUG
