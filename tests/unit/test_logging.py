"""Tests for logging context."""

import pytest
import structlog

from gridforge.core import LogContext


@pytest.mark.unit
class TestLogContext:
    """Bound context follows the with-block."""

    def test_bound_inside_only(self):
        with LogContext(command="import"):
            assert structlog.contextvars.get_contextvars()["command"] == "import"
        assert "command" not in structlog.contextvars.get_contextvars()

    def test_nested_restores_outer(self):
        with LogContext(dialect="basalt", command="export"):
            with LogContext(dialect="pixelui"):
                assert structlog.contextvars.get_contextvars()["dialect"] == "pixelui"
            context = structlog.contextvars.get_contextvars()
            assert (context["dialect"], context["command"]) == ("basalt", "export")
