"""Unit tests for ProjectTelemetry."""
from unittest.mock import MagicMock

from operator_spacing_linter.interface.telemetry import ProjectTelemetry


def test_handshake_prints_banner():
    tel = ProjectTelemetry("Test", "blue", "Hello")
    tel.echo = MagicMock()
    tel.logger = MagicMock()
    tel.handshake()
    tel.echo.assert_called_once()
    assert tel.echo.call_args.args[0] == "[Test] Hello"
    assert tel.echo.call_args.kwargs["err"] is True
    tel.logger.info.assert_called()


def test_step_prints_and_logs():
    tel = ProjectTelemetry("Test", "blue", "Hello")
    tel.echo = MagicMock()
    tel.logger = MagicMock()
    tel.step("Done")
    tel.echo.assert_called_once_with("[Test] Done", err=True)
    tel.logger.info.assert_called_once_with("Done")


def test_error_prints_and_logs():
    tel = ProjectTelemetry("Test", "blue", "Hello")
    tel.echo = MagicMock()
    tel.logger = MagicMock()
    tel.error("Failed")
    assert "ERROR: Failed" in tel.echo.call_args.args[0]
    tel.logger.error.assert_called_once_with("Failed")


def test_warning_prints_and_logs():
    tel = ProjectTelemetry("Test", "blue", "Hello")
    tel.echo = MagicMock()
    tel.logger = MagicMock()
    tel.warning("Careful")
    assert "WARNING: Careful" in tel.echo.call_args.args[0]
    tel.logger.warning.assert_called_once_with("Careful")


def test_debug_logs_only():
    tel = ProjectTelemetry("Test", "blue", "Hello")
    tel.echo = MagicMock()
    tel.logger = MagicMock()
    tel.debug("Detail")
    tel.logger.debug.assert_called_once_with("Detail")
    tel.echo.assert_not_called()


def test_logger_named_after_project():
    assert ProjectTelemetry("OPERATOR-SPACING", "cyan", "Hi").logger.name == "operator-spacing"
