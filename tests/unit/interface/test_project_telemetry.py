"""Unit tests for ProjectTelemetry."""
from unittest.mock import MagicMock

from type_name_linter.interface.telemetry import ProjectTelemetry


def _telemetry(quiet: bool = False) -> ProjectTelemetry:
    tel = ProjectTelemetry("Test", "blue", "Hello", quiet=quiet)
    tel.console = MagicMock()
    tel.logger = MagicMock()
    return tel


def test_handshake_prints_banner():
    tel = _telemetry()
    tel.handshake()
    tel.console.print.assert_called()
    tel.logger.info.assert_called()


def test_step_prints_and_logs():
    tel = _telemetry()
    tel.step("Done")
    tel.console.print.assert_called_once()
    tel.logger.info.assert_called_once_with("Done")


def test_quiet_step_only_logs():
    tel = _telemetry(quiet=True)
    tel.step("Done")
    tel.console.print.assert_not_called()
    tel.logger.info.assert_called_once_with("Done")


def test_error_prints_and_logs():
    tel = _telemetry()
    tel.error("Failed")
    tel.console.print.assert_called_once()
    tel.logger.error.assert_called_once_with("Failed")


def test_warning_prints_and_logs():
    tel = _telemetry()
    tel.warning("Careful")
    tel.logger.warning.assert_called_once_with("Careful")


def test_debug_logs():
    tel = _telemetry()
    tel.debug("Trace")
    tel.logger.debug.assert_called_once_with("Trace")
    tel.console.print.assert_not_called()
