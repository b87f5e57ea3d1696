"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from cleancore.config.logging import add_application_error, configure_logging
from cleancore.domain.errors import NotFoundError
from cleancore.services.validator import validate


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    core = logging.getLogger("cleancore")
    core_level = core.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    core.setLevel(core_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("cleancore").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("cleancore").level == logging.WARNING

    def test_human_mode_output(self) -> None:
        configure_logging(verbose=True, log_json=False)
        log = structlog.get_logger("cleancore.test")
        log.warning("hello world", key="val")
        # Smoke test: verify no exception; format depends on terminal

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("cleancore.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "cleancore.test"
        assert "timestamp" in parsed

    def test_library_debug_logs_are_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        validate({"a": True}, {})

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "Payload rejected: 1 missing, 0 unauthorized"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "cleancore.services.validator"

    def test_library_debug_suppressed_when_quiet(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)

        validate({"a": True}, {})

        captured = capfd.readouterr()
        assert captured.err == ""

    def test_application_error_fields(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("cleancore.test")
        try:
            raise NotFoundError(details={"id": 3})
        except NotFoundError:
            log.exception("lookup failed")

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["error"]["code"] == 404
        assert parsed["error"]["errors"] == {"id": 3}
        assert "trace" not in parsed["error"]
        assert "NotFoundError" in parsed["exception"]

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        root = logging.getLogger()
        assert len(root.handlers) == 1


class TestAddApplicationError:
    def test_ignores_events_without_exc_info(self) -> None:
        event = {"event": "hello"}
        assert add_application_error(None, "info", event) == {"event": "hello"}

    def test_ignores_other_exceptions(self) -> None:
        event = {"event": "boom", "exc_info": ValueError("x")}
        assert "error" not in add_application_error(None, "error", event)

    def test_expands_exception_instance(self) -> None:
        event = {"event": "boom", "exc_info": NotFoundError(details={"id": 1})}
        result = add_application_error(None, "error", event)
        assert result["error"]["message"] == "error.not_found"
        assert result["error"]["errors"] == {"id": 1}
