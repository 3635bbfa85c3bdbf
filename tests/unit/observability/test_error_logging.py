"""Unit tests for observability logging helpers."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from forge_errors.config import ErrorHandlerSettings
from forge_errors.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)


class TestSensitiveFieldsFilter:
    def test_redacts_default_fields(self) -> None:
        result = SensitiveFieldsFilter().redact({"password": "hunter2", "user": "bob"})
        assert result == {"password": "[REDACTED]", "user": "bob"}

    def test_key_match_is_case_insensitive(self) -> None:
        assert SensitiveFieldsFilter().redact({"Authorization": "Bearer x"})["Authorization"] == "[REDACTED]"

    def test_redact_deep(self) -> None:
        data = {"outer": {"token": "abc", "keep": 1}, "n": 2}
        assert SensitiveFieldsFilter().redact_deep(data) == {
            "outer": {"token": "[REDACTED]", "keep": 1},
            "n": 2,
        }

    def test_custom_fields_replace_defaults(self) -> None:
        f = SensitiveFieldsFilter({"pin"})
        assert f.redact({"pin": 1234, "password": "p"}) == {"pin": "[REDACTED]", "password": "p"}

    def test_with_extra_keeps_defaults(self) -> None:
        f = SensitiveFieldsFilter.with_extra(["PIN"])
        assert f.redact({"pin": 1, "password": "p"}) == {"pin": "[REDACTED]", "password": "[REDACTED]"}

    def test_defaults_include_common_secrets(self) -> None:
        assert {"password", "token", "authorization"} <= DEFAULT_SENSITIVE_FIELDS

    def test_input_is_not_mutated(self) -> None:
        data = {"secret": "s"}
        SensitiveFieldsFilter().redact_deep(data)
        assert data == {"secret": "s"}

    def test_non_string_keys_pass_through(self) -> None:
        f = SensitiveFieldsFilter()
        assert f.redact({1: "a", "password": "x"}) == {1: "a", "password": "[REDACTED]"}

    def test_non_string_keys_pass_through_nested(self) -> None:
        data = {(1, 2): {"token": "t"}, None: "n", "outer": {3: "c"}}
        assert SensitiveFieldsFilter().redact_deep(data) == {
            (1, 2): {"token": "[REDACTED]"},
            None: "n",
            "outer": {3: "c"},
        }

    def test_is_a_structlog_processor(self) -> None:
        event = {"event": "login", "auth": {"Authorization": "Bearer x"}}
        assert SensitiveFieldsFilter()(None, "info", event) == {
            "event": "login",
            "auth": {"Authorization": "[REDACTED]"},
        }


class TestGetLogger:
    def test_returns_logger_with_log_methods(self) -> None:
        log = get_logger("forge_errors.test")
        for method in ("debug", "info", "warning", "error"):
            assert callable(getattr(log, method))

    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as captured:
            get_logger("forge_errors.test", component="mapper").info("bound_event")
        assert captured[0]["component"] == "mapper"
        assert captured[0]["event"] == "bound_event"


class TestJsonLoggerFactory:
    @pytest.fixture(autouse=True)
    def _restore_logging(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)
        structlog.reset_defaults()

    def test_installs_single_json_handler(self) -> None:
        JsonLoggerFactory.configure(ErrorHandlerSettings(log_level="WARNING"))
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert root.level == logging.WARNING

    def test_defaults_to_info(self) -> None:
        JsonLoggerFactory.configure()
        assert logging.getLogger().level == logging.INFO

    def test_redacts_default_and_configured_fields(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(ErrorHandlerSettings(redact_fields=["ssn"]))
        get_logger("forge_errors.test").info("login", password="hunter2", ssn="123-45", user="bob")
        line = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert line["event"] == "login"
        assert line["password"] == "[REDACTED]"
        assert line["ssn"] == "[REDACTED]"
        assert line["user"] == "bob"

    def test_redacts_nested_error_data(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure()
        get_logger("forge_errors.test").error("forge_error", data={"token": "abc", 7: "seven"})
        line = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert line["data"] == {"token": "[REDACTED]", "7": "seven"}

    def test_stdlib_records_rendered_as_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure()
        logging.getLogger("uvicorn.error").warning("worker restarted")
        line = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert line["event"] == "worker restarted"
        assert line["level"] == "warning"
        assert line["logger"] == "uvicorn.error"
