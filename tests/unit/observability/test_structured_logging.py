"""Unit tests for structured logging helpers."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from credguard.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
    redact_sensitive_fields,
)


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_known_sensitive_key(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({"password": "s3cr3t", "path": "/keys"})
        assert result["password"] == SensitiveFieldsFilter.REDACTED
        assert result["path"] == "/keys"

    def test_redacts_all_default_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({field: "value" for field in DEFAULT_SENSITIVE_FIELDS})
        assert set(result.values()) == {SensitiveFieldsFilter.REDACTED}

    def test_case_insensitive_keys(self) -> None:
        result = SensitiveFieldsFilter().redact({"Plaintext": "x"})
        assert result["Plaintext"] == SensitiveFieldsFilter.REDACTED

    def test_redact_deep_handles_nested_dicts(self) -> None:
        result = SensitiveFieldsFilter().redact_deep({"user": {"password": "x", "id": 1}})
        assert result["user"]["password"] == SensitiveFieldsFilter.REDACTED
        assert result["user"]["id"] == 1

    def test_custom_fields(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"pin"}))
        result = f.redact({"pin": "1234", "password": "kept"})
        assert result["pin"] == SensitiveFieldsFilter.REDACTED
        assert result["password"] == "kept"


class TestRedactProcessor:
    def test_processor_redacts_event_dict(self) -> None:
        event = redact_sensitive_fields(None, "info", {"event": "login", "secret": "x"})
        assert event["secret"] == SensitiveFieldsFilter.REDACTED
        assert event["event"] == "login"


class TestGetLogger:
    def test_returns_logger_with_bound_values(self) -> None:
        log = get_logger("credguard.test", component="keys")
        assert hasattr(log, "info")
        assert hasattr(log, "bind")


class TestJsonLoggerFactory:
    @pytest.fixture(autouse=True)
    def _restore_logging(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)
        structlog.reset_defaults()

    def test_configure_installs_json_handler(self) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_sensitive_values_never_reach_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        structlog.get_logger("credguard.test").info("key_pair.loaded", path="/keys/a.pem", passphrase="hunter2")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "key_pair.loaded"
        assert payload["passphrase"] == SensitiveFieldsFilter.REDACTED
        assert "hunter2" not in line

    def test_context_bound_secrets_are_redacted(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        structlog.contextvars.bind_contextvars(password="hunter2", request_id="r-1")
        try:
            structlog.get_logger("credguard.test").info("hash.verify")
        finally:
            structlog.contextvars.clear_contextvars()
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["password"] == SensitiveFieldsFilter.REDACTED
        assert payload["request_id"] == "r-1"
        assert "hunter2" not in line
