"""
Unit tests for the shared/ utility modules.

Covers:
- shared.agent    (agent name, version, User-Agent string)
- shared.logging  (redaction processor, structlog configuration)
"""

from __future__ import annotations

import structlog

from restcaptcha.shared import agent
from restcaptcha.shared.logging import (
    configure_structlog,
    get_logger,
    redact_sensitive_fields,
)


class TestAgent:
    def test_user_agent_format(self):
        name, _, version = agent.user_agent().partition("/")
        assert name == "restcaptcha-client"
        assert version

    def test_version_fallback_when_not_installed(self, mocker):
        mocker.patch.object(
            agent, "version", side_effect=agent.PackageNotFoundError("x")
        )
        assert agent.get_version() == "0.0.0"


class TestRedaction:
    def test_sensitive_keys_redacted(self):
        event = {
            "event": "x",
            "token": "tok",
            "site_secret": "s",
            "siteKey": "k",
            "solution": "42",
            "attempt": 2,
        }
        out = redact_sensitive_fields(None, "info", event)
        assert out["token"] == "***REDACTED***"
        assert out["site_secret"] == "***REDACTED***"
        assert out["siteKey"] == "***REDACTED***"
        assert out["solution"] == "***REDACTED***"
        assert out["attempt"] == 2
        assert out["event"] == "x"


class TestConfigureStructlog:
    def teardown_method(self):
        structlog.reset_defaults()

    def test_json_renderer(self):
        configure_structlog(log_format="json", log_level="INFO")
        processors = structlog.get_config()["processors"]
        assert redact_sensitive_fields in processors
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer(self):
        configure_structlog(log_format="console", log_level="DEBUG")
        processors = structlog.get_config()["processors"]
        assert redact_sensitive_fields in processors
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
