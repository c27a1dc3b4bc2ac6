"""
Configuration and Logging Unit Tests
"""

import logging

from header_relay.config import Settings
from header_relay.logging_config import LOG_FORMAT, build_logging_config, setup_logging


class TestSettings:
    """Settings parsing"""

    def test_defaults(self, monkeypatch):
        for name in ("EXTRA_STRIPPED_HEADERS", "HEADER_ASSEMBLY_FAIL_CLOSED", "DEBUG"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.extra_stripped_headers == []
        assert settings.HEADER_ASSEMBLY_FAIL_CLOSED is False
        assert settings.DEBUG is False

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("EXTRA_STRIPPED_HEADERS", "X-Real-IP, ,X-Forwarded-For")
        monkeypatch.setenv("HEADER_ASSEMBLY_FAIL_CLOSED", "true")
        settings = Settings(_env_file=None)
        assert settings.extra_stripped_headers == ["X-Real-IP", "X-Forwarded-For"]
        assert settings.HEADER_ASSEMBLY_FAIL_CLOSED is True


class TestLoggingConfig:
    """dictConfig construction"""

    def test_levels(self):
        config = build_logging_config("DEBUG")
        assert config["loggers"]["header_relay"]["level"] == "DEBUG"
        assert config["loggers"]["root"]["level"] == "DEBUG"
        assert config["loggers"]["uvicorn.access"]["level"] == "INFO"
        assert config["formatters"]["standard"]["format"] == LOG_FORMAT

    def test_setup_logging_debug(self):
        setup_logging(Settings(_env_file=None, DEBUG=True))
        assert logging.getLogger("header_relay").level == logging.DEBUG

        setup_logging(Settings(_env_file=None, DEBUG=False))
        assert logging.getLogger("header_relay").level == logging.INFO
