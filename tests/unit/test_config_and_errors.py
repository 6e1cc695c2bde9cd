# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import importlib
import logging
import socket

from webprobe import config, log
from webprobe.errors import (
    ConnectError,
    ErrorCategory,
    MalformedResponseError,
    categorize_exception,
    error_category_to_reason,
)
from webprobe.models import ProbeFailure


def test_probe_settings_defaults(monkeypatch):
    for name in ("WEBPROBE_PORT", "WEBPROBE_TIMEOUT", "WEBPROBE_READ_CHUNK_BYTES"):
        monkeypatch.delenv(name, raising=False)
    settings = config.load_probe_settings()
    assert settings.port == 80
    assert settings.timeout is None
    assert settings.read_chunk_bytes == config.DEFAULT_READ_CHUNK_BYTES


def test_probe_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("WEBPROBE_PORT", "8080")
    monkeypatch.setenv("WEBPROBE_TIMEOUT", "2.5")
    monkeypatch.setenv("WEBPROBE_READ_CHUNK_BYTES", "512")

    settings = config.load_probe_settings()

    assert settings.port == 8080
    assert settings.timeout == 2.5
    assert settings.read_chunk_bytes == 512


def test_probe_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("WEBPROBE_PORT", "http")
    monkeypatch.setenv("WEBPROBE_TIMEOUT", "soon")
    monkeypatch.setenv("WEBPROBE_READ_CHUNK_BYTES", "-1")

    settings = config.load_probe_settings()

    assert settings.port == config.ProbeSettings.port
    assert settings.timeout is None
    assert settings.read_chunk_bytes == config.ProbeSettings.read_chunk_bytes

    monkeypatch.setenv("WEBPROBE_PORT", "70000")
    monkeypatch.setenv("WEBPROBE_TIMEOUT", "0")
    settings = config.load_probe_settings()
    assert settings.port == config.ProbeSettings.port
    assert settings.timeout is None


def test_setup_logging_reads_level_from_env(monkeypatch):
    monkeypatch.setenv("WEBPROBE_LOG_LEVEL", "debug")
    importlib.reload(log)
    assert log.DEFAULT_LOG_LEVEL == "DEBUG"

    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    log.setup_logging()
    assert captured["level"] == logging.DEBUG
    log.setup_logging("nonsense")
    assert captured["level"] == logging.WARNING

    monkeypatch.delenv("WEBPROBE_LOG_LEVEL")
    importlib.reload(log)


def test_categorize_exception():
    assert categorize_exception(socket.gaierror(-2, "unknown host")) == ErrorCategory.DNS_ERROR
    assert categorize_exception(TimeoutError()) == ErrorCategory.TIMEOUT
    assert categorize_exception(ConnectionRefusedError()) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(OSError("boom")) == ErrorCategory.UNKNOWN_ERROR
    assert categorize_exception(OSError("boom"), default=ErrorCategory.READ_ERROR) == ErrorCategory.READ_ERROR
    assert categorize_exception(MalformedResponseError("x")) == ErrorCategory.MALFORMED_RESPONSE


def test_probe_error_category_override_and_reason():
    exc = ConnectError("no dns", category=ErrorCategory.DNS_ERROR)
    failure = ProbeFailure.from_exception(exc)
    assert failure.category == ErrorCategory.DNS_ERROR
    assert failure.error_type == "ConnectError"
    assert error_category_to_reason(ErrorCategory.DNS_ERROR) == "DNS resolution failure"
    assert error_category_to_reason(None) == ""


def test_setup_logging_floors_transport_logger(monkeypatch):
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    transport = logging.getLogger(log.TRANSPORT_LOGGER)
    original = transport.level
    try:
        monkeypatch.delenv("WEBPROBE_LOG_TRANSPORT", raising=False)
        log.setup_logging("DEBUG")
        assert transport.level == logging.INFO
        assert not transport.isEnabledFor(logging.DEBUG)

        log.setup_logging("ERROR")
        assert transport.level == logging.ERROR

        monkeypatch.setenv("WEBPROBE_LOG_TRANSPORT", "yes")
        log.setup_logging("DEBUG")
        assert transport.level == logging.NOTSET

        log.setup_logging("DEBUG", transport_debug=False)
        assert transport.level == logging.INFO
    finally:
        transport.setLevel(original)
