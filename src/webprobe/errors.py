# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
from enum import Enum


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    DNS_ERROR = "DNS_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    WRITE_ERROR = "WRITE_ERROR"
    READ_ERROR = "READ_ERROR"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class ProbeError(Exception):
    """Base class for failures that abort a single probe."""

    category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR

    def __init__(self, message: str, *, category: ErrorCategory | None = None):
        super().__init__(message)
        if category is not None:
            self.category = category


class ConnectError(ProbeError):
    """
    DNS resolution or TCP connection establishment failed.

    This is the taxonomy's connection error, named so it does not shadow the
    builtin ``ConnectionError``.
    """

    category = ErrorCategory.CONNECTION_ERROR


class WriteError(ProbeError):
    """The request could not be written in full."""

    category = ErrorCategory.WRITE_ERROR


class ReadError(ProbeError):
    """The response could not be read to end-of-stream."""

    category = ErrorCategory.READ_ERROR


class MalformedResponseError(ProbeError):
    """The response has no parsable status line."""

    category = ErrorCategory.MALFORMED_RESPONSE


class InvalidArgument(ValueError):
    """A caller-supplied argument (CLI flag or run count) is unusable."""


def categorize_exception(exc: BaseException, *, default: ErrorCategory = ErrorCategory.UNKNOWN_ERROR) -> ErrorCategory:
    """
    Map socket/OS exceptions to ErrorCategory.

    ``default`` is returned for I/O errors that carry no more specific meaning,
    so callers can tag them with the phase (write/read) they happened in.
    """
    if isinstance(exc, ProbeError):
        return exc.category

    if isinstance(exc, (socket.timeout, TimeoutError)):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (ConnectionRefusedError, ConnectionAbortedError)):
        return ErrorCategory.CONNECTION_ERROR

    return default


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Network timeout during probe",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.CONNECTION_ERROR: "Could not connect to target",
        ErrorCategory.WRITE_ERROR: "Failed to send request",
        ErrorCategory.READ_ERROR: "Failed to read response",
        ErrorCategory.MALFORMED_RESPONSE: "Response has no recognizable status line",
        ErrorCategory.UNKNOWN_ERROR: "Network error during probe",
        None: "",
    }
    return mapping.get(category, "Probe failed due to network error")


__all__ = [
    "ConnectError",
    "ErrorCategory",
    "InvalidArgument",
    "MalformedResponseError",
    "ProbeError",
    "ReadError",
    "WriteError",
    "categorize_exception",
    "error_category_to_reason",
]
