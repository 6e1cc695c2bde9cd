# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe outcome models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..errors import ErrorCategory, MalformedResponseError, categorize_exception


@dataclass(frozen=True)
class ProbeResult:
    """One completed request/response cycle."""

    headers: tuple[str, ...]
    body: str
    elapsed_ns: int
    response_size: int

    @property
    def status_line(self) -> str | None:
        return self.headers[0] if self.headers else None

    @property
    def status_code(self) -> str:
        """
        Second whitespace-delimited token of the status line (``"200"`` for ``HTTP/1.0 200 OK``).

        Raises MalformedResponseError when there is no status line to read it from.
        """
        line = self.status_line
        if line is None:
            raise MalformedResponseError("response has no status line")
        tokens = line.split()
        if len(tokens) < 2:
            raise MalformedResponseError(f"unparsable status line: {line!r}")
        return tokens[1]

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": True,
            "headers": list(self.headers),
            "body": self.body,
            "elapsed_ns": self.elapsed_ns,
            "response_size": self.response_size,
        }


@dataclass(frozen=True)
class ProbeFailure:
    """A probe that produced no usable result."""

    error_message: str
    error_type: str
    category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR

    @classmethod
    def from_exception(cls, exc: BaseException) -> ProbeFailure:
        return cls(
            error_message=str(exc),
            error_type=type(exc).__name__,
            category=categorize_exception(exc),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": False,
            "error_message": self.error_message,
            "error_type": self.error_type,
            "category": self.category.value,
        }


ProbeOutcome = ProbeResult | ProbeFailure
