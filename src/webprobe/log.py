# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for webprobe."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("WEBPROBE_LOG_LEVEL", "WARNING").upper()

# Logs every connect and read; floored at INFO unless WEBPROBE_LOG_TRANSPORT is set.
TRANSPORT_LOGGER = "webprobe.http.socket_client"


def _transport_debug_enabled() -> bool:
    value = os.getenv("WEBPROBE_LOG_TRANSPORT")
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def setup_logging(level: str | None = None, *, transport_debug: bool | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    numeric_level = getattr(logging, effective_level, logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if transport_debug is None:
        transport_debug = _transport_debug_enabled()
    transport_logger = logging.getLogger(TRANSPORT_LOGGER)
    if transport_debug:
        transport_logger.setLevel(logging.NOTSET)
    else:
        transport_logger.setLevel(max(numeric_level, logging.INFO))


__all__ = ["TRANSPORT_LOGGER", "setup_logging"]
