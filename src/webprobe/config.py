# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for webprobe."""

import os
from dataclasses import dataclass

DEFAULT_PORT = 80
DEFAULT_READ_CHUNK_BYTES = 4096


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _optional_float_env(name: str, default: float | None) -> float | None:
    try:
        value = os.getenv(name)
        if value is None:
            return default
        parsed = float(value)
        return parsed if parsed > 0 else None
    except ValueError:
        return default


@dataclass
class ProbeSettings:
    """Transport defaults. ``timeout=None`` blocks until the peer closes."""

    port: int = DEFAULT_PORT
    timeout: float | None = None
    read_chunk_bytes: int = DEFAULT_READ_CHUNK_BYTES

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        """Create settings from environment variables (evaluated at call time)."""
        port = _int_env("WEBPROBE_PORT", cls.port)
        if not 0 < port < 65536:
            port = cls.port
        read_chunk_bytes = _int_env("WEBPROBE_READ_CHUNK_BYTES", cls.read_chunk_bytes)
        if read_chunk_bytes <= 0:
            read_chunk_bytes = cls.read_chunk_bytes
        return cls(
            port=port,
            timeout=_optional_float_env("WEBPROBE_TIMEOUT", cls.timeout),
            read_chunk_bytes=read_chunk_bytes,
        )


def load_probe_settings() -> ProbeSettings:
    """Load probe settings from environment with sensible defaults."""
    return ProbeSettings.from_env()
