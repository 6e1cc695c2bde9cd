# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe client abstraction and factory."""

from typing import Protocol

from ..config import ProbeSettings, load_probe_settings
from ..models.probe import ProbeResult


class ProbeClient(Protocol):
    """Minimal protocol for issuing one timed request against a target."""

    def probe(self, host: str, path: str) -> ProbeResult: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def create_default_probe_client(settings: ProbeSettings | None = None) -> ProbeClient:
    """Factory for the default raw-socket client."""
    from .socket_client import SocketProbeClient

    return SocketProbeClient(settings or load_probe_settings())
