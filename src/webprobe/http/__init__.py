# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe client exports."""

from .client import ProbeClient, create_default_probe_client
from .socket_client import SocketProbeClient
from .url import split_target
from .wire import build_request, split_response

__all__ = [
    "ProbeClient",
    "SocketProbeClient",
    "build_request",
    "create_default_probe_client",
    "split_response",
    "split_target",
]
