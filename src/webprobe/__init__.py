# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
webprobe package entrypoint.

A small HTTP/1.0 latency profiler: it times raw-socket GET requests against a
target and summarizes repeated runs (latency extremes, mean, median, response
sizes and status-code distribution). Transport is abstracted behind an
injectable client interface so the statistics can be exercised offline.
"""

from .config import ProbeSettings, load_probe_settings
from .errors import (
    ConnectError,
    ErrorCategory,
    InvalidArgument,
    MalformedResponseError,
    ProbeError,
    ReadError,
    WriteError,
)
from .http import ProbeClient, SocketProbeClient, create_default_probe_client, split_response, split_target
from .log import setup_logging
from .models import AggregateReport, AggregateStats, ProbeFailure, ProbeResult
from .profile import ProbeRunner, ProfileRunner
from .runtime import WebProbe
from .version import __version__

__all__ = [
    "AggregateReport",
    "AggregateStats",
    "ConnectError",
    "ErrorCategory",
    "InvalidArgument",
    "MalformedResponseError",
    "ProbeClient",
    "ProbeError",
    "ProbeFailure",
    "ProbeResult",
    "ProbeRunner",
    "ProbeSettings",
    "ProfileRunner",
    "ReadError",
    "SocketProbeClient",
    "WebProbe",
    "WriteError",
    "create_default_probe_client",
    "load_probe_settings",
    "setup_logging",
    "split_response",
    "split_target",
    "__version__",
]
