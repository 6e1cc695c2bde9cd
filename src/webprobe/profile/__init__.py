# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from .report import format_aggregate_report, format_failure, format_probe_result
from .runner import ProbeRunner, ProfileRunner

__all__ = [
    "ProbeRunner",
    "ProfileRunner",
    "format_aggregate_report",
    "format_failure",
    "format_probe_result",
]
