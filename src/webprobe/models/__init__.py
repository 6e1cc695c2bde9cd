# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for webprobe."""

from .probe import ProbeFailure, ProbeOutcome, ProbeResult
from .stats import AggregateReport, AggregateStats, aggregate

__all__ = [
    "AggregateReport",
    "AggregateStats",
    "ProbeFailure",
    "ProbeOutcome",
    "ProbeResult",
    "aggregate",
]
