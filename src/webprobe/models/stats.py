# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Aggregate statistics across repeated probes."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from ..errors import MalformedResponseError
from .probe import ProbeFailure, ProbeOutcome, ProbeResult

OK_STATUS = "200"


@dataclass(frozen=True)
class AggregateReport:
    """Finalized view of an aggregate run. Latency/size fields are None when nothing succeeded."""

    total_runs: int
    successful_runs: int
    failed_runs: int
    fastest: int | None = None
    slowest: int | None = None
    mean: int | None = None
    median: int | None = None
    size_min: int | None = None
    size_max: int | None = None
    ok_count: int = 0
    status_counts: dict[str, int] = field(default_factory=dict)

    @property
    def has_successes(self) -> bool:
        return self.successful_runs > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_runs": self.total_runs,
            "successful_runs": self.successful_runs,
            "failed_runs": self.failed_runs,
            "fastest_ns": self.fastest,
            "slowest_ns": self.slowest,
            "mean_ns": self.mean,
            "median_ns": self.median,
            "size_min": self.size_min,
            "size_max": self.size_max,
            "ok_count": self.ok_count,
            "status_counts": dict(self.status_counts),
        }


@dataclass
class AggregateStats:
    """
    Running accumulator for an aggregate run.

    Each recorded outcome lands in exactly one of ``latencies`` (success) or
    ``failures``, so ``len(latencies) + len(failures)`` always equals the
    number of outcomes recorded.
    """

    latencies: list[int] = field(default_factory=list)
    fastest: int | None = None
    slowest: int | None = None
    size_min: int | None = None
    size_max: int | None = None
    status_counts: Counter[str] = field(default_factory=Counter)
    failures: list[ProbeFailure] = field(default_factory=list)

    @property
    def total_runs(self) -> int:
        return len(self.latencies) + len(self.failures)

    def record(self, outcome: ProbeOutcome) -> ProbeFailure | None:
        """Fold one outcome into the accumulator; returns the failure recorded, if any."""
        if isinstance(outcome, ProbeFailure):
            self.record_failure(outcome)
            return outcome
        return self.record_success(outcome)

    def record_success(self, result: ProbeResult) -> ProbeFailure | None:
        # Status code first: a malformed status line must not touch any statistic.
        try:
            code = result.status_code
        except MalformedResponseError as exc:
            failure = ProbeFailure.from_exception(exc)
            self.record_failure(failure)
            return failure

        elapsed = result.elapsed_ns
        self.latencies.append(elapsed)
        if self.fastest is None or elapsed < self.fastest:
            self.fastest = elapsed
        if self.slowest is None or elapsed > self.slowest:
            self.slowest = elapsed

        size = result.response_size
        if self.size_min is None or size < self.size_min:
            self.size_min = size
        if self.size_max is None or size > self.size_max:
            self.size_max = size

        self.status_counts[code] += 1
        return None

    def record_failure(self, failure: ProbeFailure) -> None:
        self.failures.append(failure)

    def summarize(self) -> AggregateReport:
        count = len(self.latencies)
        if not count:
            return AggregateReport(
                total_runs=self.total_runs,
                successful_runs=0,
                failed_runs=len(self.failures),
            )

        ordered = sorted(self.latencies)
        return AggregateReport(
            total_runs=self.total_runs,
            successful_runs=count,
            failed_runs=len(self.failures),
            fastest=self.fastest,
            slowest=self.slowest,
            mean=sum(ordered) // count,
            # Upper-middle element for even counts; no averaging.
            median=ordered[count // 2],
            size_min=self.size_min,
            size_max=self.size_max,
            ok_count=self.status_counts.get(OK_STATUS, 0),
            status_counts=dict(self.status_counts),
        )


def aggregate(outcomes: Iterable[ProbeOutcome]) -> AggregateStats:
    """Fold an iterable of outcomes into a fresh AggregateStats."""
    stats = AggregateStats()
    for outcome in outcomes:
        stats.record(outcome)
    return stats


__all__ = ["OK_STATUS", "AggregateReport", "AggregateStats", "aggregate"]
