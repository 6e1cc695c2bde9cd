# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Human-readable rendering of probe results and aggregate reports."""

from __future__ import annotations

from ..models import AggregateReport, ProbeFailure, ProbeResult


def format_probe_result(result: ProbeResult) -> str:
    lines = ["Headers       :"]
    lines.extend(f"\t{header}" for header in result.headers)
    lines.append("Body          :")
    lines.append(result.body)
    lines.append(f"Total Time    : {result.elapsed_ns}")
    lines.append(f"Response Size : {result.response_size}")
    return "\n".join(lines)


def format_failure(failure: ProbeFailure) -> str:
    return f"Error: {failure.error_message}"


def format_aggregate_report(report: AggregateReport) -> str:
    """Render the summary table; an all-failure run gets an explicit notice instead of statistics."""
    if not report.has_successes:
        return f"No successful runs (0/{report.total_runs})"

    lines = [
        f"Fastest Time (NS)      : {report.fastest}",
        f"Slowest Time (NS)      : {report.slowest}",
        f"Mean Time (NS)         : {report.mean}",
        f"Median Time (NS)       : {report.median}",
        f"Smallest Response Size : {report.size_min}",
        f"Largest Response Size  : {report.size_max}",
        f"Successful Attempts    : {report.ok_count}/{report.successful_runs}",
    ]
    if report.failed_runs:
        lines.append(f"Failed Attempts        : {report.failed_runs}/{report.total_runs}")
    lines.append("Http Codes Present     :")
    for code, occurrences in sorted(report.status_counts.items()):
        lines.append(f"\tCode: {code}, Occurrences: {occurrences}")
    return "\n".join(lines)


__all__ = ["format_aggregate_report", "format_failure", "format_probe_result"]
