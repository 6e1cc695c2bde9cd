# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""webprobe CLI."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from ..errors import InvalidArgument
from ..log import setup_logging
from ..models import ProbeFailure
from ..profile.report import format_aggregate_report, format_failure, format_probe_result
from ..runtime import WebProbe

EXIT_OK = 0
EXIT_PROBE_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Time raw HTTP/1.0 GET requests against a host and summarize repeated runs")
    parser.add_argument(
        "-u",
        "--url",
        help="Target in host[/path] form (no scheme, no port)",
    )
    parser.add_argument(
        "-p",
        "--profile",
        default="1",
        help="Number of sequential probes to run (default: 1)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of the text report",
    )
    return parser


def parse_run_count(value: Any) -> int:
    try:
        runs = int(str(value).strip())
    except ValueError:
        raise InvalidArgument(f"--profile expects an integer, got {value!r}") from None
    if runs < 1:
        raise InvalidArgument(f"--profile must be at least 1, got {runs}")
    return runs


def _print_json(data: Any) -> None:
    payload = data.to_dict() if hasattr(data, "to_dict") else data
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _report_failure(_index: int, failure: ProbeFailure) -> None:
    print(format_failure(failure), file=sys.stderr)


def _run_single(prober: WebProbe, target: str, *, as_json: bool) -> int:
    outcome = prober.probe(target)
    if isinstance(outcome, ProbeFailure):
        if as_json:
            _print_json(outcome)
        else:
            print(format_failure(outcome), file=sys.stderr)
        return EXIT_PROBE_FAILED

    if as_json:
        _print_json(outcome)
    else:
        print(format_probe_result(outcome))
    return EXIT_OK


def _run_profile(prober: WebProbe, target: str, runs: int, *, as_json: bool) -> int:
    stats = prober.profile(target, runs, on_failure=_report_failure)
    report = stats.summarize()
    if as_json:
        _print_json(report)
    else:
        print(format_aggregate_report(report))
    return EXIT_OK if report.has_successes else EXIT_PROBE_FAILED


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if not args.url:
            raise InvalidArgument("--url is required")
        runs = parse_run_count(args.profile)
    except InvalidArgument as exc:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    with WebProbe() as prober:
        if runs > 1:
            return _run_profile(prober, args.url, runs, as_json=args.json)
        return _run_single(prober, args.url, as_json=args.json)


if __name__ == "__main__":
    raise SystemExit(main())
