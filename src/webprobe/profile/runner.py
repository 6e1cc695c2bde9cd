# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-probe and repeated-probe runners."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..errors import ErrorCategory, InvalidArgument, ProbeError, error_category_to_reason
from ..http.client import ProbeClient, create_default_probe_client
from ..models import AggregateStats, ProbeFailure, ProbeOutcome

logger = logging.getLogger(__name__)

FailureCallback = Callable[[int, ProbeFailure], None]


class ProbeRunner:
    """Runs one probe and turns transport errors into a ProbeFailure."""

    def __init__(self, client: ProbeClient | None = None):
        self.client = client or create_default_probe_client()

    def run(self, host: str, path: str) -> ProbeOutcome:
        try:
            return self.client.probe(host, path)
        except ProbeError as exc:
            failure = ProbeFailure.from_exception(exc)
            logger.info(
                "probe of %s/%s failed: %s (%s)",
                host,
                path,
                error_category_to_reason(failure.category),
                failure.error_message,
            )
            return failure


class ProfileRunner:
    """Repeats probes sequentially and folds every outcome into an AggregateStats."""

    def __init__(self, probe_runner: ProbeRunner | None = None):
        self.probe_runner = probe_runner or ProbeRunner()

    def run(
        self,
        host: str,
        path: str,
        runs: int,
        *,
        on_failure: FailureCallback | None = None,
    ) -> AggregateStats:
        if runs < 1:
            raise InvalidArgument(f"run count must be at least 1, got {runs}")

        stats = AggregateStats()
        for index in range(runs):
            outcome = self.probe_runner.run(host, path)
            failure = stats.record(outcome)
            if failure is None:
                continue
            if failure.category == ErrorCategory.MALFORMED_RESPONSE:
                logger.info("run %d/%d: %s", index + 1, runs, failure.error_message)
            if on_failure is not None:
                on_failure(index, failure)

        logger.info(
            "profiled %s/%s: %d/%d runs succeeded",
            host,
            path,
            len(stats.latencies),
            runs,
        )
        return stats
