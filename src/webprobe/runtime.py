# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level webprobe facade for single and repeated probes."""

from __future__ import annotations

from contextlib import suppress

from .config import load_probe_settings
from .http.client import ProbeClient, create_default_probe_client
from .http.url import split_target
from .models import AggregateStats, ProbeOutcome
from .profile.runner import FailureCallback, ProbeRunner, ProfileRunner


class WebProbe:
    """
    Convenience wrapper that wires one probe client into both runners.

    Targets are given in ``host[/path]`` form and split here, so callers never
    handle host and path separately.
    """

    def __init__(self, client: ProbeClient | None = None):
        self.settings = load_probe_settings()
        self.client = client or create_default_probe_client(self.settings)
        self.probe_runner = ProbeRunner(self.client)
        self.profile_runner = ProfileRunner(self.probe_runner)

    def probe(self, target: str) -> ProbeOutcome:
        host, path = split_target(target)
        return self.probe_runner.run(host, path)

    def profile(self, target: str, runs: int, *, on_failure: FailureCallback | None = None) -> AggregateStats:
        host, path = split_target(target)
        return self.profile_runner.run(host, path, runs, on_failure=on_failure)

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.client, "close"):
                self.client.close()

    def __enter__(self) -> WebProbe:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
