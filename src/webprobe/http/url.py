# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Target string helpers."""

from __future__ import annotations


def split_target(target: str) -> tuple[str, str]:
    """
    Split ``host[/path...]`` into ``(host, path)``.

    The host is everything before the first ``/``; the path is the rest without
    its leading slash. No scheme or port handling is attempted.
    """
    host, _, path = (target or "").partition("/")
    return host, path


__all__ = ["split_target"]
