# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP/1.0 request rendering and raw response splitting."""

from __future__ import annotations

CRLF = b"\r\n"
_HEADER_END = CRLF + CRLF


def build_request(host: str, path: str, port: int = 80) -> bytes:
    """Render the single GET request a probe sends; no headers beyond Host and Connection."""
    lines = [
        f"GET /{path} HTTP/1.0",
        f"Host: {host}:{port}",
        "Connection: close",
        "",
        "",
    ]
    return "\r\n".join(lines).encode("utf-8")


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def split_response(raw: bytes) -> tuple[list[str], str]:
    """
    Split a raw response at the first empty line.

    Lines before it are returned as headers (the empty line itself is dropped);
    everything after it is the body, byte-for-byte. Without an empty line the
    whole response is headers and the body is empty.
    """
    if raw.startswith(CRLF):
        return [], _decode(raw[len(CRLF) :])

    end = raw.find(_HEADER_END)
    if end == -1:
        head, body = raw, b""
        if head.endswith(CRLF):
            head = head[: -len(CRLF)]
    else:
        head, body = raw[:end], raw[end + len(_HEADER_END) :]

    headers = [_decode(line) for line in head.split(CRLF)] if head else []
    return headers, _decode(body)


__all__ = ["CRLF", "build_request", "split_response"]
