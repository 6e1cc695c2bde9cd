# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Raw TCP ProbeClient implementation."""

from __future__ import annotations

import logging
import socket
import time

from ..config import ProbeSettings, load_probe_settings
from ..errors import ConnectError, ErrorCategory, ReadError, WriteError, categorize_exception
from ..models.probe import ProbeResult
from .client import ProbeClient
from .wire import build_request, split_response

logger = logging.getLogger(__name__)


class SocketProbeClient(ProbeClient):
    """
    Blocking socket client speaking just enough HTTP/1.0 to time one GET.

    ``Connection: close`` makes the server end the stream after the response,
    so reading until EOF captures the whole response without Content-Length
    or chunked decoding.
    """

    def __init__(self, settings: ProbeSettings | None = None):
        self.settings = settings or load_probe_settings()

    def probe(self, host: str, path: str) -> ProbeResult:
        port = self.settings.port
        payload = build_request(host, path, port)

        # Clock starts before connect: latency covers connect + write + read.
        started = time.perf_counter_ns()
        try:
            conn = socket.create_connection((host, port), timeout=self.settings.timeout)
        except (OSError, UnicodeError) as exc:
            category = categorize_exception(exc, default=ErrorCategory.CONNECTION_ERROR)
            raise ConnectError(f"could not connect to {host}:{port}: {exc}", category=category) from exc

        with conn:
            logger.debug("connected to %s:%d", host, port)
            try:
                conn.sendall(payload)
            except OSError as exc:
                category = categorize_exception(exc, default=ErrorCategory.WRITE_ERROR)
                raise WriteError(f"failed to send request to {host}:{port}: {exc}", category=category) from exc

            raw = self._read_to_end(conn, host, port)
            elapsed_ns = time.perf_counter_ns() - started

        logger.debug("read %d bytes from %s:%d in %d ns", len(raw), host, port, elapsed_ns)
        headers, body = split_response(raw)
        return ProbeResult(
            headers=tuple(headers),
            body=body,
            elapsed_ns=elapsed_ns,
            response_size=len(raw),
        )

    def _read_to_end(self, conn: socket.socket, host: str, port: int) -> bytes:
        buffer = bytearray()
        chunk_size = self.settings.read_chunk_bytes
        try:
            while True:
                chunk = conn.recv(chunk_size)
                if not chunk:
                    break
                buffer.extend(chunk)
        except OSError as exc:
            category = categorize_exception(exc, default=ErrorCategory.READ_ERROR)
            raise ReadError(f"failed to read response from {host}:{port}: {exc}", category=category) from exc
        return bytes(buffer)

    def close(self) -> None:
        # Sockets are scoped to a single probe; nothing is held between calls.
        return None
