# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Twemproxy stats socket handler.

Opens one TCP connection per call to the twemproxy stats port, reads a single
JSON document and returns its bytes. twemproxy writes the document as soon as
a client connects and then closes the connection, so nothing is sent.

Behavior:
    - No connection reuse: every fetch is an independent round trip and the
      host name is resolved on every call.
    - One deadline of ``timeout_seconds`` covers connect and read.
    - Reading stops once a complete JSON object has arrived or the peer
      closes; a second document is never read.
    - No logging and no retries. The caller owns both.
"""

from __future__ import annotations

import json
import socket
import time
from typing import Optional
from uuid import UUID

from twemproxy_exporter.enums import EnumTransportType
from twemproxy_exporter.errors import (
    MalformedResponseError,
    ModelExporterErrorContext,
    StatsConnectionError,
    StatsTimeoutError,
)
from twemproxy_exporter.models import ModelStatsEndpoint

# Stats documents are a few KB per pool.
_RECV_CHUNK_SIZE: int = 16 * 1024
_MAX_DOCUMENT_SIZE: int = 16 * 1024 * 1024

_JSON_DECODER = json.JSONDecoder()

_QUOTE: int = ord('"')
_BACKSLASH: int = ord("\\")
_OPENERS: frozenset[int] = frozenset(b"{[")
_CLOSERS: frozenset[int] = frozenset(b"}]")


class _DocumentScanner:
    """Track JSON nesting across chunks to find where the first value ends.

    Each byte is inspected once, so spotting the end of a document costs time
    linear in its size however it is chunked. UTF-8 continuation bytes never
    equal an ASCII structural byte, so scanning raw bytes is safe.
    """

    def __init__(self) -> None:
        self._depth = 0
        self._started = False
        self._in_string = False
        self._escaped = False

    def feed(self, chunk: bytes) -> Optional[int]:
        """Return the offset in ``chunk`` just past the first value's end, or None."""
        for index, byte in enumerate(chunk):
            if self._in_string:
                if self._escaped:
                    self._escaped = False
                elif byte == _BACKSLASH:
                    self._escaped = True
                elif byte == _QUOTE:
                    self._in_string = False
            elif byte == _QUOTE:
                self._in_string = True
            elif byte in _OPENERS:
                self._depth += 1
                self._started = True
            elif byte in _CLOSERS:
                self._depth -= 1
                if self._started and self._depth <= 0:
                    return index + 1
        return None


def _decode_document(buffer: bytes, context: ModelExporterErrorContext) -> bytes:
    """Return the first JSON value in ``buffer``, whitespace stripped.

    Raises:
        MalformedResponseError: ``buffer`` does not start with a valid JSON
            value, is not UTF-8, or nests too deeply to decode.
    """
    try:
        text = buffer.decode("utf-8").strip()
        _, end = _JSON_DECODER.raw_decode(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        raise MalformedResponseError(
            f"Stats response from {context.target_name} is not valid JSON: "
            f"{type(e).__name__}",
            context=context,
            bytes_received=len(buffer),
        ) from e
    return text[:end].encode("utf-8")


def fetch_stats(
    endpoint: ModelStatsEndpoint,
    timeout_seconds: float,
    correlation_id: Optional[UUID] = None,
) -> bytes:
    """Fetch one stats document from the twemproxy stats port.

    Args:
        endpoint: Stats endpoint to connect to.
        timeout_seconds: Deadline for connect plus read, in seconds.
        correlation_id: Scrape correlation ID attached to raised errors.

    Returns:
        The bytes of exactly one JSON document, surrounding whitespace removed.

    Raises:
        StatsConnectionError: Endpoint unreachable, refused or reset.
        StatsTimeoutError: Connect or read did not finish within the deadline.
        MalformedResponseError: The first JSON value received is invalid, or
            the peer closed before one complete value arrived.
    """
    deadline = time.monotonic() + timeout_seconds
    context = ModelExporterErrorContext(
        transport_type=EnumTransportType.TCP,
        operation="fetch_stats",
        target_name=endpoint.address,
        correlation_id=correlation_id,
    )

    try:
        sock = socket.create_connection(
            (endpoint.host, endpoint.port),
            timeout=timeout_seconds,
        )
    except socket.timeout as e:
        raise StatsTimeoutError(
            f"Timed out connecting to stats endpoint {endpoint.address}",
            context=context,
            timeout_seconds=timeout_seconds,
        ) from e
    except OSError as e:
        raise StatsConnectionError(
            f"Failed to connect to stats endpoint {endpoint.address}: {e}",
            context=context,
            host=endpoint.host,
            port=endpoint.port,
        ) from e

    with sock:
        return _read_document(sock, deadline, timeout_seconds, context)


def _read_document(
    sock: socket.socket,
    deadline: float,
    timeout_seconds: float,
    context: ModelExporterErrorContext,
) -> bytes:
    buffer = bytearray()
    scanner = _DocumentScanner()
    while True:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise StatsTimeoutError(
                f"Timed out reading stats from {context.target_name}",
                context=context,
                timeout_seconds=timeout_seconds,
                bytes_received=len(buffer),
            )
        sock.settimeout(remaining)
        try:
            chunk = sock.recv(_RECV_CHUNK_SIZE)
        except socket.timeout as e:
            raise StatsTimeoutError(
                f"Timed out reading stats from {context.target_name}",
                context=context,
                timeout_seconds=timeout_seconds,
                bytes_received=len(buffer),
            ) from e
        except OSError as e:
            raise StatsConnectionError(
                f"Connection to {context.target_name} failed while reading: {e}",
                context=context,
            ) from e

        if not chunk:
            break
        end = scanner.feed(chunk)
        if end is not None:
            buffer.extend(chunk[:end])
            return _decode_document(bytes(buffer), context)
        buffer.extend(chunk)
        if len(buffer) > _MAX_DOCUMENT_SIZE:
            raise MalformedResponseError(
                f"Stats response from {context.target_name} exceeds size limit",
                context=context,
                max_document_size=_MAX_DOCUMENT_SIZE,
            )

    if not buffer.strip():
        raise MalformedResponseError(
            f"Stats endpoint {context.target_name} closed without data",
            context=context,
            bytes_received=0,
        )
    return _decode_document(bytes(buffer), context)


class HandlerStatsSocket:
    """Stats fetcher bound to one endpoint and timeout.

    Holds no connection state; ``fetch()`` may be called concurrently from
    several threads.

    Example:
        >>> handler = HandlerStatsSocket(
        ...     ModelStatsEndpoint(host="localhost", port=22222),
        ...     timeout_seconds=2.0,
        ... )
        >>> raw = handler.fetch()
    """

    def __init__(self, endpoint: ModelStatsEndpoint, timeout_seconds: float) -> None:
        self._endpoint = endpoint
        self._timeout_seconds = timeout_seconds

    @property
    def endpoint(self) -> ModelStatsEndpoint:
        return self._endpoint

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    def fetch(self, correlation_id: Optional[UUID] = None) -> bytes:
        """Fetch one stats document. See ``fetch_stats``."""
        return fetch_stats(self._endpoint, self._timeout_seconds, correlation_id)


__all__: list[str] = ["HandlerStatsSocket", "fetch_stats"]
