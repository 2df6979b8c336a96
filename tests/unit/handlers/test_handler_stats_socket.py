# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for the twemproxy stats socket fetcher.

Runs against a threaded loopback server that behaves like the nutcracker
stats port: write the document on connect, then close.
"""

from __future__ import annotations

import json
import time
from collections.abc import Callable
from uuid import uuid4

import pytest

from tests.helpers.stats_server import StatsServer
from twemproxy_exporter.enums import EnumTransportType
from twemproxy_exporter.errors import (
    MalformedResponseError,
    StatsConnectionError,
    StatsTimeoutError,
)
from twemproxy_exporter.handlers import HandlerStatsSocket, fetch_stats
from twemproxy_exporter.models import ModelStatsEndpoint
from twemproxy_exporter.protocols import ProtocolStatsFetcher

ServerFactory = Callable[..., StatsServer]


class TestFetchStats:
    def test_returns_document_bytes(
        self, stats_server: ServerFactory, stats_example_bytes: bytes
    ) -> None:
        server = stats_server(stats_example_bytes)
        raw = fetch_stats(server.endpoint, timeout_seconds=2.0)
        assert json.loads(raw) == json.loads(stats_example_bytes)

    def test_reassembles_chunked_document(
        self, stats_server: ServerFactory, stats_example_bytes: bytes
    ) -> None:
        server = stats_server(stats_example_bytes, chunk_size=7)
        raw = fetch_stats(server.endpoint, timeout_seconds=2.0)
        assert json.loads(raw) == json.loads(stats_example_bytes)

    def test_returns_without_waiting_for_close(
        self, stats_server: ServerFactory, stats_example_bytes: bytes
    ) -> None:
        server = stats_server(stats_example_bytes, hold_open=True)
        start = time.monotonic()
        raw = fetch_stats(server.endpoint, timeout_seconds=5.0)
        assert time.monotonic() - start < 4.0
        assert json.loads(raw)["service"] == "nutcracker"

    def test_stops_after_first_document(self, stats_server: ServerFactory) -> None:
        server = stats_server(b'{"a": 1}\n{"b": 2}\n')
        assert fetch_stats(server.endpoint, timeout_seconds=2.0) == b'{"a": 1}'

    def test_braces_and_quotes_inside_strings(
        self, stats_server: ServerFactory
    ) -> None:
        document = b'{"k": "}\\"}{[", "n": [1, {"m": "]"}]}'
        server = stats_server(document + b'{"x": 2}', hold_open=True, chunk_size=1)
        start = time.monotonic()
        raw = fetch_stats(server.endpoint, timeout_seconds=5.0)
        assert time.monotonic() - start < 4.0
        assert raw == document
        assert json.loads(raw)["k"] == '}"}{['

    def test_deeply_nested_document_fails_without_waiting(
        self, stats_server: ServerFactory
    ) -> None:
        depth = 100_000
        server = stats_server(
            b'{"a":' * depth + b"1" + b"}" * depth, hold_open=True, chunk_size=4096
        )
        start = time.monotonic()
        with pytest.raises(MalformedResponseError, match="not valid JSON"):
            fetch_stats(server.endpoint, timeout_seconds=5.0)
        assert time.monotonic() - start < 4.0

    def test_refused_connection(self, refused_endpoint: ModelStatsEndpoint) -> None:
        correlation_id = uuid4()
        with pytest.raises(StatsConnectionError) as exc_info:
            fetch_stats(refused_endpoint, 1.0, correlation_id)
        error = exc_info.value
        assert error.correlation_id == correlation_id
        assert error.context["transport_type"] == EnumTransportType.TCP
        assert error.context["target_name"] == refused_endpoint.address

    def test_read_timeout(self, stats_server: ServerFactory) -> None:
        server = stats_server(b'{"service": "nutc', hold_open=True)
        with pytest.raises(StatsTimeoutError) as exc_info:
            fetch_stats(server.endpoint, timeout_seconds=0.3)
        assert exc_info.value.context["timeout_seconds"] == 0.3

    def test_silent_open_connection_times_out(
        self, stats_server: ServerFactory
    ) -> None:
        server = stats_server(b"", hold_open=True)
        with pytest.raises(StatsTimeoutError):
            fetch_stats(server.endpoint, timeout_seconds=0.3)

    def test_closed_without_data(self, stats_server: ServerFactory) -> None:
        server = stats_server(b"")
        with pytest.raises(MalformedResponseError, match="closed without data"):
            fetch_stats(server.endpoint, timeout_seconds=2.0)

    def test_truncated_document(self, stats_server: ServerFactory) -> None:
        server = stats_server(b'{"service": "nutcracker", "uptime": ')
        with pytest.raises(MalformedResponseError, match="not valid JSON"):
            fetch_stats(server.endpoint, timeout_seconds=2.0)


class TestHandlerStatsSocket:
    def test_satisfies_fetcher_protocol(self) -> None:
        handler = HandlerStatsSocket(
            ModelStatsEndpoint(host="localhost", port=22222), timeout_seconds=2.0
        )
        assert isinstance(handler, ProtocolStatsFetcher)
        assert handler.timeout_seconds == 2.0
        assert handler.endpoint.address == "localhost:22222"

    def test_each_fetch_opens_a_new_connection(
        self, stats_server: ServerFactory, stats_example_bytes: bytes
    ) -> None:
        server = stats_server(stats_example_bytes)
        handler = HandlerStatsSocket(server.endpoint, timeout_seconds=2.0)
        first = handler.fetch()
        second = handler.fetch()
        assert first == second
        assert server.connection_count == 2
