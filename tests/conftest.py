# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for twemproxy_exporter tests."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from tests.helpers.stats_server import StatsServer, unused_endpoint
from twemproxy_exporter.models import ModelStatsEndpoint

FIXTURES_DIR: Path = Path(__file__).parent / "fixtures"


@pytest.fixture
def stats_example_bytes() -> bytes:
    """Raw bytes of a captured nutcracker stats document."""
    return (FIXTURES_DIR / "stats_example.json").read_bytes()


@pytest.fixture
def stats_example_document(stats_example_bytes: bytes) -> dict[str, object]:
    return json.loads(stats_example_bytes)


@pytest.fixture
def stats_server() -> Iterator[Callable[..., StatsServer]]:
    """Factory for started StatsServer instances, stopped on teardown.

    Example:
        >>> def test_fetch(stats_server):
        ...     server = stats_server(b"{}", hold_open=True)
        ...     fetch_stats(server.endpoint, 1.0)
    """
    servers: list[StatsServer] = []

    def _start(payload: bytes, **kwargs: object) -> StatsServer:
        server = StatsServer(payload, **kwargs)  # type: ignore[arg-type]
        server.start()
        servers.append(server)
        return server

    yield _start

    for server in servers:
        server.stop()


@pytest.fixture
def refused_endpoint() -> ModelStatsEndpoint:
    """Loopback endpoint with nothing listening."""
    return unused_endpoint()
