# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Builders for valid twemproxy stats documents.

Each builder returns a plain dict with every fixed field present, so a test
only spells out the values it cares about.

Example:
    >>> document = make_stats_document(
    ...     {"alpha": make_pool_document({"s1": make_server_document(requests=3)})}
    ... )
"""

from __future__ import annotations


def make_server_document(**overrides: float) -> dict[str, float]:
    """Build a valid server-level stats object, all counters zero."""
    document: dict[str, float] = {
        "server_eof": 0,
        "server_err": 0,
        "server_timedout": 0,
        "server_connections": 0,
        "server_ejected_at": 0,
        "requests": 0,
        "request_bytes": 0,
        "responses": 0,
        "response_bytes": 0,
        "in_queue": 0,
        "in_queue_bytes": 0,
        "out_queue": 0,
        "out_queue_bytes": 0,
    }
    document.update(overrides)
    return document


def make_pool_document(
    servers: dict[str, dict[str, float]] | None = None,
    **overrides: float,
) -> dict[str, object]:
    """Build a valid pool-level stats object holding ``servers``."""
    document: dict[str, object] = {
        "client_eof": 0,
        "client_err": 0,
        "client_connections": 0,
        "server_ejects": 0,
        "forward_error": 0,
        "fragments": 0,
    }
    document.update(overrides)
    document.update(servers or {})
    return document


def make_stats_document(
    pools: dict[str, dict[str, object]] | None = None,
    **overrides: object,
) -> dict[str, object]:
    """Build a valid root stats document holding ``pools``."""
    document: dict[str, object] = {
        "service": "nutcracker",
        "source": "test-host",
        "version": "0.4.1",
        "uptime": 10,
        "timestamp": 1700000000,
        "total_connections": 4,
        "curr_connections": 2,
    }
    document.update(overrides)
    document.update(pools or {})
    return document


__all__: list[str] = [
    "make_pool_document",
    "make_server_document",
    "make_stats_document",
]
