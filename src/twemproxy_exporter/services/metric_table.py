# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Static metric table.

Maps every (level, field) of the stats snapshot to a metric name suffix, kind
and help text. Metric identity comes from this table only, never from the
JSON key text, so an upstream key rename needs a table update here rather than
silently changing metric names.

The table is built once at import and is never mutated; every collect() call
reads it concurrently.
"""

from __future__ import annotations

from twemproxy_exporter.enums import EnumMetricKind, EnumMetricLevel
from twemproxy_exporter.models import ModelMetricDescriptor

_COUNTER = EnumMetricKind.COUNTER
_GAUGE = EnumMetricKind.GAUGE
_ROOT = EnumMetricLevel.ROOT
_POOL = EnumMetricLevel.POOL
_SERVER = EnumMetricLevel.SERVER

DEFAULT_NAMESPACE: str = "twemproxy_exporter"


def _row(
    level: EnumMetricLevel,
    field: str,
    suffix: str,
    kind: EnumMetricKind,
    help_text: str,
) -> ModelMetricDescriptor:
    return ModelMetricDescriptor(
        level=level,
        field=field,
        suffix=suffix,
        kind=kind,
        help_text=help_text,
    )


UP_DESCRIPTOR: ModelMetricDescriptor = ModelMetricDescriptor(
    level=_ROOT,
    field=None,
    suffix="up",
    kind=_GAUGE,
    help_text="Could twemproxy be queried.",
)

# curr_connections and client_connections are exported separately; upstream
# does not document how they differ.
ROOT_METRICS: tuple[ModelMetricDescriptor, ...] = (
    _row(
        _ROOT,
        "total_connections",
        "connections_total",
        _COUNTER,
        "Total number of connections.",
    ),
    _row(
        _ROOT,
        "curr_connections",
        "current_connections",
        _GAUGE,
        "The current number of connections.",
    ),
)

POOL_METRICS: tuple[ModelMetricDescriptor, ...] = (
    _row(
        _POOL,
        "client_eof",
        "client_eof_total",
        _COUNTER,
        "Total number of client EOFs.",
    ),
    _row(
        _POOL,
        "client_err",
        "client_err_total",
        _COUNTER,
        "Total number of client errors.",
    ),
    _row(
        _POOL,
        "client_connections",
        "client_connections_active",
        _GAUGE,
        "The current number of active client connections.",
    ),
    _row(
        _POOL,
        "server_ejects",
        "backend_server_ejections_total",
        _COUNTER,
        "The number of times a backend has been ejected.",
    ),
    _row(
        _POOL,
        "forward_error",
        "forward_errors_total",
        _COUNTER,
        "Total number of forward errors.",
    ),
    _row(
        _POOL,
        "fragments",
        "fragments_total",
        _COUNTER,
        "Total number fragments created from multi-vector requests.",
    ),
)

# server_ejected_at is passed through unchanged; upstream does not state its unit.
SERVER_METRICS: tuple[ModelMetricDescriptor, ...] = (
    _row(
        _SERVER,
        "server_eof",
        "server_eof_total",
        _COUNTER,
        "Total number of server EOFs.",
    ),
    _row(
        _SERVER,
        "server_err",
        "server_err_total",
        _COUNTER,
        "Total number of server errors.",
    ),
    _row(
        _SERVER,
        "server_timedout",
        "server_timeouts_total",
        _COUNTER,
        "Total number of times the server has timed out.",
    ),
    _row(
        _SERVER,
        "server_connections",
        "server_connections_active",
        _GAUGE,
        "The current number of active server connections.",
    ),
    _row(
        _SERVER,
        "server_ejected_at",
        "server_ejected_at",
        _GAUGE,
        "The time when the server was ejected, as reported by twemproxy.",
    ),
    _row(
        _SERVER,
        "requests",
        "server_requests_total",
        _COUNTER,
        "Total number of requests to the server.",
    ),
    _row(
        _SERVER,
        "request_bytes",
        "server_requests_bytes_total",
        _COUNTER,
        "Total number of request bytes sent to the server.",
    ),
    _row(
        _SERVER,
        "responses",
        "server_responses_total",
        _COUNTER,
        "Total number of responses from the server.",
    ),
    _row(
        _SERVER,
        "response_bytes",
        "server_responses_bytes_total",
        _COUNTER,
        "Total number of response bytes received from the server.",
    ),
    _row(
        _SERVER,
        "in_queue",
        "incoming_queue",
        _GAUGE,
        "The current number of requests in the incoming queue.",
    ),
    _row(
        _SERVER,
        "in_queue_bytes",
        "incoming_queue_bytes",
        _GAUGE,
        "The current number of bytes in the incoming queue.",
    ),
    _row(
        _SERVER,
        "out_queue",
        "outgoing_queue",
        _GAUGE,
        "The current number of requests in the outgoing queue.",
    ),
    _row(
        _SERVER,
        "out_queue_bytes",
        "outgoing_queue_bytes",
        _GAUGE,
        "The current number of bytes in the outgoing queue.",
    ),
)

SNAPSHOT_METRICS: tuple[ModelMetricDescriptor, ...] = (
    ROOT_METRICS + POOL_METRICS + SERVER_METRICS
)

ALL_METRICS: tuple[ModelMetricDescriptor, ...] = (UP_DESCRIPTOR,) + SNAPSHOT_METRICS


__all__: list[str] = [
    "DEFAULT_NAMESPACE",
    "UP_DESCRIPTOR",
    "ROOT_METRICS",
    "POOL_METRICS",
    "SERVER_METRICS",
    "SNAPSHOT_METRICS",
    "ALL_METRICS",
]
