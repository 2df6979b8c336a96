# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Stats decoding, projection and the exporter service.

Exports:
    ServiceStatsExporter: describe()/collect() over one stats endpoint
    decode_stats: Two-level decode of a raw stats document
    project_snapshot: Snapshot to observation projection
    ALL_METRICS: Static metric descriptor table, up first
"""

from twemproxy_exporter.services.metric_table import ALL_METRICS, DEFAULT_NAMESPACE
from twemproxy_exporter.services.service_stats_exporter import ServiceStatsExporter
from twemproxy_exporter.services.stats_decoder import decode_stats
from twemproxy_exporter.services.stats_projector import project_snapshot

__all__: list[str] = [
    "ALL_METRICS",
    "DEFAULT_NAMESPACE",
    "ServiceStatsExporter",
    "decode_stats",
    "project_snapshot",
]
