# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Exporter Enumerations Module.

Exports:
    EnumMetricKind: Counter/gauge classification of exported metrics
    EnumMetricLevel: Stats document level (root, pool, server)
    EnumTransportType: Transport type enumeration for error context
"""

from twemproxy_exporter.enums.enum_metric_kind import EnumMetricKind
from twemproxy_exporter.enums.enum_metric_level import EnumMetricLevel
from twemproxy_exporter.enums.enum_transport_type import EnumTransportType

__all__: list[str] = [
    "EnumMetricKind",
    "EnumMetricLevel",
    "EnumTransportType",
]
