# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Prometheus integration for the exporter.

Exports:
    TwemproxyCollector: prometheus_client collector backed by the exporter service
    build_registry: Registry with the twemproxy collector registered
"""

from twemproxy_exporter.observability.collector_twemproxy import (
    TwemproxyCollector,
    build_registry,
)

__all__: list[str] = ["TwemproxyCollector", "build_registry"]
