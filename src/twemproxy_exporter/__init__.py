# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Twemproxy Prometheus Exporter.

Polls the twemproxy (nutcracker) stats socket and republishes its pool and
backend server counters as Prometheus metrics.

Key Components:
    - handlers.handler_stats_socket: one-shot TCP fetch of the stats document
    - services.stats_decoder: two-level decode of the stats document
    - services.stats_projector: projection of a snapshot into observations
    - services.service_stats_exporter: describe()/collect() with the up signal
    - observability.collector_twemproxy: prometheus_client collector adapter
    - runtime.metrics_server: aiohttp server for the telemetry endpoint
"""

__version__: str = "0.1.0"

__all__: list[str] = ["__version__"]
