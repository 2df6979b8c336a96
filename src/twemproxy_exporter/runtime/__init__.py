# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Exporter runtime: configuration, metrics server and process kernel.

Exports:
    ModelExporterConfig: Validated exporter configuration
    load_exporter_config: Config builder raising ProtocolConfigurationError
    MetricsServer: aiohttp server for the telemetry endpoint
    run_exporter: Run the exporter until shutdown
"""

from twemproxy_exporter.runtime.kernel import run_exporter
from twemproxy_exporter.runtime.metrics_server import MetricsServer
from twemproxy_exporter.runtime.model_exporter_config import (
    ModelExporterConfig,
    load_exporter_config,
)

__all__: list[str] = [
    "MetricsServer",
    "ModelExporterConfig",
    "load_exporter_config",
    "run_exporter",
]
