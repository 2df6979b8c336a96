# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Exporter data models.

Exports:
    ModelStatsSnapshot: Decoded root stats document
    ModelPoolSnapshot: Decoded pool object
    ModelServerSnapshot: Decoded backend server object
    ModelObservation: One labeled sample produced by projection
    ModelMetricDescriptor: One row of the static metric table
    ModelCollectResult: Outcome of one collect() cycle
    ModelStatsEndpoint: Host and port of the stats socket
"""

from twemproxy_exporter.models.model_collect_result import ModelCollectResult
from twemproxy_exporter.models.model_metric_descriptor import ModelMetricDescriptor
from twemproxy_exporter.models.model_observation import ModelObservation
from twemproxy_exporter.models.model_pool_snapshot import ModelPoolSnapshot
from twemproxy_exporter.models.model_server_snapshot import ModelServerSnapshot
from twemproxy_exporter.models.model_stats_endpoint import ModelStatsEndpoint
from twemproxy_exporter.models.model_stats_snapshot import ModelStatsSnapshot

__all__: list[str] = [
    "ModelCollectResult",
    "ModelMetricDescriptor",
    "ModelObservation",
    "ModelPoolSnapshot",
    "ModelServerSnapshot",
    "ModelStatsEndpoint",
    "ModelStatsSnapshot",
]
