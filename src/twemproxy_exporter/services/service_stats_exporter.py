# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Twemproxy stats exporter service.

Runs one fetch, decode and project cycle per ``collect()`` call and reports
the outcome as an ``up`` flag plus observations. Every StatsError raised by
the fetcher or decoder is recovered here: the scrape degrades to ``up = 0``
with no observations and the error is logged. Nothing is retried; the scrape
scheduler decides when the next attempt happens.

The service keeps no per-scrape state. Concurrent ``collect()`` calls each
open their own connection and build their own snapshot.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING
from uuid import uuid4

from twemproxy_exporter.errors import StatsError
from twemproxy_exporter.handlers import HandlerStatsSocket
from twemproxy_exporter.models import (
    ModelCollectResult,
    ModelMetricDescriptor,
    ModelStatsEndpoint,
)
from twemproxy_exporter.protocols import ProtocolStatsFetcher
from twemproxy_exporter.services.metric_table import (
    ALL_METRICS,
    DEFAULT_NAMESPACE,
    UP_DESCRIPTOR,
)
from twemproxy_exporter.services.stats_decoder import decode_stats
from twemproxy_exporter.services.stats_projector import project_snapshot

if TYPE_CHECKING:
    from twemproxy_exporter.runtime.model_exporter_config import ModelExporterConfig

logger = logging.getLogger(__name__)


class ServiceStatsExporter:
    """Describe and collect twemproxy metrics.

    Attributes:
        namespace: Metric name prefix
        up_name: Fully qualified name of the up metric

    Example:
        >>> exporter = ServiceStatsExporter.from_endpoint(
        ...     ModelStatsEndpoint(host="localhost", port=22222),
        ...     timeout_seconds=2.0,
        ... )
        >>> result = exporter.collect()
        >>> result.up
        1
    """

    def __init__(
        self,
        fetcher: ProtocolStatsFetcher,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        self._fetcher = fetcher
        self._namespace = namespace

    @classmethod
    def from_endpoint(
        cls,
        endpoint: ModelStatsEndpoint,
        timeout_seconds: float,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> ServiceStatsExporter:
        return cls(HandlerStatsSocket(endpoint, timeout_seconds), namespace)

    @classmethod
    def from_config(cls, config: ModelExporterConfig) -> ServiceStatsExporter:
        return cls.from_endpoint(
            config.stats_endpoint,
            config.timeout_seconds,
            config.namespace,
        )

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def up_name(self) -> str:
        return UP_DESCRIPTOR.full_name(self._namespace)

    def describe(self) -> tuple[ModelMetricDescriptor, ...]:
        """Return every metric this exporter can emit, ``up`` first.

        Static: never touches the stats endpoint.
        """
        return ALL_METRICS

    def collect(self) -> ModelCollectResult:
        """Perform one fetch, decode and project cycle.

        Returns:
            ``up = 1`` with every observation on success; ``up = 0`` with no
            observations if fetching or decoding failed.
        """
        correlation_id = uuid4()
        start = time.perf_counter()
        try:
            raw = self._fetcher.fetch(correlation_id)
            snapshot = decode_stats(raw, correlation_id)
        except StatsError as e:
            logger.warning(
                "Failed to collect stats: %s",
                e.message,
                extra={
                    "correlation_id": str(correlation_id),
                    "error_type": type(e).__name__,
                    **{key: str(value) for key, value in e.context.items()},
                },
            )
            return ModelCollectResult(up=0)

        observations = project_snapshot(snapshot, self._namespace)
        logger.debug(
            "Collected stats (correlation_id=%s)",
            correlation_id,
            extra={
                "pool_count": len(snapshot.pools),
                "observation_count": len(observations),
                "duration_seconds": time.perf_counter() - start,
            },
        )
        return ModelCollectResult(up=1, observations=observations)


__all__: list[str] = ["ServiceStatsExporter"]
