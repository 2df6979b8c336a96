# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Prometheus collector for twemproxy stats.

Adapts ServiceStatsExporter onto prometheus_client's custom collector
protocol. Each registry scrape calls ``collect()`` once, which performs one
fetch of the stats endpoint and yields fresh metric families. No values are
cached between scrapes.

``describe()`` yields empty families straight from the static metric table, so
registering the collector never touches the stats endpoint.

Example:
    >>> from prometheus_client import CollectorRegistry, generate_latest
    >>> registry = CollectorRegistry()
    >>> registry.register(TwemproxyCollector(exporter))
    >>> text = generate_latest(registry)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from prometheus_client import (
    CollectorRegistry,
    GCCollector,
    PlatformCollector,
    ProcessCollector,
)
from prometheus_client.core import CounterMetricFamily, GaugeMetricFamily, Metric
from prometheus_client.registry import Collector

from twemproxy_exporter.enums import EnumMetricKind
from twemproxy_exporter.models import ModelMetricDescriptor
from twemproxy_exporter.services import ServiceStatsExporter
from twemproxy_exporter.services.metric_table import UP_DESCRIPTOR


def _new_family(descriptor: ModelMetricDescriptor, namespace: str) -> Metric:
    name = descriptor.full_name(namespace)
    labels = list(descriptor.label_names)
    if descriptor.kind == EnumMetricKind.COUNTER:
        return CounterMetricFamily(name, descriptor.help_text, labels=labels)
    return GaugeMetricFamily(name, descriptor.help_text, labels=labels)


class TwemproxyCollector(Collector):
    """Registry collector backed by a ServiceStatsExporter."""

    def __init__(self, exporter: ServiceStatsExporter) -> None:
        self._exporter = exporter

    def describe(self) -> Iterable[Metric]:
        namespace = self._exporter.namespace
        for descriptor in self._exporter.describe():
            yield _new_family(descriptor, namespace)

    def collect(self) -> Iterator[Metric]:
        namespace = self._exporter.namespace
        result = self._exporter.collect()

        up = _new_family(UP_DESCRIPTOR, namespace)
        up.add_metric([], float(result.up))
        yield up

        if not result.is_up:
            return

        families: dict[str, Metric] = {}
        for descriptor in self._exporter.describe():
            if descriptor.field is not None:
                families[descriptor.full_name(namespace)] = _new_family(
                    descriptor, namespace
                )
        for observation in result.observations:
            families[observation.name].add_metric(
                list(observation.label_values), observation.value
            )
        yield from families.values()


def build_registry(
    exporter: ServiceStatsExporter,
    include_runtime_metrics: bool = True,
) -> CollectorRegistry:
    """Create a registry holding the twemproxy collector.

    Args:
        exporter: Exporter service backing the collector.
        include_runtime_metrics: Also register the process, platform and GC
            collectors for the exporter process itself.

    Returns:
        A new registry, independent of the global default registry.
    """
    registry = CollectorRegistry(auto_describe=True)
    registry.register(TwemproxyCollector(exporter))
    if include_runtime_metrics:
        ProcessCollector(registry=registry)
        PlatformCollector(registry=registry)
        GCCollector(registry=registry)
    return registry


__all__: list[str] = ["TwemproxyCollector", "build_registry"]
