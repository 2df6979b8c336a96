# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Projection of a stats snapshot into labeled observations.

Emits exactly one observation per metric table row per entity instance:
root rows once, pool rows once per pool, server rows once per server. Labels
depend only on the level:

    root   -> {}
    pool   -> {pool}
    server -> {pool, server}

Pools and servers are visited in sorted name order so repeated projections of
one snapshot are identical sequences, not only identical sets.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel

from twemproxy_exporter.models import (
    ModelMetricDescriptor,
    ModelObservation,
    ModelStatsSnapshot,
)
from twemproxy_exporter.services.metric_table import (
    DEFAULT_NAMESPACE,
    POOL_METRICS,
    ROOT_METRICS,
    SERVER_METRICS,
)


def _observe(
    rows: tuple[ModelMetricDescriptor, ...],
    entity: BaseModel,
    labels: tuple[tuple[str, str], ...],
    namespace: str,
) -> Iterator[ModelObservation]:
    for row in rows:
        yield ModelObservation(
            name=row.full_name(namespace),
            labels=labels,
            value=getattr(entity, row.field),
            kind=row.kind,
        )


def iter_observations(
    snapshot: ModelStatsSnapshot,
    namespace: str = DEFAULT_NAMESPACE,
) -> Iterator[ModelObservation]:
    """Yield every observation of ``snapshot`` in deterministic order."""
    yield from _observe(ROOT_METRICS, snapshot, (), namespace)
    for pool_name in sorted(snapshot.pools):
        pool = snapshot.pools[pool_name]
        pool_labels = (("pool", pool_name),)
        yield from _observe(POOL_METRICS, pool, pool_labels, namespace)
        for server_name in sorted(pool.servers):
            server_labels = pool_labels + (("server", server_name),)
            yield from _observe(
                SERVER_METRICS, pool.servers[server_name], server_labels, namespace
            )


def project_snapshot(
    snapshot: ModelStatsSnapshot,
    namespace: str = DEFAULT_NAMESPACE,
) -> tuple[ModelObservation, ...]:
    """Project a decoded snapshot into observations.

    Pure function: no I/O, and the whole snapshot is projected or nothing is
    returned.

    Args:
        snapshot: Snapshot produced by ``decode_stats``.
        namespace: Metric name prefix.

    Returns:
        ``len(ROOT_METRICS) + len(POOL_METRICS) * P + len(SERVER_METRICS) * S``
        observations for P pools holding S servers in total.
    """
    return tuple(iter_observations(snapshot, namespace))


__all__: list[str] = ["iter_observations", "project_snapshot"]
