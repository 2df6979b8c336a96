# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for projecting snapshots into observations."""

from __future__ import annotations

import json
from collections import Counter

from tests.helpers.stats_documents import (
    make_pool_document,
    make_server_document,
    make_stats_document,
)
from twemproxy_exporter.enums import EnumMetricKind
from twemproxy_exporter.models import ModelStatsSnapshot
from twemproxy_exporter.services import decode_stats, project_snapshot
from twemproxy_exporter.services.metric_table import (
    POOL_METRICS,
    ROOT_METRICS,
    SERVER_METRICS,
)


def _snapshot(document: dict[str, object]) -> ModelStatsSnapshot:
    return decode_stats(json.dumps(document).encode("utf-8"))


class TestObservationCount:
    def test_example_count(self, stats_example_bytes: bytes) -> None:
        observations = project_snapshot(decode_stats(stats_example_bytes))
        assert len(observations) == 2 + 6 * 1 + 13 * 3

    def test_count_formula_across_pools(self) -> None:
        server_counts = [0, 1, 4]
        pools = {
            f"pool-{i}": make_pool_document(
                {f"s{n}": make_server_document() for n in range(count)}
            )
            for i, count in enumerate(server_counts)
        }
        observations = project_snapshot(_snapshot(make_stats_document(pools)))
        expected = (
            len(ROOT_METRICS)
            + len(POOL_METRICS) * len(server_counts)
            + len(SERVER_METRICS) * sum(server_counts)
        )
        assert len(observations) == expected

    def test_pool_without_servers_has_no_server_observations(self) -> None:
        snapshot = _snapshot(make_stats_document({"proxied": make_pool_document()}))
        observations = project_snapshot(snapshot)
        assert len(observations) == len(ROOT_METRICS) + len(POOL_METRICS)
        assert not [o for o in observations if "server" in o.label_names]


class TestObservationContent:
    def test_server_request_bytes(self, stats_example_bytes: bytes) -> None:
        observations = project_snapshot(decode_stats(stats_example_bytes))
        matches = [
            o
            for o in observations
            if o.name == "twemproxy_exporter_server_requests_bytes_total"
            and o.label_dict() == {"pool": "proxied", "server": "memcached-1"}
        ]
        assert len(matches) == 1
        assert matches[0].value == 1495.0
        assert matches[0].kind == EnumMetricKind.COUNTER

    def test_labels_follow_level(self, stats_example_bytes: bytes) -> None:
        observations = project_snapshot(decode_stats(stats_example_bytes))
        by_name = {o.name: o for o in observations}
        assert by_name["twemproxy_exporter_current_connections"].labels == ()
        assert by_name["twemproxy_exporter_client_eof_total"].label_names == (
            "pool",
        )
        assert by_name["twemproxy_exporter_incoming_queue"].label_names == (
            "pool",
            "server",
        )

    def test_ejections_use_server_ejects(self) -> None:
        pool = make_pool_document(client_connections=9, server_ejects=2)
        observations = project_snapshot(_snapshot(make_stats_document({"a": pool})))
        by_name = {o.name: o.value for o in observations}
        assert by_name["twemproxy_exporter_backend_server_ejections_total"] == 2.0
        assert by_name["twemproxy_exporter_client_connections_active"] == 9.0

    def test_no_duplicate_series(self, stats_example_bytes: bytes) -> None:
        observations = project_snapshot(decode_stats(stats_example_bytes))
        series = Counter((o.name, o.labels) for o in observations)
        assert max(series.values()) == 1

    def test_custom_namespace(self, stats_example_bytes: bytes) -> None:
        observations = project_snapshot(decode_stats(stats_example_bytes), "nc")
        assert all(o.name.startswith("nc_") for o in observations)


class TestProjectionDeterminism:
    def test_projection_is_idempotent(self, stats_example_bytes: bytes) -> None:
        snapshot = decode_stats(stats_example_bytes)
        assert project_snapshot(snapshot) == project_snapshot(snapshot)

    def test_order_independent_of_document_order(self) -> None:
        pools = {
            "b": make_pool_document(
                {"y": make_server_document(), "x": make_server_document()}
            ),
            "a": make_pool_document({"z": make_server_document()}),
        }
        reordered = {
            "a": make_pool_document({"z": make_server_document()}),
            "b": make_pool_document(
                {"x": make_server_document(), "y": make_server_document()}
            ),
        }
        first = project_snapshot(_snapshot(make_stats_document(pools)))
        second = project_snapshot(_snapshot(make_stats_document(reordered)))
        assert first == second
