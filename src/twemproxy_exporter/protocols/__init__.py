# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol interfaces for the exporter."""

from twemproxy_exporter.protocols.protocol_stats_fetcher import ProtocolStatsFetcher

__all__: list[str] = ["ProtocolStatsFetcher"]
