# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Transport handlers.

Exports:
    HandlerStatsSocket: Fetcher bound to one stats endpoint and timeout
    fetch_stats: One-shot fetch of a stats document
"""

from twemproxy_exporter.handlers.handler_stats_socket import (
    HandlerStatsSocket,
    fetch_stats,
)

__all__: list[str] = ["HandlerStatsSocket", "fetch_stats"]
