# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for twemproxy_exporter tests.

Available Utilities:
    Stats server:
        - StatsServer: Threaded fake of the twemproxy stats port
        - unused_endpoint: Loopback endpoint that refuses connections

    Log Helpers:
        - filter_module_records: Filter log records by module and level
        - get_warning_messages: Extract warning messages from log records

    Stats documents:
        - make_stats_document, make_pool_document, make_server_document:
          Builders for valid stats documents

    aiohttp:
        - get_aiohttp_bound_port: Port of a MetricsServer started on port 0
"""

from tests.helpers.aiohttp_utils import get_aiohttp_bound_port
from tests.helpers.log_helpers import filter_module_records, get_warning_messages
from tests.helpers.stats_documents import (
    make_pool_document,
    make_server_document,
    make_stats_document,
)
from tests.helpers.stats_server import StatsServer, unused_endpoint

__all__: list[str] = [
    "StatsServer",
    "filter_module_records",
    "get_aiohttp_bound_port",
    "get_warning_messages",
    "make_pool_document",
    "make_server_document",
    "make_stats_document",
    "unused_endpoint",
]
