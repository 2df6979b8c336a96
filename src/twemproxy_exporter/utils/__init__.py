# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for the exporter.

This package provides common utilities:
    - util_address: Stats and listen address parsing
    - util_logging: Logging bootstrap from environment variables
"""

from twemproxy_exporter.utils.util_address import (
    parse_listen_address,
    parse_stats_address,
)
from twemproxy_exporter.utils.util_logging import configure_logging

__all__: list[str] = [
    "parse_listen_address",
    "parse_stats_address",
    "configure_logging",
]
