# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Metric Level Enumeration.

Identifies which entity of the stats document a metric is read from. The level
alone determines the label dimensions of the metric.
"""

from enum import Enum


class EnumMetricLevel(str, Enum):
    """Entity level of the twemproxy stats document.

    Attributes:
        ROOT: Top-level stats object (no labels)
        POOL: Per-pool object (``pool`` label)
        SERVER: Per-backend-server object (``pool`` and ``server`` labels)
    """

    ROOT = "root"
    POOL = "pool"
    SERVER = "server"

    @property
    def label_names(self) -> tuple[str, ...]:
        """Return the label dimensions for metrics at this level."""
        if self is EnumMetricLevel.ROOT:
            return ()
        if self is EnumMetricLevel.POOL:
            return ("pool",)
        return ("pool", "server")


__all__ = ["EnumMetricLevel"]
