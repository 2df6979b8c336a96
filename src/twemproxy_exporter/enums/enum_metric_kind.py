# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Metric Kind Enumeration.

Static counter/gauge classification attached to every exported metric.
"""

from enum import Enum


class EnumMetricKind(str, Enum):
    """Prometheus value type of an exported metric.

    Attributes:
        COUNTER: Monotonically non-decreasing value (resets on upstream restart)
        GAUGE: Instantaneous value that can rise or fall between samples
    """

    COUNTER = "counter"
    GAUGE = "gauge"


__all__ = ["EnumMetricKind"]
