# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Transport Type Enumeration.

Defines the transports the exporter talks over. Used for error context.
"""

from enum import Enum


class EnumTransportType(str, Enum):
    """Transport types used by the exporter.

    Attributes:
        TCP: Raw TCP connection to the twemproxy stats port
        HTTP: HTTP listener serving the telemetry endpoint
        RUNTIME: Exporter-internal processing (decode, config)
    """

    TCP = "tcp"
    HTTP = "http"
    RUNTIME = "runtime"


__all__ = ["EnumTransportType"]
