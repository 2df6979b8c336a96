# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Root stats snapshot model.

One instance is built per successful fetch and discarded once its observations
have been projected.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from twemproxy_exporter.models.model_pool_snapshot import ModelPoolSnapshot


class ModelStatsSnapshot(BaseModel):
    """Decoded twemproxy stats document.

    Attributes:
        service: Service name reported by the proxy ("nutcracker")
        source: Host name of the proxy
        version: Proxy version string
        uptime: Proxy uptime in seconds
        timestamp: Sample time in unix seconds
        total_connections: Connections accepted since start
        curr_connections: Currently open connections
        pools: Pool name to pool snapshot
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="forbid",
    )

    service: str = Field(description="Service name")
    source: str = Field(description="Source host name")
    version: str = Field(description="Proxy version")
    uptime: float = Field(description="Uptime in seconds")
    timestamp: float = Field(description="Sample timestamp in unix seconds")
    total_connections: float = Field(description="Total connections accepted")
    curr_connections: float = Field(description="Current open connections")
    pools: dict[str, ModelPoolSnapshot] = Field(
        default_factory=dict,
        description="Pools keyed by name",
    )


__all__: list[str] = ["ModelStatsSnapshot"]
