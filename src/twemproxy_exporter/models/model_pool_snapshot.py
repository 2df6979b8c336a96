# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pool stats snapshot model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from twemproxy_exporter.models.model_server_snapshot import ModelServerSnapshot


class ModelPoolSnapshot(BaseModel):
    """Client-facing counters of one pool plus its backend servers.

    Attributes:
        servers: Server name to server snapshot, one entry per nested object
            found under the pool in the stats document.
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="forbid",
    )

    client_eof: float = Field(description="Number of client EOFs")
    client_err: float = Field(description="Number of client errors")
    client_connections: float = Field(description="Active client connections")
    server_ejects: float = Field(description="Times a backend server was ejected")
    forward_error: float = Field(description="Number of forwarding errors")
    fragments: float = Field(
        description="Fragments created from multi-vector requests",
    )
    servers: dict[str, ModelServerSnapshot] = Field(
        default_factory=dict,
        description="Backend servers keyed by name",
    )


__all__: list[str] = ["ModelPoolSnapshot"]
