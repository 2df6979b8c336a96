# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Backend server stats snapshot model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelServerSnapshot(BaseModel):
    """Counters of one backend server inside a pool.

    Terminal entity of the stats document: it has no dynamic children.
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="forbid",
    )

    server_eof: float = Field(description="Number of EOFs received from the server")
    server_err: float = Field(description="Number of server errors")
    server_timedout: float = Field(description="Number of server timeouts")
    server_connections: float = Field(description="Active server connections")
    server_ejected_at: float = Field(
        description="Time the server was last ejected, as reported upstream",
    )
    requests: float = Field(description="Requests forwarded to the server")
    request_bytes: float = Field(description="Request bytes sent to the server")
    responses: float = Field(description="Responses received from the server")
    response_bytes: float = Field(description="Response bytes received")
    in_queue: float = Field(description="Requests in the incoming queue")
    in_queue_bytes: float = Field(description="Bytes in the incoming queue")
    out_queue: float = Field(description="Requests in the outgoing queue")
    out_queue_bytes: float = Field(description="Bytes in the outgoing queue")


__all__: list[str] = ["ModelServerSnapshot"]
