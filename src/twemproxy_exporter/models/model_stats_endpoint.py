# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Stats endpoint address model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelStatsEndpoint(BaseModel):
    """Host and port of the twemproxy stats socket.

    The host is kept as given; name resolution happens on every connect.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    host: str = Field(min_length=1, description="Host name or IP address")
    port: int = Field(ge=1, le=65535, description="TCP port")

    @property
    def address(self) -> str:
        """Return the endpoint as ``host:port`` (IPv6 hosts bracketed)."""
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"

    def __str__(self) -> str:
        return self.address


__all__: list[str] = ["ModelStatsEndpoint"]
