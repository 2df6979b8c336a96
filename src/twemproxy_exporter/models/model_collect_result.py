# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Result of one collect() cycle."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from twemproxy_exporter.models.model_observation import ModelObservation


class ModelCollectResult(BaseModel):
    """Outcome of one fetch, decode and project cycle.

    Attributes:
        up: 1 when the stats endpoint was queried and decoded, else 0
        observations: Every observation of the snapshot; empty when up is 0
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    up: Literal[0, 1] = Field(description="Whether the scrape succeeded")
    observations: tuple[ModelObservation, ...] = Field(default=())

    @property
    def is_up(self) -> bool:
        return self.up == 1


__all__: list[str] = ["ModelCollectResult"]
