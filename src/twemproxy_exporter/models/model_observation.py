# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Observation model: one labeled numeric sample produced by projection."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from twemproxy_exporter.enums import EnumMetricKind


class ModelObservation(BaseModel):
    """A single (metric name, labels, value) sample.

    Observations have no identity beyond their content. Labels are kept as an
    ordered tuple of (name, value) pairs so the model stays hashable and two
    projections of the same snapshot compare equal.

    Example:
        >>> ModelObservation(
        ...     name="twemproxy_exporter_server_requests_bytes_total",
        ...     labels=(("pool", "alpha"), ("server", "memcached-1")),
        ...     value=1495.0,
        ...     kind=EnumMetricKind.COUNTER,
        ... )
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    name: str = Field(description="Fully qualified metric name")
    labels: tuple[tuple[str, str], ...] = Field(
        default=(),
        description="Label (name, value) pairs in declaration order",
    )
    value: float = Field(description="Sample value")
    kind: EnumMetricKind = Field(description="Counter or gauge")

    @property
    def label_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.labels)

    @property
    def label_values(self) -> tuple[str, ...]:
        return tuple(value for _, value in self.labels)

    def label_dict(self) -> dict[str, str]:
        """Return the labels as a plain dict."""
        return dict(self.labels)


__all__: list[str] = ["ModelObservation"]
