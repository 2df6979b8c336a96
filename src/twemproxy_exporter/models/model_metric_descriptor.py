# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Metric descriptor model: one row of the static metric table."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from twemproxy_exporter.enums import EnumMetricKind, EnumMetricLevel


class ModelMetricDescriptor(BaseModel):
    """Static description of one exported metric.

    Attributes:
        level: Stats document level the value is read from
        field: Field name in the snapshot model, or None for metrics that are
            not read from the document (``up``)
        suffix: Metric name without the namespace prefix
        kind: Counter or gauge
        help_text: HELP text for the exposition format
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    level: EnumMetricLevel
    field: Optional[str] = None
    suffix: str
    kind: EnumMetricKind
    help_text: str

    @property
    def label_names(self) -> tuple[str, ...]:
        return self.level.label_names

    def full_name(self, namespace: str) -> str:
        """Return the namespace-qualified metric name."""
        if not namespace:
            return self.suffix
        return f"{namespace}_{self.suffix}"


__all__: list[str] = ["ModelMetricDescriptor"]
