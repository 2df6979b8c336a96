# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Exporter Error Context Configuration Model.

This module defines the configuration model for exporter error context,
bundling the common structured fields so error constructors stay small
while remaining strongly typed.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from twemproxy_exporter.enums import EnumTransportType


class ModelExporterErrorContext(BaseModel):
    """Configuration model for exporter error context.

    Attributes:
        transport_type: Transport the failing operation used (TCP, HTTP, RUNTIME)
        operation: Operation being performed (fetch_stats, decode_stats, ...)
        target_name: Target endpoint or entity name
        correlation_id: Scrape correlation ID for log correlation

    Example:
        >>> context = ModelExporterErrorContext(
        ...     transport_type=EnumTransportType.TCP,
        ...     operation="fetch_stats",
        ...     target_name="localhost:22222",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise StatsConnectionError("Connection refused", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    transport_type: Optional[EnumTransportType] = Field(
        default=None,
        description="Transport used by the failing operation",
    )
    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (fetch_stats, decode_stats, etc.)",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Target endpoint or entity name",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Scrape correlation ID",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: Optional[UUID] = None,
        **kwargs: object,
    ) -> ModelExporterErrorContext:
        """Build a context, generating a correlation ID when none is given.

        Args:
            correlation_id: Existing correlation ID to propagate, if any.
            **kwargs: Remaining context fields.

        Returns:
            A context whose correlation_id is always set.
        """
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelExporterErrorContext"]
