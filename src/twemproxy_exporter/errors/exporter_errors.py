# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Exporter-Specific Error Classes.

Error Hierarchy:
    ExporterError (base exporter error)
    ├── ProtocolConfigurationError
    ├── ExporterRuntimeError
    └── StatsError
        ├── StatsFetchError
        │   ├── StatsConnectionError
        │   └── StatsTimeoutError
        └── StatsDecodeError
            ├── MalformedResponseError
            ├── MissingFieldError
            ├── FieldTypeMismatchError
            └── UnexpectedFieldError

All errors:
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Accept ModelExporterErrorContext for bundled context parameters

Every StatsError is recoverable: the exporter turns it into ``up = 0`` for the
scrape that raised it. ProtocolConfigurationError and ExporterRuntimeError are
only raised during startup.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from twemproxy_exporter.errors.model_exporter_error_context import (
    ModelExporterErrorContext,
)


class ExporterError(Exception):
    """Base error class for the exporter.

    Structured Fields (via ModelExporterErrorContext):
        transport_type: Type of transport (tcp, http, runtime)
        operation: Operation being performed
        correlation_id: Scrape correlation ID for tracking
        target_name: Target endpoint name

    Example:
        >>> context = ModelExporterErrorContext(
        ...     transport_type=EnumTransportType.TCP,
        ...     operation="fetch_stats",
        ...     target_name="localhost:22222",
        ... )
        >>> raise ExporterError("Operation failed", context=context, retry_count=0)
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelExporterErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize ExporterError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled exporter context (transport_type, operation, etc.)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message: str = message
        self.correlation_id: Optional[UUID] = None

        structured_context: dict[str, object] = dict(extra_context)
        if context is not None:
            if context.transport_type is not None:
                structured_context["transport_type"] = context.transport_type
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            self.correlation_id = context.correlation_id
        self.context: dict[str, object] = structured_context

    def __str__(self) -> str:
        if self.correlation_id is None:
            return self.message
        return f"{self.message} (correlation_id={self.correlation_id})"


class ProtocolConfigurationError(ExporterError):
    """Raised when exporter configuration is invalid.

    Used for unparseable stats or listen addresses and invalid telemetry
    paths. Fatal at startup.

    Example:
        >>> raise ProtocolConfigurationError(
        ...     "Invalid stats address 'localhost'",
        ...     address="localhost",
        ... )
    """


class ExporterRuntimeError(ExporterError):
    """Raised when the exporter's own runtime cannot operate.

    Used when the HTTP listener fails to bind or start.
    """


class StatsError(ExporterError):
    """Base class for failures of a single scrape of the stats endpoint."""


class StatsFetchError(StatsError):
    """Base class for network failures while fetching the stats document."""


class StatsConnectionError(StatsFetchError):
    """Raised when the stats endpoint is unreachable, refuses or resets.

    Example:
        >>> raise StatsConnectionError(
        ...     "Failed to connect to stats endpoint",
        ...     context=context,
        ...     host="localhost",
        ...     port=22222,
        ... )
    """


class StatsTimeoutError(StatsFetchError):
    """Raised when connecting to or reading from the endpoint exceeds the timeout.

    Example:
        >>> raise StatsTimeoutError(
        ...     "Timed out reading stats",
        ...     context=context,
        ...     timeout_seconds=2.0,
        ... )
    """


class StatsDecodeError(StatsError):
    """Base class for stats documents that do not match the expected shape."""


class MalformedResponseError(StatsDecodeError):
    """Raised when the response is not exactly one valid JSON object."""


class MissingFieldError(StatsDecodeError):
    """Raised when a required fixed field is absent from a stats object.

    Attributes:
        field: Name of the missing field
    """

    def __init__(
        self,
        field: str,
        context: Optional[ModelExporterErrorContext] = None,
        **extra_context: object,
    ) -> None:
        self.field: str = field
        super().__init__(
            f"Missing required field '{field}'",
            context=context,
            field=field,
            **extra_context,
        )


class FieldTypeMismatchError(StatsDecodeError):
    """Raised when a fixed field or child entry holds the wrong JSON type.

    Attributes:
        field: Name of the offending field or child key
        expected_type: JSON type that was expected ("number", "string", "object")
        actual_type: JSON type that was found
    """

    def __init__(
        self,
        field: str,
        expected_type: str,
        actual_type: str,
        context: Optional[ModelExporterErrorContext] = None,
        **extra_context: object,
    ) -> None:
        self.field: str = field
        self.expected_type: str = expected_type
        self.actual_type: str = actual_type
        super().__init__(
            f"Field '{field}' must be {expected_type}, got {actual_type}",
            context=context,
            field=field,
            expected_type=expected_type,
            actual_type=actual_type,
            **extra_context,
        )


class UnexpectedFieldError(StatsDecodeError):
    """Raised when a server-level object carries keys outside its fixed set.

    Attributes:
        key: The unexpected key
    """

    def __init__(
        self,
        key: str,
        context: Optional[ModelExporterErrorContext] = None,
        **extra_context: object,
    ) -> None:
        self.key: str = key
        super().__init__(
            f"Unexpected field '{key}'",
            context=context,
            key=key,
            **extra_context,
        )


__all__ = [
    "ExporterError",
    "ProtocolConfigurationError",
    "ExporterRuntimeError",
    "StatsError",
    "StatsFetchError",
    "StatsConnectionError",
    "StatsTimeoutError",
    "StatsDecodeError",
    "MalformedResponseError",
    "MissingFieldError",
    "FieldTypeMismatchError",
    "UnexpectedFieldError",
]
