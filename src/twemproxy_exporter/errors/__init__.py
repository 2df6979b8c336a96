# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Exporter Errors Module.

Exports:
    ModelExporterErrorContext: Configuration model for bundled error context
    ExporterError: Base exporter error class
    ProtocolConfigurationError: Invalid startup configuration
    ExporterRuntimeError: HTTP listener or runtime failures
    StatsError: Base class for recoverable scrape failures
    StatsFetchError: Network failures while fetching stats
    StatsConnectionError: Stats endpoint unreachable, refused or reset
    StatsTimeoutError: Connect or read deadline exceeded
    StatsDecodeError: Stats document does not match the expected shape
    MalformedResponseError: Response is not a single JSON object
    MissingFieldError: Required fixed field absent
    FieldTypeMismatchError: Fixed field or child entry has the wrong JSON type
    UnexpectedFieldError: Server-level object has leftover keys

Error Sanitization:
    Error messages name fields, operations, hosts and ports. They never echo
    raw response bodies, which can be large.
"""

from twemproxy_exporter.errors.exporter_errors import (
    ExporterError,
    ExporterRuntimeError,
    FieldTypeMismatchError,
    MalformedResponseError,
    MissingFieldError,
    ProtocolConfigurationError,
    StatsConnectionError,
    StatsDecodeError,
    StatsError,
    StatsFetchError,
    StatsTimeoutError,
    UnexpectedFieldError,
)
from twemproxy_exporter.errors.model_exporter_error_context import (
    ModelExporterErrorContext,
)

__all__: list[str] = [
    "ModelExporterErrorContext",
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
