# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Exporter Configuration Model.

This module provides the Pydantic configuration model for the exporter
process. Values come from CLI options, which fall back to environment
variables (see ``cli.commands``).

Environment Variables:
    TWEMPROXY_EXPORTER_STATS_ADDRESS: Stats address of twemproxy
    TWEMPROXY_EXPORTER_TIMEOUT: Timeout in seconds for the stats request
    TWEMPROXY_EXPORTER_LISTEN_ADDRESS: Address for the telemetry listener
    TWEMPROXY_EXPORTER_TELEMETRY_PATH: Path serving the metrics
    TWEMPROXY_EXPORTER_NAMESPACE: Metric name prefix
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from twemproxy_exporter.enums import EnumTransportType
from twemproxy_exporter.errors import (
    ModelExporterErrorContext,
    ProtocolConfigurationError,
)
from twemproxy_exporter.models.model_stats_endpoint import ModelStatsEndpoint
from twemproxy_exporter.services.metric_table import DEFAULT_NAMESPACE
from twemproxy_exporter.utils.util_address import (
    parse_listen_address,
    parse_stats_address,
)

DEFAULT_STATS_ADDRESS: str = "localhost:22222"
DEFAULT_TIMEOUT_SECONDS: float = 2.0
DEFAULT_LISTEN_ADDRESS: str = ":9151"
DEFAULT_TELEMETRY_PATH: str = "/metrics"
_RESERVED_PATHS: frozenset[str] = frozenset({"/", "/health"})
_NAMESPACE_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


class ModelExporterConfig(BaseModel):
    """Configuration for the twemproxy exporter.

    Attributes:
        stats_address: Stats address of twemproxy (default "localhost:22222")
        timeout_seconds: Timeout for the stats request; 0 means the default
            of 2 seconds, never "no timeout"
        listen_address: Address to serve telemetry on (default ":9151")
        telemetry_path: Path under which metrics are exposed (default "/metrics")
        namespace: Metric name prefix (default "twemproxy_exporter")

    Example:
        >>> config = ModelExporterConfig(stats_address="10.0.0.5:22222")
        >>> config.stats_endpoint.port
        22222
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    stats_address: str = Field(
        default=DEFAULT_STATS_ADDRESS,
        description="Stats address of twemproxy",
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        ge=0.0,
        description="Timeout for the stats request in seconds",
    )
    listen_address: str = Field(
        default=DEFAULT_LISTEN_ADDRESS,
        description="Address to listen on for telemetry",
    )
    telemetry_path: str = Field(
        default=DEFAULT_TELEMETRY_PATH,
        description="Path under which to expose metrics",
    )
    namespace: str = Field(
        default=DEFAULT_NAMESPACE,
        description="Metric name prefix",
    )

    @field_validator("timeout_seconds")
    @classmethod
    def default_zero_timeout(cls, v: float) -> float:
        # Zero falls back to the default rather than disabling the timeout.
        if v == 0:
            return DEFAULT_TIMEOUT_SECONDS
        return v

    @field_validator("stats_address")
    @classmethod
    def validate_stats_address(cls, v: str) -> str:
        try:
            parse_stats_address(v)
        except ProtocolConfigurationError as e:
            raise ValueError(e.message) from e
        return v

    @field_validator("listen_address")
    @classmethod
    def validate_listen_address(cls, v: str) -> str:
        try:
            parse_listen_address(v)
        except ProtocolConfigurationError as e:
            raise ValueError(e.message) from e
        return v

    @field_validator("telemetry_path")
    @classmethod
    def validate_telemetry_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"Telemetry path '{v}' must start with '/'")
        if v in _RESERVED_PATHS:
            raise ValueError(f"Telemetry path '{v}' is reserved")
        return v

    @field_validator("namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        if not _NAMESPACE_PATTERN.match(v):
            raise ValueError(f"Namespace '{v}' is not a valid metric name prefix")
        return v

    @property
    def stats_endpoint(self) -> ModelStatsEndpoint:
        return parse_stats_address(self.stats_address)

    @property
    def listen_host_port(self) -> tuple[str, int]:
        return parse_listen_address(self.listen_address)


def load_exporter_config(**values: object) -> ModelExporterConfig:
    """Build the exporter config, converting validation failures.

    Args:
        **values: Config field values; omitted or None values use defaults.

    Returns:
        The validated configuration.

    Raises:
        ProtocolConfigurationError: If any value is invalid.
    """
    provided = {key: value for key, value in values.items() if value is not None}
    try:
        return ModelExporterConfig(**provided)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        context = ModelExporterErrorContext(
            transport_type=EnumTransportType.RUNTIME,
            operation="load_exporter_config",
        )
        raise ProtocolConfigurationError(
            f"Invalid exporter configuration: {problems}",
            context=context,
        ) from e


__all__: list[str] = [
    "ModelExporterConfig",
    "load_exporter_config",
    "DEFAULT_STATS_ADDRESS",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_LISTEN_ADDRESS",
    "DEFAULT_TELEMETRY_PATH",
    "DEFAULT_NAMESPACE",
]
