# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for ModelExporterConfig and load_exporter_config."""

import pytest
from pydantic import ValidationError

from twemproxy_exporter.errors import ProtocolConfigurationError
from twemproxy_exporter.models import ModelStatsEndpoint
from twemproxy_exporter.runtime import ModelExporterConfig, load_exporter_config


class TestModelExporterConfigDefaults:
    def test_defaults(self) -> None:
        config = ModelExporterConfig()
        assert config.stats_address == "localhost:22222"
        assert config.timeout_seconds == 2.0
        assert config.listen_address == ":9151"
        assert config.telemetry_path == "/metrics"
        assert config.namespace == "twemproxy_exporter"

    def test_derived_endpoints(self) -> None:
        config = ModelExporterConfig()
        assert config.stats_endpoint == ModelStatsEndpoint(host="localhost", port=22222)
        assert config.listen_host_port == ("0.0.0.0", 9151)

    def test_is_frozen(self) -> None:
        config = ModelExporterConfig()
        with pytest.raises(ValidationError):
            config.namespace = "other"  # type: ignore[misc]


class TestModelExporterConfigValidation:
    def test_zero_timeout_uses_default(self) -> None:
        assert ModelExporterConfig(timeout_seconds=0).timeout_seconds == 2.0

    def test_fractional_timeout_is_kept(self) -> None:
        assert ModelExporterConfig(timeout_seconds=0.5).timeout_seconds == 0.5

    def test_negative_timeout_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelExporterConfig(timeout_seconds=-1)

    @pytest.mark.parametrize("path", ["metrics", "/", "/health"])
    def test_invalid_telemetry_path(self, path: str) -> None:
        with pytest.raises(ValidationError):
            ModelExporterConfig(telemetry_path=path)

    @pytest.mark.parametrize("namespace", ["1abc", "has-dash", "has space"])
    def test_invalid_namespace(self, namespace: str) -> None:
        with pytest.raises(ValidationError):
            ModelExporterConfig(namespace=namespace)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelExporterConfig(stats_port=22222)  # type: ignore[call-arg]


class TestLoadExporterConfig:
    def test_none_values_use_defaults(self) -> None:
        config = load_exporter_config(stats_address=None, timeout_seconds=None)
        assert config == ModelExporterConfig()

    def test_values_are_applied(self) -> None:
        config = load_exporter_config(
            stats_address="tcp://10.0.0.5:22223",
            listen_address="127.0.0.1:9999",
            namespace="nutcracker",
        )
        assert config.stats_endpoint.port == 22223
        assert config.listen_host_port == ("127.0.0.1", 9999)
        assert config.namespace == "nutcracker"

    def test_invalid_address_raises_configuration_error(self) -> None:
        with pytest.raises(ProtocolConfigurationError) as exc_info:
            load_exporter_config(stats_address="localhost")
        assert "stats_address" in exc_info.value.message
        assert "missing a port" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, ValidationError)
