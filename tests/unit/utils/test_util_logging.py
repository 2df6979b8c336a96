# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for logging bootstrap."""

import logging

import pytest

from twemproxy_exporter.utils.util_logging import (
    LOG_LEVEL_ENV_VAR,
    configure_logging,
    resolve_log_level,
)


class TestResolveLogLevel:
    def test_unset_defaults_to_info(self) -> None:
        assert resolve_log_level(None) == "INFO"

    def test_level_is_case_insensitive(self) -> None:
        assert resolve_log_level("debug") == "DEBUG"

    def test_invalid_level_warns_and_falls_back(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert resolve_log_level("chatty") == "INFO"
        err = capsys.readouterr().err
        assert LOG_LEVEL_ENV_VAR in err
        assert "CHATTY" in err


class TestConfigureLogging:
    def test_reads_level_from_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        root = logging.getLogger()
        saved_handlers = root.handlers[:]
        saved_level = root.level
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "WARNING")
        # basicConfig is a no-op while the root logger has handlers.
        root.handlers = []
        try:
            configure_logging()
            assert root.level == logging.WARNING
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)
