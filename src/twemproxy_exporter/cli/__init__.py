# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Twemproxy exporter command line interface."""

from twemproxy_exporter.cli.commands import cli, main

__all__: list[str] = ["cli", "main"]
