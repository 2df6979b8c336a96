# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Logging bootstrap for the exporter process."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV_VAR: str = "TWEMPROXY_EXPORTER_LOG_LEVEL"
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

_VALID_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)


def resolve_log_level(raw_level: str | None) -> str:
    """Return a valid level name for ``raw_level``, warning on bad input.

    Args:
        raw_level: Level name from the environment, any case, or None.

    Returns:
        Upper-case level name; INFO when unset or invalid.
    """
    log_level = (raw_level or "INFO").upper()
    if log_level not in _VALID_LEVELS:
        print(
            f"Warning: Invalid {LOG_LEVEL_ENV_VAR} '{log_level}', using INFO. "
            f"Valid levels: {', '.join(sorted(_VALID_LEVELS))}",
            file=sys.stderr,
        )
        log_level = "INFO"
    return log_level


def configure_logging() -> None:
    """Configure root logging from the environment.

    Logging is configured from ``TWEMPROXY_EXPORTER_LOG_LEVEL`` before any CLI
    config is validated, so that config errors can themselves be logged.

    Log Format Example:
        2025-01-15 10:30:45 [INFO] twemproxy_exporter.cli.commands: Starting twemproxy_exporter 0.1.0
    """
    log_level = resolve_log_level(os.getenv(LOG_LEVEL_ENV_VAR))
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


__all__: list[str] = [
    "LOG_LEVEL_ENV_VAR",
    "configure_logging",
    "resolve_log_level",
]
