# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Twemproxy Exporter CLI Commands.

Provides the CLI for running the exporter and for inspecting a single scrape
of the twemproxy stats endpoint.

Every option also reads a TWEMPROXY_EXPORTER_* environment variable.
"""

from __future__ import annotations

import asyncio
import logging
import re

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from twemproxy_exporter import __version__
from twemproxy_exporter.errors import ProtocolConfigurationError
from twemproxy_exporter.models import ModelCollectResult
from twemproxy_exporter.runtime import (
    ModelExporterConfig,
    load_exporter_config,
    run_exporter,
)
from twemproxy_exporter.runtime.model_exporter_config import (
    DEFAULT_LISTEN_ADDRESS,
    DEFAULT_STATS_ADDRESS,
    DEFAULT_TELEMETRY_PATH,
    DEFAULT_TIMEOUT_SECONDS,
)
from twemproxy_exporter.services import ServiceStatsExporter
from twemproxy_exporter.services.metric_table import DEFAULT_NAMESPACE
from twemproxy_exporter.utils import configure_logging

console = Console()
logger = logging.getLogger(__name__)

_ENV_PREFIX = "TWEMPROXY_EXPORTER"
_DURATION_PATTERN = re.compile(r"^(?P<value>\d+(?:\.\d+)?)(?P<unit>ms|s|m|h)?$")
_DURATION_UNITS: dict[str, float] = {"ms": 0.001, "s": 1.0, "m": 60.0, "h": 3600.0}


class DurationParamType(click.ParamType):
    """Duration in seconds, written as ``2``, ``2s``, ``1.5s``, ``500ms`` or ``1m``."""

    name = "duration"

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> float:
        if isinstance(value, (int, float)):
            return float(value)
        match = _DURATION_PATTERN.match(str(value).strip())
        if match is None:
            self.fail(f"{value!r} is not a valid duration", param, ctx)
        unit = match.group("unit") or "s"
        return float(match.group("value")) * _DURATION_UNITS[unit]


DURATION = DurationParamType()


def _stats_options(func):  # type: ignore[no-untyped-def]
    func = click.option(
        "--namespace",
        "namespace",
        default=DEFAULT_NAMESPACE,
        show_default=True,
        envvar=f"{_ENV_PREFIX}_NAMESPACE",
        help="Metric name prefix.",
    )(func)
    func = click.option(
        "--twemproxy.timeout",
        "timeout_seconds",
        type=DURATION,
        default=DEFAULT_TIMEOUT_SECONDS,
        show_default=True,
        envvar=f"{_ENV_PREFIX}_TIMEOUT",
        help="Timeout for request to twemproxy (0 means the default).",
    )(func)
    func = click.option(
        "--twemproxy.stats-address",
        "stats_address",
        default=DEFAULT_STATS_ADDRESS,
        show_default=True,
        envvar=f"{_ENV_PREFIX}_STATS_ADDRESS",
        help="Stats address of twemproxy.",
    )(func)
    return func


def _load_config(**values: object) -> ModelExporterConfig:
    try:
        return load_exporter_config(**values)
    except ProtocolConfigurationError as e:
        raise click.UsageError(e.message) from e


@click.group()
@click.version_option(__version__, prog_name="twemproxy_exporter")
def cli() -> None:
    """Prometheus exporter for twemproxy stats."""


@cli.command("serve")
@_stats_options
@click.option(
    "--web.listen-address",
    "listen_address",
    default=DEFAULT_LISTEN_ADDRESS,
    show_default=True,
    envvar=f"{_ENV_PREFIX}_LISTEN_ADDRESS",
    help="Address to listen on for web interface and telemetry.",
)
@click.option(
    "--web.telemetry-path",
    "telemetry_path",
    default=DEFAULT_TELEMETRY_PATH,
    show_default=True,
    envvar=f"{_ENV_PREFIX}_TELEMETRY_PATH",
    help="Path under which to expose metrics.",
)
def serve_cmd(
    stats_address: str,
    timeout_seconds: float,
    namespace: str,
    listen_address: str,
    telemetry_path: str,
) -> None:
    """Run the exporter HTTP server."""
    config = _load_config(
        stats_address=stats_address,
        timeout_seconds=timeout_seconds,
        namespace=namespace,
        listen_address=listen_address,
        telemetry_path=telemetry_path,
    )
    logger.info(
        "Starting twemproxy_exporter %s",
        __version__,
        extra={"listen_address": config.listen_address},
    )
    raise SystemExit(asyncio.run(run_exporter(config)))


@cli.command("dump")
@_stats_options
def dump_cmd(stats_address: str, timeout_seconds: float, namespace: str) -> None:
    """Scrape twemproxy once and print every observation."""
    config = _load_config(
        stats_address=stats_address,
        timeout_seconds=timeout_seconds,
        namespace=namespace,
    )
    exporter = ServiceStatsExporter.from_config(config)
    result = exporter.collect()
    _print_result(exporter.up_name, config.stats_endpoint.address, result)
    raise SystemExit(0 if result.is_up else 1)


@cli.command("describe")
@click.option(
    "--namespace",
    "namespace",
    default=DEFAULT_NAMESPACE,
    show_default=True,
    envvar=f"{_ENV_PREFIX}_NAMESPACE",
    help="Metric name prefix.",
)
def describe_cmd(namespace: str) -> None:
    """List every metric the exporter can emit."""
    config = _load_config(namespace=namespace)
    exporter = ServiceStatsExporter.from_config(config)

    table = Table(title="Exported metrics")
    table.add_column("Metric", style="cyan")
    table.add_column("Kind")
    table.add_column("Labels")
    table.add_column("Help")
    for descriptor in exporter.describe():
        table.add_row(
            descriptor.full_name(config.namespace),
            descriptor.kind.value,
            ",".join(descriptor.label_names) or "-",
            descriptor.help_text,
        )
    console.print(table)


def _print_result(up_name: str, address: str, result: ModelCollectResult) -> None:
    if not result.is_up:
        console.print(
            f"[red]{up_name} 0[/red] - could not query twemproxy at {escape(address)}"
        )
        return

    table = Table(title=f"twemproxy stats from {escape(address)}")
    table.add_column("Metric", style="cyan")
    table.add_column("Labels")
    table.add_column("Value", justify="right")
    table.add_column("Kind")
    table.add_row(up_name, "-", "1", "gauge")
    for observation in result.observations:
        labels = ",".join(
            f'{name}="{value}"' for name, value in observation.label_dict().items()
        )
        table.add_row(
            observation.name,
            escape(labels) or "-",
            f"{observation.value:g}",
            observation.kind.value,
        )
    console.print(table)
    console.print(f"[green]{len(result.observations)} observations[/green]")


def main() -> None:
    """Console entry point."""
    configure_logging()
    cli()


if __name__ == "__main__":
    main()
