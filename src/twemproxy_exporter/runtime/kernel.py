# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Exporter process kernel.

Wires the exporter service, the Prometheus registry and the metrics server
together and runs them until SIGINT or SIGTERM.

Bootstrap Order:
    1. Build ServiceStatsExporter from the validated config
    2. Build a registry with the twemproxy collector
    3. Start MetricsServer on the listen address
    4. Wait for a shutdown signal, then stop the server

Exit Codes:
    0: Clean shutdown
    1: Metrics server failed to start or unexpected failure
"""

from __future__ import annotations

import asyncio
import logging
import signal
import sys
from typing import Optional
from uuid import uuid4

from twemproxy_exporter import __version__
from twemproxy_exporter.errors import ExporterRuntimeError
from twemproxy_exporter.observability import build_registry
from twemproxy_exporter.runtime.metrics_server import MetricsServer
from twemproxy_exporter.runtime.model_exporter_config import ModelExporterConfig
from twemproxy_exporter.services import ServiceStatsExporter

logger = logging.getLogger(__name__)


def _install_signal_handlers(
    loop: asyncio.AbstractEventLoop,
    shutdown_event: asyncio.Event,
) -> None:
    def handle_shutdown(sig: signal.Signals) -> None:
        logger.info("Received %s, shutting down", sig.name)
        shutdown_event.set()

    if sys.platform != "win32":
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, handle_shutdown, sig)
    else:
        # Windows has no loop signal handlers; the handler runs off-loop.
        def windows_handler(signum: int, frame: object) -> None:
            sig = signal.Signals(signum)
            logger.info("Received %s, shutting down", sig.name)
            loop.call_soon_threadsafe(shutdown_event.set)

        signal.signal(signal.SIGINT, windows_handler)


async def run_exporter(
    config: ModelExporterConfig,
    shutdown_event: Optional[asyncio.Event] = None,
) -> int:
    """Run the exporter until ``shutdown_event`` is set or a signal arrives.

    Args:
        config: Validated exporter configuration.
        shutdown_event: Event that stops the exporter when set. When omitted,
            SIGINT/SIGTERM handlers are installed to set an internal event.

    Returns:
        Process exit code.
    """
    correlation_id = uuid4()
    host, port = config.listen_host_port

    exporter = ServiceStatsExporter.from_config(config)
    registry = build_registry(exporter)
    server = MetricsServer(
        registry=registry,
        port=port,
        host=host,
        telemetry_path=config.telemetry_path,
        version=__version__,
    )

    if shutdown_event is None:
        shutdown_event = asyncio.Event()
        _install_signal_handlers(asyncio.get_running_loop(), shutdown_event)

    try:
        await server.start()
    except ExporterRuntimeError:
        logger.error(
            "Exporter failed to start (correlation_id=%s)",
            correlation_id,
        )
        return 1

    banner = "\n".join(
        [
            "=" * 60,
            f"twemproxy_exporter v{__version__}",
            f"Stats address: {config.stats_endpoint.address}",
            f"Stats timeout: {config.timeout_seconds}s",
            f"Metrics endpoint: http://{host}:{port}{config.telemetry_path}",
            f"Correlation ID: {correlation_id}",
            "=" * 60,
        ]
    )
    logger.info("\n%s", banner)

    try:
        await shutdown_event.wait()
    finally:
        await server.stop()

    logger.info("twemproxy_exporter stopped (correlation_id=%s)", correlation_id)
    return 0


__all__: list[str] = ["run_exporter"]
