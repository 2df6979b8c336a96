# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP Metrics Server for the exporter.

The server exposes:
    - GET <telemetry path>: Prometheus exposition of the registry (default /metrics)
    - GET /health: Liveness of the exporter process as JSON
    - GET /: Landing page linking to the telemetry path

Rendering the exposition runs the twemproxy collector, which does blocking
socket I/O. It runs in the default executor so concurrent scrapes proceed in
parallel without blocking the event loop.

Example:
    >>> server = MetricsServer(registry=registry, port=9151)
    >>> await server.start()
    >>> # curl http://localhost:9151/metrics
    >>> await server.stop()
"""

from __future__ import annotations

import asyncio
import html
import json
import logging
from typing import Optional

from aiohttp import web
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest

from twemproxy_exporter import __version__
from twemproxy_exporter.enums import EnumTransportType
from twemproxy_exporter.errors import ExporterRuntimeError, ModelExporterErrorContext

logger = logging.getLogger(__name__)

DEFAULT_HTTP_PORT = 9151
DEFAULT_HTTP_HOST = "0.0.0.0"  # noqa: S104 - Required for container networking
DEFAULT_TELEMETRY_PATH = "/metrics"

_INDEX_TEMPLATE = """<html>
<head><title>Twemproxy Exporter</title></head>
<body>
<h1>Twemproxy Exporter</h1>
<p><a href="{path}">Metrics</a></p>
</body>
</html>
"""


class MetricsServer:
    """aiohttp server exposing a Prometheus registry.

    Attributes:
        registry: Registry rendered on the telemetry path
        port: Port to listen on
        host: Host to bind to
        telemetry_path: Path serving the exposition
        version: Exporter version reported by /health
    """

    def __init__(
        self,
        registry: CollectorRegistry,
        port: int = DEFAULT_HTTP_PORT,
        host: str = DEFAULT_HTTP_HOST,
        telemetry_path: str = DEFAULT_TELEMETRY_PATH,
        version: str = __version__,
    ) -> None:
        self._registry: CollectorRegistry = registry
        self._port: int = port
        self._host: str = host
        self._telemetry_path: str = telemetry_path
        self._version: str = version

        self._app: Optional[web.Application] = None
        self._runner: Optional[web.AppRunner] = None
        self._site: Optional[web.TCPSite] = None
        self._is_running: bool = False

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def port(self) -> int:
        return self._port

    @property
    def telemetry_path(self) -> str:
        return self._telemetry_path

    def build_app(self) -> web.Application:
        """Create the aiohttp application with all routes registered."""
        app = web.Application()
        app.router.add_get(self._telemetry_path, self._handle_metrics)
        app.router.add_get("/health", self._handle_health)
        app.router.add_get("/", self._handle_index)
        return app

    async def start(self) -> None:
        """Start listening on the configured host and port.

        Idempotent: calling start() on a running server does nothing.

        Raises:
            ExporterRuntimeError: If the listener cannot be started, e.g. the
                port is already in use.
        """
        if self._is_running:
            logger.debug("MetricsServer already started, skipping")
            return

        context = ModelExporterErrorContext.with_correlation(
            transport_type=EnumTransportType.HTTP,
            operation="start_metrics_server",
            target_name=f"{self._host}:{self._port}",
        )
        correlation_id = context.correlation_id

        try:
            self._app = self.build_app()
            self._runner = web.AppRunner(self._app)
            await self._runner.setup()
            self._site = web.TCPSite(self._runner, self._host, self._port)
            await self._site.start()
        except OSError as e:
            error_msg = (
                f"Failed to start metrics server on {self._host}:{self._port}: {e}"
            )
            logger.exception(
                "%s (correlation_id=%s)",
                error_msg,
                correlation_id,
                extra={"error_type": type(e).__name__, "errno": e.errno},
            )
            await self._cleanup()
            raise ExporterRuntimeError(error_msg, context=context) from e

        self._is_running = True
        logger.info(
            "MetricsServer listening on %s:%s (correlation_id=%s)",
            self._host,
            self._port,
            correlation_id,
            extra={
                "endpoints": [self._telemetry_path, "/health", "/"],
                "version": self._version,
            },
        )

    async def stop(self) -> None:
        """Stop the server and release its resources. Idempotent."""
        if not self._is_running:
            logger.debug("MetricsServer already stopped, skipping")
            return
        await self._cleanup()
        logger.info("MetricsServer stopped")

    async def _cleanup(self) -> None:
        # Reverse order of creation.
        if self._site is not None:
            try:
                await self._site.stop()
            except Exception as e:
                logger.warning(
                    "Error stopping TCPSite during shutdown",
                    extra={"error_type": type(e).__name__, "error": str(e)},
                )
            self._site = None

        if self._runner is not None:
            try:
                await self._runner.cleanup()
            except Exception as e:
                logger.warning(
                    "Error cleaning up AppRunner during shutdown",
                    extra={"error_type": type(e).__name__, "error": str(e)},
                )
            self._runner = None

        self._app = None
        self._is_running = False

    async def _handle_metrics(self, request: web.Request) -> web.Response:
        """Handle GET on the telemetry path."""
        _ = request
        loop = asyncio.get_running_loop()
        body = await loop.run_in_executor(None, generate_latest, self._registry)
        return web.Response(body=body, headers={"Content-Type": CONTENT_TYPE_LATEST})

    async def _handle_health(self, request: web.Request) -> web.Response:
        """Handle GET /health.

        Reports the exporter process only. Whether twemproxy itself is
        reachable is the ``up`` metric's job.
        """
        _ = request
        return web.Response(
            text=json.dumps({"status": "healthy", "version": self._version}),
            content_type="application/json",
        )

    async def _handle_index(self, request: web.Request) -> web.Response:
        _ = request
        return web.Response(
            text=_INDEX_TEMPLATE.format(path=html.escape(self._telemetry_path)),
            content_type="text/html",
        )


__all__: list[str] = [
    "MetricsServer",
    "DEFAULT_HTTP_PORT",
    "DEFAULT_HTTP_HOST",
    "DEFAULT_TELEMETRY_PATH",
]
