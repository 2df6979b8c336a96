# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""aiohttp test utilities.

Provides helpers for extracting runtime information from aiohttp servers
during tests.
"""

from __future__ import annotations

import aiohttp

from twemproxy_exporter.runtime import MetricsServer


def get_aiohttp_bound_port(metrics_server: MetricsServer) -> int:
    """Extract the auto-assigned port from a MetricsServer started on port 0.

    aiohttp does not expose the bound port publicly when using port=0, so
    this reads the private ``_site._server.sockets`` chain.

    Raises:
        RuntimeError: If the aiohttp internal attribute chain has changed.
    """
    try:
        site = metrics_server._site
        internal_server = site._server  # type: ignore[union-attr]
        sock = next(iter(internal_server.sockets))  # type: ignore[union-attr]
        return sock.getsockname()[1]  # type: ignore[no-any-return]
    except AttributeError as e:
        msg = (
            f"aiohttp internals changed (currently installed: aiohttp "
            f"{aiohttp.__version__}). The private attribute chain "
            f"(_site._server.sockets) is no longer valid: {e}"
        )
        raise RuntimeError(msg) from e


__all__: list[str] = ["get_aiohttp_bound_port"]
