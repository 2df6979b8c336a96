# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Address parsing utilities.

Parses the ``host:port`` strings accepted on the command line into typed
values. Parsing happens once at startup; failures raise
ProtocolConfigurationError, which is fatal.

Accepted stats address forms:
    - ``host:port``
    - ``[ipv6]:port``
    - ``tcp://host:port``

Accepted listen address forms:
    - ``host:port``
    - ``:port`` (all interfaces)
"""

from __future__ import annotations

from urllib.parse import urlsplit

from twemproxy_exporter.enums import EnumTransportType
from twemproxy_exporter.errors import (
    ModelExporterErrorContext,
    ProtocolConfigurationError,
)
from twemproxy_exporter.models.model_stats_endpoint import ModelStatsEndpoint

_ALL_INTERFACES: str = "0.0.0.0"  # noqa: S104 - listen on every interface


def _split_host_port(
    address: str,
    operation: str,
    *,
    allow_empty_host: bool = False,
) -> tuple[str, int]:
    context = ModelExporterErrorContext(
        transport_type=EnumTransportType.RUNTIME,
        operation=operation,
        target_name=address,
    )
    raw = address.strip()
    if "://" in raw:
        parsed = urlsplit(raw)
        if parsed.scheme != "tcp":
            raise ProtocolConfigurationError(
                f"Unsupported scheme '{parsed.scheme}' in address '{address}'",
                context=context,
            )
        if parsed.path not in ("", "/") or parsed.query or parsed.fragment:
            raise ProtocolConfigurationError(
                f"Address '{address}' must not carry a path or query",
                context=context,
            )
        raw = parsed.netloc

    host, sep, port_text = raw.rpartition(":")
    if not sep:
        raise ProtocolConfigurationError(
            f"Address '{address}' is missing a port",
            context=context,
        )
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ProtocolConfigurationError(
            f"IPv6 host in address '{address}' must be bracketed",
            context=context,
        )
    if not host and not allow_empty_host:
        raise ProtocolConfigurationError(
            f"Address '{address}' is missing a host",
            context=context,
        )

    try:
        port = int(port_text)
    except ValueError:
        raise ProtocolConfigurationError(
            f"Invalid port '{port_text}' in address '{address}'",
            context=context,
        ) from None
    if not 1 <= port <= 65535:
        raise ProtocolConfigurationError(
            f"Port {port} in address '{address}' is out of range",
            context=context,
        )
    return host, port


def parse_stats_address(address: str) -> ModelStatsEndpoint:
    """Parse the twemproxy stats address.

    Args:
        address: Address string, e.g. ``localhost:22222``.

    Returns:
        The parsed endpoint.

    Raises:
        ProtocolConfigurationError: If the address cannot be parsed.

    Example:
        >>> parse_stats_address("tcp://10.0.0.5:22222").address
        '10.0.0.5:22222'
    """
    host, port = _split_host_port(address, "parse_stats_address")
    return ModelStatsEndpoint(host=host, port=port)


def parse_listen_address(address: str) -> tuple[str, int]:
    """Parse the HTTP listen address.

    An empty host (``:9151``) means all interfaces.

    Raises:
        ProtocolConfigurationError: If the address cannot be parsed.
    """
    host, port = _split_host_port(
        address,
        "parse_listen_address",
        allow_empty_host=True,
    )
    return host or _ALL_INTERFACES, port


__all__: list[str] = ["parse_stats_address", "parse_listen_address"]
