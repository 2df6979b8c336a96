# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Two-level decoder for the twemproxy stats document.

The stats document has no discriminator field. At the root and at every pool,
a closed set of fixed keys sits next to an open set of child objects:

    {
        "service": "nutcracker", ..., "curr_connections": 5,   <- fixed root keys
        "alpha": {                                              <- pool
            "client_eof": 65, ..., "fragments": 0,              <- fixed pool keys
            "memcached-1": {"server_eof": 0, ...},              <- server
        },
    }

Decode procedure, applied the same way at root and pool level:
    1. Parse the bytes into an untyped mapping.
    2. Pop every fixed field and coerce it to its declared type.
    3. Decode every remaining key as a child one level down.

A key is a child iff it is not a fixed field, so classification is exhaustive
and independent of key order. Server objects are terminal: leftover keys are an
error there. Missing fields are an error at every level; nothing is defaulted.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Optional, Union
from uuid import UUID

from twemproxy_exporter.enums import EnumTransportType
from twemproxy_exporter.errors import (
    FieldTypeMismatchError,
    MalformedResponseError,
    MissingFieldError,
    ModelExporterErrorContext,
    UnexpectedFieldError,
)
from twemproxy_exporter.models import (
    ModelPoolSnapshot,
    ModelServerSnapshot,
    ModelStatsSnapshot,
)

_NUMBER: str = "number"
_STRING: str = "string"
_OBJECT: str = "object"

ROOT_FIELDS: Mapping[str, str] = {
    "service": _STRING,
    "source": _STRING,
    "version": _STRING,
    "uptime": _NUMBER,
    "timestamp": _NUMBER,
    "total_connections": _NUMBER,
    "curr_connections": _NUMBER,
}

POOL_FIELDS: Mapping[str, str] = {
    "client_eof": _NUMBER,
    "client_err": _NUMBER,
    "client_connections": _NUMBER,
    "server_ejects": _NUMBER,
    "forward_error": _NUMBER,
    "fragments": _NUMBER,
}

SERVER_FIELDS: Mapping[str, str] = {
    "server_eof": _NUMBER,
    "server_err": _NUMBER,
    "server_timedout": _NUMBER,
    "server_connections": _NUMBER,
    "server_ejected_at": _NUMBER,
    "requests": _NUMBER,
    "request_bytes": _NUMBER,
    "responses": _NUMBER,
    "response_bytes": _NUMBER,
    "in_queue": _NUMBER,
    "in_queue_bytes": _NUMBER,
    "out_queue": _NUMBER,
    "out_queue_bytes": _NUMBER,
}


def _json_type_name(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return _NUMBER
    if isinstance(value, str):
        return _STRING
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return _OBJECT
    return type(value).__name__


def _coerce(
    field: str,
    value: object,
    expected_type: str,
    context: ModelExporterErrorContext,
    path: Mapping[str, str],
) -> Union[str, float]:
    if expected_type == _NUMBER:
        # bool is an int subclass but JSON true/false is not a number.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                return float(value)
            except OverflowError as e:
                raise FieldTypeMismatchError(
                    field,
                    expected_type,
                    "number out of range",
                    context=context,
                    **path,
                ) from e
    elif expected_type == _STRING:
        if isinstance(value, str):
            return value
    raise FieldTypeMismatchError(
        field,
        expected_type,
        _json_type_name(value),
        context=context,
        **path,
    )


def _as_object(
    key: str,
    value: object,
    context: ModelExporterErrorContext,
    path: Mapping[str, str],
) -> Mapping[str, object]:
    if not isinstance(value, dict):
        raise FieldTypeMismatchError(
            key,
            _OBJECT,
            _json_type_name(value),
            context=context,
            **path,
        )
    return value


def _split_fields(
    document: Mapping[str, object],
    fields: Mapping[str, str],
    context: ModelExporterErrorContext,
    path: Mapping[str, str],
) -> tuple[dict[str, Union[str, float]], dict[str, object]]:
    """Pop the fixed fields out of a copy of ``document``.

    Returns:
        The coerced fixed values and the remaining (child) entries.
    """
    remainder = dict(document)
    values: dict[str, Union[str, float]] = {}
    for field, expected_type in fields.items():
        if field not in remainder:
            raise MissingFieldError(field, context=context, **path)
        values[field] = _coerce(
            field, remainder.pop(field), expected_type, context, path
        )
    return values, remainder


def _decode_server(
    pool_name: str,
    server_name: str,
    document: Mapping[str, object],
    context: ModelExporterErrorContext,
) -> ModelServerSnapshot:
    path = {"pool": pool_name, "server": server_name}
    values, remainder = _split_fields(document, SERVER_FIELDS, context, path)
    if remainder:
        # Sorted so the reported key does not depend on document order.
        raise UnexpectedFieldError(min(remainder), context=context, **path)
    return ModelServerSnapshot(**values)


def _decode_pool(
    pool_name: str,
    document: Mapping[str, object],
    context: ModelExporterErrorContext,
) -> ModelPoolSnapshot:
    path = {"pool": pool_name}
    values, remainder = _split_fields(document, POOL_FIELDS, context, path)
    servers = {
        server_name: _decode_server(
            pool_name,
            server_name,
            _as_object(server_name, server_document, context, path),
            context,
        )
        for server_name, server_document in remainder.items()
    }
    return ModelPoolSnapshot(**values, servers=servers)


def parse_document(
    raw: Union[bytes, str],
    correlation_id: Optional[UUID] = None,
) -> dict[str, object]:
    """Parse raw stats bytes into an untyped JSON object.

    Raises:
        MalformedResponseError: Not valid JSON, or not a JSON object.
    """
    context = ModelExporterErrorContext(
        transport_type=EnumTransportType.RUNTIME,
        operation="parse_stats",
        correlation_id=correlation_id,
    )
    try:
        document = json.loads(raw)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        raise MalformedResponseError(
            f"Stats response is not valid JSON: {e}",
            context=context,
        ) from e
    if not isinstance(document, dict):
        raise MalformedResponseError(
            f"Stats response must be a JSON object, got {_json_type_name(document)}",
            context=context,
        )
    return document


def decode_stats(
    raw: Union[bytes, str],
    correlation_id: Optional[UUID] = None,
) -> ModelStatsSnapshot:
    """Decode a raw stats document into a snapshot.

    Args:
        raw: Bytes (or text) of one JSON document.
        correlation_id: Scrape correlation ID attached to raised errors.

    Returns:
        The decoded snapshot with every pool and server of the document.

    Raises:
        MalformedResponseError: Not a single JSON object.
        MissingFieldError: A fixed field is absent at some level.
        FieldTypeMismatchError: A fixed field has the wrong JSON type, or a
            pool/server entry is not an object.
        UnexpectedFieldError: A server object has keys outside its fixed set.
    """
    return decode_document(parse_document(raw, correlation_id), correlation_id)


def decode_document(
    document: Mapping[str, object],
    correlation_id: Optional[UUID] = None,
) -> ModelStatsSnapshot:
    """Decode an already-parsed stats document. The input is not modified."""
    context = ModelExporterErrorContext(
        transport_type=EnumTransportType.RUNTIME,
        operation="decode_stats",
        correlation_id=correlation_id,
    )
    values, remainder = _split_fields(document, ROOT_FIELDS, context, {})
    pools = {
        pool_name: _decode_pool(
            pool_name,
            _as_object(pool_name, pool_document, context, {}),
            context,
        )
        for pool_name, pool_document in remainder.items()
    }
    return ModelStatsSnapshot(**values, pools=pools)


__all__: list[str] = [
    "ROOT_FIELDS",
    "POOL_FIELDS",
    "SERVER_FIELDS",
    "decode_document",
    "decode_stats",
    "parse_document",
]
