# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol interface for stats fetchers.

A stats fetcher performs one independent round trip to the stats endpoint per
call and returns the raw bytes of one JSON document.

Stats fetchers MUST:
    - Open a new connection per call and keep no state between calls
    - Raise a StatsFetchError or MalformedResponseError on failure
    - Be thread-safe: concurrent scrapes call fetch() in parallel

Stats fetchers MUST NOT:
    - Log or retry; the caller owns both
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable
from uuid import UUID


@runtime_checkable
class ProtocolStatsFetcher(Protocol):
    """Source of raw stats documents."""

    def fetch(self, correlation_id: Optional[UUID] = None) -> bytes:
        """Fetch one raw stats document."""
        ...


__all__: list[str] = ["ProtocolStatsFetcher"]
