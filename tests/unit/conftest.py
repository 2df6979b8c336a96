# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration for unit tests.

Applies the ``unit`` marker to every test under tests/unit/, so that

    pytest -m unit

selects them without each module setting ``pytestmark``.
"""

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Mark every collected test that lives under tests/unit as ``unit``."""
    unit_marker = pytest.mark.unit
    for item in items:
        if "tests/unit" not in str(item.path):
            continue
        if not any(marker.name == "unit" for marker in item.iter_markers()):
            item.add_marker(unit_marker)
