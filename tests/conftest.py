"""Global pytest configuration for subinstall.

Registers the shared fixtures and gives every test a default marker named
after the top-level folder it lives in (``unit``, ``contract``, ...), unless
the test already carries that marker.
"""

from __future__ import annotations

from pathlib import Path

import pytest

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.namespaces",
]

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = ("unit", "integration", "functional", "contract")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the folder marker to items under ``tests/<folder>/``."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if TESTS_ROOT not in path.parents:
            continue
        folder = path.relative_to(TESTS_ROOT).parts[0]
        if folder not in FOLDER_MARKERS:
            continue
        if not any(marker.name == folder for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, folder))
