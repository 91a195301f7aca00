"""Fixtures for Namespace contract tests."""

from __future__ import annotations

import types
from collections.abc import Iterator

import pytest

from subinstall.adapters.namespace import (
    InMemoryNamespace,
    MappingNamespace,
    ObjectNamespace,
)
from subinstall.interfaces.namespace import Namespace


@pytest.fixture(params=["memory", "module", "class", "instance", "mapping"])
def namespace(request: pytest.FixtureRequest) -> Iterator[Namespace]:
    """Return a fresh, empty namespace for the requested backend.

    Supported params:
      - `"memory"` → InMemoryNamespace
      - `"module"` → ObjectNamespace over a new module
      - `"class"` → ObjectNamespace over a new class
      - `"instance"` → ObjectNamespace over a plain object
      - `"mapping"` → MappingNamespace over a dict

    Each invocation yields a brand-new namespace for isolation.
    """

    match request.param:
        case "memory":
            yield InMemoryNamespace("contract.memory")
        case "module":
            yield ObjectNamespace(types.ModuleType("contract_module"))
        case "class":
            yield ObjectNamespace(type("ContractClass", (), {}))
        case "instance":
            yield ObjectNamespace(types.SimpleNamespace())
        case "mapping":
            yield MappingNamespace({}, name="contract.mapping")
        case _:
            raise ValueError(f"unknown namespace type: {request.param}")
