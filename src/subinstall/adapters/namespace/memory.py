"""In-memory Namespace implementation for testing purposes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from subinstall.interfaces.errors import NamespaceNotFoundError
from subinstall.interfaces.namespace import Namespace, NamespaceResolver


class InMemoryNamespace(Namespace):
    """Dict-backed namespace with optional parents for inherited lookups.

    Note: This implementation is not thread-safe and is intended
    solely for use in single-threaded test scenarios
    """

    def __init__(
        self,
        name: str,
        bindings: dict[str, Any] | None = None,
        parents: Iterable[InMemoryNamespace] = (),
    ) -> None:
        self._name = name
        self.bindings: dict[str, Any] = dict(bindings or {})
        self.parents: list[InMemoryNamespace] = list(parents)

    @property
    def name(self) -> str:
        return self._name

    # --- lookups ---

    def own(self, name: str) -> Any | None:
        return self.bindings.get(name)

    def lookup(self, name: str) -> Any | None:
        if (value := self.own(name)) is not None:
            return value
        # depth-first, left-to-right, like a classic package search path
        for parent in self.parents:
            if (value := parent.lookup(name)) is not None:
                return value
        return None

    # --- writes ---

    def bind(self, name: str, value: Any) -> None:
        self.bindings[name] = value


class InMemoryNamespaceResolver(NamespaceResolver):
    """Resolves namespace names to `InMemoryNamespace` instances.

    Unknown names are created on first use, the way packages spring into
    existence the first time something is installed into them. Pass
    ``autocreate=False`` to raise `NamespaceNotFoundError` instead.
    """

    def __init__(self, *, autocreate: bool = True) -> None:
        self.namespaces: dict[str, InMemoryNamespace] = {}
        self._autocreate = autocreate

    def add(self, namespace: InMemoryNamespace) -> InMemoryNamespace:
        """Register `namespace` under its own name and return it."""
        self.namespaces[namespace.name] = namespace
        return namespace

    def resolve(self, target: object) -> Namespace:
        if isinstance(target, Namespace):
            return target
        if not isinstance(target, str) or not target:
            raise NamespaceNotFoundError(target)
        if (namespace := self.namespaces.get(target)) is not None:
            return namespace
        if not self._autocreate:
            raise NamespaceNotFoundError(target)
        return self.add(InMemoryNamespace(target))
