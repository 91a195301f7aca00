"""Interfaces for namespaces that callables are installed into.

A `Namespace` is a mutable name -> value table owned by the host runtime
(a module, a class, a plain mapping, ...). subinstall never owns one; it only
reads it for lookups and collision checks and writes a single binding per
installation. A `NamespaceResolver` turns whatever the caller passed as
``into`` / ``from`` into a `Namespace`.
"""

from __future__ import annotations

import abc
import functools
from collections.abc import Callable
from typing import Any

# pylint: disable=too-few-public-methods


class Namespace(abc.ABC):
    """Mutable name -> value table that callables can be bound into."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Display name of the namespace, e.g. ``"pkg.module"``."""

    @abc.abstractmethod
    def lookup(self, name: str) -> Any | None:
        """Find a value by name the way attribute access would.

        Unlike `own`, this follows whatever inheritance the namespace has
        (class MRO, module ``__getattr__``, ...).

        Args:
            name: The name to look up.

        Returns:
            The value bound to `name`, or ``None`` if nothing is reachable.
        """

    @abc.abstractmethod
    def own(self, name: str) -> Any | None:
        """Return the value stored directly in this namespace under `name`.

        Inherited values are not reported.

        Args:
            name: The name to check.

        Returns:
            The directly stored value, or ``None`` if there is none.
        """

    @abc.abstractmethod
    def bind(self, name: str, value: Any) -> None:
        """Store `value` under `name`, replacing any existing binding.

        Args:
            name: Destination name.
            value: Value to store (normally a callable).
        """

    def as_method(self, func: Callable[..., Any]) -> Any:
        """Return `func` prepared to be stored as a method of this namespace.

        `func` always receives the invocant as its first argument. Namespaces
        without one (modules, mappings, ...) pass themselves; class namespaces
        override this to pass the class the method was called through.
        Use `for_invocant` to turn the invocant back into a namespace.
        """
        method = functools.partial(func, self)
        functools.update_wrapper(method, func)
        return method

    def for_invocant(self, invocant: object) -> Namespace:
        """Return the namespace a method stored by `as_method` was invoked on."""
        return self

    def qualify(self, name: str) -> str:
        """Return the fully qualified form of `name` in this namespace."""
        return f"{self.name}.{name}"

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.own(name) is not None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class NamespaceResolver(abc.ABC):
    """Turns a namespace identifier into a `Namespace`."""

    @abc.abstractmethod
    def resolve(self, target: object) -> Namespace:
        """Resolve `target` to a namespace.

        Args:
            target: A namespace identifier. Which identifiers are accepted is
                up to the implementation; a `Namespace` instance is always
                accepted and returned unchanged.

        Returns:
            The namespace identified by `target`.

        Raises:
            NamespaceNotFoundError: If `target` cannot be resolved.
        """
