"""Namespaces backed by live Python objects.

`ObjectNamespace` wraps anything with an attribute table (modules, classes,
plain instances) and goes through ``getattr``/``setattr``, so class
inheritance and module ``__getattr__`` hooks behave as usual for lookups.
`MappingNamespace` wraps a bare mutable mapping such as the ``globals()`` of
a script that is not registered in ``sys.modules``.

`PythonNamespaceResolver` accepts any of those, or a dotted name rooted in a
module that is already loaded (``"pkg.mod"``, ``"pkg.mod:Class"``,
``"pkg.mod.Class"``). It never imports anything: a module has to be imported
by its owner before callables can be installed into it by name.
"""

from __future__ import annotations

import inspect
import logging
import sys
import types
from collections.abc import Callable, MutableMapping
from typing import Any

from subinstall.interfaces.errors import NamespaceNotFoundError
from subinstall.interfaces.namespace import Namespace, NamespaceResolver

logger = logging.getLogger(__name__)


def _display_name(obj: object) -> str:
    if isinstance(obj, types.ModuleType):
        return obj.__name__
    if isinstance(obj, type):
        if obj.__module__ == "builtins":
            return obj.__qualname__
        return f"{obj.__module__}.{obj.__qualname__}"
    return f"<{type(obj).__qualname__} object at {id(obj):#x}>"


class ObjectNamespace(Namespace):
    """Namespace over the attribute table of a module, class or instance."""

    def __init__(self, target: object) -> None:
        if not hasattr(target, "__dict__"):
            raise NamespaceNotFoundError(target)
        self.target = target

    @property
    def name(self) -> str:
        return _display_name(self.target)

    def lookup(self, name: str) -> Any | None:
        return getattr(self.target, name, None)

    def own(self, name: str) -> Any | None:
        # class __dict__ is a read-only mappingproxy, vars() covers both cases
        return vars(self.target).get(name)

    def bind(self, name: str, value: Any) -> None:
        setattr(self.target, name, value)

    def as_method(self, func: Callable[..., Any]) -> Any:
        if isinstance(self.target, type):
            # bound to whichever class (or subclass) it is called through
            return classmethod(func)
        return super().as_method(func)

    def for_invocant(self, invocant: object) -> Namespace:
        if invocant is self or invocant is self.target:
            return self
        return ObjectNamespace(invocant)


class MappingNamespace(Namespace):
    """Namespace over a bare mutable mapping (e.g. a script's ``globals()``)."""

    def __init__(self, mapping: MutableMapping[str, Any], name: str | None = None):
        self.mapping = mapping
        self._name = name or str(mapping.get("__name__", "<mapping>"))

    @property
    def name(self) -> str:
        return self._name

    def lookup(self, name: str) -> Any | None:
        return self.mapping.get(name)

    def own(self, name: str) -> Any | None:
        return self.mapping.get(name)

    def bind(self, name: str, value: Any) -> None:
        self.mapping[name] = value


def _namespace_for_globals(globals_: MutableMapping[str, Any]) -> Namespace:
    module = sys.modules.get(str(globals_.get("__name__")))
    if module is not None and vars(module) is globals_:
        return ObjectNamespace(module)
    return MappingNamespace(globals_)


class PythonNamespaceResolver(NamespaceResolver):
    """Resolves live Python objects and dotted names to namespaces."""

    def resolve(self, target: object) -> Namespace:
        if isinstance(target, Namespace):
            return target
        if isinstance(target, str):
            return ObjectNamespace(self._find_loaded(target))
        if isinstance(target, MutableMapping):
            return _namespace_for_globals(target)
        return ObjectNamespace(target)

    @staticmethod
    def _find_loaded(dotted: str) -> object:
        obj: object | None
        module_name, colon, attr_path = dotted.partition(":")
        if colon:
            obj = sys.modules.get(module_name)
            attrs = attr_path.split(".") if attr_path else []
        else:
            # longest prefix naming a loaded module, the rest are attributes
            parts = dotted.split(".")
            attrs = []
            for cut in range(len(parts), 0, -1):
                obj = sys.modules.get(".".join(parts[:cut]))
                if obj is not None:
                    attrs = parts[cut:]
                    break
        if obj is None:
            logger.debug("Namespace %r names no loaded module", dotted)
            raise NamespaceNotFoundError(dotted)
        for attr in attrs:
            try:
                obj = getattr(obj, attr)
            except AttributeError as e:
                logger.debug("Could not resolve namespace %r: %s", dotted, e)
                raise NamespaceNotFoundError(dotted) from e
        return obj


def caller_namespace(stacklevel: int = 1) -> Namespace:
    """Return the module namespace of a function on the call stack.

    Args:
        stacklevel: As for ``warnings.warn``: 1 is the code calling
            `caller_namespace`, 2 is whoever called that, and so on.

    Returns:
        The caller's module as an `ObjectNamespace` when it is a registered
        module, otherwise its globals as a `MappingNamespace`.

    Raises:
        NamespaceNotFoundError: If the stack is not that deep.
    """
    frame = inspect.currentframe()
    try:
        for _ in range(stacklevel):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            raise NamespaceNotFoundError(f"<caller at stacklevel {stacklevel}>")
        globals_ = frame.f_globals
    finally:
        del frame
    return _namespace_for_globals(globals_)
