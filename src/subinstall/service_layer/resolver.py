"""Normalize a binding request into a concrete callable, namespace and name.

A request names what to install (``code``), where (``into``), where to look
``code`` up when it is given by name (``from``) and under which name (``as``).
``from`` and ``as`` are keywords in Python, so the dataclass spells them
``from_`` and ``as_``; the configuration mapping accepted by
`resolve_request` uses the plain keys.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from subinstall.interfaces.errors import (
    CodeNotFoundError,
    InvalidNameError,
    MissingArgumentError,
    MissingNameError,
    UnknownOptionError,
)
from subinstall.interfaces.namespace import Namespace, NamespaceResolver

logger = logging.getLogger(__name__)

OPTION_KEYS = frozenset({"code", "into", "from", "as"})


@dataclass(frozen=True, slots=True)
class BindingRequest:
    """Raw, unresolved installation request.

    Conventions:
      - `code` is a callable (or a ``classmethod`` wrapping one) or the
        name of one to look up in `from_`.
      - `into` / `from_` are namespace identifiers; ``None`` means the
        caller's namespace.
      - `as_` is the destination name; ``None`` means "infer it".
    """

    code: Callable[..., Any] | str | None
    into: object = None
    from_: object = None
    as_: str | None = None

    @classmethod
    def from_mapping(cls, arg: Mapping[str, Any]) -> BindingRequest:
        """Build a request from a ``{"code", "into", "from", "as"}`` mapping.

        Raises:
            UnknownOptionError: If the mapping has any other key.
        """
        if unknown := set(arg) - OPTION_KEYS:
            raise UnknownOptionError(sorted(unknown))
        return cls(
            code=arg.get("code"),
            into=arg.get("into"),
            from_=arg.get("from"),
            as_=arg.get("as"),
        )


@dataclass(frozen=True, slots=True)
class ResolvedBinding:
    """A request after resolution: everything needed to perform the write."""

    code: Callable[..., Any]
    namespace: Namespace
    name: str

    @property
    def fullname(self) -> str:
        """Qualified destination, e.g. ``"pkg.mod.launder"``."""
        return self.namespace.qualify(self.name)


def callable_name(code: Callable[..., Any]) -> str | None:
    """Return the name a callable was defined under, if it has a usable one.

    ``functools.partial`` objects report the name of the function they wrap.
    Anonymous callables (lambdas, ``<genexpr>`` and friends) have no usable
    name and yield ``None``.
    """
    while isinstance(code, functools.partial):
        code = code.func
    name = getattr(code, "__name__", None)
    if not isinstance(name, str) or not name or name.startswith("<"):
        return None
    return name


def _resolve_namespace(
    target: object, option: str, resolver: NamespaceResolver, caller: Namespace | None
) -> Namespace:
    if target is None:
        if caller is None:
            raise MissingArgumentError(option)
        return caller
    return resolver.resolve(target)


def resolve_request(
    arg: Mapping[str, Any] | BindingRequest,
    resolver: NamespaceResolver,
    caller: Namespace | None = None,
) -> ResolvedBinding:
    """Resolve a binding request.

    Args:
        arg: A `BindingRequest` or a configuration mapping with keys
            ``code`` (required), ``into``, ``from`` and ``as``.
        resolver: Turns ``into`` / ``from`` identifiers into namespaces.
        caller: Namespace used when ``into`` or ``from`` is omitted.

    Returns:
        ResolvedBinding: The concrete callable, target namespace and name.

    Raises:
        UnknownOptionError: If the mapping carries unrecognized keys.
        MissingArgumentError: If ``code`` is missing, or ``into``/``from`` is
            needed but missing and no caller namespace is known.
        CodeNotFoundError: If ``code`` names nothing callable in ``from``.
        MissingNameError: If no destination name can be determined.
        InvalidNameError: If the destination name is not an identifier.
        NamespaceNotFoundError: If a namespace identifier cannot be resolved.
    """
    if isinstance(arg, BindingRequest):
        request = arg
    else:
        request = BindingRequest.from_mapping(arg)

    if not request.code:
        raise MissingArgumentError("code")

    into = _resolve_namespace(request.into, "into", resolver, caller)
    name = request.as_

    if isinstance(request.code, str):
        source = _resolve_namespace(request.from_, "from", resolver, caller)
        code = source.lookup(request.code)
        if code is None or not callable(code):
            raise CodeNotFoundError(request.code, source.name)
        if not name:
            name = request.code
    elif callable(request.code) or isinstance(request.code, classmethod):
        code = request.code
        if not name:
            name = callable_name(code)
    else:
        raise CodeNotFoundError(repr(request.code), "<code argument>")

    if not name:
        raise MissingNameError(code)
    if not isinstance(name, str) or not name.isidentifier():
        raise InvalidNameError(name)

    logger.debug("Resolved %r to %s", code, into.qualify(name))
    return ResolvedBinding(code=code, namespace=into, name=name)
