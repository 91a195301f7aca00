"""Public functions of subinstall.

Each function resolves omitted ``into`` / ``from`` options to the module that
called it, then delegates to the shared `Installer`::

    from subinstall import install_sub

    install_sub({"code": launder, "into": "finance.shady"})
    install_sub({"code": "twitch", "from": in_pain, "into": teenager, "as": "dance"})

Pass ``resolver=`` and/or ``sink=`` to run against an isolated installer
instead of the process-wide default.
"""

from __future__ import annotations

import functools
import logging
import sys
from collections.abc import Callable, Mapping
from typing import Any

from subinstall.adapters.namespace import ObjectNamespace, caller_namespace
from subinstall.bootstrap import AppContainer, bootstrap
from subinstall.interfaces.diagnostics import DiagnosticSink
from subinstall.interfaces.errors import CodeNotFoundError
from subinstall.interfaces.namespace import Namespace, NamespaceResolver
from subinstall.service_layer import shim
from subinstall.service_layer.installers import Installer, InstallPolicy
from subinstall.service_layer.resolver import BindingRequest

logger = logging.getLogger(__name__)

EXPORTABLE = frozenset(
    {"install_sub", "reinstall_sub", "fatal_install_sub", "install_installers"}
)

Request = Mapping[str, Any] | BindingRequest


@functools.cache
def default_container() -> AppContainer:
    """Return the process-wide container, bootstrapping it on first use."""
    return bootstrap()


def _installer(
    resolver: NamespaceResolver | None, sink: DiagnosticSink | None
) -> Installer:
    if resolver is None and sink is None:
        return default_container().installer
    return bootstrap(resolver=resolver, sink=sink).installer


def _target(installer: Installer, into: object, stacklevel: int) -> Namespace:
    if into is None:
        return caller_namespace(stacklevel + 1)
    return installer.resolver.resolve(into)


def install_sub(
    arg: Request,
    *,
    resolver: NamespaceResolver | None = None,
    sink: DiagnosticSink | None = None,
) -> Callable[..., Any]:
    """Install a callable into a namespace.

    Args:
        arg: Mapping with keys ``code`` (callable, or name to look up in
            ``from``), ``into`` (target namespace, default: calling module),
            ``from`` (source namespace, default: calling module) and ``as``
            (destination name, default: the callable's own name or the looked
            up name).
        resolver: Optional namespace resolver for an isolated run.
        sink: Optional diagnostic sink for an isolated run.

    Returns:
        The installed callable.

    Raises:
        SubInstallError: If the request cannot be resolved.

    Overwriting an existing binding reports a short redefinition notice.
    """
    return _installer(resolver, sink).install(
        arg, InstallPolicy.INSTALL, caller=caller_namespace(2)
    )


def reinstall_sub(
    arg: Request,
    *,
    resolver: NamespaceResolver | None = None,
    sink: DiagnosticSink | None = None,
) -> Callable[..., Any]:
    """Like `install_sub`, but overwrite an existing binding without notice.

    Signature mismatches between the old and new callable are still reported.
    """
    return _installer(resolver, sink).install(
        arg, InstallPolicy.REINSTALL, caller=caller_namespace(2)
    )


def fatal_install_sub(
    arg: Request,
    *,
    resolver: NamespaceResolver | None = None,
    sink: DiagnosticSink | None = None,
) -> Callable[..., Any]:
    """Like `install_sub`, but refuse to overwrite an existing binding.

    Raises:
        RedefinitionRejectedError: If the destination is already bound. The
            existing binding is left in place.
    """
    return _installer(resolver, sink).install(
        arg, InstallPolicy.FATAL, caller=caller_namespace(2)
    )


def install_installers(
    into: object = None,
    *,
    resolver: NamespaceResolver | None = None,
    sink: DiagnosticSink | None = None,
) -> None:
    """Give a namespace ``install_sub`` and ``reinstall_sub`` methods.

    Example:
        ```py
        install_installers(Builder)
        Builder.install_sub({"launder": launder})
        ```

    Args:
        into: Namespace receiving the methods; defaults to the calling module.
        resolver: Optional namespace resolver for an isolated run.
        sink: Optional diagnostic sink for an isolated run.
    """
    installer = _installer(resolver, sink)
    target = _target(installer, into, stacklevel=2)
    # the method frame sits between the lookup and the code calling the method
    shim.install_installers(installer, target, lambda: caller_namespace(3))


def export(
    *names: str,
    into: object = None,
    resolver: NamespaceResolver | None = None,
    sink: DiagnosticSink | None = None,
) -> None:
    """Install the named public functions of this module into a namespace.

    Args:
        *names: Any of ``install_sub``, ``reinstall_sub``,
            ``fatal_install_sub`` and ``install_installers``.
        into: Namespace receiving them; defaults to the calling module.
        resolver: Optional namespace resolver for an isolated run.
        sink: Optional diagnostic sink for an isolated run.

    Raises:
        CodeNotFoundError: If a name is not exportable.
    """
    installer = _installer(resolver, sink)
    target = _target(installer, into, stacklevel=2)
    for name in names:
        if name not in EXPORTABLE:
            raise CodeNotFoundError(name, __name__)
    source = ObjectNamespace(sys.modules[__name__])
    for name in names:
        installer.install({"code": name, "from": source, "into": target})
        logger.debug("Exported %s to %s", name, target.name)
