"""Give a namespace its own ``install_sub`` / ``reinstall_sub`` methods.

After ``install_installers(installer, target)`` the target can install into
itself with a plain ``{name: code}`` mapping::

    Builder.install_sub({"launder": launder})
    Builder.reinstall_sub({"launder": "clean"})  # looked up in the caller

String values are looked up in the namespace of the code calling the method.
The namespace the method is called on is the one installed into: on classes
the methods are ``classmethod``s, so ``Child.install_sub(...)`` installs into
``Child`` even when the methods were installed on a base class.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from subinstall.interfaces.namespace import Namespace

from .installers import Installer, InstallPolicy

logger = logging.getLogger(__name__)

INSTALLER_METHODS: Mapping[str, InstallPolicy] = {
    "install_sub": InstallPolicy.INSTALL,
    "reinstall_sub": InstallPolicy.REINSTALL,
}


def _make_method(
    installer: Installer,
    target: Namespace,
    method: str,
    policy: InstallPolicy,
    caller_lookup: Callable[[], Namespace | None],
) -> Callable[[object, Mapping[str, Any]], Any]:
    def installer_method(invocant: object, subs: Mapping[str, Any]) -> Any:
        into = target.for_invocant(invocant)
        caller = caller_lookup()
        installed = None
        for name, code in subs.items():
            installed = installer.install(
                {"code": code, "into": into, "from": caller, "as": name},
                policy,
                caller=caller,
            )
        return installed

    installer_method.__name__ = method
    installer_method.__qualname__ = f"{target.name}.{method}"
    installer_method.__doc__ = (
        f"Install each ``name: code`` pair of `subs` into the namespace this is "
        f"called on ({policy.value} policy) and return the last installed "
        f"callable."
    )
    return installer_method


def install_installers(
    installer: Installer,
    target: Namespace,
    caller_lookup: Callable[[], Namespace | None] = lambda: None,
) -> None:
    """Install ``install_sub`` and ``reinstall_sub`` methods on `target`.

    The methods themselves are installed with the ``install`` policy, so
    repeating the call reports a redefinition like any other collision.

    Args:
        installer: Installer doing the actual work, now and on every method
            call.
        target: Namespace receiving the methods.
        caller_lookup: Called on each method invocation to find the namespace
            string codes are looked up in.
    """
    for method, policy in INSTALLER_METHODS.items():
        code = _make_method(installer, target, method, policy, caller_lookup)
        # one frame more than a direct install: whoever called us
        installer.install(
            {"code": target.as_method(code), "into": target, "as": method},
            extra_frames=1,
        )
        logger.debug("Installed %s installer on %s", method, target.name)
