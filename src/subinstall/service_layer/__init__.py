"""Service layer for subinstall.

Holds the installation rules: request resolution (`resolver`), collision
policies and the installer (`installers`), and the installer-method shim
(`shim`). Works only against the ports in `subinstall.interfaces`.
"""

from .installers import Installer, InstallPolicy
from .resolver import BindingRequest, ResolvedBinding, resolve_request

__all__ = [
    "BindingRequest",
    "InstallPolicy",
    "Installer",
    "ResolvedBinding",
    "resolve_request",
]
