"""Errors raised while resolving and installing bindings."""

from typing import Any


class SubInstallError(Exception):
    """Base class for all subinstall errors."""


# ============================================================================
#                           Request resolution errors
# ============================================================================


class MissingArgumentError(SubInstallError, TypeError):
    """Raised when a required option is absent and cannot be defaulted."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"named argument '{argument}' is not optional")
        self.argument = argument


class UnknownOptionError(SubInstallError, TypeError):
    """Raised when a binding request carries options nobody understands."""

    def __init__(self, options: list[str]) -> None:
        super().__init__(
            "unknown option(s) for binding request: " + ", ".join(sorted(options))
        )
        self.options = options


class CodeNotFoundError(SubInstallError, LookupError):
    """Raised when a named callable cannot be found in the source namespace.

    Attributes:
        name (str): The name that was looked up.
        namespace (str): Display name of the namespace searched.
    """

    def __init__(self, name: str, namespace: str) -> None:
        super().__init__(f"couldn't find callable named {name!r} in {namespace}")
        self.name = name
        self.namespace = namespace


class MissingNameError(SubInstallError, ValueError):
    """Raised when no destination name can be determined for a callable."""

    def __init__(self, code: Any) -> None:
        super().__init__(
            f"couldn't determine name under which to install {code!r}; pass 'as'"
        )
        self.code = code


class InvalidNameError(SubInstallError, ValueError):
    """Raised when the destination name is not a valid Python identifier."""

    def __init__(self, name: object) -> None:
        super().__init__(f"{name!r} is not a valid name to install under")
        self.name = name


class NamespaceNotFoundError(SubInstallError, LookupError):
    """Raised when a namespace identifier cannot be resolved to a namespace."""

    def __init__(self, target: object) -> None:
        super().__init__(f"couldn't resolve namespace {target!r}")
        self.target = target


# ============================================================================
#                           Installation errors
# ============================================================================


class RedefinitionRejectedError(SubInstallError):
    """Raised by the fatal policy when the destination is already bound.

    Attributes:
        fullname (str): Qualified destination, e.g. ``"pkg.mod.launder"``.
    """

    def __init__(self, fullname: str) -> None:
        super().__init__(f"attempted to redefine existing code {fullname}")
        self.fullname = fullname
