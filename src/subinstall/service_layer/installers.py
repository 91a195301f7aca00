"""Installation policies and the installer that applies them.

Before writing a binding the installer works out which collision diagnostics
the write produces (see `detect_diagnostics`). Each policy carries a rule
table saying which diagnostic kinds are suppressed, which are escalated into
a `RedefinitionRejectedError`, and which are reported in short form; any
kind the table does not mention is reported in full.

Escalation is checked before anything is written, so a rejected installation
leaves the target namespace exactly as it was.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from subinstall.interfaces.diagnostics import Diagnostic, DiagnosticKind, DiagnosticSink
from subinstall.interfaces.errors import RedefinitionRejectedError
from subinstall.interfaces.namespace import Namespace, NamespaceResolver

from .resolver import BindingRequest, ResolvedBinding, resolve_request

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class InstallPolicy(Enum):
    """How to treat an existing binding at the destination.

    Policies:
    - INSTALL: overwrite, reporting the collision as a short notice.
    - REINSTALL: overwrite quietly; signature mismatches are still reported.
    - FATAL: refuse to overwrite; raise `RedefinitionRejectedError`.
    """

    INSTALL = "install"
    REINSTALL = "reinstall"
    FATAL = "fatal"


class Action(Enum):
    """What a policy does with a single diagnostic."""

    SUPPRESS = "suppress"
    ESCALATE = "escalate"
    SHORTEN = "shorten"
    PASS = "pass"


@dataclass(frozen=True, slots=True)
class DiagnosticRules:
    """Per-policy classification table for diagnostic kinds.

    Suppression wins over escalation, which wins over shortening.
    """

    suppress: frozenset[DiagnosticKind] = frozenset()
    escalate: frozenset[DiagnosticKind] = frozenset()
    shorten: frozenset[DiagnosticKind] = frozenset()

    def classify(self, diagnostic: Diagnostic) -> Action:
        """Return the action to take for `diagnostic`."""
        if diagnostic.kind in self.suppress:
            return Action.SUPPRESS
        if diagnostic.kind in self.escalate:
            return Action.ESCALATE
        if diagnostic.kind in self.shorten:
            return Action.SHORTEN
        return Action.PASS


POLICY_RULES: Mapping[InstallPolicy, DiagnosticRules] = {
    InstallPolicy.INSTALL: DiagnosticRules(
        shorten=frozenset(
            {DiagnosticKind.REDEFINED, DiagnosticKind.SIGNATURE_MISMATCH}
        ),
    ),
    InstallPolicy.REINSTALL: DiagnosticRules(
        suppress=frozenset({DiagnosticKind.REDEFINED}),
        shorten=frozenset({DiagnosticKind.SIGNATURE_MISMATCH}),
    ),
    InstallPolicy.FATAL: DiagnosticRules(
        escalate=frozenset({DiagnosticKind.REDEFINED}),
    ),
}


# ============================================================================
#                           Collision detection
# ============================================================================


def _signature_shape(value: Any) -> str | None:
    """Render a callable's parameter list without annotations.

    Returns None when the value is not callable or has no signature (many
    builtins do not).
    """
    if isinstance(value, (staticmethod, classmethod)):
        value = value.__func__
    if not callable(value):
        return None
    try:
        signature = inspect.signature(value)
    except (TypeError, ValueError):
        return None
    parameters = [
        p.replace(annotation=inspect.Parameter.empty)
        for p in signature.parameters.values()
    ]
    stripped = signature.replace(
        parameters=parameters, return_annotation=inspect.Signature.empty
    )
    return str(stripped)


def _location(code: Callable[..., Any]) -> str | None:
    """Return ``"file:line"`` for where `code` was defined, when known."""
    func = inspect.unwrap(code) if inspect.isfunction(code) else code
    code_obj = getattr(func, "__code__", None)
    if code_obj is None:
        return None
    return f"{code_obj.co_filename}:{code_obj.co_firstlineno}"


def detect_diagnostics(
    namespace: Namespace, name: str, code: Callable[..., Any]
) -> list[Diagnostic]:
    """List the diagnostics that binding `code` to `name` would produce.

    Only values stored directly in `namespace` count; overriding an inherited
    attribute is not a redefinition. Rebinding the very same object produces
    nothing.

    Args:
        namespace: Target namespace.
        name: Destination name.
        code: The callable about to be installed.

    Returns:
        Diagnostics in reporting order: signature mismatch first, then
        redefinition.
    """
    existing = namespace.own(name)
    if existing is None or existing is code:
        return []

    fullname = namespace.qualify(name)
    location = _location(code)
    found: list[Diagnostic] = []

    old_shape, new_shape = _signature_shape(existing), _signature_shape(code)
    if old_shape is not None and new_shape is not None and old_shape != new_shape:
        found.append(
            Diagnostic(
                kind=DiagnosticKind.SIGNATURE_MISMATCH,
                fullname=fullname,
                message=f"Signature mismatch: {fullname}{old_shape} vs {new_shape}",
                location=location,
            )
        )

    what = "Callable" if callable(existing) else "Attribute"
    found.append(
        Diagnostic(
            kind=DiagnosticKind.REDEFINED,
            fullname=fullname,
            message=f"{what} {fullname} redefined",
            location=location,
        )
    )
    return found


# ============================================================================
#                           Installer
# ============================================================================


class Installer:
    """Resolve binding requests and write them under an installation policy.

    Args:
        resolver: Turns ``into`` / ``from`` identifiers into namespaces.
        sink: Receives the diagnostics the policy lets through.
    """

    def __init__(self, resolver: NamespaceResolver, sink: DiagnosticSink) -> None:
        self.resolver = resolver
        self.sink = sink

    def install(
        self,
        arg: Mapping[str, Any] | BindingRequest,
        policy: InstallPolicy = InstallPolicy.INSTALL,
        *,
        caller: Namespace | None = None,
        extra_frames: int = 0,
    ) -> Callable[..., Any]:
        """Install a callable described by `arg`.

        Args:
            arg: Configuration mapping (``code``, ``into``, ``from``, ``as``)
                or a `BindingRequest`.
            policy: How to treat an existing binding at the destination.
            caller: Namespace standing in for omitted ``into`` / ``from``.
            extra_frames: Frames between the code that asked for the
                installation and this call beyond the usual public function,
                passed on to the sink.

        Returns:
            The installed callable.

        Raises:
            RedefinitionRejectedError: Under `InstallPolicy.FATAL` when the
                destination is already bound. Nothing is written.
            SubInstallError: Any resolution error from `resolve_request`.
        """
        binding = resolve_request(arg, self.resolver, caller)
        self._report(binding, POLICY_RULES[policy], extra_frames)
        binding.namespace.bind(binding.name, binding.code)
        logger.debug(
            "Installed %r as %s (%s)", binding.code, binding.fullname, policy.value
        )
        return binding.code

    def _report(
        self, binding: ResolvedBinding, rules: DiagnosticRules, extra_frames: int
    ) -> None:
        diagnostics = detect_diagnostics(binding.namespace, binding.name, binding.code)
        for diagnostic in diagnostics:
            match rules.classify(diagnostic):
                case Action.SUPPRESS:
                    logger.debug("Suppressed: %s", diagnostic)
                case Action.ESCALATE:
                    logger.debug("Rejected: %s", diagnostic)
                    raise RedefinitionRejectedError(binding.fullname)
                case Action.SHORTEN:
                    self.sink.emit(diagnostic, short=True, extra_frames=extra_frames)
                case Action.PASS:
                    self.sink.emit(diagnostic, extra_frames=extra_frames)
