"""Wire the installer with its namespace resolver and diagnostic sink."""

from __future__ import annotations

from dataclasses import dataclass

from subinstall import config
from subinstall.adapters.diagnostics import (
    LoggingDiagnosticSink,
    WarningsDiagnosticSink,
)
from subinstall.adapters.namespace import PythonNamespaceResolver
from subinstall.interfaces.diagnostics import DiagnosticSink
from subinstall.interfaces.namespace import NamespaceResolver
from subinstall.service_layer.installers import Installer


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    installer: Installer


def build_sink(mode: config.DiagnosticsMode) -> DiagnosticSink:
    """Build the diagnostic sink for a configured mode."""
    match mode:
        case config.DiagnosticsMode.WARN:
            return WarningsDiagnosticSink()
        case _:
            return LoggingDiagnosticSink()


def bootstrap(
    resolver: NamespaceResolver | None = None, sink: DiagnosticSink | None = None
) -> AppContainer:
    """Bootstrap an installer, filling unset dependencies from configuration.

    Args:
        resolver: Namespace resolver; defaults to `PythonNamespaceResolver`.
        sink: Diagnostic sink; defaults to the one `SUBINSTALL_DIAGNOSTICS`
            selects.

    Raises:
        InvalidDiagnosticsModeError: If no sink is given and the environment
            names an unknown diagnostics mode.
    """
    if sink is None:
        sink = build_sink(config.get_diagnostics_mode())
    installer = Installer(
        resolver=resolver or PythonNamespaceResolver(),
        sink=sink,
    )
    return AppContainer(installer=installer)
