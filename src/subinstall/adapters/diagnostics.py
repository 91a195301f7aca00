"""Diagnostic sinks.

- `LoggingDiagnosticSink` (default): WARNING records on ``subinstall.diagnostics``.
- `WarningsDiagnosticSink`: ``warnings.warn`` with a per-kind category, so the
  host's warning filters (``-W error::subinstall...RedefinitionWarning``) apply.
- `CollectingDiagnosticSink`: keeps everything in a list, for tests.
"""

import logging
import warnings
from dataclasses import dataclass, field

from subinstall.interfaces.diagnostics import (
    WARNING_CATEGORIES,
    Diagnostic,
    DiagnosticSink,
)

# pylint: disable=too-few-public-methods

DIAGNOSTICS_LOGGER = "subinstall.diagnostics"


class LoggingDiagnosticSink(DiagnosticSink):
    """Log diagnostics at WARNING level.

    Args:
        logger: Logger to use; defaults to ``subinstall.diagnostics``.
        stacklevel: Passed to the logging call, so ``pathname`` and ``lineno``
            of the record name the code that asked for the installation.
    """

    def __init__(
        self, logger: logging.Logger | None = None, stacklevel: int = 5
    ) -> None:
        self._logger = logger or logging.getLogger(DIAGNOSTICS_LOGGER)
        self._stacklevel = stacklevel

    def emit(
        self, diagnostic: Diagnostic, *, short: bool = False, extra_frames: int = 0
    ) -> None:
        self._logger.warning(
            "%s",
            diagnostic.short if short else str(diagnostic),
            extra={"diagnostic_kind": diagnostic.kind.value},
            stacklevel=self._stacklevel + extra_frames,
        )


class WarningsDiagnosticSink(DiagnosticSink):
    """Route diagnostics through the `warnings` module.

    Args:
        stacklevel: Passed to ``warnings.warn``. The default points past the
            sink, the installer and the public facade at the code that asked
            for the installation.
    """

    def __init__(self, stacklevel: int = 5) -> None:
        self._stacklevel = stacklevel

    def emit(
        self, diagnostic: Diagnostic, *, short: bool = False, extra_frames: int = 0
    ) -> None:
        warnings.warn(
            diagnostic.short if short else str(diagnostic),
            WARNING_CATEGORIES[diagnostic.kind],
            stacklevel=self._stacklevel + extra_frames,
        )


@dataclass
class CollectingDiagnosticSink(DiagnosticSink):
    """Collect emitted diagnostics together with the form they were sent in."""

    emitted: list[tuple[Diagnostic, bool]] = field(default_factory=list)

    def emit(
        self, diagnostic: Diagnostic, *, short: bool = False, extra_frames: int = 0
    ) -> None:
        # pylint: disable=unused-argument
        self.emitted.append((diagnostic, short))

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """The emitted diagnostics, in order."""
        return [diagnostic for diagnostic, _ in self.emitted]

    @property
    def messages(self) -> list[str]:
        """The emitted texts, short or full as requested by the policy."""
        return [d.short if short else str(d) for d, short in self.emitted]

    def clear(self) -> None:
        """Forget everything collected so far."""
        self.emitted.clear()
