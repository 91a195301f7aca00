"""Diagnostics produced when an installation collides with an existing binding.

Installing over a name that is already bound is not an error by itself; it
produces a `Diagnostic`. The active installation policy then decides whether
the diagnostic is suppressed, shortened, passed through, or escalated into an
error. Whatever is not suppressed or escalated is handed to a
`DiagnosticSink`.
"""

import abc
from dataclasses import dataclass
from enum import Enum

# pylint: disable=too-few-public-methods


class DiagnosticKind(Enum):
    """Kinds of collision diagnostics.

    Kinds:
    - REDEFINED: the destination already held a different value.
    - SIGNATURE_MISMATCH: old and new callables take different parameters.
    """

    REDEFINED = "redefined"
    SIGNATURE_MISMATCH = "signature_mismatch"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single collision notice.

    `message` is the short form. `location` is where the incoming code was
    defined (``"path.py:12"``), when that is known; ``str(diagnostic)``
    includes it.
    """

    kind: DiagnosticKind
    fullname: str
    message: str
    location: str | None = None

    @property
    def short(self) -> str:
        """The message without its source location."""
        return self.message

    def __str__(self) -> str:
        if self.location is None:
            return self.message
        return f"{self.message} at {self.location}"


class RedefinitionWarning(UserWarning):
    """Warning category for `DiagnosticKind.REDEFINED`."""


class SignatureMismatchWarning(UserWarning):
    """Warning category for `DiagnosticKind.SIGNATURE_MISMATCH`."""


WARNING_CATEGORIES: dict[DiagnosticKind, type[UserWarning]] = {
    DiagnosticKind.REDEFINED: RedefinitionWarning,
    DiagnosticKind.SIGNATURE_MISMATCH: SignatureMismatchWarning,
}


class DiagnosticSink(abc.ABC):
    """Receives the diagnostics an installation policy lets through."""

    @abc.abstractmethod
    def emit(
        self, diagnostic: Diagnostic, *, short: bool = False, extra_frames: int = 0
    ) -> None:
        """Report a diagnostic.

        Args:
            diagnostic: The diagnostic to report.
            short: When True, report ``diagnostic.short`` instead of the full
                form with its location.
            extra_frames: Frames the installation went through beyond the
                usual public function, for sinks that point at the caller.
        """
