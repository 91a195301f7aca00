"""Configuration utilities for subinstall.

This module centralizes the environment variables subinstall reads.
"""

import os
from enum import Enum

DIAGNOSTICS_ENV_VAR = "SUBINSTALL_DIAGNOSTICS"  # pragma: no mutate


class DiagnosticsMode(Enum):
    """Where collision diagnostics go by default.

    Modes:
    - LOG: WARNING records on the ``subinstall.diagnostics`` logger.
    - WARN: Python warnings (``RedefinitionWarning`` etc.).
    """

    LOG = "log"
    WARN = "warn"


class InvalidDiagnosticsModeError(ValueError):
    """Raised when SUBINSTALL_DIAGNOSTICS holds an unknown mode."""

    def __init__(self, value: str) -> None:
        choices = ", ".join(mode.value for mode in DiagnosticsMode)
        super().__init__(
            f"Invalid {DIAGNOSTICS_ENV_VAR} value {value!r}; expected one of: {choices}"
        )
        self.value = value


def get_diagnostics_mode() -> DiagnosticsMode:
    """Get the default diagnostics mode from the environment.

    Returns:
        The mode named by `SUBINSTALL_DIAGNOSTICS` (case-insensitive), or
        `DiagnosticsMode.LOG` when the variable is unset or empty.

    Raises:
        InvalidDiagnosticsModeError: If the variable names an unknown mode.
    """
    if not (raw := os.environ.get(DIAGNOSTICS_ENV_VAR, "").strip()):
        return DiagnosticsMode.LOG
    try:
        return DiagnosticsMode(raw.lower())
    except ValueError as e:
        raise InvalidDiagnosticsModeError(raw) from e
