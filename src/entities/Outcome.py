"""
Outcome values returned by operations and collaborator capabilities.
"""

from enum import Enum


class OperationResult(Enum):
    """Uniform outcome class of one dispatched command."""

    SUCCESS = "success"
    INVALID_INPUT = "invalid_input"
    OPERATION_FAILED = "operation_failed"

    @property
    def message(self) -> str | None:
        """Line reported to the user for this outcome, if any."""
        return _MESSAGES.get(self)


_MESSAGES = {
    OperationResult.INVALID_INPUT: "Invalid input",
    OperationResult.OPERATION_FAILED: "Operation failed",
}


class CreateOutcome(Enum):
    """Result of an exclusive creation (file or directory)."""

    CREATED = "created"
    EXISTS = "exists"
    ERROR = "error"
