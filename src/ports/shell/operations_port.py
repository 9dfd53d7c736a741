"""
Port and types describing shell operations independently of how they run.
"""

from abc import ABC, abstractmethod
from typing import TypedDict

from src.entities.Outcome import OperationResult
from src.entities.Session import Session


class OperationSpec(TypedDict):
    """Specification of one shell command."""

    name: str
    usage: str
    description: str
    arity: int
    rest_of_line: bool  # last argument swallows the remaining tokens


class OperationsHandlerPort(ABC):
    """
    Port interface for a group of shell operations.

    A handler exposes the commands it implements and runs them against a session.
    """

    @abstractmethod
    def available_operations(self) -> list[OperationSpec]:
        """
        Get the operations this handler implements.

        Returns:
            List of operation specifications
        """
        pass

    @abstractmethod
    def dispatch(
        self, name: str, arguments: list[str], session: Session
    ) -> OperationResult:
        """
        Run an operation with already bound arguments.

        Args:
            name: Command name
            arguments: Exactly ``arity`` non-empty arguments
            session: Session to read (and for navigation, update)

        Returns:
            OperationResult.SUCCESS; failures are raised

        Raises:
            ValueError: If the command name is unknown to this handler
            InvalidInputError: If preconditions are violated
            OperationFailedError: If the operation fails while executing
        """
        pass
