"""
Registry combining every operations handler behind one dispatch point.
"""

import logging
from typing import Optional

from src.entities.Command import Command
from src.entities.Outcome import OperationResult
from src.entities.Session import Session
from src.exceptions import BaseAppError, InvalidInputError
from src.ports.shell.operations_port import OperationsHandlerPort, OperationSpec


class OperationRegistry:
    """
    Maps command names to their handler and classifies every outcome.

    ``dispatch`` is the boundary where failures become OperationResult values:
    nothing but KeyboardInterrupt escapes it.
    """

    def __init__(
        self, *handlers: OperationsHandlerPort, logger: Optional[logging.Logger] = None
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._index: dict[str, tuple[OperationSpec, OperationsHandlerPort]] = {}
        for handler in handlers:
            for spec in handler.available_operations():
                if spec["name"] in self._index:
                    raise ValueError(f"Duplicate operation: {spec['name']}")
                self._index[spec["name"]] = (spec, handler)

    def operations(self) -> list[OperationSpec]:
        return [spec for spec, _ in self._index.values()]

    def dispatch(self, command: Command, session: Session) -> OperationResult:
        """
        Validate, run and classify one command.

        Args:
            command: Parsed command
            session: Session the command runs against

        Returns:
            OperationResult of the command
        """
        found = self._index.get(command.name)
        if found is None:
            self._logger.info(f"Unknown command: {command.name}")
            return OperationResult.INVALID_INPUT
        spec, handler = found

        arguments = command.bind(spec["arity"], spec["rest_of_line"])
        if arguments is None:
            self._logger.info(f"Missing arguments, usage: {spec['usage']}")
            return OperationResult.INVALID_INPUT

        try:
            return handler.dispatch(command.name, arguments, session)
        except InvalidInputError as e:
            self._logger.info(f"Invalid input for '{command.name}': {e}")
            return OperationResult.INVALID_INPUT
        except BaseAppError as e:
            self._logger.warning(f"Operation '{command.name}' failed: {e}")
            return OperationResult.OPERATION_FAILED
        except Exception:
            self._logger.exception(f"Unexpected error in '{command.name}'")
            return OperationResult.OPERATION_FAILED
