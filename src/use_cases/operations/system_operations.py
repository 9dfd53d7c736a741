"""
Operation "os" for host facts.
"""

import logging
from typing import Optional

from typing_extensions import override

from src.entities.Outcome import OperationResult
from src.entities.Session import Session
from src.ports.shell.operations_port import OperationsHandlerPort, OperationSpec
from src.ports.terminal.terminal_port import TerminalPort
from src.use_cases.system.system_info import SystemInfoUseCase


class SystemOperationsHandler(OperationsHandlerPort):
    """Handler for the ``os`` command."""

    def __init__(
        self,
        system_info_uc: SystemInfoUseCase,
        terminal: TerminalPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._system_info_uc = system_info_uc
        self._terminal = terminal
        self._logger = logger or logging.getLogger(__name__)

    @override
    def available_operations(self) -> list[OperationSpec]:
        flags = "|".join(self._system_info_uc.flags)
        return [
            {
                "name": "os",
                "usage": f"os <{flags}>",
                "description": "Print information about the host.",
                "arity": 1,
                "rest_of_line": False,
            }
        ]

    @override
    def dispatch(
        self, name: str, arguments: list[str], session: Session
    ) -> OperationResult:
        if name != "os":
            raise ValueError(f"Unknown operation: {name}")
        for line in self._system_info_uc.execute(arguments[0]):
            self._terminal.print_line(line)
        return OperationResult.SUCCESS
