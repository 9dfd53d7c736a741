"""
Operations "up", "cd" and "ls" mapped to the navigation use cases.
"""

import logging
from typing import Optional

from typing_extensions import override

from src.entities.Outcome import OperationResult
from src.entities.Session import Session
from src.ports.shell.operations_port import OperationsHandlerPort, OperationSpec
from src.ports.terminal.terminal_port import TerminalPort
from src.use_cases.files.list_directory import ListDirectoryUseCase
from src.use_cases.navigation.change_directory import ChangeDirectoryUseCase
from src.use_cases.navigation.navigate_up import NavigateUpUseCase


class NavigationOperationsHandler(OperationsHandlerPort):
    """Handler for moving around the tree and listing it."""

    def __init__(
        self,
        navigate_up_uc: NavigateUpUseCase,
        change_directory_uc: ChangeDirectoryUseCase,
        list_directory_uc: ListDirectoryUseCase,
        terminal: TerminalPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._navigate_up_uc = navigate_up_uc
        self._change_directory_uc = change_directory_uc
        self._list_directory_uc = list_directory_uc
        self._terminal = terminal
        self._logger = logger or logging.getLogger(__name__)

    @override
    def available_operations(self) -> list[OperationSpec]:
        return [
            {
                "name": "up",
                "usage": "up",
                "description": "Go to the parent directory (no-op at the root).",
                "arity": 0,
                "rest_of_line": False,
            },
            {
                "name": "cd",
                "usage": "cd <path>",
                "description": "Change to a directory, relative or absolute.",
                "arity": 1,
                "rest_of_line": True,
            },
            {
                "name": "ls",
                "usage": "ls",
                "description": "List directories then files of the current directory.",
                "arity": 0,
                "rest_of_line": False,
            },
        ]

    @override
    def dispatch(
        self, name: str, arguments: list[str], session: Session
    ) -> OperationResult:
        if name == "up":
            self._navigate_up_uc.execute(session)
            return OperationResult.SUCCESS

        if name == "cd":
            self._change_directory_uc.execute(session, arguments[0])
            return OperationResult.SUCCESS

        if name == "ls":
            for entry in self._list_directory_uc.execute(session):
                self._terminal.print_line(entry.label())
            return OperationResult.SUCCESS

        raise ValueError(f"Unknown operation: {name}")
