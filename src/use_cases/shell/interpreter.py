"""
Read-eval-print loop of the file manager.
"""

import logging
from enum import Enum
from typing import Optional

from src.entities.Command import Command
from src.entities.Outcome import OperationResult
from src.entities.Session import Session
from src.ports.terminal.terminal_port import TerminalPort
from src.use_cases.operations.registry import OperationRegistry

EXIT_KEYWORDS = (".exit", "exit")


class InterpreterState(Enum):
    AWAITING_LINE = "awaiting_line"
    PARSING = "parsing"
    DISPATCHING = "dispatching"
    REPORTING = "reporting"
    EXITED = "exited"


class CommandInterpreter:
    """
    Reads one line at a time, runs it and reports the outcome.

    Every dispatched command ends with the current directory line. Only the
    exit keywords, end of input and an interrupt end the loop.
    """

    def __init__(
        self,
        registry: OperationRegistry,
        terminal: TerminalPort,
        prompt: str = "> ",
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the interpreter.

        Args:
            registry: Registry used to dispatch commands
            terminal: Line transport
            prompt: Prompt shown before each line
            logger: Logger instance to use for logging
        """
        self._registry = registry
        self._terminal = terminal
        self._prompt = prompt
        self._logger = logger or logging.getLogger(__name__)
        self.state = InterpreterState.AWAITING_LINE

    def _print_cwd(self, session: Session) -> None:
        self._terminal.print_line(
            f"You are currently in {session.current_directory}", style="cyan"
        )

    def welcome(self, session: Session) -> None:
        self._terminal.print_line(
            f"Welcome to the File Manager, {session.username}!", style="bold"
        )
        self._print_cwd(session)

    def farewell(self, session: Session) -> None:
        self._terminal.print_line(
            f"Thank you for using File Manager, {session.username}, goodbye!",
            style="bold",
        )
        self._terminal.close()
        self.state = InterpreterState.EXITED

    def handle_line(self, line: str, session: Session) -> Optional[OperationResult]:
        """
        Run one input line.

        Args:
            line: Raw input line
            session: Session the line runs against

        Returns:
            The OperationResult, or None for a blank line (nothing printed)
        """
        self.state = InterpreterState.PARSING
        command = Command.parse(line)
        if command is None:
            self.state = InterpreterState.AWAITING_LINE
            return None

        self.state = InterpreterState.DISPATCHING
        self._logger.debug(f"Dispatching: {command}")
        result = self._registry.dispatch(command, session)

        self.state = InterpreterState.REPORTING
        if result.message:
            style = "yellow" if result is OperationResult.INVALID_INPUT else "red"
            self._terminal.print_line(result.message, style=style)
        self._print_cwd(session)
        self.state = InterpreterState.AWAITING_LINE
        return result

    def run(self, session: Session) -> int:
        """
        Run the loop until exit, end of input or interrupt.

        Returns:
            Process exit status (always 0)
        """
        self.welcome(session)
        try:
            for line in self._terminal.lines(self._prompt):
                if line.strip() in EXIT_KEYWORDS:
                    break
                self.handle_line(line, session)
        except KeyboardInterrupt:
            self._logger.info("Interrupted")
            self._terminal.print_line()
        self.farewell(session)
        return 0
