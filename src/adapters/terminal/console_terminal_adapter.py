"""
Terminal adapter using a rich Console for output and stdin for input.
"""

import logging
from typing import Iterator, Optional

from rich.console import Console
from typing_extensions import override

from src.ports.terminal.terminal_port import TerminalPort


class ConsoleTerminalAdapter(TerminalPort):
    """Interactive terminal transport."""

    def __init__(
        self,
        console: Optional[Console] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Args:
            console: Console to print to (default: stdout, no highlighting, soft wrap)
            logger: Optional logger
        """
        self._console = console or Console(highlight=False, soft_wrap=True)
        self._logger = logger or logging.getLogger(__name__)
        self._closed = False

    @override
    def lines(self, prompt: str = "") -> Iterator[str]:
        while not self._closed:
            try:
                line = self._console.input(prompt)
            except EOFError:
                self._logger.debug("End of input reached")
                return
            yield line

    @override
    def write(self, text: str) -> None:
        # Raw content: no markup, no wrapping
        self._console.out(text, end="", highlight=False)
        self._console.file.flush()

    @override
    def print_line(self, text: str = "", style: Optional[str] = None) -> None:
        self._console.print(text, style=style, markup=False, highlight=False)

    @override
    def close(self) -> None:
        self._closed = True
