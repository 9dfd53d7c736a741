"""
Terminal port: line-oriented input and output for the interactive session.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional


class TerminalPort(ABC):
    """Port interface for the line-oriented terminal transport."""

    @abstractmethod
    def lines(self, prompt: str = "") -> Iterator[str]:
        """
        Lazily yield input lines until the input is exhausted.

        The next line is only requested once the consumer asks for it.
        An interrupt propagates as KeyboardInterrupt.
        """
        pass

    @abstractmethod
    def write(self, text: str) -> None:
        """Write raw text without a trailing newline."""
        pass

    @abstractmethod
    def print_line(self, text: str = "", style: Optional[str] = None) -> None:
        """Write one line of output."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the input resource."""
        pass
