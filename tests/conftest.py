"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from typing import Iterator, Optional
from unittest.mock import MagicMock

import pytest

from src.container import DependencyContainer
from src.entities.Session import Session
from src.ports.terminal.terminal_port import TerminalPort


class FakeTerminal(TerminalPort):
    """In-memory terminal: feeds scripted lines and records everything written.

    An input item equal to ``KeyboardInterrupt`` raises it instead of yielding.
    """

    def __init__(self, inputs: Optional[list] = None) -> None:
        self.inputs = list(inputs or [])
        self.output = ""
        self.closed = False
        self.prompts: list[str] = []

    def lines(self, prompt: str = "") -> Iterator[str]:
        for item in self.inputs:
            if self.closed:
                return
            self.prompts.append(prompt)
            if item is KeyboardInterrupt:
                raise KeyboardInterrupt
            yield item

    def write(self, text: str) -> None:
        self.output += text

    def print_line(self, text: str = "", style: Optional[str] = None) -> None:
        self.output += text + "\n"

    def close(self) -> None:
        self.closed = True

    @property
    def output_lines(self) -> list[str]:
        return self.output.splitlines()


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def terminal():
    """In-memory terminal with no scripted input."""
    return FakeTerminal()


@pytest.fixture
def session(temp_directory, mock_logger):
    """Session starting in the temporary directory."""
    return Session("tester", temp_directory, logger=mock_logger)


@pytest.fixture
def dependency_container(mock_logger, terminal):
    """
    Create a dependency container with a mocked logger and in-memory terminal.

    Returns:
        DependencyContainer instance
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    container.use_terminal(terminal)
    return container
