"""
Tests for the CommandInterpreter loop.
"""

import hashlib
import os

import pytest

from src.entities.Outcome import OperationResult
from src.entities.Session import Session
from src.use_cases.shell.interpreter import CommandInterpreter, InterpreterState


def _cwd_line(path: str) -> str:
    return f"You are currently in {path}"


@pytest.fixture
def interpreter(dependency_container):
    return dependency_container.get_interpreter()


class TestCommandInterpreter:
    """Test cases for the CommandInterpreter."""

    def test_scenario(self, interpreter, terminal, temp_directory, mock_logger):
        """Walk through a typical session and check every printed line."""
        home = temp_directory
        sub = os.path.join(home, "sub")
        terminal.inputs = [
            "mkdir sub",
            "cd sub",
            "up",
            "add sub/note.txt",
            "cat sub/note.txt",
            "rm nonexistent.txt",
            "hash sub",
            ".exit",
        ]
        session = Session("alice", home, logger=mock_logger)

        assert interpreter.run(session) == 0

        assert os.path.isdir(sub)
        assert os.path.isfile(os.path.join(sub, "note.txt"))
        assert terminal.output_lines == [
            "Welcome to the File Manager, alice!",
            _cwd_line(home),
            _cwd_line(home),
            _cwd_line(sub),
            _cwd_line(home),
            _cwd_line(home),
            "",
            _cwd_line(home),
            "Invalid input",
            _cwd_line(home),
            "Invalid input",
            _cwd_line(home),
            "Thank you for using File Manager, alice, goodbye!",
        ]
        assert terminal.closed
        assert interpreter.state is InterpreterState.EXITED

    def test_blank_line_prints_nothing(self, interpreter, terminal, session):
        assert interpreter.handle_line("   ", session) is None
        assert terminal.output == ""

    def test_unknown_command(self, interpreter, terminal, session):
        assert interpreter.handle_line("dir", session) is OperationResult.INVALID_INPUT
        assert terminal.output_lines == [
            "Invalid input",
            _cwd_line(session.current_directory),
        ]

    def test_failure_reports_operation_failed(self, interpreter, terminal, session):
        assert interpreter.handle_line("add test1.txt", session) is OperationResult.OPERATION_FAILED
        assert terminal.output_lines == [
            "Operation failed",
            _cwd_line(session.current_directory),
        ]

    def test_listing(self, interpreter, terminal, session):
        interpreter.handle_line("ls", session)
        assert terminal.output_lines == [
            "subdir <DIR>",
            "test1.txt <FILE>",
            "test2.py <FILE>",
            _cwd_line(session.current_directory),
        ]

    def test_cat_and_hash_output(self, interpreter, terminal, session):
        interpreter.handle_line("cat test1.txt", session)
        interpreter.handle_line("hash test1.txt", session)
        cwd = _cwd_line(session.current_directory)
        assert terminal.output_lines == [
            "This is a test file.",
            cwd,
            hashlib.sha256(b"This is a test file.").hexdigest(),
            cwd,
        ]

    @pytest.mark.parametrize(
        "line",
        ["up", "ls", "cd subdir", "cd nowhere", "cat", "rn a", "os --nope", "bogus", "rm test2.py"],
    )
    def test_every_command_ends_with_one_cwd_line(self, interpreter, terminal, session, line):
        interpreter.handle_line(line, session)
        lines = terminal.output_lines
        assert lines[-1] == _cwd_line(session.current_directory)
        assert sum(1 for l in lines if l.startswith("You are currently in ")) == 1

    def test_exit_keyword(self, interpreter, terminal, session):
        terminal.inputs = ["  exit  ", "ls"]
        interpreter.run(session)
        assert terminal.output_lines[-1] == "Thank you for using File Manager, tester, goodbye!"
        assert "subdir <DIR>" not in terminal.output_lines

    def test_end_of_input_exits(self, interpreter, terminal, session):
        terminal.inputs = ["up"]
        assert interpreter.run(session) == 0
        assert terminal.output_lines[-1] == "Thank you for using File Manager, tester, goodbye!"

    def test_interrupt_exits_with_farewell(self, interpreter, terminal, session):
        terminal.inputs = ["up", KeyboardInterrupt, "ls"]
        assert interpreter.run(session) == 0
        assert terminal.output_lines[-2:] == [
            "",
            "Thank you for using File Manager, tester, goodbye!",
        ]
        assert terminal.closed

    def test_prompt_is_passed_to_terminal(self, dependency_container, terminal, session):
        interpreter = CommandInterpreter(
            dependency_container.get_operation_registry(), terminal, prompt="$ "
        )
        terminal.inputs = ["ls"]
        interpreter.run(session)
        assert terminal.prompts == ["$ "]
