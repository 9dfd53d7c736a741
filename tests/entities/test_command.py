"""
Tests for the Command entity.
"""

from src.entities.Command import Command


class TestCommand:
    """Test cases for parsing and argument binding."""

    def test_blank_line_is_not_a_command(self):
        assert Command.parse("") is None
        assert Command.parse("   \t ") is None

    def test_tokens_are_split_on_whitespace(self):
        command = Command.parse("  cp   a.txt   my   dir ")
        assert command == Command("cp", ["a.txt", "my", "dir"])

    def test_rest_of_line_binding_rejoins_tokens(self):
        command = Command.parse("cat my notes.txt")
        assert command.bind(1, rest_of_line=True) == ["my notes.txt"]

    def test_two_argument_binding(self):
        command = Command.parse("rn old.txt new name.txt")
        assert command.bind(2, rest_of_line=True) == ["old.txt", "new name.txt"]

    def test_first_token_binding_ignores_extra(self):
        command = Command.parse("os --cpus extra")
        assert command.bind(1) == ["--cpus"]

    def test_missing_arguments(self):
        assert Command.parse("cat").bind(1, rest_of_line=True) is None
        assert Command.parse("cp a.txt").bind(2, rest_of_line=True) is None

    def test_zero_arity_ignores_arguments(self):
        assert Command.parse("ls -la").bind(0) == []

    def test_str(self):
        assert str(Command("mv", ["a", "b"])) == "mv a b"
