"""
Command domain entity parsed from one input line.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Command:
    """A command name and its positional argument tokens."""

    name: str
    args: list[str] = field(default_factory=list)

    @classmethod
    def parse(cls, line: str) -> Optional["Command"]:
        """
        Split a raw line on whitespace.

        Args:
            line: Raw input line

        Returns:
            The parsed Command, or None for an empty/whitespace-only line
        """
        tokens = (line or "").split()
        if not tokens:
            return None
        return cls(name=tokens[0], args=tokens[1:])

    def bind(self, arity: int, rest_of_line: bool = False) -> Optional[list[str]]:
        """
        Shape the argument tokens into exactly ``arity`` positional arguments.

        With ``rest_of_line`` the last argument swallows every remaining token,
        joined back with single spaces, so names containing spaces survive.
        Extra tokens are ignored otherwise.

        Returns:
            The bound arguments, or None if fewer than ``arity`` non-empty
            arguments are available
        """
        if arity == 0:
            return []
        if rest_of_line:
            bound = self.args[: arity - 1] + [" ".join(self.args[arity - 1 :])]
        else:
            bound = self.args[:arity]
        if len(bound) < arity or any(not a.strip() for a in bound):
            return None
        return bound

    def __str__(self) -> str:
        return " ".join([self.name, *self.args])
