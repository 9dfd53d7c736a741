"""
Directory entry domain entities.
"""

from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    """Kind of a filesystem entry as shown in directory listings."""

    DIRECTORY = "DIR"
    FILE = "FILE"
    OTHER = "OTHER"


@dataclass(frozen=True)
class PathInfo:
    """Existence and type facts about a single path."""

    exists: bool
    is_file: bool = False
    is_dir: bool = False

    @classmethod
    def missing(cls) -> "PathInfo":
        return cls(exists=False)


@dataclass(frozen=True)
class Entry:
    """A named child of a directory."""

    name: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    def label(self) -> str:
        """Render the entry as a listing line, e.g. ``notes <DIR>``."""
        return f"{self.name} <{self.kind.value}>"

    def __str__(self) -> str:
        return self.label()
