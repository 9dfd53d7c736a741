"""Path confinement utilities.

Every path a command touches is resolved against the session's current
directory and clamped to the filesystem root of that directory (``/`` on POSIX,
the drive root such as ``C:\\`` on Windows). Resolution is pure: nothing here
touches the filesystem.
"""

from __future__ import annotations

import os
from types import ModuleType


def filesystem_root(path: str, path_module: ModuleType = os.path) -> str:
    """Return the root of the filesystem/drive that ``path`` lives on."""
    drive, _ = path_module.splitdrive(path)
    return drive + path_module.sep


def is_within(path: str, boundary: str, path_module: ModuleType = os.path) -> bool:
    """True if ``path`` equals ``boundary`` or is one of its descendants."""
    p = path_module.normcase(path_module.normpath(path))
    b = path_module.normcase(path_module.normpath(boundary))
    if p == b:
        return True
    prefix = b if b.endswith(path_module.sep) else b + path_module.sep
    return p.startswith(prefix)


class PathResolver:
    """Turns a user-supplied path argument into an absolute, root-confined path."""

    def __init__(self, path_module: ModuleType = os.path) -> None:
        self._path = path_module

    @property
    def path_module(self) -> ModuleType:
        return self._path

    def root(self, path: str) -> str:
        return filesystem_root(path, self._path)

    def resolve(self, raw: str, cwd: str) -> str:
        """
        Resolve ``raw`` against ``cwd``.

        Absolute arguments are only normalized; relative ones are joined onto
        ``cwd`` first. A result that leaves the root of ``cwd`` is clamped to
        that root instead of raising.

        Args:
            raw: Non-empty path argument as typed by the user
            cwd: Absolute current directory

        Returns:
            Absolute normalized path inside ``root(cwd)``
        """
        p = self._path
        candidate = raw if p.isabs(raw) else p.join(cwd, raw)
        resolved = p.normpath(candidate)
        boundary = self.root(cwd)
        if not is_within(resolved, boundary, p):
            return boundary
        return resolved

    def join(self, directory: str, name: str) -> str:
        return self._path.join(directory, name)

    def dirname(self, path: str) -> str:
        return self._path.dirname(path)

    def basename(self, path: str) -> str:
        return self._path.basename(path)
