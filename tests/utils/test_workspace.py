"""
Tests for path confinement utilities.
"""

import ntpath
import posixpath

import pytest

from src.utils import workspace
from src.utils.workspace import PathResolver, filesystem_root, is_within


def test_module_is_documented():
    assert workspace.__doc__.startswith("Path confinement utilities.")


class TestFilesystemRoot:
    def test_posix_root(self):
        assert filesystem_root("/home/user/docs", posixpath) == "/"

    def test_windows_drive_root(self):
        assert filesystem_root("C:\\Users\\bob", ntpath) == "C:\\"

    def test_is_within_rejects_sibling_prefix(self):
        """A sibling sharing a name prefix is not a descendant."""
        assert not is_within("/home/user2", "/home/user", posixpath)
        assert is_within("/home/user/a", "/home/user", posixpath)
        assert is_within("/home/user", "/home/user", posixpath)

    def test_is_within_is_case_insensitive_on_windows(self):
        assert is_within("c:\\data", "C:\\", ntpath)


class TestPathResolver:
    """Test cases for PathResolver."""

    def test_relative_path_is_joined_to_cwd(self):
        resolver = PathResolver(posixpath)
        assert resolver.resolve("a/b", "/home/user") == "/home/user/a/b"

    def test_absolute_path_is_only_normalized(self):
        resolver = PathResolver(posixpath)
        assert resolver.resolve("/tmp//x/../y/.", "/home/user") == "/tmp/y"

    def test_parent_references_stop_at_root(self):
        resolver = PathResolver(posixpath)
        assert resolver.resolve("../../../../..", "/home/user") == "/"

    def test_other_drive_is_clamped_to_current_root(self):
        """Leaving the current drive degrades to its root instead of failing."""
        resolver = PathResolver(ntpath)
        assert resolver.resolve("D:\\data", "C:\\Users\\bob") == "C:\\"

    def test_windows_relative_path(self):
        resolver = PathResolver(ntpath)
        assert resolver.resolve("..\\alice", "C:\\Users\\bob") == "C:\\Users\\alice"

    @pytest.mark.parametrize(
        "raw",
        ["docs", "./a/../b", "../..", "/etc/hosts", "a//b///c", "/", "..", "x/./y/"],
    )
    def test_resolution_is_idempotent(self, raw):
        resolver = PathResolver(posixpath)
        cwd = "/home/user"
        once = resolver.resolve(raw, cwd)
        assert resolver.resolve(once, cwd) == once

    @pytest.mark.parametrize("raw", ["D:\\x", "..\\..\\..", "sub\\dir", "C:\\"])
    def test_windows_resolution_is_idempotent(self, raw):
        resolver = PathResolver(ntpath)
        cwd = "C:\\Users\\bob"
        once = resolver.resolve(raw, cwd)
        assert resolver.resolve(once, cwd) == once
