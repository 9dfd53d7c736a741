"""
Local file system adapter implementation for file operations.
"""

import errno
import logging
import os
import stat as _stat
from typing import BinaryIO

from typing_extensions import override

from src.entities.Entry import Entry, EntryKind, PathInfo
from src.entities.Outcome import CreateOutcome
from src.exceptions import CrossDeviceError, FileRepositoryError
from src.ports.files.file_repository_port import FileRepositoryPort


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _entry_kind(self, entry: os.DirEntry) -> EntryKind:
        """
        Classify a directory entry, following symlinks.

        Args:
            entry: Entry produced by os.scandir

        Returns:
            The EntryKind, OTHER if the entry cannot be inspected
        """
        try:
            if entry.is_dir():
                return EntryKind.DIRECTORY
            if entry.is_file():
                return EntryKind.FILE
        except OSError as e:
            # Log the error but keep listing the other entries
            self._logger.warning(f"Could not inspect entry {entry.path}: {e}")
        return EntryKind.OTHER

    @override
    def stat(self, path: str) -> PathInfo:
        try:
            st = os.stat(path)
        except (FileNotFoundError, NotADirectoryError):
            return PathInfo.missing()
        except OSError as e:
            raise FileRepositoryError(f"Failed to stat {path}: {str(e)}")
        return PathInfo(
            exists=True,
            is_file=_stat.S_ISREG(st.st_mode),
            is_dir=_stat.S_ISDIR(st.st_mode),
        )

    @override
    def list_entries(self, directory: str) -> list[Entry]:
        """
        List the children of a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            List of Entry entities

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            with os.scandir(directory) as it:
                return [Entry(name=e.name, kind=self._entry_kind(e)) for e in it]
        except Exception as e:
            raise FileRepositoryError(f"Failed to list entries in {directory}: {str(e)}")

    @override
    def open_read(self, path: str) -> BinaryIO:
        try:
            return open(path, "rb")
        except OSError as e:
            raise FileRepositoryError(f"Failed to open {path} for reading: {str(e)}")

    @override
    def open_write(self, path: str, exclusive: bool = False) -> BinaryIO:
        mode = "xb" if exclusive else "wb"
        try:
            return open(path, mode)
        except OSError as e:
            raise FileRepositoryError(f"Failed to open {path} for writing: {str(e)}")

    @override
    def create_file(self, path: str) -> CreateOutcome:
        """
        Create a new empty file without overwriting.

        Args:
            path: Path of the file to create

        Returns:
            CreateOutcome of the attempt
        """
        if os.path.lexists(path):
            return CreateOutcome.EXISTS
        try:
            fd = os.open(path, os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0o666)
        except FileExistsError:
            # Lost a race with another creator
            return CreateOutcome.EXISTS
        except OSError as e:
            self._logger.warning(f"Could not create file {path}: {e}")
            return CreateOutcome.ERROR
        os.close(fd)
        return CreateOutcome.CREATED

    @override
    def mkdir(self, path: str) -> CreateOutcome:
        """
        Create a single directory.

        Args:
            path: Directory path to create; its parent must exist

        Returns:
            CreateOutcome of the attempt
        """
        if os.path.lexists(path):
            return CreateOutcome.EXISTS
        try:
            os.mkdir(path)
        except FileExistsError:
            return CreateOutcome.EXISTS
        except OSError as e:
            self._logger.warning(f"Could not create directory {path}: {e}")
            return CreateOutcome.ERROR
        return CreateOutcome.CREATED

    @override
    def rename(self, source: str, destination: str) -> None:
        try:
            os.rename(source, destination)
        except OSError as e:
            if e.errno == errno.EXDEV:
                raise CrossDeviceError(
                    f"Cannot rename {source} to {destination} across devices"
                )
            raise FileRepositoryError(
                f"Failed to rename {source} to {destination}: {str(e)}"
            )

    @override
    def unlink(self, path: str) -> None:
        try:
            os.unlink(path)
        except OSError as e:
            raise FileRepositoryError(f"Failed to remove {path}: {str(e)}")
