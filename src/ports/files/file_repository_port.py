"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO

from src.entities.Entry import Entry, PathInfo
from src.entities.Outcome import CreateOutcome


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
    def stat(self, path: str) -> PathInfo:
        """
        Query existence and type of a path.

        Args:
            path: Absolute path to inspect

        Returns:
            PathInfo describing the path (``exists=False`` when missing)

        Raises:
            FileRepositoryError: If the query fails for another reason
        """
        pass

    @abstractmethod
    def list_entries(self, directory: str) -> list[Entry]:
        """
        List the children of a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            List of Entry entities in no particular order

        Raises:
            FileRepositoryError: If listing fails
        """
        pass

    @abstractmethod
    def open_read(self, path: str) -> BinaryIO:
        """
        Open a file for streamed binary reading.

        Raises:
            FileRepositoryError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def open_write(self, path: str, exclusive: bool = False) -> BinaryIO:
        """
        Open a file for streamed binary writing.

        Args:
            path: Path of the file to write
            exclusive: Fail if the file already exists instead of truncating it

        Raises:
            FileRepositoryError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def create_file(self, path: str) -> CreateOutcome:
        """
        Create a new empty file, never overwriting an existing one.

        Returns:
            CREATED, EXISTS if a file of that name is already there, or ERROR
        """
        pass

    @abstractmethod
    def mkdir(self, path: str) -> CreateOutcome:
        """
        Create a single directory (parents are not created).

        Returns:
            CREATED, EXISTS if the path is already taken, or ERROR
        """
        pass

    @abstractmethod
    def rename(self, source: str, destination: str) -> None:
        """
        Atomically rename an entry.

        Raises:
            CrossDeviceError: If source and destination are on different devices
            FileRepositoryError: If the rename fails for another reason
        """
        pass

    @abstractmethod
    def unlink(self, path: str) -> None:
        """
        Remove a file.

        Raises:
            FileRepositoryError: If removal fails
        """
        pass
