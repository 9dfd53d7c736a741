"""
Use case for listing the current directory.
"""

import locale
import logging
from typing import Optional

from src.entities.Entry import Entry
from src.entities.Session import Session
from src.exceptions import FileRepositoryError, OperationFailedError
from src.ports.files.file_repository_port import FileRepositoryPort


def _collation_key(entry: Entry) -> tuple[str, str]:
    return (locale.strxfrm(entry.name.casefold()), entry.name)


class ListDirectoryUseCase:
    """Use case for listing directories then files of the current directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session) -> list[Entry]:
        """
        List the current directory.

        Directories come first, then files, each group sorted with the active
        collation. Entries that are neither are left out.

        Args:
            session: Session whose current directory is listed

        Returns:
            Ordered list of Entry entities

        Raises:
            OperationFailedError: If listing fails
        """
        directory = session.current_directory
        try:
            self._logger.info(f"Listing directory: {directory}")
            entries = self._file_repository.list_entries(directory)
        except FileRepositoryError as e:
            self._logger.error(f"Error listing directory: {e}")
            raise OperationFailedError(str(e))
        dirs = sorted((e for e in entries if e.is_dir), key=_collation_key)
        files = sorted((e for e in entries if e.is_file), key=_collation_key)
        self._logger.info(f"Found {len(dirs)} directories and {len(files)} files")
        return dirs + files
