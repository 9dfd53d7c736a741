"""
Use case for renaming an entry in place.
"""

import logging
from typing import Optional

from src.entities.Session import Session
from src.exceptions import FileRepositoryError, InvalidInputError, OperationFailedError
from src.ports.files.file_repository_port import FileRepositoryPort
from src.use_cases.files.preconditions import inspect


class RenameEntryUseCase:
    """Use case for renaming a file or directory within its parent."""

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

    def _validate_name(self, session: Session, new_name: str) -> None:
        p = session.resolver.path_module
        seps = {p.sep} | ({p.altsep} if p.altsep else set())
        if new_name in (".", "..") or any(s in new_name for s in seps):
            raise InvalidInputError(f"Not a plain file name: {new_name}")

    def execute(self, session: Session, old_path: str, new_name: str) -> str:
        """
        Rename ``old_path`` to ``new_name`` inside the same parent directory.

        Args:
            session: Session used to resolve the path
            old_path: Path of the entry to rename
            new_name: New bare name (no directory part)

        Returns:
            Absolute path after the rename

        Raises:
            InvalidInputError: If ``new_name`` is not a bare name
            OperationFailedError: If the source is missing, the target exists,
                or the rename fails
        """
        self._validate_name(session, new_name)
        source = session.resolve(old_path)
        destination = session.resolver.join(session.resolver.dirname(source), new_name)
        if not inspect(self._file_repository, source).exists:
            raise OperationFailedError(f"No such entry: {source}")
        if inspect(self._file_repository, destination).exists:
            raise OperationFailedError(f"Target already exists: {destination}")
        try:
            self._logger.info(f"Renaming {source} to {destination}")
            self._file_repository.rename(source, destination)
        except FileRepositoryError as e:
            self._logger.error(f"Error renaming: {e}")
            raise OperationFailedError(str(e))
        return destination
