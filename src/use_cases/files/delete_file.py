"""
Use case for deleting a file.
"""

import logging
from typing import Optional

from src.entities.Session import Session
from src.exceptions import FileRepositoryError, OperationFailedError
from src.ports.files.file_repository_port import FileRepositoryPort
from src.use_cases.files.preconditions import require_file


class DeleteFileUseCase:
    """Use case for removing a regular file."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, target: str) -> str:
        """
        Delete ``target``; directories are refused.

        Raises:
            InvalidInputError: If the target is missing or not a regular file
            OperationFailedError: If removal fails
        """
        path = session.resolve(target)
        require_file(self._file_repository, path)
        try:
            self._logger.info(f"Deleting file: {path}")
            self._file_repository.unlink(path)
        except FileRepositoryError as e:
            self._logger.error(f"Error deleting file: {e}")
            raise OperationFailedError(str(e))
        return path
