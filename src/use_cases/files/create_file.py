"""
Use case for creating an empty file.
"""

import logging
from typing import Optional

from src.entities.Outcome import CreateOutcome
from src.entities.Session import Session
from src.exceptions import OperationFailedError
from src.ports.files.file_repository_port import FileRepositoryPort


class CreateFileUseCase:
    """Use case for creating a new empty file without overwriting."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, name: str) -> str:
        """
        Create ``name`` relative to the current directory.

        Returns:
            Absolute path of the created file

        Raises:
            OperationFailedError: If the file exists or cannot be created
        """
        path = session.resolve(name)
        outcome = self._file_repository.create_file(path)
        if outcome is CreateOutcome.EXISTS:
            self._logger.warning(f"File already exists: {path}")
            raise OperationFailedError(f"File already exists: {path}")
        if outcome is CreateOutcome.ERROR:
            raise OperationFailedError(f"Failed to create file: {path}")
        self._logger.info(f"Created file: {path}")
        return path
