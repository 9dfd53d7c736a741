"""
Use case for creating a directory.
"""

import logging
from typing import Optional

from src.entities.Outcome import CreateOutcome
from src.entities.Session import Session
from src.exceptions import OperationFailedError
from src.ports.files.file_repository_port import FileRepositoryPort


class CreateDirectoryUseCase:
    """Use case for creating one directory (no parents)."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, name: str) -> str:
        path = session.resolve(name)
        outcome = self._file_repository.mkdir(path)
        if outcome is not CreateOutcome.CREATED:
            self._logger.warning(f"Could not create directory {path}: {outcome.value}")
            raise OperationFailedError(f"Failed to create directory: {path}")
        self._logger.info(f"Created directory: {path}")
        return path
