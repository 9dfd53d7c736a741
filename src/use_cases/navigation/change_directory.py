"""
Use case for changing the session's current directory.
"""

import logging
from typing import Optional

from src.entities.Session import Session
from src.exceptions import InvalidInputError
from src.ports.files.file_repository_port import FileRepositoryPort
from src.use_cases.files.preconditions import inspect


class ChangeDirectoryUseCase:
    """Use case for changing directory within the confinement boundary."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository used to check the target
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, target: str) -> str:
        """
        Change to ``target``, relative to the current directory or absolute.

        Args:
            session: Session whose current directory changes
            target: Path argument as typed by the user

        Returns:
            The current directory afterwards

        Raises:
            InvalidInputError: If the target is missing or not a directory
            OperationFailedError: If the target cannot be inspected
        """
        destination = session.resolve(target)
        self._logger.info(f"Changing directory to: {destination}")
        info = inspect(self._file_repository, destination)
        if not info.exists or not info.is_dir:
            raise InvalidInputError(f"Not a directory: {destination}")
        session.change_to(destination)
        return session.current_directory
