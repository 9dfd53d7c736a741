"""
Use case for moving a file into a directory.
"""

import logging
from typing import Optional

from src.entities.Session import Session
from src.exceptions import CrossDeviceError, FileRepositoryError, OperationFailedError
from src.ports.files.file_repository_port import FileRepositoryPort
from src.use_cases.files.copy_file import CopyFileUseCase


class MoveFileUseCase:
    """
    Use case for moving a file.

    An atomic rename is tried first. If it fails (typically across devices)
    the file is stream-copied and the source removed afterwards. A failure to
    remove the source after a successful copy leaves a duplicate behind; no
    rollback is attempted.
    """

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        copy_file_uc: CopyFileUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._copy_file_uc = copy_file_uc
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, source_arg: str, dest_dir_arg: str) -> str:
        """
        Move a file into a directory, keeping its name.

        Returns:
            Absolute path of the moved file

        Raises:
            InvalidInputError: Same preconditions as copy
            OperationFailedError: If both the rename and the fallback fail
        """
        source, destination = self._copy_file_uc.prepare(session, source_arg, dest_dir_arg)
        self._logger.info(f"Moving {source} to {destination}")
        try:
            self._file_repository.rename(source, destination)
            return destination
        except CrossDeviceError as e:
            self._logger.info(f"{e}; falling back to copy and delete")
        except FileRepositoryError as e:
            self._logger.warning(f"Atomic rename failed ({e}); falling back to copy and delete")

        self._copy_file_uc.copy(source, destination)
        try:
            self._file_repository.unlink(source)
        except FileRepositoryError as e:
            self._logger.error(f"Copied but could not remove source {source}: {e}")
            raise OperationFailedError(str(e))
        return destination
