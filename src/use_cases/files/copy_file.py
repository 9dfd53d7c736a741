"""
Use case for copying a file into a directory.
"""

import logging
from typing import Optional

from src.entities.Session import Session
from src.exceptions import FileRepositoryError, InvalidInputError, OperationFailedError
from src.ports.files.file_repository_port import FileRepositoryPort
from src.use_cases.files.preconditions import (
    discard_partial,
    require_directory,
    require_file,
)
from src.utils.streams import DEFAULT_CHUNK_SIZE, pipe


class CopyFileUseCase:
    """Use case for stream-copying a file into a directory under its own name."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            chunk_size: Bytes per streamed chunk
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._chunk_size = chunk_size
        self._logger = logger or logging.getLogger(__name__)

    def prepare(self, session: Session, source_arg: str, dest_dir_arg: str) -> tuple[str, str]:
        """
        Resolve and validate a copy/move request.

        Returns:
            (source path, destination file path)

        Raises:
            InvalidInputError: If the source is not a file, the destination is
                not a directory, or the destination is the source itself
        """
        source = session.resolve(source_arg)
        dest_dir = session.resolve(dest_dir_arg)
        require_file(self._file_repository, source)
        require_directory(self._file_repository, dest_dir)
        destination = session.resolver.join(dest_dir, session.resolver.basename(source))
        if destination == source:
            raise InvalidInputError(f"Source and destination are the same: {source}")
        return source, destination

    def copy(self, source: str, destination: str) -> int:
        """
        Stream ``source`` into ``destination`` (truncating it).

        Returns:
            Number of bytes copied

        Raises:
            OperationFailedError: If any read or write fails
        """
        # Only output this call opened is ours to discard
        opened = False
        try:
            with self._file_repository.open_read(source) as reader:
                with self._file_repository.open_write(destination) as writer:
                    opened = True
                    return pipe(reader, writer, chunk_size=self._chunk_size)
        except (FileRepositoryError, OSError) as e:
            self._logger.error(f"Error copying {source} to {destination}: {e}")
            if opened:
                discard_partial(self._file_repository, destination, self._logger)
            raise OperationFailedError(f"Failed to copy {source}: {str(e)}")

    def execute(self, session: Session, source_arg: str, dest_dir_arg: str) -> str:
        """
        Copy a file into a directory.

        Args:
            session: Session used to resolve the paths
            source_arg: Path of the file to copy
            dest_dir_arg: Path of the destination directory

        Returns:
            Absolute path of the copy
        """
        source, destination = self.prepare(session, source_arg, dest_dir_arg)
        self._logger.info(f"Copying {source} to {destination}")
        size = self.copy(source, destination)
        self._logger.info(f"Copied {size} bytes")
        return destination
