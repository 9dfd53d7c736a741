"""
Use case for streaming a file's contents to the terminal.
"""

import codecs
import logging
from typing import Callable, Optional

from src.entities.Session import Session
from src.exceptions import FileRepositoryError, OperationFailedError
from src.ports.files.file_repository_port import FileRepositoryPort
from src.use_cases.files.preconditions import require_file
from src.utils.streams import DEFAULT_CHUNK_SIZE, pipe


class ReadFileUseCase:
    """Use case for reading a file as UTF-8 text."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._chunk_size = chunk_size
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, target: str, sink: Callable[[str], None]) -> int:
        """
        Stream the decoded contents of ``target`` into ``sink``.

        Args:
            session: Session used to resolve the path
            target: Path argument as typed by the user
            sink: Receives decoded text chunks as they are read

        Returns:
            Number of bytes read

        Raises:
            InvalidInputError: If the target is missing or not a regular file
            OperationFailedError: If reading fails
        """
        path = session.resolve(target)
        require_file(self._file_repository, path)
        self._logger.info(f"Reading file: {path}")
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

        def _decode(data: bytes) -> None:
            text = decoder.decode(data)
            if text:
                sink(text)

        try:
            with self._file_repository.open_read(path) as reader:
                size = pipe(reader, sink=_decode, chunk_size=self._chunk_size)
            tail = decoder.decode(b"", final=True)
            if tail:
                sink(tail)
            return size
        except (FileRepositoryError, OSError) as e:
            self._logger.error(f"Error reading file {path}: {e}")
            raise OperationFailedError(f"Failed to read {path}: {str(e)}")
