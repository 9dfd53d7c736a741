"""
Use case for computing a file's content digest.
"""

import logging
from typing import Optional

from src.entities.Session import Session
from src.exceptions import FileRepositoryError, OperationFailedError
from src.ports.codecs.codec_port import CodecPort
from src.ports.files.file_repository_port import FileRepositoryPort
from src.use_cases.files.preconditions import require_file
from src.utils.streams import DEFAULT_CHUNK_SIZE, pipe


class HashFileUseCase:
    """Use case for hashing a file without loading it into memory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        codec: CodecPort,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            codec: Provider of digest accumulators
            chunk_size: Bytes per streamed chunk
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._codec = codec
        self._chunk_size = chunk_size
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, target: str) -> str:
        """
        Hash ``target``.

        Returns:
            Hex digest of the file contents

        Raises:
            InvalidInputError: If the target is missing or not a regular file
            OperationFailedError: If reading fails
        """
        path = session.resolve(target)
        require_file(self._file_repository, path)
        digest = self._codec.new_digest()
        try:
            with self._file_repository.open_read(path) as reader:
                pipe(reader, digest=digest, chunk_size=self._chunk_size)
        except (FileRepositoryError, OSError) as e:
            self._logger.error(f"Error hashing file {path}: {e}")
            raise OperationFailedError(f"Failed to hash {path}: {str(e)}")
        hexdigest = digest.hexdigest()
        self._logger.info(f"Hashed {path}: {hexdigest}")
        return hexdigest
