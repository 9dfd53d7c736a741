"""
Use cases for compressing and decompressing files.
"""

import logging
from typing import Optional

from src.entities.Session import Session
from src.exceptions import (
    CodecError,
    FileRepositoryError,
    InvalidInputError,
    OperationFailedError,
)
from src.ports.codecs.codec_port import CodecPort, TransformStage
from src.ports.files.file_repository_port import FileRepositoryPort
from src.use_cases.files.preconditions import (
    discard_partial,
    inspect,
    require_directory,
    require_file,
)
from src.utils.streams import DEFAULT_CHUNK_SIZE, pipe


class TransformFileUseCase:
    """Streams a file through one codec stage into a destination file."""

    action = "transform"

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
            codec: Provider of transform stages
            chunk_size: Bytes per streamed chunk
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._codec = codec
        self._chunk_size = chunk_size
        self._logger = logger or logging.getLogger(__name__)

    def _stage(self) -> TransformStage:
        raise NotImplementedError

    def execute(self, session: Session, source_arg: str, dest_arg: str) -> str:
        """
        Transform ``source_arg`` into ``dest_arg``.

        Args:
            session: Session used to resolve the paths
            source_arg: Path of the input file
            dest_arg: Path of the output file (its parent must exist)

        Returns:
            Absolute path of the written file

        Raises:
            InvalidInputError: If the source is not a file, the destination's
                parent is missing, or the destination is a directory or the source
            OperationFailedError: If any read, write or transform step fails
        """
        source = session.resolve(source_arg)
        destination = session.resolve(dest_arg)
        require_file(self._file_repository, source)
        require_directory(self._file_repository, session.resolver.dirname(destination))
        if destination == source:
            raise InvalidInputError(f"Source and destination are the same: {source}")
        if inspect(self._file_repository, destination).is_dir:
            raise InvalidInputError(f"Destination is a directory: {destination}")

        self._logger.info(f"Starting {self.action}: {source} -> {destination}")
        opened = False
        try:
            with self._file_repository.open_read(source) as reader:
                with self._file_repository.open_write(destination) as writer:
                    opened = True
                    size = pipe(
                        reader, writer, stages=[self._stage()], chunk_size=self._chunk_size
                    )
        except (FileRepositoryError, CodecError, OSError) as e:
            self._logger.error(f"Error during {self.action} of {source}: {e}")
            if opened:
                discard_partial(self._file_repository, destination, self._logger)
            raise OperationFailedError(f"Failed to {self.action} {source}: {str(e)}")
        self._logger.info(f"Wrote {size} bytes to {destination}")
        return destination


class CompressFileUseCase(TransformFileUseCase):
    """Use case for compressing a file."""

    action = "compress"

    def _stage(self) -> TransformStage:
        return self._codec.compressor()


class DecompressFileUseCase(TransformFileUseCase):
    """Use case for decompressing a file."""

    action = "decompress"

    def _stage(self) -> TransformStage:
        return self._codec.decompressor()
