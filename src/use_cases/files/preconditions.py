"""
Precondition checks shared by the file use cases.
"""

from src.entities.Entry import PathInfo
from src.exceptions import FileRepositoryError, InvalidInputError, OperationFailedError
from src.ports.files.file_repository_port import FileRepositoryPort


def inspect(file_repository: FileRepositoryPort, path: str) -> PathInfo:
    """Stat a path, turning collaborator failures into OperationFailedError."""
    try:
        return file_repository.stat(path)
    except FileRepositoryError as e:
        raise OperationFailedError(str(e))


def require_file(file_repository: FileRepositoryPort, path: str) -> None:
    """
    Ensure ``path`` is an existing regular file.

    Raises:
        InvalidInputError: If the path is missing or not a regular file
        OperationFailedError: If the path cannot be inspected
    """
    info = inspect(file_repository, path)
    if not info.exists:
        raise InvalidInputError(f"No such file: {path}")
    if not info.is_file:
        raise InvalidInputError(f"Not a regular file: {path}")


def require_directory(file_repository: FileRepositoryPort, path: str) -> None:
    """
    Ensure ``path`` is an existing directory.

    Raises:
        InvalidInputError: If the path is missing or not a directory
        OperationFailedError: If the path cannot be inspected
    """
    info = inspect(file_repository, path)
    if not info.exists:
        raise InvalidInputError(f"No such directory: {path}")
    if not info.is_dir:
        raise InvalidInputError(f"Not a directory: {path}")


def discard_partial(
    file_repository: FileRepositoryPort, path: str, logger
) -> None:
    """Best-effort removal of a destination left half-written by a failed stream."""
    try:
        if file_repository.stat(path).exists:
            file_repository.unlink(path)
            logger.info(f"Removed partial output: {path}")
    except FileRepositoryError as e:
        logger.warning(f"Could not remove partial output {path}: {e}")
