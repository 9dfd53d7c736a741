"""
Tests for the CopyFileUseCase and MoveFileUseCase.
"""

import os
from unittest.mock import patch

import pytest

from src.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from src.exceptions import (
    CrossDeviceError,
    FileRepositoryError,
    InvalidInputError,
    OperationFailedError,
)
from src.use_cases.files.copy_file import CopyFileUseCase
from src.use_cases.files.move_file import MoveFileUseCase


def _read(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


@pytest.fixture
def repository(mock_logger):
    return LocalFileSystemAdapter(mock_logger)


@pytest.fixture
def copy_uc(repository, mock_logger):
    return CopyFileUseCase(repository, chunk_size=3, logger=mock_logger)


@pytest.fixture
def move_uc(repository, copy_uc, mock_logger):
    return MoveFileUseCase(repository, copy_uc, mock_logger)


class TestCopyFileUseCase:
    """Test cases for the CopyFileUseCase."""

    def test_copy_into_directory(self, session, temp_directory, copy_uc):
        dest = copy_uc.execute(session, "test1.txt", "subdir")
        assert dest == os.path.join(temp_directory, "subdir", "test1.txt")
        assert _read(dest) == b"This is a test file."
        assert os.path.exists(os.path.join(temp_directory, "test1.txt"))

    def test_source_must_be_a_file(self, session, copy_uc):
        with pytest.raises(InvalidInputError):
            copy_uc.execute(session, "subdir", ".")

    def test_destination_must_be_a_directory(self, session, copy_uc):
        with pytest.raises(InvalidInputError):
            copy_uc.execute(session, "test1.txt", "test2.py")
        with pytest.raises(InvalidInputError):
            copy_uc.execute(session, "test1.txt", "missing")

    def test_copy_onto_itself_is_invalid(self, session, temp_directory, copy_uc):
        with pytest.raises(InvalidInputError, match="same"):
            copy_uc.execute(session, "test1.txt", ".")
        assert _read(os.path.join(temp_directory, "test1.txt")) == b"This is a test file."

    def test_write_error_removes_partial_copy(self, session, temp_directory, repository, copy_uc):
        dest = os.path.join(temp_directory, "subdir", "test1.txt")
        with patch.object(repository, "open_write", side_effect=FileRepositoryError("disk full")):
            with pytest.raises(OperationFailedError, match="disk full"):
                copy_uc.execute(session, "test1.txt", "subdir")
        assert not os.path.exists(dest)

    def test_read_error_keeps_existing_destination(self, session, temp_directory, repository, copy_uc):
        dest = os.path.join(temp_directory, "subdir", "test1.txt")
        with open(dest, "wb") as f:
            f.write(b"older copy")
        with patch.object(repository, "open_read", side_effect=FileRepositoryError("permission denied")):
            with pytest.raises(OperationFailedError, match="permission denied"):
                copy_uc.execute(session, "test1.txt", "subdir")
        assert _read(dest) == b"older copy"

    def test_error_mid_stream_removes_partial_copy(self, session, temp_directory, copy_uc):
        dest = os.path.join(temp_directory, "subdir", "test1.txt")
        with patch("src.use_cases.files.copy_file.pipe", side_effect=OSError("I/O error")):
            with pytest.raises(OperationFailedError, match="I/O error"):
                copy_uc.execute(session, "test1.txt", "subdir")
        assert not os.path.exists(dest)


class TestMoveFileUseCase:
    """Test cases for the MoveFileUseCase."""

    def test_move_with_rename(self, session, temp_directory, move_uc):
        dest = move_uc.execute(session, "test2.py", "subdir")
        assert not os.path.exists(os.path.join(temp_directory, "test2.py"))
        assert _read(dest) == b"print('Hello, world!')"

    def test_move_falls_back_across_devices(self, session, temp_directory, repository, move_uc):
        with patch.object(repository, "rename", side_effect=CrossDeviceError("EXDEV")):
            dest = move_uc.execute(session, "test2.py", "subdir")
        assert not os.path.exists(os.path.join(temp_directory, "test2.py"))
        assert _read(dest) == b"print('Hello, world!')"

    def test_move_falls_back_on_any_rename_failure(self, session, temp_directory, repository, move_uc):
        with patch.object(repository, "rename", side_effect=FileRepositoryError("busy")):
            dest = move_uc.execute(session, "test1.txt", "subdir")
        assert os.path.isfile(dest)
        assert not os.path.exists(os.path.join(temp_directory, "test1.txt"))

    def test_source_left_behind_when_delete_fails(self, session, temp_directory, repository, move_uc):
        """A copy that succeeded stays; the source is not rolled back."""
        with patch.object(repository, "rename", side_effect=CrossDeviceError("EXDEV")), \
                patch.object(repository, "unlink", side_effect=FileRepositoryError("denied")):
            with pytest.raises(OperationFailedError, match="denied"):
                move_uc.execute(session, "test1.txt", "subdir")
        assert os.path.isfile(os.path.join(temp_directory, "test1.txt"))
        assert os.path.isfile(os.path.join(temp_directory, "subdir", "test1.txt"))

    def test_fallback_read_error_keeps_existing_destination(self, session, temp_directory, repository, move_uc):
        dest = os.path.join(temp_directory, "subdir", "test1.txt")
        with open(dest, "wb") as f:
            f.write(b"older copy")
        with patch.object(repository, "rename", side_effect=CrossDeviceError("EXDEV")), \
                patch.object(repository, "open_read", side_effect=FileRepositoryError("permission denied")):
            with pytest.raises(OperationFailedError):
                move_uc.execute(session, "test1.txt", "subdir")
        assert _read(dest) == b"older copy"
        assert os.path.isfile(os.path.join(temp_directory, "test1.txt"))

    def test_same_preconditions_as_copy(self, session, move_uc):
        with pytest.raises(InvalidInputError):
            move_uc.execute(session, "subdir", "subdir")
        with pytest.raises(InvalidInputError):
            move_uc.execute(session, "test1.txt", "nowhere")
