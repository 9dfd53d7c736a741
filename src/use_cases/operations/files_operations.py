"""
Operations on files and directories mapped to the Files use cases.
"""

import logging
from typing import Optional

from typing_extensions import override

from src.entities.Outcome import OperationResult
from src.entities.Session import Session
from src.ports.shell.operations_port import OperationsHandlerPort, OperationSpec
from src.ports.terminal.terminal_port import TerminalPort
from src.use_cases.files.copy_file import CopyFileUseCase
from src.use_cases.files.create_directory import CreateDirectoryUseCase
from src.use_cases.files.create_file import CreateFileUseCase
from src.use_cases.files.delete_file import DeleteFileUseCase
from src.use_cases.files.move_file import MoveFileUseCase
from src.use_cases.files.read_file import ReadFileUseCase
from src.use_cases.files.rename_entry import RenameEntryUseCase


def _spec(name: str, usage: str, description: str, arity: int) -> OperationSpec:
    return {
        "name": name,
        "usage": usage,
        "description": description,
        "arity": arity,
        "rest_of_line": True,
    }


class FilesOperationsHandler(OperationsHandlerPort):
    """Handler for the file-related shell commands."""

    def __init__(
        self,
        read_file_uc: ReadFileUseCase,
        create_file_uc: CreateFileUseCase,
        create_directory_uc: CreateDirectoryUseCase,
        rename_entry_uc: RenameEntryUseCase,
        copy_file_uc: CopyFileUseCase,
        move_file_uc: MoveFileUseCase,
        delete_file_uc: DeleteFileUseCase,
        terminal: TerminalPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the files operations handler.

        Args:
            read_file_uc: Use case for ``cat``
            create_file_uc: Use case for ``add``
            create_directory_uc: Use case for ``mkdir``
            rename_entry_uc: Use case for ``rn``
            copy_file_uc: Use case for ``cp``
            move_file_uc: Use case for ``mv``
            delete_file_uc: Use case for ``rm``
            terminal: Where ``cat`` streams file contents
            logger: Logger instance to use for logging
        """
        self._read_file_uc = read_file_uc
        self._create_file_uc = create_file_uc
        self._create_directory_uc = create_directory_uc
        self._rename_entry_uc = rename_entry_uc
        self._copy_file_uc = copy_file_uc
        self._move_file_uc = move_file_uc
        self._delete_file_uc = delete_file_uc
        self._terminal = terminal
        self._logger = logger or logging.getLogger(__name__)

    @override
    def available_operations(self) -> list[OperationSpec]:
        return [
            _spec("cat", "cat <path>", "Print a file's contents.", 1),
            _spec("add", "add <name>", "Create an empty file.", 1),
            _spec("mkdir", "mkdir <name>", "Create a directory.", 1),
            _spec("rn", "rn <path> <new name>", "Rename a file or directory in place.", 2),
            _spec("cp", "cp <file> <directory>", "Copy a file into a directory.", 2),
            _spec("mv", "mv <file> <directory>", "Move a file into a directory.", 2),
            _spec("rm", "rm <file>", "Delete a file.", 1),
        ]

    def _cat(self, session: Session, target: str) -> None:
        streamed = False

        def _write(text: str) -> None:
            nonlocal streamed
            streamed = True
            self._terminal.write(text)

        try:
            self._read_file_uc.execute(session, target, _write)
        except Exception:
            # Keep the outcome message off the partial content line
            if streamed:
                self._terminal.print_line()
            raise
        self._terminal.print_line()

    @override
    def dispatch(
        self, name: str, arguments: list[str], session: Session
    ) -> OperationResult:
        if name == "cat":
            self._cat(session, arguments[0])
        elif name == "add":
            self._create_file_uc.execute(session, arguments[0])
        elif name == "mkdir":
            self._create_directory_uc.execute(session, arguments[0])
        elif name == "rn":
            self._rename_entry_uc.execute(session, arguments[0], arguments[1])
        elif name == "cp":
            self._copy_file_uc.execute(session, arguments[0], arguments[1])
        elif name == "mv":
            self._move_file_uc.execute(session, arguments[0], arguments[1])
        elif name == "rm":
            self._delete_file_uc.execute(session, arguments[0])
        else:
            raise ValueError(f"Unknown operation: {name}")
        return OperationResult.SUCCESS
