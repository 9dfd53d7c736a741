"""
Operations "hash", "compress" and "decompress".
"""

import logging
from typing import Optional

from typing_extensions import override

from src.entities.Outcome import OperationResult
from src.entities.Session import Session
from src.ports.shell.operations_port import OperationsHandlerPort, OperationSpec
from src.ports.terminal.terminal_port import TerminalPort
from src.use_cases.codecs.hash_file import HashFileUseCase
from src.use_cases.codecs.transform_file import (
    CompressFileUseCase,
    DecompressFileUseCase,
)


class CodecsOperationsHandler(OperationsHandlerPort):
    def __init__(
        self,
        hash_file_uc: HashFileUseCase,
        compress_file_uc: CompressFileUseCase,
        decompress_file_uc: DecompressFileUseCase,
        terminal: TerminalPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._hash_file_uc = hash_file_uc
        self._compress_file_uc = compress_file_uc
        self._decompress_file_uc = decompress_file_uc
        self._terminal = terminal
        self._logger = logger or logging.getLogger(__name__)

    @override
    def available_operations(self) -> list[OperationSpec]:
        return [
            {
                "name": "hash",
                "usage": "hash <file>",
                "description": "Print the SHA-256 digest of a file.",
                "arity": 1,
                "rest_of_line": True,
            },
            {
                "name": "compress",
                "usage": "compress <file> <destination>",
                "description": "Compress a file (gzip) into a destination file.",
                "arity": 2,
                "rest_of_line": True,
            },
            {
                "name": "decompress",
                "usage": "decompress <file> <destination>",
                "description": "Decompress a gzip file into a destination file.",
                "arity": 2,
                "rest_of_line": True,
            },
        ]

    @override
    def dispatch(
        self, name: str, arguments: list[str], session: Session
    ) -> OperationResult:
        if name == "hash":
            self._terminal.print_line(self._hash_file_uc.execute(session, arguments[0]))
            return OperationResult.SUCCESS
        if name == "compress":
            self._compress_file_uc.execute(session, arguments[0], arguments[1])
            return OperationResult.SUCCESS
        if name == "decompress":
            self._decompress_file_uc.execute(session, arguments[0], arguments[1])
            return OperationResult.SUCCESS
        raise ValueError(f"Unknown operation: {name}")
