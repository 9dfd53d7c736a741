"""
Dependency injection container for managing application dependencies.
"""

import logging

from src.adapters.codecs.gzip_codec_adapter import GzipCodecAdapter
from src.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from src.adapters.system.local_host_info_adapter import LocalHostInfoAdapter
from src.adapters.terminal.console_terminal_adapter import ConsoleTerminalAdapter
from src.config.settings import settings
from src.entities.Session import Session
from src.ports.codecs.codec_port import CodecPort
from src.ports.files.file_repository_port import FileRepositoryPort
from src.ports.system.host_info_port import HostInfoPort
from src.ports.terminal.terminal_port import TerminalPort
from src.use_cases.codecs.hash_file import HashFileUseCase
from src.use_cases.codecs.transform_file import (
    CompressFileUseCase,
    DecompressFileUseCase,
)
from src.use_cases.files.copy_file import CopyFileUseCase
from src.use_cases.files.create_directory import CreateDirectoryUseCase
from src.use_cases.files.create_file import CreateFileUseCase
from src.use_cases.files.delete_file import DeleteFileUseCase
from src.use_cases.files.list_directory import ListDirectoryUseCase
from src.use_cases.files.move_file import MoveFileUseCase
from src.use_cases.files.read_file import ReadFileUseCase
from src.use_cases.files.rename_entry import RenameEntryUseCase
from src.use_cases.navigation.change_directory import ChangeDirectoryUseCase
from src.use_cases.navigation.navigate_up import NavigateUpUseCase
from src.use_cases.operations.codecs_operations import CodecsOperationsHandler
from src.use_cases.operations.files_operations import FilesOperationsHandler
from src.use_cases.operations.navigation_operations import (
    NavigationOperationsHandler,
)
from src.use_cases.operations.registry import OperationRegistry
from src.use_cases.operations.system_operations import SystemOperationsHandler
from src.use_cases.shell.interpreter import CommandInterpreter
from src.use_cases.system.system_info import SystemInfoUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_repository"]

    def get_codec(self) -> CodecPort:
        """
        Get codec adapter instance.

        Returns:
            CodecPort implementation
        """
        if "codec" not in self._instances:
            self._instances["codec"] = GzipCodecAdapter(logger=self._logger)
        return self._instances["codec"]

    def get_host_info(self) -> HostInfoPort:
        if "host_info" not in self._instances:
            self._instances["host_info"] = LocalHostInfoAdapter(logger=self._logger)
        return self._instances["host_info"]

    def get_terminal(self) -> TerminalPort:
        """
        Get terminal adapter instance.

        Returns:
            TerminalPort implementation
        """
        if "terminal" not in self._instances:
            self._instances["terminal"] = ConsoleTerminalAdapter(logger=self._logger)
        return self._instances["terminal"]

    def use_terminal(self, terminal: TerminalPort) -> None:
        """Replace the terminal transport (must happen before handlers are built)."""
        self._instances["terminal"] = terminal

    def get_copy_file_use_case(self) -> CopyFileUseCase:
        if "copy_file_use_case" not in self._instances:
            self._instances["copy_file_use_case"] = CopyFileUseCase(
                self.get_file_repository(), settings.chunk_size, self._logger
            )
        return self._instances["copy_file_use_case"]

    def get_navigation_operations_handler(self) -> NavigationOperationsHandler:
        """
        Operations 'up', 'cd' and 'ls'.
        """
        if "navigation_operations_handler" not in self._instances:
            file_repository = self.get_file_repository()
            self._instances["navigation_operations_handler"] = (
                NavigationOperationsHandler(
                    NavigateUpUseCase(self._logger),
                    ChangeDirectoryUseCase(file_repository, self._logger),
                    ListDirectoryUseCase(file_repository, self._logger),
                    self.get_terminal(),
                    self._logger,
                )
            )
        return self._instances["navigation_operations_handler"]

    def get_files_operations_handler(self) -> FilesOperationsHandler:
        """
        Operations on files backed by the Files use cases.
        """
        if "files_operations_handler" not in self._instances:
            file_repository = self.get_file_repository()
            copy_uc = self.get_copy_file_use_case()
            self._instances["files_operations_handler"] = FilesOperationsHandler(
                ReadFileUseCase(file_repository, settings.chunk_size, self._logger),
                CreateFileUseCase(file_repository, self._logger),
                CreateDirectoryUseCase(file_repository, self._logger),
                RenameEntryUseCase(file_repository, self._logger),
                copy_uc,
                MoveFileUseCase(file_repository, copy_uc, self._logger),
                DeleteFileUseCase(file_repository, self._logger),
                self.get_terminal(),
                self._logger,
            )
        return self._instances["files_operations_handler"]

    def get_codecs_operations_handler(self) -> CodecsOperationsHandler:
        if "codecs_operations_handler" not in self._instances:
            file_repository = self.get_file_repository()
            codec = self.get_codec()
            chunk = settings.chunk_size
            self._instances["codecs_operations_handler"] = CodecsOperationsHandler(
                HashFileUseCase(file_repository, codec, chunk, self._logger),
                CompressFileUseCase(file_repository, codec, chunk, self._logger),
                DecompressFileUseCase(file_repository, codec, chunk, self._logger),
                self.get_terminal(),
                self._logger,
            )
        return self._instances["codecs_operations_handler"]

    def get_system_operations_handler(self) -> SystemOperationsHandler:
        if "system_operations_handler" not in self._instances:
            self._instances["system_operations_handler"] = SystemOperationsHandler(
                SystemInfoUseCase(self.get_host_info(), self._logger),
                self.get_terminal(),
                self._logger,
            )
        return self._instances["system_operations_handler"]

    def get_operation_registry(self) -> OperationRegistry:
        """
        Get the registry of every shell operation.

        Returns:
            Configured OperationRegistry
        """
        if "operation_registry" not in self._instances:
            self._instances["operation_registry"] = OperationRegistry(
                self.get_navigation_operations_handler(),
                self.get_files_operations_handler(),
                self.get_codecs_operations_handler(),
                self.get_system_operations_handler(),
                logger=self._logger,
            )
        return self._instances["operation_registry"]

    def get_interpreter(self) -> CommandInterpreter:
        """
        Get the command interpreter with injected dependencies.

        Returns:
            Configured CommandInterpreter
        """
        if "interpreter" not in self._instances:
            self._instances["interpreter"] = CommandInterpreter(
                self.get_operation_registry(),
                self.get_terminal(),
                prompt=settings.prompt,
                logger=self._logger,
            )
        return self._instances["interpreter"]

    def create_session(self, username: str, start_directory: str) -> Session:
        """Create a session starting in ``start_directory``."""
        return Session(username, start_directory, logger=self._logger)

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
