"""
Session domain entity holding the current working directory.
"""

import logging
from typing import Optional

from src.exceptions import ConfigurationError
from src.utils.workspace import PathResolver, is_within


class Session:
    """
    Interactive session state.

    ``current_directory`` is always absolute, normalized and inside
    ``root_of_start``. It only changes through ``navigate_up`` and
    ``change_to``.
    """

    def __init__(
        self,
        username: str,
        start_directory: str,
        resolver: Optional[PathResolver] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the session.

        Args:
            username: Name used in the welcome and farewell messages
            start_directory: Absolute directory the session starts in
            resolver: Path resolver (defaults to the host path flavour)
            logger: Logger instance to use for logging

        Raises:
            ConfigurationError: If the username is empty or the start directory is relative
        """
        if not username or not username.strip():
            raise ConfigurationError("Username must be a non-empty string")
        self._resolver = resolver or PathResolver()
        p = self._resolver.path_module
        if not start_directory or not p.isabs(start_directory):
            raise ConfigurationError(
                f"Start directory must be an absolute path: {start_directory!r}"
            )
        self._logger = logger or logging.getLogger(__name__)
        self.username = username
        self._current = p.normpath(start_directory)
        self.root_of_start = self._resolver.root(self._current)

    @property
    def resolver(self) -> PathResolver:
        return self._resolver

    @property
    def current_directory(self) -> str:
        return self._current

    @property
    def boundary(self) -> str:
        """Confinement boundary derived from the current directory."""
        return self._resolver.root(self._current)

    def resolve(self, raw: str) -> str:
        return self._resolver.resolve(raw, self._current)

    def at_root(self) -> bool:
        return self._current == self.boundary

    def navigate_up(self) -> None:
        """Move to the parent directory; a no-op at the root."""
        if self.at_root():
            return
        self._current = self._resolver.dirname(self._current)
        self._logger.debug(f"Navigated up to {self._current}")

    def change_to(self, destination: str) -> bool:
        """
        Move to an already validated directory.

        Returns:
            True if the directory changed, False if ``destination`` lies outside
            the confinement boundary (state left untouched)
        """
        if not is_within(destination, self.boundary, self._resolver.path_module):
            self._logger.warning(f"Refusing to leave {self.boundary}: {destination}")
            return False
        self._current = self._resolver.path_module.normpath(destination)
        return True

    def __repr__(self) -> str:
        return f"Session(username='{self.username}', cwd='{self._current}')"
