"""
Use case for moving the session one directory up.
"""

import logging
from typing import Optional

from src.entities.Session import Session


class NavigateUpUseCase:
    """Use case for navigating to the parent directory."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session) -> str:
        """
        Move to the parent of the current directory; stay put at the root.

        Returns:
            The current directory afterwards
        """
        if session.at_root():
            self._logger.info(f"Already at root: {session.current_directory}")
        session.navigate_up()
        return session.current_directory
