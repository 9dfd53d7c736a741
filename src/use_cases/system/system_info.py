"""
Use case for reporting host facts.
"""

import json
import logging
from typing import Callable, Optional

from src.exceptions import HostInfoError, InvalidInputError, OperationFailedError
from src.ports.system.host_info_port import HostInfoPort


class SystemInfoUseCase:
    """Use case answering ``os --<flag>`` queries."""

    def __init__(
        self,
        host_info: HostInfoPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._host_info = host_info
        self._logger = logger or logging.getLogger(__name__)
        self._queries: dict[str, Callable[[], list[str]]] = {
            "--EOL": self._eol,
            "--cpus": self._cpus,
            "--homedir": lambda: [self._host_info.homedir()],
            "--username": lambda: [self._host_info.username()],
            "--architecture": lambda: [self._host_info.architecture()],
        }

    @property
    def flags(self) -> list[str]:
        return list(self._queries)

    def _eol(self) -> list[str]:
        # Show the escaped form, e.g. "\n"
        return [json.dumps(self._host_info.eol())]

    def _cpus(self) -> list[str]:
        cpus = self._host_info.cpus()
        lines = [f"Overall amount of CPUS: {len(cpus)}"]
        lines.extend(f"Model: {c.model}, Speed: {c.speed_ghz:.2f} GHz" for c in cpus)
        return lines

    def execute(self, flag: str) -> list[str]:
        """
        Answer one flag.

        Args:
            flag: One of ``--EOL``, ``--cpus``, ``--homedir``, ``--username``,
                ``--architecture``

        Returns:
            Output lines

        Raises:
            InvalidInputError: If the flag is not recognized
            OperationFailedError: If the host query fails
        """
        query = self._queries.get(flag)
        if query is None:
            raise InvalidInputError(f"Unknown flag: {flag}")
        try:
            self._logger.info(f"Querying host info: {flag}")
            return query()
        except HostInfoError as e:
            self._logger.error(f"Error querying {flag}: {e}")
            raise OperationFailedError(str(e))
