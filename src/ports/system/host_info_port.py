from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CpuInfo:
    model: str
    speed_ghz: float


class HostInfoPort(ABC):
    """Facts about the host the file manager runs on.

    Implementations raise HostInfoError when a fact cannot be queried.
    """

    @abstractmethod
    def eol(self) -> str: ...

    @abstractmethod
    def cpus(self) -> list[CpuInfo]: ...

    @abstractmethod
    def homedir(self) -> str: ...

    @abstractmethod
    def username(self) -> str: ...

    @abstractmethod
    def architecture(self) -> str: ...
