"""
Local host information adapter built on the stdlib and psutil.
"""

import getpass
import logging
import os
import platform
from typing import Optional

import psutil
from typing_extensions import override

from src.exceptions import HostInfoError
from src.ports.system.host_info_port import CpuInfo, HostInfoPort

CPUINFO_PATH = "/proc/cpuinfo"


class LocalHostInfoAdapter(HostInfoPort):
    """Reads host facts for the ``os`` command."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def _cpu_models(self) -> list[str]:
        """Model names per logical CPU, best-effort."""
        models: list[str] = []
        try:
            with open(CPUINFO_PATH, "r", encoding="utf-8", errors="replace") as f:
                for line in f:
                    key, _, value = line.partition(":")
                    if key.strip() == "model name":
                        models.append(value.strip())
        except OSError:
            pass
        return models

    @override
    def eol(self) -> str:
        return os.linesep

    @override
    def cpus(self) -> list[CpuInfo]:
        try:
            count = psutil.cpu_count(logical=True) or os.cpu_count() or 0
            freqs = psutil.cpu_freq(percpu=True) or []
        except Exception as e:
            raise HostInfoError(f"Failed to query CPUs: {e}")
        models = self._cpu_models()
        fallback_model = platform.processor() or platform.machine() or "unknown"
        cpus: list[CpuInfo] = []
        for i in range(count):
            model = models[i] if i < len(models) else fallback_model
            freq = freqs[i] if i < len(freqs) else (freqs[0] if freqs else None)
            # psutil reports MHz
            speed = round(freq.current / 1000, 2) if freq and freq.current else 0.0
            cpus.append(CpuInfo(model=model, speed_ghz=speed))
        return cpus

    @override
    def homedir(self) -> str:
        home = os.path.expanduser("~")
        if home == "~":
            raise HostInfoError("Home directory cannot be determined")
        return home

    @override
    def username(self) -> str:
        try:
            return getpass.getuser()
        except Exception as e:
            raise HostInfoError(f"Failed to query OS user name: {e}")

    @override
    def architecture(self) -> str:
        arch = platform.machine()
        if not arch:
            raise HostInfoError("Architecture cannot be determined")
        return arch
