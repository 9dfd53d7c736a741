"""
Tests for the SystemInfoUseCase.
"""

from unittest.mock import MagicMock

import pytest

from src.exceptions import HostInfoError, InvalidInputError, OperationFailedError
from src.ports.system.host_info_port import CpuInfo, HostInfoPort
from src.use_cases.system.system_info import SystemInfoUseCase


@pytest.fixture
def host_info():
    mock_host = MagicMock(spec=HostInfoPort)
    mock_host.eol.return_value = "\n"
    mock_host.cpus.return_value = [CpuInfo("Fast CPU", 3.2), CpuInfo("Fast CPU", 3.0)]
    mock_host.homedir.return_value = "/home/alice"
    mock_host.username.return_value = "alice"
    mock_host.architecture.return_value = "x86_64"
    return mock_host


class TestSystemInfoUseCase:
    def test_eol_is_escaped(self, host_info, mock_logger):
        assert SystemInfoUseCase(host_info, mock_logger).execute("--EOL") == ['"\\n"']

    def test_cpus(self, host_info, mock_logger):
        assert SystemInfoUseCase(host_info, mock_logger).execute("--cpus") == [
            "Overall amount of CPUS: 2",
            "Model: Fast CPU, Speed: 3.20 GHz",
            "Model: Fast CPU, Speed: 3.00 GHz",
        ]

    @pytest.mark.parametrize(
        "flag, expected",
        [("--homedir", "/home/alice"), ("--username", "alice"), ("--architecture", "x86_64")],
    )
    def test_single_value_flags(self, host_info, mock_logger, flag, expected):
        assert SystemInfoUseCase(host_info, mock_logger).execute(flag) == [expected]

    @pytest.mark.parametrize("flag", ["--eol", "cpus", "--memory"])
    def test_unknown_flag(self, host_info, mock_logger, flag):
        with pytest.raises(InvalidInputError):
            SystemInfoUseCase(host_info, mock_logger).execute(flag)

    def test_query_error(self, host_info, mock_logger):
        host_info.cpus.side_effect = HostInfoError("no cpu info")
        with pytest.raises(OperationFailedError, match="no cpu info"):
            SystemInfoUseCase(host_info, mock_logger).execute("--cpus")
