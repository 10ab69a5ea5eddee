"""
Tests for the PowerShell and dry-run hosts.
"""

import io
import subprocess
from unittest.mock import patch

import pytest
from hvswitch_core.errors import HostCommandError
from hvswitch_core.host import DryRunHost, PowerShellHost
from hvswitch_core.host.commands import HostCommand
from rich.console import Console

COMMAND = HostCommand("Rename-NetAdapter", (("Name", "vEthernet (LM)"), ("NewName", "LM")))


def _completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestPowerShellHost:
    """Test command execution through a PowerShell process."""

    @patch("hvswitch_core.host.powershell.subprocess.run")
    def test_success_returns_stdout(self, mock_run):
        mock_run.return_value = _completed(stdout="ok\n")

        host = PowerShellHost("pwsh")
        assert host.run(COMMAND) == "ok\n"

        argv = mock_run.call_args.args[0]
        assert argv[:4] == ["pwsh", "-NoProfile", "-NonInteractive", "-Command"]
        assert argv[4] == "$ErrorActionPreference = 'Stop'; " + COMMAND.render()
        assert "timeout" not in mock_run.call_args.kwargs

    @patch("hvswitch_core.host.powershell.subprocess.run")
    def test_nonzero_exit_raises(self, mock_run):
        mock_run.return_value = _completed(returncode=1, stderr="Cannot find adapter 'vEthernet (LM)'\n")

        with pytest.raises(HostCommandError) as excinfo:
            PowerShellHost("pwsh").run(COMMAND)

        err = excinfo.value
        assert err.returncode == 1
        assert err.command == COMMAND.render()
        assert "Cannot find adapter" in str(err)
        assert isinstance(err, RuntimeError)

    @patch("hvswitch_core.host.powershell.subprocess.run")
    def test_missing_executable_raises(self, mock_run):
        mock_run.side_effect = FileNotFoundError("No such file or directory")

        with pytest.raises(HostCommandError) as excinfo:
            PowerShellHost("missing-pwsh").run(COMMAND)

        assert excinfo.value.returncode is None
        assert "missing-pwsh" in str(excinfo.value)

    def test_default_executable(self, monkeypatch):
        # environment lookup belongs to the CLI option, not the host
        monkeypatch.setenv("HVSWITCH_POWERSHELL", "/opt/pwsh/pwsh")
        assert PowerShellHost().executable == "powershell.exe"


class TestDryRunHost:
    """Test that the dry-run host records and prints without executing."""

    @patch("hvswitch_core.host.powershell.subprocess.run")
    def test_records_and_prints(self, mock_run):
        buffer = io.StringIO()
        host = DryRunHost(Console(file=buffer, width=200))

        assert host.run(COMMAND) == ""

        assert host.commands == [COMMAND]
        assert "Rename-NetAdapter -Name 'vEthernet (LM)' -NewName 'LM'" in buffer.getvalue()
        mock_run.assert_not_called()
