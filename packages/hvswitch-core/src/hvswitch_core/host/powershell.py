import logging
import subprocess

from hvswitch_core.errors import HostCommandError

from .base import NetworkHost
from .commands import HostCommand

logger = logging.getLogger("hvswitch.host")

DEFAULT_EXECUTABLE = "powershell.exe"


class PowerShellHost(NetworkHost):
    """Runs each command in a fresh, non-interactive PowerShell process."""

    def __init__(self, executable: str = DEFAULT_EXECUTABLE):
        self.executable = executable

    def _argv(self, command: HostCommand) -> list[str]:
        script = f"$ErrorActionPreference = 'Stop'; {command.render()}"
        return [self.executable, "-NoProfile", "-NonInteractive", "-Command", script]

    def run(self, command: HostCommand) -> str:
        rendered = command.render()
        logger.info("Running %s", rendered)
        try:
            result = subprocess.run(self._argv(command), capture_output=True, text=True)
        except OSError as e:
            raise HostCommandError(rendered, None, f"{self.executable}: {e}") from e

        if result.stdout:
            logger.debug("stdout: %s", result.stdout.strip())
        if result.returncode != 0:
            logger.debug("%s failed with status %d", command.cmdlet, result.returncode)
            raise HostCommandError(rendered, result.returncode, result.stderr or result.stdout)
        return result.stdout
