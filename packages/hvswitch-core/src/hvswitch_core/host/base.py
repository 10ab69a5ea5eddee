from abc import ABC, abstractmethod

from .commands import HostCommand


class NetworkHost(ABC):
    """Executes networking cmdlets against the Hyper-V host."""

    @abstractmethod
    def run(self, command: HostCommand) -> str:
        """Run one command and return its standard output.

        Raises HostCommandError when the host rejects the command.
        """
        ...
