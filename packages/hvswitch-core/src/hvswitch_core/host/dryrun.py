import logging

from rich.console import Console
from rich.markup import escape

from .base import NetworkHost
from .commands import HostCommand

logger = logging.getLogger("hvswitch.host")


class DryRunHost(NetworkHost):
    """Prints commands instead of running them; keeps them in `.commands`."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self.commands: list[HostCommand] = []

    def run(self, command: HostCommand) -> str:
        self.commands.append(command)
        logger.info("Dry run: %s", command.render())
        self.console.print(f"[dim]PS>[/dim] {escape(command.render())}", highlight=False, soft_wrap=True)
        return ""
