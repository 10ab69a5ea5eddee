from .base import NetworkHost
from .commands import HostCommand
from .dryrun import DryRunHost
from .powershell import PowerShellHost

__all__ = ["DryRunHost", "HostCommand", "NetworkHost", "PowerShellHost"]
