import logging
from typing import Optional

import click
from hvswitch_cli.guidance.guidance import guidance_option
from hvswitch_core.host.powershell import DEFAULT_EXECUTABLE


@click.command()
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print the PowerShell commands instead of running them.",
)
@click.option(
    "--powershell",
    type=str,
    envvar="HVSWITCH_POWERSHELL",
    default=DEFAULT_EXECUTABLE,
    show_default=True,
    help="PowerShell executable used to reach the Hyper-V cmdlets.",
)
@guidance_option
@click.option("--verbose", "-v", is_flag=True, help="Log every host command.")
def provision(dry_run: bool, powershell: str, guidance_path: Optional[str], verbose: bool) -> None:
    """Interactively create a SET switch and its cluster vNICs."""
    import sys

    from hvswitch_core.codebase.debug import configure_logger, trace_enabled
    from hvswitch_core.data.weight_guidance import load_weight_guidance
    from hvswitch_core.errors import HvSwitchError
    from hvswitch_core.host import DryRunHost, PowerShellHost
    from hvswitch_tools.prompts import OperatorPrompts
    from hvswitch_tools.provision import run_provisioning
    from rich.console import Console
    from rich.markup import escape

    console = Console()
    configure_logger(logging.DEBUG if verbose or trace_enabled() else logging.WARNING)

    try:
        guidance = load_weight_guidance(guidance_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error loading weight guidance: {escape(str(e))}[/red]", soft_wrap=True)
        sys.exit(1)

    host = DryRunHost(console) if dry_run else PowerShellHost(powershell)
    if dry_run:
        console.print("[yellow]Dry run: no changes will be made to this host.[/yellow]")

    try:
        run_provisioning(host, OperatorPrompts(console=console), guidance=guidance)
    except HvSwitchError as e:
        console.print(f"[red]Error during provisioning: {escape(str(e))}[/red]", soft_wrap=True)
        console.print("[yellow]Steps completed before the failure were left in place; nothing was rolled back.[/yellow]", soft_wrap=True)
        sys.exit(1)

    console.print("\n[green]✓[/green] Provisioning complete")
