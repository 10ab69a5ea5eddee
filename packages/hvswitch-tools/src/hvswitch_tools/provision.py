"""SET switch and cluster vNIC provisioning.

The run is a straight line: create the switch, then for each vNIC apply its
steps in order. Steps are not transactional; when one fails the error
propagates and everything applied before it stays on the host.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from hvswitch_core.codebase.debug import trace
from hvswitch_core.data.weight_guidance import load_weight_guidance
from hvswitch_core.host import commands
from hvswitch_core.host.base import NetworkHost
from hvswitch_core.host.commands import HostCommand
from hvswitch_core.models.guidance import WeightGuidance
from hvswitch_core.models.switch import SwitchConfig, VNicConfig
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .prompts import OperatorPrompts

logger = logging.getLogger("hvswitch.provision")

TARGET_WEIGHT_TOTAL = 100

NEXT_STEPS = (
    "Verify the vNICs with Get-VMNetworkAdapter -ManagementOS and Get-VMNetworkAdapterVlan -ManagementOS.",
    "Assign cluster network roles (cluster only / cluster and client) in Failover Cluster Manager.",
    "Pick the Live Migration networks under Live Migration Settings.",
    "Repeat on every node with the same vNIC names and VLANs.",
)


@dataclass(frozen=True)
class ProvisionStep:
    label: str
    command: HostCommand


# ----------------------------
# Steps
# ----------------------------


def vnic_steps(switch_name: str, vnic: VNicConfig) -> list[ProvisionStep]:
    """Ordered host calls that bring one management-OS vNIC online."""
    return [
        ProvisionStep("attach", commands.add_management_adapter(switch_name, vnic)),
        ProvisionStep("rename", commands.rename_interface(vnic)),
        ProvisionStep("weight", commands.set_bandwidth_weight(vnic)),
        ProvisionStep("vlan", commands.set_access_vlan(vnic)),
        ProvisionStep("ip", commands.new_static_ip(vnic)),
    ]


@trace
def provision_switch(host: NetworkHost, switch: SwitchConfig) -> None:
    logger.info("Creating switch %s on %s", switch.name, ", ".join(switch.adapters))
    host.run(commands.new_vm_switch(switch))


@trace
def provision_vnic(host: NetworkHost, switch_name: str, vnic: VNicConfig) -> None:
    for step in vnic_steps(switch_name, vnic):
        logger.debug("vNIC %s: %s", vnic.name, step.label)
        host.run(step.command)


# ----------------------------
# Interactive run
# ----------------------------


@trace
def run_provisioning(
    host: NetworkHost,
    prompts: OperatorPrompts,
    *,
    guidance: WeightGuidance | None = None,
    console: Console | None = None,
) -> list[VNicConfig]:
    """Prompt for the switch and vNICs and apply each as soon as it is entered."""
    out = console or prompts.console
    if guidance is None:
        guidance = load_weight_guidance()

    out.print("\n[bold cyan]Hyper-V SET Switch Provisioning[/bold cyan]\n")

    switch = prompts.collect_switch_config()
    provision_switch(host, switch)
    out.print(f"[green]✓[/green] Switch {escape(switch.name)} created")

    total = prompts.collect_vnic_count()
    configured: list[VNicConfig] = []
    for index in range(1, total + 1):
        vnic = prompts.collect_vnic_config(index, total, guidance)
        provision_vnic(host, switch.name, vnic)
        configured.append(vnic)
        out.print(f"[green]✓[/green] vNIC {escape(vnic.name)} configured")

    print_completion_guidance(switch, configured, console=out)
    return configured


def print_completion_guidance(
    switch: SwitchConfig,
    vnics: list[VNicConfig],
    *,
    console: Console | None = None,
) -> None:
    out = console or Console()

    table = Table(title=f"Switch {switch.name}")
    table.add_column("vNIC", style="cyan")
    table.add_column("Weight", justify="right")
    table.add_column("VLAN", justify="right")
    table.add_column("Address")
    for vnic in vnics:
        table.add_row(vnic.name, str(vnic.weight), str(vnic.vlan_id), f"{vnic.ip_address}/{vnic.prefix_length}")
    out.print()
    out.print(table)

    total_weight = sum(v.weight for v in vnics)
    if vnics and total_weight != TARGET_WEIGHT_TOTAL:
        out.print(
            f"[yellow]Total bandwidth weight is {total_weight}; aim for about {TARGET_WEIGHT_TOTAL}.[/yellow]"
        )

    out.print("\n[bold]Next steps:[/bold]")
    for line in NEXT_STEPS:
        out.print(f"  • {line}", highlight=False)
