"""Operator prompts for the provisioning flow.

Only string->int coercion happens here. Ranges, formats and uniqueness are
left to the operator and to the host, so a bad number aborts the run instead
of asking again.
"""

from __future__ import annotations

from typing import Callable

from hvswitch_core.errors import InputError
from hvswitch_core.models.guidance import WeightGuidance
from hvswitch_core.models.switch import SwitchConfig, VNicConfig
from rich.console import Console
from rich.markup import escape

from .guidance import suggest_weight

Ask = Callable[[str], str]


def is_affirmative(answer: str) -> bool:
    return answer.strip()[:1] in {"y", "Y"}


def resolve_vnic_count(count: int, replica_answer: str) -> int:
    """One extra vNIC when Hyper-V Replica traffic gets its own network."""
    return count + 1 if is_affirmative(replica_answer) else count


class OperatorPrompts:
    def __init__(self, ask: Ask | None = None, console: Console | None = None):
        self.console = console or Console()
        self.ask = ask or self.console.input

    def text(self, label: str) -> str:
        return self.ask(f"{label}: ").strip()

    def integer(self, label: str) -> int:
        raw = self.text(label)
        try:
            return int(raw)
        except ValueError as e:
            raise InputError(label, raw) from e

    def names(self, label: str) -> list[str]:
        raw = self.text(label)
        return [part.strip() for part in raw.split(",") if part.strip()]

    def collect_switch_config(self) -> SwitchConfig:
        name = self.text("Name for the SET virtual switch (e.g. SETswitch)")
        adapters = self.names("Physical adapters to team, comma-separated (e.g. NIC1,NIC2)")
        return SwitchConfig(name=name, adapters=adapters)

    def collect_vnic_count(self) -> int:
        count = self.integer("How many cluster vNICs (CSV, LM, CLS...)")
        replica = self.text("Add a vNIC for Hyper-V Replica traffic? (y/N)")
        return resolve_vnic_count(count, replica)

    def collect_vnic_config(self, index: int, total: int, guidance: WeightGuidance | None = None) -> VNicConfig:
        self.console.print(f"\n[bold]vNIC {index} of {total}[/bold]")
        name = self.text("vNIC name (e.g. CSV, LM, CLS-HB, REPL)")
        suggestion = suggest_weight(name, guidance)
        self.console.print(f"Suggested weight for [cyan]{escape(name)}[/cyan]: [yellow]{escape(suggestion)}[/yellow]")
        weight = self.integer("Minimum bandwidth weight (0-100)")
        vlan_id = self.integer("VLAN ID")
        ip_address = self.text("IP address")
        prefix_length = self.integer("Prefix length (e.g. 24)")
        return VNicConfig(
            name=name,
            weight=weight,
            vlan_id=vlan_id,
            ip_address=ip_address,
            prefix_length=prefix_length,
        )
