from __future__ import annotations

from pathlib import Path

from hvswitch_core.data.weight_guidance import load_weight_guidance
from hvswitch_core.models.guidance import WeightGuidance
from rich.console import Console
from rich.table import Table

console = Console()


def suggest_weight(name: str, guidance: WeightGuidance | None = None) -> str:
    """Advisory minimum bandwidth weight for a vNIC, chosen by its name."""
    table = guidance if guidance is not None else load_weight_guidance()
    return table.lookup(name)


def render_weight_guidance(guidance_path: Path | str | None = None) -> None:
    """Print the weight table the provisioning prompts draw suggestions from."""
    guidance = load_weight_guidance(guidance_path)

    table = Table(title="Bandwidth Weight Guidance")
    table.add_column("Name contains", style="cyan")
    table.add_column("Traffic")
    table.add_column("Suggested weight", style="yellow")

    for rule in guidance.rules:
        table.add_row(" / ".join(rule.patterns), rule.traffic or "", rule.suggestion)
    table.add_row("(anything else)", "", guidance.default, style="dim")

    console.print(table)
    console.print("[dim]Weights are relative shares of the team; keep the total across vNICs near 100.[/dim]")
