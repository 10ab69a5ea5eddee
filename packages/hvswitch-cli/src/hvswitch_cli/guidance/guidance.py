from typing import Optional

import click

guidance_option = click.option(
    "--guidance",
    "guidance_path",
    type=click.Path(path_type=str, dir_okay=False, exists=True),
    envvar="HVSWITCH_GUIDANCE",
    default=None,
    help="Weight guidance YAML to use instead of the packaged table.",
)


@click.command()
@guidance_option
def guidance(guidance_path: Optional[str]) -> None:
    """Show the bandwidth weight guidance table."""
    from hvswitch_tools.guidance import render_weight_guidance

    render_weight_guidance(guidance_path)


@click.command()
@click.argument("name")
@guidance_option
def suggest(name: str, guidance_path: Optional[str]) -> None:
    """Print the suggested bandwidth weight for a vNIC NAME."""
    from hvswitch_core.data.weight_guidance import load_weight_guidance
    from hvswitch_tools.guidance import suggest_weight

    click.echo(suggest_weight(name, load_weight_guidance(guidance_path)))
