import click
from hvswitch_cli.guidance.guidance import guidance, suggest
from hvswitch_cli.provision.provision import provision


@click.group()
def cli():
    """Hyper-V SET switch and cluster vNIC provisioning."""
    pass


# add cli commands here

cli.add_command(provision)
cli.add_command(guidance)
cli.add_command(suggest)
