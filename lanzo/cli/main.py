"""Main CLI entry point for Lanzo."""

import click

from .commands.down import down
from .commands.ports import ports
from .commands.provision import provision
from .commands.serve import serve
from .commands.services import services
from .commands.up import up


@click.group()
def cli():
    """Lanzo - Bring containerized services and stacks up and down"""
    pass


# Register commands
cli.add_command(serve)
cli.add_command(up)
cli.add_command(down)
cli.add_command(ports)
cli.add_command(services)
cli.add_command(provision)


if __name__ == '__main__':
    cli()
