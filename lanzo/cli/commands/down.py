"""Down command for Lanzo."""

import click

from ..helpers import fail, get_orchestrator
from ...services.exceptions import LanzoError


@click.command()
@click.argument('service')
@click.option('--target-host', '-t', default=None, help='Engine host to use (default: local engine)')
def down(service, target_host):
    """Stop and remove a service or every member of a stack"""
    orchestrator = get_orchestrator()

    try:
        orchestrator.stop_service(service, target_host)
    except LanzoError as e:
        fail(e)

    click.echo(f"Stopped and removed {service}")
