"""Ports command for Lanzo."""

import json

import click

from ..helpers import fail, get_orchestrator, port_rows, print_table
from ...services.exceptions import LanzoError


@click.command()
@click.argument('service')
@click.option('--target-host', '-t', default=None, help='Engine host to query (default: local engine)')
@click.option('--json', 'as_json', is_flag=True, help='Print the raw port mapping as JSON')
def ports(service, target_host, as_json):
    """Show published ports of a service or stack"""
    orchestrator = get_orchestrator()

    try:
        mapping = orchestrator.get_port_mapping(service, target_host)
    except LanzoError as e:
        fail(e)

    if as_json:
        click.echo(json.dumps(mapping, indent=2))
        return

    rows = port_rows(mapping, service)
    if not rows:
        click.echo(f"No published ports for {service}")
        return
    print_table(["SERVICE", "CONTAINER PORT", "HOST"], rows)
