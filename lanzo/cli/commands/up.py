"""Up command for Lanzo."""

import click

from ..helpers import fail, flatten_containers, get_orchestrator, print_table
from ...services.exceptions import LanzoError


@click.command()
@click.argument('service')
@click.option('--target-host', '-t', default=None, help='Engine host to deploy to (default: local engine)')
def up(service, target_host):
    """(Re)create and start a service or stack"""
    orchestrator = get_orchestrator()

    click.echo(f"Starting {service}...")
    try:
        result = orchestrator.run_service(service, target_host)
    except LanzoError as e:
        fail(e)

    containers = flatten_containers(result)
    print_table(
        ["SERVICE", "CONTAINER", "ID"],
        [[c.service, c.name, c.id[:12]] for c in containers],
    )
    jobs = [c.post_start_job for c in containers if c.post_start_job]
    if jobs:
        click.echo("Waiting for post-start commands to finish...")
    for job in jobs:
        job.join()
        error = job.outcome.exception()
        if error:
            click.echo(f"Post-start command for {job.service} failed: {error}", err=True)
        else:
            click.echo(f"Post-start command for {job.service} exited with code {job.outcome.result()}")
