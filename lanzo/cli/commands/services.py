"""Services command for Lanzo."""

import click
from rich.console import Console
from rich.table import Table

from ...core.config import Settings
from ...core.registry import ServiceRegistry
from ...models.service import CompositeService
from ...services.exceptions import InvalidRegistryError


@click.command()
@click.pass_context
def services(ctx):
    """List registered services and stacks"""
    console = Console()

    try:
        registry = ServiceRegistry.load(Settings.from_env().registry_file)
    except InvalidRegistryError as e:
        console.print(f"[red]Error loading service registry: {e}[/red]")
        ctx.exit(1)

    if not len(registry):
        console.print("[yellow]No services registered.[/yellow]")
        return

    table = Table(title="Registered Services")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Kind", style="green")
    table.add_column("Image / Members", style="white")
    table.add_column("Depends On", style="white")
    table.add_column("Network", style="white")

    for descriptor in registry:
        if isinstance(descriptor, CompositeService):
            table.add_row(descriptor.name, "stack", ", ".join(descriptor.services), "", "")
        else:
            table.add_row(
                descriptor.name,
                "service",
                descriptor.image,
                ", ".join(descriptor.depends_on),
                descriptor.network or "",
            )

    console.print(table)
