"""CLI helper functions shared by Lanzo commands.

The helpers provide:
- Orchestrator construction from process settings
- Consistent error reporting and exit codes
- Table formatting for command output
"""

import sys
from typing import Any, Dict, List

import click
from tabulate import tabulate

from lanzo.core.config import Settings
from lanzo.core.orchestrator import ServiceOrchestrator
from lanzo.models.container import RunningContainer
from lanzo.services.exceptions import LanzoError


def get_orchestrator() -> ServiceOrchestrator:
    """Build an orchestrator from environment settings, exit on a bad registry."""
    try:
        return ServiceOrchestrator.from_settings(Settings.from_env())
    except LanzoError as e:
        fail(e)


def fail(error: Exception) -> None:
    """Report an error on stderr and exit with status 1."""
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def flatten_containers(result) -> List[RunningContainer]:
    """Flatten a run result (container or nested lists) into a list."""
    if isinstance(result, RunningContainer):
        return [result]
    flat = []
    for item in result:
        flat.extend(flatten_containers(item))
    return flat


def port_rows(ports: Dict[str, Any], service: str = "") -> List[List[str]]:
    """Rows of (service, container port, host binding) from a port mapping.

    Stack mappings nest one mapping per member; members are recursed with
    their own name.
    """
    rows = []
    for key, value in ports.items():
        if isinstance(value, dict):
            rows.extend(port_rows(value, key))
            continue
        bindings = value or []
        if not bindings:
            rows.append([service, key, "-"])
        for binding in bindings:
            host_ip = binding.get("HostIp") or "0.0.0.0"
            rows.append([service, key, f"{host_ip}:{binding.get('HostPort', '')}"])
    return rows


def print_table(headers: list[str], rows: list[list[Any]],
                tablefmt: str = "simple") -> None:
    """Print a table with project-wide defaults.

    Args:
        headers: Table headers
        rows: Table rows
        tablefmt: Table format (default: "simple")
    """
    table_str = tabulate(rows, headers=headers, tablefmt=tablefmt)
    click.echo(table_str)
