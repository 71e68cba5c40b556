"""Serve command for Lanzo."""

import click

from ...core.config import Settings
from ...core.logging_setup import configure_logging
from ...server.app import run_server
from ...services.exceptions import LanzoError
from ..helpers import fail


@click.command()
@click.option('--host', default=None, help='Address to listen on (default: $LANZO_HOST or 0.0.0.0)')
@click.option('--port', '-p', type=int, default=None, help='Port to listen on (default: $PORT or 4000)')
def serve(host, port):
    """Run the HTTP control plane"""
    settings = Settings.from_env()
    if host:
        settings.http_host = host
    if port:
        settings.http_port = port

    configure_logging(settings.log_level)
    try:
        run_server(settings)
    except LanzoError as e:
        fail(e)
