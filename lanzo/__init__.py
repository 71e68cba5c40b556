"""Lanzo - Control plane for containerized services and stacks."""

from .version import __version__

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli', '__version__']
