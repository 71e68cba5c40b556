"""Allow running as ``python -m lanzo``."""

from lanzo.cli.main import cli

if __name__ == '__main__':
    cli()
