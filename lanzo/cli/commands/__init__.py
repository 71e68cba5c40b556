"""CLI commands for Lanzo."""
