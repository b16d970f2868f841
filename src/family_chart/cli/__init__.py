
"""
CLI package for family_chart.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from family_chart.cli.app import app, main

__all__ = [
    "app",
    "main",
]
