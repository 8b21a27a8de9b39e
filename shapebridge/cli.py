#!/usr/bin/env python3
"""
shapebridge - GeoJSON ↔ map shape conversion
Main CLI entry point
"""

from __future__ import annotations

import typer

# Import command modules
from shapebridge.commands import config_cmd, convert_cmd

app = typer.Typer(
    name="shapebridge",
    help="Convert GeoJSON documents to map layers of pins, polylines and polygons, and back",
    no_args_is_help=True,
    add_completion=True,
)

app.command(name="inspect", help="Import GeoJSON onto a map and list the layers")(convert_cmd.inspect)
app.command(name="roundtrip", help="Import GeoJSON onto a map and export it again")(
    convert_cmd.roundtrip
)

# Register command groups
app.add_typer(config_cmd.app, name="config", help="Manage configuration settings")


@app.callback()
def callback() -> None:
    """
    shapebridge - GeoJSON ↔ map shape conversion

    Commands:
      inspect    - Import a FeatureCollection and show one layer per feature
      roundtrip  - Import, then export the map back to GeoJSON

    Utilities:
      config     - Manage configuration settings
    """
    pass


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
