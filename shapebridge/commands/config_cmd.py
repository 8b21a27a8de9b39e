"""Config command for shapebridge CLI."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from shapebridge.core.config import export_template, load_config

app = typer.Typer()
console = Console()


@app.command("show")
def show(
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Config file (defaults to ./shapebridge_config.yaml)"
    ),
):
    """Show current configuration."""
    try:
        options = load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]❌ Invalid configuration:[/] {e}")
        raise typer.Exit(1)
    summary = options.get_config_summary()

    console.print("\n[bold]Current Configuration:[/]")
    console.print(f"  Collection results: [cyan]{summary['collection_results']}[/]")
    console.print(
        f"  Populate line coordinates: [cyan]{'Enabled' if summary['populate_line_coordinates'] else 'Disabled'}[/]"
    )
    console.print()


@app.command("export")
def export(
    output_path: Path = typer.Option(
        Path("shapebridge_config.yaml"), "--output", "-o", help="Where to write the template"
    ),
):
    """Export configuration template."""
    export_template(output_path)
    console.print(f"[bold green]✔[/] Configuration template exported to [underline]{output_path}[/]")


@app.command("validate")
def validate(config_file: Path = typer.Argument(..., help="Config file to validate")):
    """Validate a configuration file."""
    try:
        options = load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]❌ Invalid configuration:[/] {e}")
        raise typer.Exit(1)
    console.print(f"[bold green]✔[/] Configuration file is valid: [underline]{config_file}[/]")
    summary = options.get_config_summary()
    console.print(f"  Collection results: {summary['collection_results']}")
    console.print(f"  Populate line coordinates: {summary['populate_line_coordinates']}")
