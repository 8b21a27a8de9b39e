"""Inspect and round-trip commands for shapebridge CLI."""

from __future__ import annotations

from contextlib import nullcontext
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

import typer
from enum import Enum
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from shapebridge.core.binder import bind_feature_collection
from shapebridge.core.config import ConversionOptions, load_config
from shapebridge.core.diagnostics import document_inventory, map_inventory, returned_shape_count
from shapebridge.core.document import build_document
from shapebridge.core.trace import TraceWriter, trace_hooks
from shapebridge.io.geojson import read_geojson, write_geojson
from shapebridge.model import LayerCreated, ShapeMap

console = Console()

VERSION = "0.1.0"


class CollectionResultsChoice(str, Enum):
    last = "last"
    all = "all"


def print_header() -> None:
    """Print the shapebridge header."""
    console.print(
        Panel.fit(
            f"[bold cyan]SHAPEBRIDGE[/] v{VERSION}\n[italic]GeoJSON ↔ map shapes[/]",
            border_style="cyan",
            padding=(0, 4),
        )
    )


def _load_options(config_file: Optional[Path]) -> ConversionOptions:
    try:
        return load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]❌ Invalid configuration:[/] {e}")
        raise typer.Exit(1)


def _read_input(input_file: Path):
    try:
        return read_geojson(input_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]❌ Error:[/] {e}")
        raise typer.Exit(1)


def _apply_overrides(
    options: ConversionOptions,
    collection_results: Optional[CollectionResultsChoice] = None,
    fill_lines: Optional[bool] = None,
) -> ConversionOptions:
    if collection_results is not None:
        options = replace(options, collection_results=collection_results.value)
    if fill_lines is not None:
        options = replace(options, populate_line_coordinates=fill_lines)
    return options


def display_layers(shape_map: ShapeMap, returned_counts: List[int]) -> None:
    """Display one row per layer with its shape kinds."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Layer", justify="right", style="dim")
    table.add_column("Shapes", justify="right")
    table.add_column("Returned", justify="right")
    table.add_column("Kinds", style="green")
    table.add_column("Points", justify="right")

    for index in range(shape_map.layer_count()):
        layer = shape_map.layer_at(index)
        kinds = ", ".join(s.kind.value for s in layer.shapes) or "[dim]empty[/]"
        points = sum(len(s.points) for s in layer.shapes)
        table.add_row(
            str(index + 1),
            str(layer.shape_count()),
            str(returned_counts[index]),
            kinds,
            str(points),
        )

    console.print(table)


def inspect(
    input_file: Path = typer.Argument(..., help="GeoJSON FeatureCollection to import"),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to shapebridge_config.yaml"
    ),
    trace_path: Optional[Path] = typer.Option(
        None, "--trace", help="Write a JSONL trace of every conversion step"
    ),
    collection_results: Optional[CollectionResultsChoice] = typer.Option(
        None,
        "--collection-results",
        help="Override collection_results from config (changes the Returned column)",
    ),
) -> None:
    """Import a GeoJSON file onto an empty map and show the resulting layers."""
    print_header()
    options = _apply_overrides(_load_options(config_file), collection_results)
    fc = _read_input(input_file)

    shape_map = ShapeMap()
    returned_counts: List[int] = []

    with TraceWriter(trace_path) if trace_path else nullcontext() as trace:
        trace_layer, trace_shape = None, None
        if trace is not None:
            trace_layer, trace_shape, _ = trace_hooks(trace)

        def on_layer(record: LayerCreated) -> None:
            returned_counts.append(returned_shape_count(record.returned))
            if trace_layer is not None:
                trace_layer(record)

        bind_feature_collection(shape_map, fc, on_layer, trace_shape, options=options)
        if trace is not None:
            trace.emit({"event": "import.done", **map_inventory(shape_map)})

    inv = map_inventory(shape_map)
    console.print(
        f"\n[bold white]{inv['layer_count']} layer(s)[/], {inv['shape_count']} shape(s): "
        f"📍 {inv['pin_count']}  〰️  {inv['polyline_count']}  ⬠ {inv['polygon_count']}"
    )
    console.print(
        f"[dim]collection_results={options.collection_results}: "
        f"{sum(returned_counts)} shape(s) returned by conversion[/]"
    )
    display_layers(shape_map, returned_counts)
    if trace_path:
        console.print(f"[dim]Trace written to {trace_path}[/]")


def roundtrip(
    input_file: Path = typer.Argument(..., help="GeoJSON FeatureCollection to import"),
    output_file: Path = typer.Option(
        Path("roundtrip.geojson"), "--output", "-o", help="Where to write the exported GeoJSON"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to shapebridge_config.yaml"
    ),
    trace_path: Optional[Path] = typer.Option(
        None, "--trace", help="Write a JSONL trace of every conversion step"
    ),
    collection_results: Optional[CollectionResultsChoice] = typer.Option(
        None,
        "--collection-results",
        help="Override collection_results from config (recorded as returned_shape_count in --trace)",
    ),
    fill_lines: Optional[bool] = typer.Option(
        None,
        "--fill-lines/--no-fill-lines",
        help="Override populate_line_coordinates from config",
    ),
) -> None:
    """Import a GeoJSON file onto a map, then export the map back to GeoJSON."""
    print_header()
    options = _apply_overrides(_load_options(config_file), collection_results, fill_lines)

    fc = _read_input(input_file)
    shape_map = ShapeMap()

    with TraceWriter(trace_path) if trace_path else nullcontext() as trace:
        if trace is not None:
            on_layer, on_shape, on_geometry = trace_hooks(trace)
            trace.emit({"event": "config", **options.get_config_summary()})
            bind_feature_collection(shape_map, fc, on_layer, on_shape, options=options)
            out_doc = build_document(shape_map, on_geometry, options=options)
            trace.emit({"event": "export.done", **document_inventory(out_doc)})
        else:
            bind_feature_collection(shape_map, fc, options=options)
            out_doc = build_document(shape_map, options=options)

    write_geojson(out_doc, output_file)

    before = document_inventory(fc)
    after = document_inventory(out_doc)
    console.print(
        f"\n[bold green]✔[/] {before['feature_count']} feature(s) in → "
        f"{map_inventory(shape_map)['layer_count']} layer(s) → "
        f"{after['feature_count']} feature(s) out"
    )
    console.print(f"[bold green]✔[/] Wrote [underline]{output_file}[/]")
    if trace_path:
        console.print(f"[dim]Trace written to {trace_path}[/]")
