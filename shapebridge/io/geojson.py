"""
GeoJSON file adapter.

Reads and writes FeatureCollection documents. The conversion core only ever
sees the decoded dicts; this module owns the text encoding.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from shapebridge.model import FeatureCollection


def read_geojson(filepath: str | Path) -> FeatureCollection:
    """
    Read a GeoJSON FeatureCollection file.

    A bare Feature is wrapped into a single-feature collection.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file isn't valid JSON or isn't a Feature/FeatureCollection
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    with open(filepath, "r", encoding="utf-8") as f:
        try:
            data: Dict[str, Any] = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {filepath.name}: {e}")

    if not isinstance(data, dict):
        raise ValueError(f"Expected a GeoJSON object in {filepath.name}")

    doc_type = data.get("type")
    if doc_type == "Feature":
        return {"type": "FeatureCollection", "features": [data]}
    if doc_type != "FeatureCollection":
        raise ValueError(
            f"Expected a FeatureCollection in {filepath.name}, got type={doc_type!r}"
        )
    if not isinstance(data.get("features", []), list):
        raise ValueError(f"'features' must be a list in {filepath.name}")
    return data


def write_geojson(feature_collection: FeatureCollection, output_path: str | Path) -> Path:
    """
    Write a FeatureCollection to output_path.
    """
    out = Path(output_path)
    out.write_text(
        json.dumps(feature_collection, ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    return out
