"""
Configuration management for shapebridge conversions.

Two behaviors of the conversion are selectable because downstream consumers
may depend on either variant:

- collection_results: what a GeometryCollection import returns.
    "last" - only the last member's result (callbacks still see every shape)
    "all"  - a flat list of every shape generated for the collection
- populate_line_coordinates: whether exported LineStrings carry coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml


CollectionResults = Literal["last", "all"]
COLLECTION_RESULT_MODES = ("last", "all")

DEFAULT_CONFIG_NAMES = ("shapebridge_config.yaml", "shapebridge_config.yml")


@dataclass(frozen=True)
class ConversionOptions:
    collection_results: CollectionResults = "last"
    populate_line_coordinates: bool = False

    def get_config_summary(self) -> Dict[str, Any]:
        """
        Get a summary of current configuration.

        Returns:
            Dictionary with the effective option values
        """
        return {
            "collection_results": self.collection_results,
            "populate_line_coordinates": self.populate_line_coordinates,
        }


DEFAULT_OPTIONS = ConversionOptions()


def _parse_collection_results(value: Any) -> CollectionResults:
    mode = str(value or "").strip().lower()
    if mode not in COLLECTION_RESULT_MODES:
        raise ValueError(
            f"Invalid collection_results '{value}' (expected one of: {', '.join(COLLECTION_RESULT_MODES)})"
        )
    return mode  # type: ignore[return-value]


def options_from_mapping(data: Dict[str, Any]) -> ConversionOptions:
    """
    Build ConversionOptions from a parsed YAML mapping.

    Unknown keys are rejected so typos don't silently fall back to defaults.
    """
    known = {"collection_results", "populate_line_coordinates"}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config key(s): {', '.join(unknown)}")

    options = ConversionOptions()
    if "collection_results" in data:
        options = replace(
            options, collection_results=_parse_collection_results(data["collection_results"])
        )
    if "populate_line_coordinates" in data:
        value = data["populate_line_coordinates"]
        if not isinstance(value, bool):
            raise ValueError(
                f"Invalid populate_line_coordinates '{value}' (expected true or false)"
            )
        options = replace(options, populate_line_coordinates=value)
    return options


def load_config(config_file: Optional[Path] = None) -> ConversionOptions:
    """
    Load conversion options.

    Args:
        config_file: Optional path to a config file (.yaml or .yml).
                    If None, looks for 'shapebridge_config.yaml' in current directory.

    Returns:
        ConversionOptions instance (defaults when no file is found)

    Raises:
        FileNotFoundError: If an explicit config_file doesn't exist
        ValueError: If the file isn't valid YAML or holds invalid values
    """
    if config_file is None:
        for name in DEFAULT_CONFIG_NAMES:
            candidate = Path(name)
            if candidate.exists():
                config_file = candidate
                break
        else:
            return ConversionOptions()

    config_file = Path(config_file)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")

    # Handle empty config file
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    return options_from_mapping(data)


def export_template(output_path: Path) -> None:
    """
    Export a configuration template file for user customization.

    Args:
        output_path: Path to write the template file (.yaml)
    """
    yaml_content = """# =============================================================================
# shapebridge conversion configuration
# =============================================================================

# What importing a GeometryCollection returns.
#   last - only the last member's shape(s); every shape still reaches the
#          on_shape_created hook and its layer
#   all  - a flat list of every shape built from the collection
collection_results: last

# Export Polyline shapes as LineStrings with coordinates filled in.
# When false, exported LineStrings carry an empty coordinate list.
populate_line_coordinates: false
"""
    Path(output_path).write_text(yaml_content, encoding="utf-8")
