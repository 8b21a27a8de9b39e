"""
Machine-parseable tracing for conversions.

Trace files are JSON Lines (one JSON object per line). They are intentionally
not optimized for human reading; they are optimized for replay and diffing.
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, Tuple

from shapebridge.core.diagnostics import returned_shape_count
from shapebridge.model import GeometryCreated, LayerCreated, ShapeCreated, geometry_type_of


class TraceWriter:
    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._fh = self._path.open("w", encoding="utf-8")

    @property
    def path(self) -> Path:
        return self._path

    def emit(self, event: Dict[str, Any]) -> None:
        # Add a timestamp if caller didn't.
        if "ts" not in event:
            event = dict(event)
            event["ts"] = datetime.now(timezone.utc).isoformat()

        def default(o: Any) -> Any:
            if isinstance(o, Enum):
                return o.value
            if is_dataclass(o):
                return asdict(o)
            return str(o)

        self._fh.write(json.dumps(event, ensure_ascii=False, default=default) + "\n")
        self._fh.flush()

    def close(self) -> None:
        self._fh.close()

    def __enter__(self) -> "TraceWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class TraceReader:
    def __init__(self, path: str | Path):
        self._path = Path(path)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        with self._path.open("r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line:
                    continue
                yield json.loads(line)


def trace_hooks(
    trace: TraceWriter,
) -> Tuple[
    Callable[[LayerCreated], None],
    Callable[[ShapeCreated], None],
    Callable[[GeometryCreated], None],
]:
    """
    Build (on_layer_created, on_shape_created, on_geometry_created) hooks
    that record every conversion step to `trace`.
    """
    layer_index = {"next": 0}

    def on_layer_created(record: LayerCreated) -> None:
        trace.emit(
            {
                "event": "layer.created",
                "index": layer_index["next"],
                "feature_id": record.feature.get("id"),
                "geometry_type": geometry_type_of(record.feature.get("geometry")),
                "shape_count": record.layer.shape_count(),
                "returned_shape_count": returned_shape_count(record.returned),
            }
        )
        layer_index["next"] += 1

    def on_shape_created(record: ShapeCreated) -> None:
        trace.emit(
            {
                "event": "shape.created",
                "geometry_type": geometry_type_of(record.geometry),
                "shape_kind": record.shape.kind,
                "point_count": len(record.shape.points),
            }
        )

    def on_geometry_created(record: GeometryCreated) -> None:
        trace.emit(
            {
                "event": "geometry.created",
                "geometry_type": geometry_type_of(record.geometry),
                "shape_kind": record.shape.kind,
                "point_count": len(record.shape.points),
            }
        )

    return on_layer_created, on_shape_created, on_geometry_created
