"""
JSON input/output for structural-shapes.

Input JSON schema:
==================
{
  "units": "mm",
  "shapes": [
    {"type": "i_beam", "flange_width": 200, "flange_thickness": 15,
     "web_height": 370, "web_thickness": 10},
    {"type": "rectangular_bar", "width": 250, "height": 20,
     "center_of_gravity": [0, 210]},
    {"type": "composite", "shapes": [ ... ]}
  ]
}

Shape types and their parameters:
  rod             : radius
  pipe            : outer_radius + inner_radius, or outer_radius + thickness
  rectangular_bar : width, height
  box_beam        : outer_width, outer_height, inner_width, inner_height,
                    or width, height, thickness
  i_beam          : flange_width, flange_thickness, web_height, web_thickness,
                    or width, height, web_thickness, flange_thickness
  composite       : shapes (nested list)

Every shape accepts an optional "center_of_gravity": [x, y].

Output JSON schema:
===================
{
  "metadata": {...},
  "units": {"length": "mm", "area": "mm^2", "moment_of_inertia": "mm^4"},
  "section_properties": {...},    // SectionProperties.to_dict()
  "members": [ {"type": ..., "area": ..., ...}, ... ]
}
"""

from __future__ import annotations

import datetime
import json
import logging
import warnings
from pathlib import Path
from typing import Any, Callable, Dict, List

from structural_shapes.errors import InvalidGeometryError
from structural_shapes.shapes.base import Shape
from structural_shapes.shapes.composite import CompositeShape
from structural_shapes.shapes.primitives import (
    BoxBeam,
    IBeam,
    Pipe,
    RectangularBar,
    Rod,
)

logger = logging.getLogger(__name__)

_ALIASES = {
    "rod": "rod",
    "pipe": "pipe",
    "rectangular_bar": "rectangular_bar",
    "rectangle": "rectangular_bar",
    "bar": "rectangular_bar",
    "box_beam": "box_beam",
    "box": "box_beam",
    "i_beam": "i_beam",
    "ibeam": "i_beam",
    "composite": "composite",
}


def _require(d: Dict[str, Any], key: str, where: str) -> Any:
    if key not in d:
        raise ValueError(f"{where}: missing required parameter '{key}'")
    return d[key]


def _warn_unused(d: Dict[str, Any], used: set, where: str) -> None:
    extra = sorted(set(d) - used - {"type", "center_of_gravity"})
    if extra:
        warnings.warn(f"{where}: ignoring unknown parameter(s) {', '.join(extra)}")


def _rod(d, cg, where):
    _warn_unused(d, {"radius"}, where)
    return Rod(_require(d, "radius", where), center_of_gravity=cg)


def _pipe(d, cg, where):
    if "thickness" in d:
        _warn_unused(d, {"outer_radius", "thickness"}, where)
        return Pipe.from_thickness(
            _require(d, "outer_radius", where), d["thickness"], center_of_gravity=cg
        )
    _warn_unused(d, {"outer_radius", "inner_radius"}, where)
    return Pipe(
        _require(d, "outer_radius", where),
        _require(d, "inner_radius", where),
        center_of_gravity=cg,
    )


def _rectangular_bar(d, cg, where):
    _warn_unused(d, {"width", "height"}, where)
    return RectangularBar(
        _require(d, "width", where), _require(d, "height", where), center_of_gravity=cg
    )


def _box_beam(d, cg, where):
    if "thickness" in d:
        _warn_unused(d, {"width", "height", "thickness"}, where)
        return BoxBeam.from_thickness(
            _require(d, "width", where),
            _require(d, "height", where),
            d["thickness"],
            center_of_gravity=cg,
        )
    keys = ("outer_width", "outer_height", "inner_width", "inner_height")
    _warn_unused(d, set(keys), where)
    return BoxBeam(*(_require(d, k, where) for k in keys), center_of_gravity=cg)


def _i_beam(d, cg, where):
    if "height" in d:
        keys = ("width", "height", "web_thickness", "flange_thickness")
        _warn_unused(d, set(keys), where)
        return IBeam.from_overall(*(_require(d, k, where) for k in keys), center_of_gravity=cg)
    keys = ("flange_width", "flange_thickness", "web_height", "web_thickness")
    _warn_unused(d, set(keys), where)
    return IBeam(*(_require(d, k, where) for k in keys), center_of_gravity=cg)


def _composite(d, cg, where):
    _warn_unused(d, {"shapes"}, where)
    section = composite_from_list(_require(d, "shapes", where), where=where)
    if cg is not None:
        try:
            dx, dy = (float(v) for v in cg)
        except (TypeError, ValueError):
            raise InvalidGeometryError(
                f"{where}: center_of_gravity must be an (x, y) offset, got {cg!r}",
                parameter="center_of_gravity",
                value=cg,
            ) from None
        section = section.translated(dx, dy)
    return section


_BUILDERS: Dict[str, Callable[[Dict[str, Any], Any, str], Shape]] = {
    "rod": _rod,
    "pipe": _pipe,
    "rectangular_bar": _rectangular_bar,
    "box_beam": _box_beam,
    "i_beam": _i_beam,
    "composite": _composite,
}


def shape_from_dict(d: Dict[str, Any], where: str = "shape") -> Shape:
    """Build a single shape from its JSON description.

    For a nested composite, "center_of_gravity" is an offset applied to
    every member rather than an absolute centroid.
    """
    if not isinstance(d, dict):
        raise ValueError(f"{where}: expected an object, got {type(d).__name__}")
    shape_type = str(_require(d, "type", where)).lower()
    if shape_type not in _ALIASES:
        raise ValueError(f"{where}: unknown shape type {shape_type!r}")
    kind = _ALIASES[shape_type]

    if kind == "composite":
        cg = d.get("center_of_gravity")
    else:
        cg = d.get("center_of_gravity", (0.0, 0.0))
    return _BUILDERS[kind](d, cg, where)


def composite_from_list(items: List[Dict[str, Any]], where: str = "shapes") -> CompositeShape:
    if not isinstance(items, list):
        raise ValueError(f"{where}: expected a list of shapes, got {type(items).__name__}")
    section = CompositeShape()
    for i, item in enumerate(items):
        section.add(shape_from_dict(item, where=f"{where}[{i}]"))
    return section


def load_json_input(filepath: str | Path) -> Dict[str, Any]:
    """Load a JSON section description.

    Returns dict with keys "section" (CompositeShape), "units", "metadata".
    """
    filepath = Path(filepath)
    with open(filepath) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(
            f"{filepath}: top level must be an object with a 'shapes' list, "
            f"got {type(data).__name__}"
        )
    section = composite_from_list(data.get("shapes", []))
    logger.debug("Loaded %d shape(s) from %s", len(section), filepath)

    return {
        "section": section,
        "units": data.get("units", "mm"),
        "metadata": {"source_file": str(filepath)},
    }


def member_summary(shape: Shape) -> Dict[str, Any]:
    """Computed properties of one member, tagged with its shape type."""
    entry: Dict[str, Any] = {"type": shape.kind}
    entry.update(shape.properties().to_dict())
    if isinstance(shape, CompositeShape):
        entry["members"] = [member_summary(m) for m in shape]
    return entry


def save_json_output(
    section: CompositeShape,
    filepath: str | Path,
    input_file: str = "",
    units: str = "mm",
) -> None:
    """Write the computed properties of *section* to a JSON file.

    Only computed properties are written; the output cannot be read back
    as a section description.
    """
    from structural_shapes import __version__

    output = {
        "metadata": {
            "version": "1.0.0",
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "generator": f"structural-shapes v{__version__}",
            "input_file": input_file,
        },
        "units": {
            "length": units,
            "area": f"{units}^2",
            "moment_of_inertia": f"{units}^4",
        },
        "section_properties": section.properties().to_dict(),
        "members": [member_summary(m) for m in section],
    }

    filepath = Path(filepath)
    with open(filepath, "w") as f:
        json.dump(output, f, indent=2)
