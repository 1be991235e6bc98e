"""Input/output: JSON section descriptions and result files."""

from structural_shapes.io.json_io import (
    load_json_input,
    save_json_output,
    shape_from_dict,
)

__all__ = ["load_json_input", "save_json_output", "shape_from_dict"]
