"""
structural-shapes: closed-form cross-section properties
=======================================================

Area, centroid and second moment of area for a small catalog of
structural cross-sections, plus composite sections assembled from them
with the parallel-axis theorem.

Currently implements:
  - Rod, pipe, rectangular bar, box beam and I-beam primitives
  - Composite sections (nestable) built from any of the above
  - JSON section descriptions and a small command-line front end
"""

from structural_shapes.errors import (
    StructuralShapesError,
    InvalidGeometryError,
    DegenerateSectionError,
)
from structural_shapes.shapes import (
    Shape,
    SectionProperties,
    Rod,
    Pipe,
    RectangularBar,
    BoxBeam,
    IBeam,
    CompositeShape,
)

__version__ = "0.1.0"

__all__ = [
    "StructuralShapesError",
    "InvalidGeometryError",
    "DegenerateSectionError",
    "Shape",
    "SectionProperties",
    "Rod",
    "Pipe",
    "RectangularBar",
    "BoxBeam",
    "IBeam",
    "CompositeShape",
]
