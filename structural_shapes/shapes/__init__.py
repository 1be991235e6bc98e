"""Cross-section shapes and composite sections."""

from structural_shapes.shapes.base import Shape, SectionProperties
from structural_shapes.shapes.primitives import (
    Rod,
    Pipe,
    RectangularBar,
    BoxBeam,
    IBeam,
)
from structural_shapes.shapes.composite import CompositeShape

__all__ = [
    "Shape",
    "SectionProperties",
    "Rod",
    "Pipe",
    "RectangularBar",
    "BoxBeam",
    "IBeam",
    "CompositeShape",
]
