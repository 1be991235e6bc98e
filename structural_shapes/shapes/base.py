"""
Capabilities shared by every cross-section shape.

A shape -- primitive or composite -- exposes:
  - area()               : cross-sectional area
  - moment_of_inertia()  : second moment of area about its own centroidal
                           horizontal (x) axis; moi_x() is an alias
  - moi_y()              : same, about the centroidal vertical (y) axis
  - center_of_gravity    : (x, y) centroid in the shared reference frame

Axis convention: moi_x is measured about a horizontal axis, so the
parallel-axis shift for moi_x uses offsets in y, and moi_y uses offsets
in x.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from structural_shapes.errors import DegenerateSectionError

Point = Tuple[float, float]


@dataclass(frozen=True)
class SectionProperties:
    """Snapshot of the properties of one shape.

    Attributes
    ----------
    area : float
    centroid_x, centroid_y : float
        Centroid in the shared reference frame.
    moi_x, moi_y : float
        Centroidal second moments of area.
    polar_moi : float
        moi_x + moi_y.
    """

    area: float
    centroid_x: float
    centroid_y: float
    moi_x: float
    moi_y: float
    polar_moi: float

    def to_dict(self) -> dict:
        return {
            "area": self.area,
            "centroid_x": self.centroid_x,
            "centroid_y": self.centroid_y,
            "moi_x": self.moi_x,
            "moi_y": self.moi_y,
            "polar_moi": self.polar_moi,
        }


class Shape:
    """Base class for primitives and composites."""

    kind: str = "shape"

    # ------------------------------------------------------------------
    # Per-shape queries
    # ------------------------------------------------------------------
    def area(self) -> float:
        raise NotImplementedError

    def moment_of_inertia(self) -> float:
        """Second moment of area about the centroidal horizontal axis."""
        raise NotImplementedError

    def moi_y(self) -> float:
        """Second moment of area about the centroidal vertical axis."""
        raise NotImplementedError

    def translated(self, dx: float, dy: float) -> "Shape":
        """Return a copy of this shape moved by (dx, dy)."""
        raise NotImplementedError

    # center_of_gravity is a dataclass field on primitives and a computed
    # property on composites.
    center_of_gravity: Point

    # ------------------------------------------------------------------
    # Derived quantities
    # ------------------------------------------------------------------
    def moi_x(self) -> float:
        return self.moment_of_inertia()

    def polar_moi(self) -> float:
        """Polar second moment of area about the centroid (Ix + Iy)."""
        return self.moment_of_inertia() + self.moi_y()

    def moi_x_about(self, y: float) -> float:
        """Second moment about the horizontal axis at elevation *y*."""
        d = self.center_of_gravity[1] - y
        return self.moment_of_inertia() + self.area() * d * d

    def moi_y_about(self, x: float) -> float:
        """Second moment about the vertical axis at abscissa *x*."""
        d = self.center_of_gravity[0] - x
        return self.moi_y() + self.area() * d * d

    def radius_of_gyration_x(self) -> float:
        return math.sqrt(self.moment_of_inertia() / self._nonzero_area())

    def radius_of_gyration_y(self) -> float:
        return math.sqrt(self.moi_y() / self._nonzero_area())

    def moved_to(self, x: float, y: float) -> "Shape":
        """Return a copy of this shape with its centroid at (x, y)."""
        cx, cy = self.center_of_gravity
        return self.translated(x - cx, y - cy)

    def properties(self) -> SectionProperties:
        cx, cy = self.center_of_gravity
        ix = self.moment_of_inertia()
        iy = self.moi_y()
        return SectionProperties(
            area=self.area(),
            centroid_x=cx,
            centroid_y=cy,
            moi_x=ix,
            moi_y=iy,
            polar_moi=ix + iy,
        )

    def _nonzero_area(self) -> float:
        a = self.area()
        if a == 0:
            raise DegenerateSectionError(
                f"{type(self).__name__} has zero area; radius of gyration is undefined"
            )
        return a
