"""
CompositeShape: several shapes analysed as one cross-section.

Build one by adding shapes placed in a shared reference frame:

    section = (
        CompositeShape()
        .add(IBeam(200, 15, 370, 10))
        .add(RectangularBar(250, 20, center_of_gravity=(0, 210)))
    )
    section.center_of_gravity
    section.moment_of_inertia()

Key responsibilities:
  - Keep members in insertion order
  - Area-weighted centroid of all members
  - Composite second moments via the parallel-axis theorem

The second moments need two passes over the members: the first finds the
composite centroid, the second shifts each member's own moment to it.
A composite is itself a Shape, so composites nest.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Tuple

from structural_shapes.errors import DegenerateSectionError
from structural_shapes.shapes.base import Point, Shape

logger = logging.getLogger(__name__)


class CompositeShape(Shape):
    """Ordered collection of shapes treated as a single section.

    ``add`` appends in place and returns the composite so calls chain.
    Member primitives are immutable; an added composite is copied so that
    later changes to it do not affect this one.

    Parameters
    ----------
    shapes : iterable of Shape, optional
        Initial members, added in order.
    """

    kind = "composite"

    def __init__(self, shapes: Iterable[Shape] = ()) -> None:
        self._members: List[Shape] = []
        self.extend(shapes)

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------
    def add(self, shape: Shape) -> "CompositeShape":
        if not isinstance(shape, Shape):
            raise TypeError(f"Cannot add {type(shape).__name__} to a CompositeShape")
        if isinstance(shape, CompositeShape):
            if shape is self:
                raise ValueError("A CompositeShape cannot contain itself")
            shape = shape.copy()
        self._members.append(shape)
        return self

    def extend(self, shapes: Iterable[Shape]) -> "CompositeShape":
        for shape in shapes:
            self.add(shape)
        return self

    def copy(self) -> "CompositeShape":
        new = CompositeShape()
        # members are already immutable or private copies
        new._members = list(self._members)
        return new

    @property
    def members(self) -> Tuple[Shape, ...]:
        return tuple(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Shape]:
        return iter(tuple(self._members))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompositeShape):
            return NotImplemented
        return self._members == other._members

    def __repr__(self) -> str:
        return f"CompositeShape({self._members!r})"

    # ------------------------------------------------------------------
    # Section properties
    # ------------------------------------------------------------------
    def _total_area(self) -> float:
        if not self._members:
            raise DegenerateSectionError("CompositeShape has no members")
        total = sum(m.area() for m in self._members)
        if total == 0:
            raise DegenerateSectionError(
                f"CompositeShape of {len(self._members)} member(s) has zero total area"
            )
        return total

    def area(self) -> float:
        return self._total_area()

    @property
    def center_of_gravity(self) -> Point:
        """Area-weighted average of the member centroids."""
        total_A = self._total_area()
        sum_Ax = 0.0
        sum_Ay = 0.0
        for m in self._members:
            a = m.area()
            x, y = m.center_of_gravity
            sum_Ax += a * x
            sum_Ay += a * y
        return (sum_Ax / total_A, sum_Ay / total_A)

    def moment_of_inertia(self) -> float:
        """Second moment about the composite centroidal horizontal axis."""
        yc = self.center_of_gravity[1]
        I_total = 0.0
        for m in self._members:
            dy = m.center_of_gravity[1] - yc
            I_total += m.moment_of_inertia() + m.area() * dy * dy
        logger.debug("moi_x of %d members about y=%g: %g", len(self._members), yc, I_total)
        return I_total

    def moi_y(self) -> float:
        """Second moment about the composite centroidal vertical axis."""
        xc = self.center_of_gravity[0]
        I_total = 0.0
        for m in self._members:
            dx = m.center_of_gravity[0] - xc
            I_total += m.moi_y() + m.area() * dx * dx
        logger.debug("moi_y of %d members about x=%g: %g", len(self._members), xc, I_total)
        return I_total

    def translated(self, dx: float, dy: float) -> "CompositeShape":
        return CompositeShape(m.translated(dx, dy) for m in self._members)
