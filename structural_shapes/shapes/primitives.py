"""
Primitive cross-section shapes with closed-form properties.

Supported shapes:
  - Rod            : solid circle
  - Pipe           : annulus
  - RectangularBar : solid rectangle
  - BoxBeam        : rectangular tube
  - IBeam          : doubly symmetric wide-flange section

Each shape carries its own dimensions and a ``center_of_gravity`` giving
its placement in the shared reference frame.  area(), moment_of_inertia()
and moi_y() are always about the shape's own centroid; the placement only
matters once the shape is part of a CompositeShape.

Dimensions are validated on construction and an InvalidGeometryError names
the offending parameter.  All formulas are polynomial in the dimensions,
so zero-thickness walls simply contribute nothing.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from structural_shapes.errors import InvalidGeometryError
from structural_shapes.shapes.base import Point, Shape

if TYPE_CHECKING:
    from structural_shapes.shapes.composite import CompositeShape


def _check_length(name: str, value: float) -> None:
    # Anything ordered against zero is accepted, so unit-tagged quantities
    # pass through to the formulas untouched.
    if isinstance(value, (bool, str)) or value is None:
        raise InvalidGeometryError(
            f"{name} must be a number, got {value!r}", parameter=name, value=value
        )
    try:
        negative = bool(value < 0)
    except TypeError:
        raise InvalidGeometryError(
            f"{name} must be a number, got {value!r}", parameter=name, value=value
        ) from None
    if value != value or (isinstance(value, numbers.Real) and not math.isfinite(value)):
        raise InvalidGeometryError(
            f"{name} must be finite, got {value}", parameter=name, value=value
        )
    if negative:
        raise InvalidGeometryError(
            f"{name} must be non-negative, got {value}", parameter=name, value=value
        )


def _normalise_point(shape: Shape, value) -> None:
    try:
        x, y = value
        x = float(x)
        y = float(y)
    except (TypeError, ValueError):
        raise InvalidGeometryError(
            f"center_of_gravity must be an (x, y) pair, got {value!r}",
            parameter="center_of_gravity",
            value=value,
        ) from None
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidGeometryError(
            f"center_of_gravity must be finite, got {value!r}",
            parameter="center_of_gravity",
            value=value,
        )
    # frozen dataclass
    object.__setattr__(shape, "center_of_gravity", (x, y))


class _PrimitiveShape(Shape):
    """Behaviour shared by the dataclass primitives."""

    def translated(self, dx: float, dy: float) -> "_PrimitiveShape":
        x, y = self.center_of_gravity
        return replace(self, center_of_gravity=(x + dx, y + dy))


@dataclass(frozen=True)
class Rod(_PrimitiveShape):
    """Solid circular cross-section.

    Parameters
    ----------
    radius : float
    center_of_gravity : (x, y), default (0, 0)
    """

    radius: float
    center_of_gravity: Point = (0.0, 0.0)

    kind = "rod"

    def __post_init__(self) -> None:
        _check_length("radius", self.radius)
        _normalise_point(self, self.center_of_gravity)

    def area(self) -> float:
        return math.pi * self.radius ** 2

    def moment_of_inertia(self) -> float:
        return math.pi * self.radius ** 4 / 4.0

    def moi_y(self) -> float:
        return self.moment_of_inertia()


@dataclass(frozen=True)
class Pipe(_PrimitiveShape):
    """Annular cross-section.

    Parameters
    ----------
    outer_radius : float
    inner_radius : float – must be strictly less than outer_radius
    center_of_gravity : (x, y), default (0, 0)
    """

    outer_radius: float
    inner_radius: float
    center_of_gravity: Point = (0.0, 0.0)

    kind = "pipe"

    def __post_init__(self) -> None:
        _check_length("outer_radius", self.outer_radius)
        _check_length("inner_radius", self.inner_radius)
        if self.inner_radius >= self.outer_radius:
            raise InvalidGeometryError(
                f"inner_radius ({self.inner_radius}) must be less than "
                f"outer_radius ({self.outer_radius})",
                parameter="inner_radius",
                value=self.inner_radius,
            )
        _normalise_point(self, self.center_of_gravity)

    @classmethod
    def from_thickness(
        cls, outer_radius: float, thickness: float, center_of_gravity: Point = (0.0, 0.0)
    ) -> "Pipe":
        """Build a pipe from its outer radius and wall thickness."""
        _check_length("outer_radius", outer_radius)
        _check_length("thickness", thickness)
        if thickness > outer_radius:
            raise InvalidGeometryError(
                f"thickness ({thickness}) exceeds outer_radius ({outer_radius})",
                parameter="thickness",
                value=thickness,
            )
        return cls(
            outer_radius=outer_radius,
            inner_radius=outer_radius - thickness,
            center_of_gravity=center_of_gravity,
        )

    @property
    def thickness(self) -> float:
        return self.outer_radius - self.inner_radius

    def area(self) -> float:
        return math.pi * (self.outer_radius ** 2 - self.inner_radius ** 2)

    def moment_of_inertia(self) -> float:
        return math.pi * (self.outer_radius ** 4 - self.inner_radius ** 4) / 4.0

    def moi_y(self) -> float:
        return self.moment_of_inertia()


@dataclass(frozen=True)
class RectangularBar(_PrimitiveShape):
    """Solid rectangle.

    Parameters
    ----------
    width : float  – horizontal dimension
    height : float – vertical dimension
    center_of_gravity : (x, y), default (0, 0)
    """

    width: float
    height: float
    center_of_gravity: Point = (0.0, 0.0)

    kind = "rectangular_bar"

    def __post_init__(self) -> None:
        _check_length("width", self.width)
        _check_length("height", self.height)
        _normalise_point(self, self.center_of_gravity)

    def area(self) -> float:
        return self.width * self.height

    def moment_of_inertia(self) -> float:
        return self.width * self.height ** 3 / 12.0

    def moi_y(self) -> float:
        return self.height * self.width ** 3 / 12.0


@dataclass(frozen=True)
class BoxBeam(_PrimitiveShape):
    """Rectangular tube, hollow about a concentric rectangular void.

    Parameters
    ----------
    outer_width, outer_height : float
    inner_width, inner_height : float
        Void dimensions.  Each must not exceed the matching outer
        dimension (a zero wall thickness is allowed).
    center_of_gravity : (x, y), default (0, 0)
    """

    outer_width: float
    outer_height: float
    inner_width: float
    inner_height: float
    center_of_gravity: Point = (0.0, 0.0)

    kind = "box_beam"

    def __post_init__(self) -> None:
        _check_length("outer_width", self.outer_width)
        _check_length("outer_height", self.outer_height)
        _check_length("inner_width", self.inner_width)
        _check_length("inner_height", self.inner_height)
        if self.inner_width > self.outer_width:
            raise InvalidGeometryError(
                f"inner_width ({self.inner_width}) exceeds outer_width ({self.outer_width})",
                parameter="inner_width",
                value=self.inner_width,
            )
        if self.inner_height > self.outer_height:
            raise InvalidGeometryError(
                f"inner_height ({self.inner_height}) exceeds outer_height ({self.outer_height})",
                parameter="inner_height",
                value=self.inner_height,
            )
        _normalise_point(self, self.center_of_gravity)

    @classmethod
    def from_thickness(
        cls,
        width: float,
        height: float,
        thickness: float,
        center_of_gravity: Point = (0.0, 0.0),
    ) -> "BoxBeam":
        """Build a box beam with a uniform wall thickness on all four sides."""
        _check_length("width", width)
        _check_length("height", height)
        _check_length("thickness", thickness)
        if 2.0 * thickness > min(width, height):
            raise InvalidGeometryError(
                f"thickness ({thickness}) is more than half of the smaller outer "
                f"dimension ({min(width, height)})",
                parameter="thickness",
                value=thickness,
            )
        return cls(
            outer_width=width,
            outer_height=height,
            inner_width=width - 2.0 * thickness,
            inner_height=height - 2.0 * thickness,
            center_of_gravity=center_of_gravity,
        )

    def area(self) -> float:
        return self.outer_width * self.outer_height - self.inner_width * self.inner_height

    def moment_of_inertia(self) -> float:
        return (
            self.outer_width * self.outer_height ** 3
            - self.inner_width * self.inner_height ** 3
        ) / 12.0

    def moi_y(self) -> float:
        return (
            self.outer_height * self.outer_width ** 3
            - self.inner_height * self.inner_width ** 3
        ) / 12.0


@dataclass(frozen=True)
class IBeam(_PrimitiveShape):
    """Doubly symmetric I-section (two equal flanges and a web).

    Parameters
    ----------
    flange_width : float
    flange_thickness : float
    web_height : float
        Clear height of the web, between the inner faces of the flanges.
    web_thickness : float
    center_of_gravity : (x, y), default (0, 0)
    """

    flange_width: float
    flange_thickness: float
    web_height: float
    web_thickness: float
    center_of_gravity: Point = (0.0, 0.0)

    kind = "i_beam"

    def __post_init__(self) -> None:
        _check_length("flange_width", self.flange_width)
        _check_length("flange_thickness", self.flange_thickness)
        _check_length("web_height", self.web_height)
        _check_length("web_thickness", self.web_thickness)
        if self.web_thickness > self.flange_width:
            raise InvalidGeometryError(
                f"web_thickness ({self.web_thickness}) exceeds flange_width "
                f"({self.flange_width})",
                parameter="web_thickness",
                value=self.web_thickness,
            )
        _normalise_point(self, self.center_of_gravity)

    @classmethod
    def from_overall(
        cls,
        width: float,
        height: float,
        web_thickness: float,
        flange_thickness: float,
        center_of_gravity: Point = (0.0, 0.0),
    ) -> "IBeam":
        """Build an I-beam from its overall width and depth."""
        _check_length("height", height)
        _check_length("flange_thickness", flange_thickness)
        if 2.0 * flange_thickness > height:
            raise InvalidGeometryError(
                f"two flanges of thickness {flange_thickness} do not fit in "
                f"height {height}",
                parameter="flange_thickness",
                value=flange_thickness,
            )
        return cls(
            flange_width=width,
            flange_thickness=flange_thickness,
            web_height=height - 2.0 * flange_thickness,
            web_thickness=web_thickness,
            center_of_gravity=center_of_gravity,
        )

    @property
    def height(self) -> float:
        return self.web_height + 2.0 * self.flange_thickness

    @property
    def flange_offset(self) -> float:
        """Distance from the beam centroid to each flange centroid."""
        return (self.web_height + self.flange_thickness) / 2.0

    def area(self) -> float:
        return 2.0 * self.flange_width * self.flange_thickness + self.web_height * self.web_thickness

    def moment_of_inertia(self) -> float:
        bf = self.flange_width
        tf = self.flange_thickness
        d = self.flange_offset
        flange = bf * tf ** 3 / 12.0 + bf * tf * d * d
        web = self.web_thickness * self.web_height ** 3 / 12.0
        return 2.0 * flange + web

    def moi_y(self) -> float:
        flange = self.flange_thickness * self.flange_width ** 3 / 12.0
        web = self.web_height * self.web_thickness ** 3 / 12.0
        return 2.0 * flange + web

    def to_composite(self) -> "CompositeShape":
        """Split the beam into flange and web rectangles, placed in the shared frame."""
        from structural_shapes.shapes.composite import CompositeShape

        x, y = self.center_of_gravity
        d = self.flange_offset
        return (
            CompositeShape()
            .add(RectangularBar(self.flange_width, self.flange_thickness, center_of_gravity=(x, y + d)))
            .add(RectangularBar(self.web_thickness, self.web_height, center_of_gravity=(x, y)))
            .add(RectangularBar(self.flange_width, self.flange_thickness, center_of_gravity=(x, y - d)))
        )

