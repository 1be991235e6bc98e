"""Exceptions raised by structural-shapes."""

from __future__ import annotations

from typing import Any, Optional


class StructuralShapesError(Exception):
    """Base class for all structural-shapes errors."""


class InvalidGeometryError(StructuralShapesError, ValueError):
    """A shape was constructed with parameters that violate its invariants.

    Parameters
    ----------
    message : str
        Human readable description of the violated invariant.
    parameter : str, optional
        Name of the offending constructor argument.
    value : Any, optional
        The rejected value.
    """

    def __init__(self, message: str, parameter: Optional[str] = None, value: Any = None) -> None:
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class DegenerateSectionError(StructuralShapesError, ZeroDivisionError):
    """A section with no (or zero) area was asked for an area-weighted quantity."""
