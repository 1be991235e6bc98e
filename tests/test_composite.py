"""Tests for composite section aggregation."""

import itertools
import math
import pytest

from structural_shapes.errors import DegenerateSectionError
from structural_shapes.shapes.composite import CompositeShape
from structural_shapes.shapes.primitives import (
    BoxBeam,
    IBeam,
    Pipe,
    RectangularBar,
    Rod,
)


@pytest.fixture
def two_rods():
    return (
        CompositeShape()
        .add(Rod(radius=2.0, center_of_gravity=(2.0, 0.0)))
        .add(Rod(radius=2.0, center_of_gravity=(-2.0, 0.0)))
    )


@pytest.fixture
def plated_beam():
    beam = IBeam(200.0, 15.0, 370.0, 10.0)
    plate = RectangularBar(250.0, 20.0, center_of_gravity=(0.0, 210.0))
    return CompositeShape([beam, plate])


class TestTwoRods:
    """Rods side by side along x; moi_x shifts use y, moi_y shifts use x."""

    def test_area(self, two_rods):
        assert two_rods.area() == pytest.approx(2 * math.pi * 4)

    def test_centroid(self, two_rods):
        assert two_rods.center_of_gravity == pytest.approx((0.0, 0.0))

    def test_moi_about_vertical_axis(self, two_rods):
        expected = 2 * (math.pi * 16 / 4 + math.pi * 4 * 2 ** 2)
        assert two_rods.moi_y() == pytest.approx(expected)

    def test_moi_about_horizontal_axis(self, two_rods):
        # centroids share y = 0, so there is no shift term
        assert two_rods.moment_of_inertia() == pytest.approx(2 * math.pi * 16 / 4)
        assert two_rods.moi_x() == two_rods.moment_of_inertia()

    def test_radius_of_gyration_y(self, two_rods):
        # (2 * (4pi + 16pi)) / (8pi) = 5
        assert two_rods.radius_of_gyration_y() == pytest.approx(math.sqrt(5.0))

    def test_moi_y_about_offset_axis(self, two_rods):
        # 40pi about the centroid plus 8pi * 2^2
        assert two_rods.moi_y_about(2.0) == pytest.approx(72 * math.pi)
        assert two_rods.moi_y_about(0.0) == pytest.approx(two_rods.moi_y())

    def test_stacked_vertically(self):
        section = CompositeShape(
            [
                Rod(2.0, center_of_gravity=(0.0, 2.0)),
                Rod(2.0, center_of_gravity=(0.0, -2.0)),
            ]
        )
        expected = 2 * (math.pi * 16 / 4 + math.pi * 4 * 2 ** 2)
        assert section.moment_of_inertia() == pytest.approx(expected)


class TestSingleMember:
    @pytest.mark.parametrize(
        "shape",
        [
            Rod(1.5, center_of_gravity=(3.0, -1.0)),
            Pipe(2.0, 1.0, center_of_gravity=(0.5, 0.5)),
            RectangularBar(3.0, 4.0, center_of_gravity=(-2.0, 7.0)),
            BoxBeam(4.0, 6.0, 3.0, 5.0, center_of_gravity=(1.0, 1.0)),
            IBeam(200.0, 15.0, 370.0, 10.0, center_of_gravity=(0.0, 100.0)),
        ],
    )
    def test_reproduces_member(self, shape):
        section = CompositeShape().add(shape)
        assert section.area() == pytest.approx(shape.area())
        assert section.center_of_gravity == pytest.approx(shape.center_of_gravity)
        assert section.moment_of_inertia() == pytest.approx(shape.moment_of_inertia())
        assert section.moi_y() == pytest.approx(shape.moi_y())


class TestPlatedBeam:
    def test_centroid(self, plated_beam):
        expected_y = 5000.0 * 210.0 / (9700.0 + 5000.0)
        cx, cy = plated_beam.center_of_gravity
        assert cx == pytest.approx(0.0)
        assert cy == pytest.approx(expected_y)

    def test_parallel_axis(self, plated_beam):
        beam, plate = plated_beam.members
        yc = plated_beam.center_of_gravity[1]
        expected = (
            beam.moment_of_inertia() + beam.area() * yc ** 2
            + plate.moment_of_inertia() + plate.area() * (210.0 - yc) ** 2
        )
        assert plated_beam.moment_of_inertia() == pytest.approx(expected)

    def test_order_independence(self, plated_beam):
        shapes = list(plated_beam.members) + [Rod(12.0, center_of_gravity=(80.0, -180.0))]
        reference = CompositeShape(shapes)
        for perm in itertools.permutations(shapes):
            section = CompositeShape(perm)
            assert section.area() == pytest.approx(reference.area())
            assert section.center_of_gravity == pytest.approx(reference.center_of_gravity)
            assert section.moment_of_inertia() == pytest.approx(reference.moment_of_inertia())
            assert section.moi_y() == pytest.approx(reference.moi_y())

    def test_moi_about_base(self, plated_beam):
        yc = plated_beam.center_of_gravity[1]
        expected = plated_beam.moment_of_inertia() + plated_beam.area() * (yc + 200.0) ** 2
        assert plated_beam.moi_x_about(-200.0) == pytest.approx(expected)


class TestBuilder:
    def test_add_returns_self(self):
        section = CompositeShape()
        assert section.add(Rod(1.0)) is section
        assert len(section) == 1

    def test_members_in_insertion_order(self):
        a, b, c = Rod(1.0), Pipe(2.0, 1.0), RectangularBar(1.0, 2.0)
        section = CompositeShape().add(a).add(b).add(c)
        assert section.members == (a, b, c)
        assert list(section) == [a, b, c]

    def test_members_view_is_read_only(self):
        section = CompositeShape([Rod(1.0)])
        members = section.members
        section.add(Rod(2.0))
        assert len(members) == 1
        assert len(section) == 2

    def test_add_non_shape(self):
        with pytest.raises(TypeError):
            CompositeShape().add((1.0, 2.0))

    def test_cannot_contain_itself(self):
        section = CompositeShape([Rod(1.0)])
        with pytest.raises(ValueError):
            section.add(section)

    def test_translated(self, plated_beam):
        moved = plated_beam.translated(10.0, -5.0)
        cx, cy = plated_beam.center_of_gravity
        assert moved.center_of_gravity == pytest.approx((cx + 10.0, cy - 5.0))
        assert moved.moment_of_inertia() == pytest.approx(plated_beam.moment_of_inertia())
        assert plated_beam.center_of_gravity == pytest.approx((cx, cy))

    def test_copy_is_independent(self):
        section = CompositeShape([Rod(1.0)])
        clone = section.copy()
        clone.add(Rod(1.0))
        assert len(section) == 1
        assert clone != section


class TestNesting:
    def test_nested_matches_flat(self, plated_beam):
        rods = CompositeShape(
            [
                Rod(10.0, center_of_gravity=(-60.0, -220.0)),
                Rod(10.0, center_of_gravity=(60.0, -220.0)),
            ]
        )
        nested = CompositeShape([plated_beam, rods])
        flat = CompositeShape(list(plated_beam.members) + list(rods.members))
        assert nested.area() == pytest.approx(flat.area())
        assert nested.center_of_gravity == pytest.approx(flat.center_of_gravity)
        assert nested.moment_of_inertia() == pytest.approx(flat.moment_of_inertia())
        assert nested.moi_y() == pytest.approx(flat.moi_y())

    def test_added_composite_is_snapshot(self):
        inner = CompositeShape([Rod(1.0)])
        outer = CompositeShape().add(inner)
        inner.add(Rod(5.0, center_of_gravity=(0.0, 10.0)))
        assert outer.area() == pytest.approx(math.pi)
        assert outer.center_of_gravity == pytest.approx((0.0, 0.0))

    def test_ibeam_decomposition_as_member(self):
        beam = IBeam(200.0, 15.0, 370.0, 10.0)
        plate = RectangularBar(250.0, 20.0, center_of_gravity=(0.0, 210.0))
        direct = CompositeShape([beam, plate])
        decomposed = CompositeShape([beam.to_composite(), plate])
        assert decomposed.moment_of_inertia() == pytest.approx(direct.moment_of_inertia())


class TestDegenerate:
    def test_empty_area(self):
        with pytest.raises(DegenerateSectionError):
            CompositeShape().area()

    def test_empty_centroid(self):
        with pytest.raises(DegenerateSectionError):
            CompositeShape().center_of_gravity

    def test_empty_moment_of_inertia(self):
        with pytest.raises(DegenerateSectionError):
            CompositeShape().moment_of_inertia()

    def test_zero_total_area(self):
        section = CompositeShape([Rod(0.0), BoxBeam(1.0, 1.0, 1.0, 1.0)])
        with pytest.raises(DegenerateSectionError):
            section.area()
        with pytest.raises(DegenerateSectionError):
            section.center_of_gravity

    def test_is_zero_division(self):
        with pytest.raises(ZeroDivisionError):
            CompositeShape().center_of_gravity

    def test_zero_area_member_is_kept(self):
        section = CompositeShape([Rod(1.0), Rod(0.0, center_of_gravity=(100.0, 100.0))])
        assert len(section) == 2
        assert section.center_of_gravity == pytest.approx((0.0, 0.0))
