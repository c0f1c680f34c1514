from __future__ import annotations

import math

import pytest

from csv_browser.geometry.pie import TAU, Arc, pie_layout


def test_equal_values_split_in_input_order():
    slices = pie_layout([("a", 3), ("b", 3)])

    assert [s.key for s in slices] == ["a", "b"]
    assert slices[0].start_angle == pytest.approx(0)
    assert slices[0].end_angle == pytest.approx(math.pi)
    assert slices[1].start_angle == pytest.approx(math.pi)
    assert slices[1].end_angle == pytest.approx(TAU)


def test_largest_slice_starts_at_twelve_o_clock():
    slices = pie_layout([("a", 1), ("b", 3)])

    a, b = slices
    assert a.key == "a"
    assert b.start_angle == pytest.approx(0)
    assert b.end_angle == pytest.approx(1.5 * math.pi)
    assert a.start_angle == pytest.approx(1.5 * math.pi)
    assert a.end_angle == pytest.approx(TAU)


def test_non_positive_values_get_zero_width():
    a, b = pie_layout([("a", -1), ("b", 2)])

    assert a.span == 0
    assert b.span == pytest.approx(TAU)


def test_all_zero_values():
    slices = pie_layout([("a", 0), ("b", 0)])
    assert all(s.span == 0 for s in slices)


def test_centroid_is_halfway_out_and_around():
    arc = Arc(inner_radius=0, outer_radius=100)
    right_half, left_half = pie_layout([("a", 1), ("b", 1)])

    assert arc.centroid(right_half) == pytest.approx((50, 0), abs=1e-9)
    assert arc.centroid(left_half) == pytest.approx((-50, 0), abs=1e-9)


def test_outline_is_closed_and_starts_at_top():
    arc = Arc(outer_radius=100)
    s = pie_layout([("a", 1), ("b", 3)])[0]
    outline = arc.outline(s)

    assert outline[0] == outline[-1]
    assert (0.0, 0.0) in outline
    full = arc.outline(pie_layout([("only", 5)])[0])
    assert full[0] == pytest.approx((0, -100), abs=1e-9)
    assert (0.0, 0.0) not in full


def test_outline_empty_for_zero_width_slice():
    zero = pie_layout([("a", 0), ("b", 1)])[0]
    assert Arc(outer_radius=10).outline(zero) == []
