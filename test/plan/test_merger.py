#!/usr/bin/env python3
"""Test stack-based coordinate pairing"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from linechart.plan import merge_coordinates


def test_y_values_are_popped_from_the_tail():
    assert merge_coordinates([0, 1, 2], [10, 20, 30]) == [(0, 30), (1, 20), (2, 10)]


def test_short_y_leaves_trailing_points_at_zero():
    assert merge_coordinates([0, 1, 2, 3], [5, 6]) == [(0, 6), (1, 5), (2, 0), (3, 0)]


def test_long_y_drops_unpopped_leading_values():
    assert merge_coordinates([0, 1], [1, 2, 3, 4]) == [(0, 4), (1, 3)]


def test_no_x_values_gives_no_points():
    assert merge_coordinates([], [1, 2, 3]) == []


def test_inputs_are_not_mutated():
    ys = [1.0, 2.0]
    merge_coordinates([0, 1], ys)
    assert ys == [1.0, 2.0]


def test_points_are_floats():
    point = merge_coordinates([1], [2])[0]
    assert all(isinstance(v, float) for v in point)
