#!/usr/bin/env python3
"""Test series extraction ordering and collision handling"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from linechart.models import ChartRequest, RequestVariant, Series
from linechart.plan import SeriesValues, extract_series


def make_request(*series, variant=RequestVariant.SINGLE_ARRAY):
    return ChartRequest(variant=variant, x_start=0, x_end=3, series=list(series))


def test_captions_come_out_in_lexicographic_order():
    request = make_request(
        Series(caption="beta", y_values=[1]),
        Series(caption="Alpha", y_values=[2]),
        Series(caption="alpha", y_values=[3]),
    )

    extracted = extract_series(request)

    # Code point order: uppercase sorts before lowercase
    assert list(extracted) == ["Alpha", "alpha", "beta"]


def test_later_duplicate_caption_overwrites_earlier():
    request = make_request(
        Series(caption="A", y_values=[1, 2]),
        Series(caption="B", y_values=[5]),
        Series(caption="A", y_values=[9]),
    )

    extracted = extract_series(request)

    assert extracted == {"A": SeriesValues(x=None, y=[9.0]), "B": SeriesValues(x=None, y=[5.0])}


def test_dual_array_series_keep_both_sequences():
    request = make_request(
        Series(caption="A", x_values=[0, 1], y_values=[4, 5, 6]),
        variant=RequestVariant.DUAL_ARRAY,
    )

    values = extract_series(request)["A"]

    assert values.x == [0.0, 1.0]
    assert values.y == [4.0, 5.0, 6.0]
