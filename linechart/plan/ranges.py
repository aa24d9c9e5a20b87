"""Axis range derivation"""

import math
from typing import List, Mapping

from linechart.models import AxisRange
from linechart.plan.extractor import SeriesValues

MAX_SYNTHESIZED_POINTS = 1_000_000


def tick_count_for(maximum: float) -> int:
    return math.floor(maximum) + 1


def derive_x_axis(x_start: float, x_end: float) -> AxisRange:
    """X range exactly as requested; no ordering or clamping is applied"""
    return AxisRange(minimum=x_start, maximum=x_end, tick_count=tick_count_for(x_end))


def derive_y_axis(series: Mapping[str, SeriesValues]) -> AxisRange:
    """
    Y range spanning every Y value of every series

    With fewer than two Y values in total the range is 0..0 rather than the
    single value.
    """
    all_y: List[float] = [y for values in series.values() for y in values.y]
    if len(all_y) > 1:
        minimum, maximum = min(all_y), max(all_y)
    else:
        minimum = maximum = 0.0
    return AxisRange(minimum=minimum, maximum=maximum, tick_count=tick_count_for(maximum))


def synthesize_x(x_start: float, x_end: float) -> List[float]:
    """
    X sequence for series that only carry Y values

    The length is int(|x_start| + |x_end|) and the values step by one from
    x_start, so the sequence does not necessarily end at x_end.
    """
    span = abs(x_start) + abs(x_end)
    # Finite bounds near the double limit still sum to inf
    if not math.isfinite(span) or span >= MAX_SYNTHESIZED_POINTS + 1:
        raise ValueError(
            f"Synthesized X sequence of {span} points exceeds {MAX_SYNTHESIZED_POINTS}"
        )
    return [x_start + i for i in range(int(span))]
