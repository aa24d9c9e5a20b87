"""Render plan derivation: series extraction, axis ranges and point pairing"""

from linechart.plan.builder import PlanBuilder
from linechart.plan.colors import ColorSource
from linechart.plan.extractor import SeriesValues, extract_series
from linechart.plan.merger import merge_coordinates
from linechart.plan.ranges import derive_x_axis, derive_y_axis, synthesize_x

__all__ = [
    "PlanBuilder",
    "ColorSource",
    "SeriesValues",
    "extract_series",
    "merge_coordinates",
    "derive_x_axis",
    "derive_y_axis",
    "synthesize_x",
]
