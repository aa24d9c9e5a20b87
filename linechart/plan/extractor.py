"""Series extraction

Turns the validated series list into a caption-keyed mapping of float
sequences. The mapping iterates in lexicographic caption order, which is the
order lines and legend entries are drawn in.
"""

from typing import Dict, List, NamedTuple, Optional

from linechart.models import ChartRequest


class SeriesValues(NamedTuple):
    x: Optional[List[float]]  # None when X is synthesized
    y: List[float]


def extract_series(request: ChartRequest) -> Dict[str, SeriesValues]:
    """
    Map each caption to its value sequences

    A caption that appears more than once keeps the values of its last
    occurrence.
    """
    by_caption: Dict[str, SeriesValues] = {}
    for series in request.series:
        x = [float(v) for v in series.x_values] if series.x_values is not None else None
        by_caption[series.caption] = SeriesValues(x=x, y=[float(v) for v in series.y_values])
    return dict(sorted(by_caption.items()))
