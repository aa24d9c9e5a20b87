"""Render plan construction

Wires series extraction, range derivation and coordinate merging into the
RenderPlan handed to the rendering engine.
"""

from typing import List, Optional

from linechart.logger import ConsoleLogger, Logger
from linechart.models import ChartRequest, PlotLine, RenderPlan, RequestVariant
from linechart.plan.colors import ColorSource
from linechart.plan.extractor import extract_series
from linechart.plan.merger import merge_coordinates
from linechart.plan.ranges import derive_x_axis, derive_y_axis, synthesize_x


class PlanBuilder:
    def __init__(self, color_source: Optional[ColorSource] = None, logger: Optional[Logger] = None):
        self.color_source = color_source or ColorSource()
        self.logger = logger or ConsoleLogger(name="plan_builder")

    def build(self, request: ChartRequest) -> RenderPlan:
        """
        Build the render plan for a validated request

        Raises:
            ValueError: If the synthesized X sequence would be too large
        """
        series = extract_series(request)
        x_axis = derive_x_axis(request.x_start, request.x_end)
        y_axis = derive_y_axis(series)

        shared_x: Optional[List[float]] = None
        if request.variant is RequestVariant.SINGLE_ARRAY:
            shared_x = synthesize_x(request.x_start, request.x_end)

        lines = []
        for caption, values in series.items():
            xs = shared_x if values.x is None else values.x
            lines.append(
                PlotLine(
                    caption=caption,
                    color=self.color_source.next_color(),
                    points=merge_coordinates(xs or [], values.y),
                )
            )

        self.logger.debug(
            "Render plan built",
            variant=request.variant.value,
            lines=len(lines),
            x_range=f"{x_axis.minimum}..{x_axis.maximum}",
            y_range=f"{y_axis.minimum}..{y_axis.maximum}",
        )
        return RenderPlan(x_axis=x_axis, y_axis=y_axis, lines=lines)
