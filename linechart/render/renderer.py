"""Chart renderer

Rasterizes a RenderPlan with matplotlib. Uses the object-oriented Figure API
with an Agg canvas so concurrent requests on the worker pool never share
pyplot state.
"""

import io
import logging
from typing import Optional, Tuple

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.ticker import LinearLocator

from linechart.exceptions import RenderError
from linechart.logger import ConsoleLogger, Logger
from linechart.models import AxisRange, RenderPlan
from linechart.settings import RenderSettings
from linechart.themes import get_theme

MIN_TICKS = 2
MAX_TICKS = 50

# matplotlib format names per configured file extension
_SAVE_FORMATS = {"png": "png", "jpg": "jpeg"}


def axis_limits(axis: AxisRange) -> Tuple[float, float]:
    """Limits to draw with; a zero-width range is widened by one unit each side"""
    if axis.minimum == axis.maximum:
        return axis.minimum - 1.0, axis.maximum + 1.0
    return axis.minimum, axis.maximum


def locator_ticks(axis: AxisRange) -> int:
    return max(MIN_TICKS, min(MAX_TICKS, axis.tick_count))


class ChartRenderer:
    """Rendering engine: RenderPlan in, encoded image bytes out"""

    def __init__(self, settings: Optional[RenderSettings] = None, logger: Optional[Logger] = None):
        """
        Args:
            settings: Output size, format and theme
            logger: Logger instance (defaults to a ConsoleLogger)

        Raises:
            ValueError: If the theme or image format is unknown
        """
        self.settings = settings or RenderSettings()
        self.logger = logger or ConsoleLogger(name="renderer", level=logging.INFO)
        self.theme = get_theme(self.settings.theme)
        if self.settings.image_format not in _SAVE_FORMATS:
            raise ValueError(f"Unsupported image format: {self.settings.image_format}")

    @property
    def extension(self) -> str:
        return self.settings.image_format

    def render(self, plan: RenderPlan) -> bytes:
        """
        Draw every line of the plan and encode the figure

        Raises:
            RenderError: If matplotlib fails at any step
        """
        self.logger.debug(
            "Starting render",
            lines=len(plan.lines),
            format=self.settings.image_format,
            size=f"{self.settings.width}x{self.settings.height}",
        )
        try:
            dpi = self.settings.dpi
            fig = Figure(
                figsize=(self.settings.width / dpi, self.settings.height / dpi), dpi=dpi
            )
            FigureCanvasAgg(fig)
            ax = fig.subplots()
            self.theme.apply(fig, ax)

            for line in plan.lines:
                xs = [x for x, _ in line.points]
                ys = [y for _, y in line.points]
                ax.plot(xs, ys, color=line.color, label=line.caption, linewidth=1.5)

            ax.set_xlim(*axis_limits(plan.x_axis))
            ax.set_ylim(*axis_limits(plan.y_axis))
            ax.xaxis.set_major_locator(LinearLocator(locator_ticks(plan.x_axis)))
            ax.yaxis.set_major_locator(LinearLocator(locator_ticks(plan.y_axis)))

            self.theme.style_legend(ax)
            fig.subplots_adjust(left=0.07, right=0.97, top=0.96, bottom=0.14)

            with io.BytesIO() as buf:
                fig.savefig(
                    buf,
                    format=_SAVE_FORMATS[self.settings.image_format],
                    facecolor=fig.get_facecolor(),
                )
                image_data = buf.getvalue()
        except MemoryError as e:
            self.logger.critical("Out of memory during render", lines=len(plan.lines))
            raise RenderError("Not enough memory to render this chart") from e
        except Exception as e:
            self.logger.error("Render failed", error=str(e), error_type=type(e).__name__)
            raise RenderError(f"Failed to render chart: {e}") from e

        self.logger.info(
            "Render completed",
            lines=len(plan.lines),
            format=self.settings.image_format,
            output_size_bytes=len(image_data),
        )
        return image_data
