from linechart.render.renderer import ChartRenderer

__all__ = ["ChartRenderer"]
