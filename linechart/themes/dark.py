from .base import Theme


class DarkTheme(Theme):
    """Dark background for dashboards"""

    name = "dark"
    background_color = "#1E1E1E"
    text_color = "#E0E0E0"
    grid_color = "#404040"
    legend_background = "#2A2A2A"
