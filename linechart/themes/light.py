from .base import Theme


class LightTheme(Theme):
    """White background with light grey grid lines"""

    name = "light"
