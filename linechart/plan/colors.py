import random
from typing import Optional


class ColorSource:
    """Random line colors; pass a seeded Random for reproducible output"""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def next_color(self) -> str:
        r, g, b = (self._rng.randint(0, 255) for _ in range(3))
        return f"#{r:02x}{g:02x}{b:02x}"
