"""Random background stars."""

from __future__ import annotations

import random
from dataclasses import dataclass

from orbitsim.constants import WINDOW_HEIGHT, WINDOW_WIDTH, Color
from orbitsim.maths import Vector2

_MIN_RADIUS = 0.5
_MAX_RADIUS = 5.5
_MIN_BRIGHTNESS = 150.0
_MAX_BRIGHTNESS = 255.0


@dataclass(frozen=True)
class StarMeta:
    """Placement and look of one star."""

    position: Vector2
    color: Color
    radius: float


class StarsGenerator:
    """Scatters grey stars of random size across the window."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def _uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self._rng.random()

    def generate(self, total: int) -> list[StarMeta]:
        """Return ``total`` randomly placed stars."""
        if total < 0:
            raise ValueError("total must not be negative")
        stars = []
        for _ in range(total):
            x = self._uniform(0.0, float(WINDOW_WIDTH))
            y = self._uniform(0.0, float(WINDOW_HEIGHT))
            radius = self._uniform(_MIN_RADIUS, _MAX_RADIUS)
            brightness = int(self._uniform(_MIN_BRIGHTNESS, _MAX_BRIGHTNESS))
            stars.append(StarMeta(Vector2(x, y), (brightness, brightness, brightness), radius))
        return stars