"""Two-dimensional gradient noise."""

from __future__ import annotations

import math
import random

_PERMUTATION_SIZE = 256


class Noise:
    """Gradient noise over a shuffled, doubled permutation table."""

    def __init__(self, seed: int | None = None) -> None:
        table = list(range(_PERMUTATION_SIZE))
        random.Random(seed).shuffle(table)
        self._permutation = table + table

    def evaluate(self, x: float, y: float) -> float:
        """Noise value at (x, y), shifted from [-1, 1] towards [0, 1]."""
        perm = self._permutation
        floor_x = math.floor(x)
        floor_y = math.floor(y)
        cell_x = floor_x & 255
        cell_y = floor_y & 255

        x -= floor_x
        y -= floor_y

        u = self._fade(x)
        v = self._fade(y)

        # The first corner is indexed with the fractional y, truncated.
        aa = perm[int(perm[cell_x] + y)]
        ab = perm[perm[cell_x] + cell_y + 1]
        ba = perm[perm[cell_x + 1] + cell_y]
        bb = perm[perm[cell_x + 1] + cell_y + 1]
        resolution = self._lerp(
            v,
            self._lerp(u, self._grad(aa, x, y), self._grad(ba, x - 1, y)),
            self._lerp(u, self._grad(ab, x, y - 1), self._grad(bb, x - 1, y - 1)),
        )
        return (resolution + 1.0) / 2.0

    @staticmethod
    def _fade(t: float) -> float:
        return 6 * t**5 - 15 * t**4 + 10 * t**3

    @staticmethod
    def _lerp(t: float, a: float, b: float) -> float:
        return a + t * (b - a)

    @staticmethod
    def _grad(hash_value: int, x: float, y: float) -> float:
        h = hash_value & 7
        u, v = (x, y) if h < 4 else (y, x)
        return (-u if h & 1 else u) + (-2.0 * v if h & 2 else 2.0 * v)