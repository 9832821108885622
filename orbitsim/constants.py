"""Simulation constants and the description of a planet's starting state."""

from __future__ import annotations

from dataclasses import dataclass

from orbitsim.maths import Vector2

Color = tuple[int, int, int]

WINDOW_WIDTH = 2160
WINDOW_HEIGHT = 1500
FRAME_LIMIT = 60

G = 11.6767
PI = 3.141592653589793
MASS_OF_SUN_KG = 100000.0
MASS_OF_MERCURY_KG = 800.0
MASS_OF_VENUS_KG = 2000.0
MASS_OF_EARTH_KG = 5000.0
MASS_OF_MOON_KG = 200.0

MASS_OF_MARS_KG = 1000.0
MASS_OF_JUPITER_KG = 9000.0
MASS_OF_SATURN_KG = 7000.0
MASS_OF_URANUS_KG = 6500.0
MASS_OF_NEPTUNE_KG = 5500.0

MAX_PATH = 5

TIME_STEP = 0.05

RHO = 0.1

TOTAL_STARS = 1000
MAX_STATISTIC_COLUMNS = 5


@dataclass(frozen=True)
class PlanetMeta:
    """Starting parameters of a planet."""

    mass: float
    name: str
    initial_velocity: Vector2
    initial_position: Vector2
    color: Color