"""A massive body that moves under gravitational attraction."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from orbitsim import constants
from orbitsim.constants import Color
from orbitsim.maths import Vector2, cross

WHITE: Color = (255, 255, 255)
_ZERO = Vector2(0.0, 0.0)


@dataclass(frozen=True)
class PathVertex:
    """One point of a body's trail."""

    position: Vector2
    color: Color = WHITE


@dataclass
class CelestialBody:
    """A body with mass, size and motion; mass and radius must be non-zero."""

    name: str
    mass: float
    radius: float
    position: Vector2 = _ZERO
    velocity: Vector2 = _ZERO
    color: Color = WHITE
    acceleration: Vector2 = field(default=_ZERO, init=False)
    angular_velocity: float = field(default=0.0, init=False)
    paths: list[PathVertex] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        messages = []
        if not self.mass:
            messages.append("VALIDATION: Celestial body required mass!")
        if not self.radius:
            messages.append("VALIDATION: Celestial body required radius!")
        if messages:
            raise ValueError("\n".join(messages))
        self.paths.append(PathVertex(self.center))

    @property
    def center(self) -> Vector2:
        """Centre of the body: its position is the top-left corner of its bounds."""
        return self.position + Vector2(self.radius, self.radius)

    def revolve(self, others: Iterable[CelestialBody]) -> None:
        """Advance one time step under the pull of the given bodies.

        The acceleration is reset for each body in turn, so only the last
        body of ``others`` determines it.
        """
        for other in others:
            delta = other.center - self.center
            direction = delta.normalized()
            self.acceleration = _ZERO
            distance = max(delta.length(), 1e-3)
            force = direction * (constants.G * self.mass * other.mass) / (distance * distance)
            self.acceleration = self.acceleration + force / self.mass

        self.velocity = self.velocity + self.acceleration * constants.TIME_STEP
        self.position = self.position + self.velocity * constants.TIME_STEP

        denominator = self.position.x**2 + self.position.y**2
        numerator = cross(self.position, self.velocity)
        self.angular_velocity = numerator / denominator if denominator else math.nan

    def update_path(self) -> None:
        """Append the current centre to the trail, dropping the oldest point once full."""
        if len(self.paths) >= constants.MAX_PATH:
            del self.paths[0]
        vertex = PathVertex(self.center, self.color)
        self.paths.extend((vertex, vertex))

    @staticmethod
    def mass_to_radius(mass: float) -> float:
        """Radius of a sphere of the given mass at the simulation's density."""
        return ((3 * mass) / (4 * constants.PI * constants.RHO)) ** (1.0 / 3.0)