"""The solar-system scene: its set-up, its time stepping and its window."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

from orbitsim import constants
from orbitsim.celestial_body import CelestialBody
from orbitsim.constants import PlanetMeta
from orbitsim.maths import Vector2
from orbitsim.stars_generator import StarsGenerator

TITLE = "Newton Universal Law of Gravity"
FONT_PATH = "fonts/FiraCode-Regular.ttf"
MUSIC_PATH = "soundtrack/soundtrack.wav"

_BLACK = (0, 0, 0)
_STATISTICS_COLOR = (144, 238, 144)
_CHARACTER_SIZE = 14


def make_sun() -> CelestialBody:
    """The central star, placed near the middle of the window."""
    mass = constants.MASS_OF_SUN_KG
    return CelestialBody(
        name="Sun",
        mass=mass,
        radius=CelestialBody.mass_to_radius(mass),
        position=Vector2(
            constants.WINDOW_WIDTH // 2 - 100, constants.WINDOW_HEIGHT // 2 - 100
        ),
        velocity=Vector2(0.0, -2.0),
        color=(255, 215, 128),
    )


def planet_metas(sun: CelestialBody) -> list[PlanetMeta]:
    """Starting parameters of the eight planets, laid out left of the sun."""
    cx, cy = sun.center
    return [
        PlanetMeta(constants.MASS_OF_MERCURY_KG, "Mercury", Vector2(0.0, -90.0),
                   Vector2(cx - 180, cy), (139, 69, 19)),
        PlanetMeta(constants.MASS_OF_VENUS_KG, "Venus", Vector2(0.0, -67.0),
                   Vector2(cx - 290, cy), (255, 255, 0)),
        PlanetMeta(constants.MASS_OF_EARTH_KG, "Earth", Vector2(0.0, -60.0),
                   Vector2(cx - 400, cy), (34, 139, 87)),
        PlanetMeta(constants.MASS_OF_MARS_KG, "Mars", Vector2(0.0, -50.0),
                   Vector2(cx - 520, cy), (255, 0, 0)),
        PlanetMeta(constants.MASS_OF_JUPITER_KG, "Jupiter", Vector2(0.0, -44.5),
                   Vector2(cx - 650, cy), (255, 153, 102)),
        PlanetMeta(constants.MASS_OF_SATURN_KG, "Saturn", Vector2(0.0, -40.5),
                   Vector2(cx - 750, cy), (210, 180, 140)),
        PlanetMeta(constants.MASS_OF_URANUS_KG, "Uranus", Vector2(0.0, -38.5),
                   Vector2(cx - 850, cy), (173, 216, 230)),
        PlanetMeta(constants.MASS_OF_NEPTUNE_KG, "Neptune", Vector2(0.0, -36.5),
                   Vector2(cx - 950, cy), (28, 82, 162)),
    ]


def create_planets(sun: CelestialBody) -> dict[str, CelestialBody]:
    """Build the planets around ``sun``, reporting progress, keyed by name."""
    print("INITIALISING: Preparing solar systems...")
    registry: dict[str, CelestialBody] = {}
    for meta in planet_metas(sun):
        px, py = meta.initial_position
        vx, vy = meta.initial_velocity
        print(f"\t => Creating: {meta.name}")
        print(f"\t\t -> Mass: {meta.mass:g}")
        print(f"\t\t -> Initial Position Vector: ({px:g}, {py:g})")
        print(f"\t\t -> Initial Velocity Vector: ({vx:g}, {vy:g})")
        registry[meta.name] = CelestialBody(
            name=meta.name,
            mass=meta.mass,
            radius=CelestialBody.mass_to_radius(meta.mass),
            position=meta.initial_position,
            velocity=meta.initial_velocity,
            color=meta.color,
        )
        print(f"\t => Done: {meta.name} is created successfully")
    print("DONE: Planets are initialised successfully")
    return registry


def make_moon(earth: CelestialBody) -> CelestialBody:
    """A moon just left of ``earth``, moving with it plus a push downwards."""
    mass = constants.MASS_OF_MOON_KG
    return CelestialBody(
        name="Moon",
        mass=mass,
        radius=CelestialBody.mass_to_radius(mass),
        position=Vector2(earth.center.x - 70, earth.center.y),
        velocity=Vector2(earth.velocity.x, earth.velocity.y + 7.0),
        color=(128, 128, 128),
    )


def statistics_lines(body: CelestialBody) -> list[str]:
    """The text lines shown for a body."""
    center = body.center
    return [
        f"Planet Name -> {body.name}",
        f"Angular velocity -> {body.angular_velocity:.3f} rad/s",
        f"Position -> ({center.x:.3f},{center.y:.3f})",
    ]


def statistics_position(index: int, line: int) -> Vector2:
    """Screen position of line ``line`` in the statistics block of body ``index``."""
    column, row = index % constants.MAX_STATISTIC_COLUMNS, index // constants.MAX_STATISTIC_COLUMNS
    return Vector2(10.0 + 275.0 * column, line * 20.0 + 10.0 + 100 * row)


class Simulation:
    """The sun, its planets and Earth's moon, advanced one step at a time."""

    def __init__(self) -> None:
        self.sun = make_sun()
        self.registry = create_planets(self.sun)
        self.planets = list(self.registry.values())
        self.moon = make_moon(self.registry["Earth"])

    def step(self) -> None:
        """Move the moon, then every planet, by one time step; the sun stays put."""
        self.moon.revolve([self.registry["Earth"], self.sun])
        for planet in self.planets:
            planet.revolve([self.sun])
            planet.update_path()
            self.registry[planet.name] = planet


class App:
    """A window that shows the simulation over a field of stars, with music."""

    def __init__(
        self, name: str, font_path: str = FONT_PATH, music_path: str = MUSIC_PATH
    ) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode(
            (constants.WINDOW_WIDTH, constants.WINDOW_HEIGHT)
        )
        pygame.display.set_caption(name)
        self._font = pygame.font.Font(font_path, _CHARACTER_SIZE)
        self._music_path = music_path

    def run(self) -> None:
        """Play music and animate until the window is closed."""
        try:
            pygame.mixer.music.load(self._music_path)
            pygame.mixer.music.play(loops=-1)
            clock = pygame.time.Clock()

            simulation = Simulation()
            stars = StarsGenerator().generate(constants.TOTAL_STARS)

            print("STARING: Starting solar system simulation...")
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        print("EXISTING: Exiting solar system simulation...")
                        running = False
                if not running:
                    break

                self._screen.fill(_BLACK)
                for star in stars:
                    center = star.position + Vector2(star.radius, star.radius)
                    pygame.draw.circle(self._screen, star.color, tuple(center), star.radius)

                simulation.step()

                self._draw_body(simulation.sun)
                self._draw_statistics(simulation.sun, 0)
                self._draw_body(simulation.moon)
                for index, planet in enumerate(simulation.planets, start=1):
                    self._draw_body(planet)
                    self._draw_paths(planet)
                    self._draw_statistics(planet, index)

                pygame.display.flip()
                clock.tick(constants.FRAME_LIMIT)
        finally:
            pygame.quit()

    def _draw_body(self, body: CelestialBody) -> None:
        pygame.draw.circle(self._screen, body.color, tuple(body.center), body.radius)

    def _draw_paths(self, body: CelestialBody) -> None:
        paths = body.paths
        for start, end in zip(paths[0::2], paths[1::2]):
            pygame.draw.line(self._screen, end.color, tuple(start.position), tuple(end.position))

    def _draw_statistics(self, body: CelestialBody, index: int) -> None:
        for line, text in enumerate(statistics_lines(body)):
            surface = self._font.render(text, True, _STATISTICS_COLOR)
            self._screen.blit(surface, tuple(statistics_position(index, line)))


def main(argv: Sequence[str] | None = None) -> int:
    """Open the simulation window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="orbitsim", description=TITLE)
    parser.parse_args(argv)
    App(TITLE).run()
    return 0