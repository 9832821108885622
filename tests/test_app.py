import pytest

from orbitsim import constants
from orbitsim.app import (
    Simulation,
    create_planets,
    make_moon,
    make_sun,
    planet_metas,
    statistics_lines,
    statistics_position,
)
from orbitsim.celestial_body import CelestialBody
from orbitsim.maths import Vector2

PLANET_NAMES = ["Mercury", "Venus", "Earth", "Mars", "Jupiter", "Saturn", "Uranus", "Neptune"]


def test_make_sun_values():
    sun = make_sun()
    assert sun.name == "Sun"
    assert sun.mass == constants.MASS_OF_SUN_KG
    assert sun.radius == pytest.approx(CelestialBody.mass_to_radius(constants.MASS_OF_SUN_KG))
    assert sun.position == Vector2(
        constants.WINDOW_WIDTH // 2 - 100, constants.WINDOW_HEIGHT // 2 - 100
    )
    assert sun.velocity == Vector2(0.0, -2.0)
    assert sun.color == (255, 215, 128)


def test_planet_metas_order_and_offsets():
    sun = make_sun()
    metas = planet_metas(sun)
    assert [m.name for m in metas] == PLANET_NAMES
    offsets = [sun.center.x - m.initial_position.x for m in metas]
    assert offsets == pytest.approx([180, 290, 400, 520, 650, 750, 850, 950])
    assert all(m.initial_position.y == sun.center.y for m in metas)
    assert metas[2].mass == constants.MASS_OF_EARTH_KG
    assert metas[2].initial_velocity == Vector2(0.0, -60.0)


def test_create_planets_builds_registry(capsys):
    sun = make_sun()
    registry = create_planets(sun)
    assert list(registry) == PLANET_NAMES
    for meta in planet_metas(sun):
        body = registry[meta.name]
        assert body.mass == meta.mass
        assert body.radius == pytest.approx(CelestialBody.mass_to_radius(meta.mass))
        assert body.position == meta.initial_position
        assert body.color == meta.color
        assert len(body.paths) == 1
    out = capsys.readouterr().out
    assert out.startswith("INITIALISING: Preparing solar systems...")
    assert "\t => Creating: Mercury" in out
    assert "\t\t -> Mass: 800\n" in out
    assert "DONE: Planets are initialised successfully" in out


def test_make_moon_relative_to_earth():
    earth = create_planets(make_sun())["Earth"]
    moon = make_moon(earth)
    assert moon.name == "Moon"
    assert moon.mass == constants.MASS_OF_MOON_KG
    assert moon.position.x == pytest.approx(earth.center.x - 70)
    assert moon.position.y == pytest.approx(earth.center.y)
    assert moon.velocity.x == pytest.approx(earth.velocity.x)
    assert moon.velocity.y == pytest.approx(earth.velocity.y + 7.0)


def test_statistics_lines_format():
    body = CelestialBody(name="Probe", mass=1.0, radius=1.0, position=Vector2(1.0, 2.0))
    body.angular_velocity = 0.5
    assert statistics_lines(body) == [
        "Planet Name -> Probe",
        "Angular velocity -> 0.500 rad/s",
        "Position -> (2.000,3.000)",
    ]


def test_statistics_position_origin():
    assert statistics_position(0, 0) == Vector2(10.0, 10.0)


def test_statistics_position_grid_invariants():
    for index in range(10):
        base = statistics_position(index, 0)
        assert statistics_position(index, 1).y - base.y == pytest.approx(20.0)
        assert statistics_position(index, 1).x == base.x
    assert statistics_position(5, 0).x == statistics_position(0, 0).x
    assert statistics_position(5, 0).y - statistics_position(0, 0).y == pytest.approx(100.0)
    assert statistics_position(1, 0).x - statistics_position(0, 0).x == pytest.approx(275.0)


def test_simulation_step_moves_planets_not_sun():
    sim = Simulation()
    sun_position = sim.sun.position
    before = {p.name: p.position for p in sim.planets}
    moon_before = sim.moon.position
    sim.step()
    assert sim.sun.position == sun_position
    assert sim.moon.position != moon_before
    for planet in sim.planets:
        assert planet.position != before[planet.name]
        # every planet starts left of the sun and is pulled right
        assert planet.velocity.x > 0
        assert sim.registry[planet.name] is planet


def test_simulation_step_extends_paths():
    sim = Simulation()
    sim.step()
    for planet in sim.planets:
        assert len(planet.paths) == 3
        last = planet.paths[-1]
        assert last == planet.paths[-2]
        assert last.position == planet.center
        assert last.color == planet.color


def test_simulation_step_sets_angular_velocity():
    sim = Simulation()
    sim.step()
    earth = sim.registry["Earth"]
    pos, vel = earth.position, earth.velocity
    expected = (pos.x * vel.y - pos.y * vel.x) / (pos.x**2 + pos.y**2)
    assert earth.angular_velocity == pytest.approx(expected)
    assert statistics_lines(earth)[1] == f"Angular velocity -> {expected:.3f} rad/s"