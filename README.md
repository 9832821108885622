# orbitsim

A small two-dimensional solar system that moves under Newton's law of
universal gravitation. A sun, eight planets and a moon are drawn over a field
of 1000 random grey stars. Each frame every body is advanced by a fixed time
step:

- the sun stays where it was placed;
- each planet is pulled by the sun and leaves a short trail behind it;
- the moon is given both the Earth and the sun. The acceleration is reset for
  each attracting body in turn, so only the last one, the sun, ends up moving it.

A statistics panel shows the name, angular velocity and centre position of the
sun and of each planet.

## Installation

```
pip install .
```

This installs pygame, which draws the window and plays the music.

## Running

```
orbitsim
```

The window expects a font at `fonts/FiraCode-Regular.ttf` and a music file at
`soundtrack/soundtrack.wav`, both relative to the current directory. Start the
command from a directory that has them. The music loops while the window is
open. Close the window to stop. The command takes no options besides `--help`.

When the planets are created, the mass and the initial position and velocity
vectors of each one are printed to standard output.

## Using the library

The physics works without a window:

```python
from orbitsim.app import Simulation

sim = Simulation()          # prints the planet set-up messages
for _ in range(100):
    sim.step()
print(sim.registry["Earth"].center)
```

- `orbitsim.celestial_body.CelestialBody` holds one body's name, mass,
  radius, position (the top-left corner of its bounds), velocity and colour.
  It raises `ValueError` if the mass or radius is zero. `center` gives the
  body's centre. `revolve(others)` advances the body by one time step.
  `update_path()` extends its trail, which is kept in `paths`.
  `CelestialBody.mass_to_radius(mass)` gives the radius that matches a mass at
  the simulation's fixed density.
- `orbitsim.maths.Vector2` is an immutable 2D vector with `length()` and
  `normalized()`. `orbitsim.maths.cross(u, v)` gives the planar cross product.
- `orbitsim.app` also provides `make_sun()`, `planet_metas(sun)`,
  `create_planets(sun)`, `make_moon(earth)`, `statistics_lines(body)` and
  `statistics_position(index, line)`, the pieces the scene is built from.
- `orbitsim.stars_generator.StarsGenerator(seed=None).generate(total)` returns
  `total` random `StarMeta` stars placed within the window.
- `orbitsim.noise.Noise(seed=None).evaluate(x, y)` returns a two-dimensional
  gradient-noise value, shifted by `(value + 1) / 2`. The scene does not use it.
- `orbitsim.constants` holds the window size, frame limit, masses, time step
  and the other fixed parameters.

## Tests

```
pip install ".[test]"
pytest
```