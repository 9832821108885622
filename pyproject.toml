[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbitsim"
version = "0.1.0"
description = "A small solar-system simulation driven by Newton's law of universal gravitation"
requires-python = ">=3.10"
keywords = ["gravity", "newton", "solar system", "simulation", "orbits", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
orbitsim = "orbitsim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["orbitsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
