"""A solar-system simulation under Newton's law of universal gravitation."""

__version__ = "0.1.0"
__all__ = ["app", "celestial_body", "constants", "maths", "noise", "stars_generator"]