"""Two small pygame arcade games: Snake and a Doodle-Jump-style platformer."""

__version__ = "0.1.0"
