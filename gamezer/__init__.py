"""A small side-scrolling platformer: levels, collisions, camera and game loop."""

__version__ = "0.1.0"