"""Build, animate and view a Rubik's cube made of cube and frustum units."""

__version__ = "0.1.0"

__all__ = ["app", "params", "scene", "scenegraph", "shapes", "transform", "viewer"]