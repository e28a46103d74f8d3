"""Parameter records for the primitive shapes and the cube puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from magicsquare.scenegraph import Texture


class Face(IntEnum):
    """A face of the cube puzzle."""

    U = 0
    D = 1
    L = 2
    R = 3
    F = 4
    B = 5


class Direction(IntEnum):
    """Turning direction of a face: clockwise or counter-clockwise."""

    CW = 0
    CCW = 1


@dataclass
class Position:
    """A point in world coordinates."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class CubeParams:
    """Edge lengths and optional texture of a box."""

    x_length: float = 5.0
    y_length: float = 5.0
    z_length: float = 5.0
    texture: Texture | None = None


@dataclass
class FrustumParams:
    """Dimensions of a square frustum panel."""

    base_width: float = 5.0
    base_height: float = 5.0
    top_width: float = 4.0
    top_height: float = 4.0
    height: float = 1.0
    texture: Texture | None = None


@dataclass
class SphereParams:
    """Radius and tessellation of a sphere."""

    radius: float = 1.0
    theta_resolution: int = 32
    phi_resolution: int = 32
    texture: Texture | None = None


@dataclass
class CylinderParams:
    """Radius, height and tessellation of a cylinder along the Y axis."""

    radius: float = 1.0
    height: float = 2.0
    resolution: int = 32
    capped: bool = True
    texture: Texture | None = None


@dataclass
class ShapeConfig:
    """Shared sizes for a cube carrying frustum panels."""

    cube_size: float = 5.0
    frustum_height: float = 1.0
    frustum_top_size: float = 4.0
    textures: list[Texture | None] = field(default_factory=lambda: [None] * 7)