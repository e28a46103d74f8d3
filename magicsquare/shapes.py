"""Primitive solids: box, frustum panel, cylinder and sphere."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from magicsquare.params import CubeParams, CylinderParams, FrustumParams, SphereParams
from magicsquare.scenegraph import Actor, Mesh

_CUBE_COLOR = (0.7, 0.7, 0.7)
_FRUSTUM_COLOR = (1.0, 0.7, 0.3)
_FACE_UV = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


def cube_mesh(x_length: float, y_length: float, z_length: float) -> Mesh:
    """Box centred at the origin: six quads with their own corners and UVs."""
    half = (x_length / 2.0, y_length / 2.0, z_length / 2.0)
    points: list[list[float]] = []
    polys: list[tuple[int, ...]] = []
    tcoords: list[tuple[float, float]] = []
    for axis in range(3):
        a, b = [k for k in range(3) if k != axis]
        for sign in (-1.0, 1.0):
            corners = [(-1, -1), (1, -1), (1, 1), (-1, 1)]
            if sign < 0:
                corners.reverse()
            start = len(points)
            for sa, sb in corners:
                p = [0.0, 0.0, 0.0]
                p[axis] = sign * half[axis]
                p[a] = sa * half[a]
                p[b] = sb * half[b]
                points.append(p)
            tcoords.extend(_FACE_UV)
            polys.append(tuple(range(start, start + 4)))
    return Mesh(points, polys, tcoords)


def frustum_mesh(params: FrustumParams, normal: Sequence[float]) -> Mesh:
    """Square frustum rising from the origin along ``normal``; only the top face is mapped."""
    bw = params.base_width / 2.0
    bh = params.base_height / 2.0
    tw = params.top_width / 2.0
    th = params.top_height / 2.0
    h = params.height

    n = np.array([float(c) for c in normal])
    nx, ny, _ = n
    center = n * h / 2.0

    up = np.zeros(3)
    right = np.zeros(3)
    if nx != 0:
        up[1] = 1.0
        right[2] = 1.0
    elif ny != 0:
        up[0] = 1.0
        right[2] = 1.0
    else:
        up[0] = 1.0
        right[1] = 1.0

    corners = [(-1, -1), (1, -1), (1, 1), (-1, 1)]
    base = [center - n * h / 2.0 + sx * bw * right + sy * bh * up for sx, sy in corners]
    top = [center + n * h / 2.0 + sx * tw * right + sy * th * up for sx, sy in corners]

    polys = [(i, (i + 1) % 4, (i + 1) % 4 + 4, i + 4) for i in range(4)]
    polys.append((4, 5, 6, 7))

    tcoords = [(0.5, 0.5)] * 4
    for p in top:
        u = min(max((p[0] + tw) / (2.0 * tw), 0.0), 1.0)
        v = min(max((p[1] + th) / (2.0 * th), 0.0), 1.0)
        tcoords.append((u, v))

    return Mesh(np.array(base + top), polys, tcoords)


def _cylinder_uv(point: np.ndarray, height: float) -> tuple[float, float]:
    angle = math.degrees(math.atan2(-point[2], point[0])) % 360.0
    s = angle / 180.0 if angle <= 180.0 else (360.0 - angle) / 180.0
    t = (point[1] + height / 2.0) / height if height > 0 else 0.0
    return s, t


def cylinder_mesh(radius: float, height: float, resolution: int, capped: bool) -> Mesh:
    """Cylinder centred at the origin along the Y axis, with seamless cylindrical UVs."""
    resolution = max(2, int(resolution))
    step = 2.0 * math.pi / resolution
    ring = [(math.cos(i * step), -math.sin(i * step)) for i in range(resolution)]

    points: list[tuple[float, float, float]] = []
    for c, s in ring:
        points.append((radius * c, 0.5 * height, radius * s))
        points.append((radius * c, -0.5 * height, radius * s))
    polys: list[tuple[int, ...]] = [
        (2 * i, 2 * i + 1, 2 * ((i + 1) % resolution) + 1, 2 * ((i + 1) % resolution))
        for i in range(resolution)
    ]

    if capped:
        first = len(points)
        points.extend((radius * c, 0.5 * height, radius * s) for c, s in ring)
        second = len(points)
        points.extend((radius * c, -0.5 * height, radius * s) for c, s in ring)
        polys.append(tuple(range(first, second)))
        polys.append(tuple(reversed(range(second, second + resolution))))

    array = np.array(points, dtype=float)
    tcoords = [_cylinder_uv(p, height) for p in array]
    return Mesh(array, polys, tcoords)


def sphere_mesh(radius: float, theta_resolution: int, phi_resolution: int) -> Mesh:
    """Sphere centred at the origin with poles on the Z axis."""
    n_theta = max(3, int(theta_resolution))
    n_phi = max(3, int(phi_resolution))
    rings = n_phi - 2

    points = [(0.0, 0.0, radius), (0.0, 0.0, -radius)]
    for i in range(n_theta):
        theta = 2.0 * math.pi * i / n_theta
        for j in range(1, n_phi - 1):
            phi = math.pi * j / (n_phi - 1)
            points.append((
                radius * math.sin(phi) * math.cos(theta),
                radius * math.sin(phi) * math.sin(theta),
                radius * math.cos(phi),
            ))

    def index(i: int, j: int) -> int:
        return 2 + (i % n_theta) * rings + j

    polys: list[tuple[int, ...]] = []
    for i in range(n_theta):
        polys.append((0, index(i, 0), index(i + 1, 0)))
        polys.append((1, index(i + 1, rings - 1), index(i, rings - 1)))
        for j in range(rings - 1):
            a, b = index(i, j), index(i, j + 1)
            c, d = index(i + 1, j + 1), index(i + 1, j)
            polys.append((a, b, c))
            polys.append((a, c, d))
    return Mesh(points, polys)


@dataclass
class CubeUnit:
    """A box; grey when it has no texture."""

    params: CubeParams = field(default_factory=CubeParams)

    def create_actor(self) -> Actor:
        p = self.params
        mesh = cube_mesh(p.x_length, p.y_length, p.z_length)
        if p.texture is not None:
            return Actor(mesh, texture=p.texture)
        return Actor(mesh, color=_CUBE_COLOR)


@dataclass
class TrapezoidalFrustum:
    """A frustum panel facing ``normal``; orange when it has no texture."""

    params: FrustumParams
    normal: tuple[float, float, float]

    def create_actor(self) -> Actor:
        mesh = frustum_mesh(self.params, self.normal)
        if self.params.texture is not None:
            return Actor(mesh, texture=self.params.texture)
        return Actor(mesh, color=_FRUSTUM_COLOR)


@dataclass
class CylindricalBodyUnit:
    """A cylinder with cylindrical texture mapping."""

    params: CylinderParams = field(default_factory=CylinderParams)

    def create_actor(self) -> Actor:
        p = self.params
        mesh = cylinder_mesh(p.radius, p.height, p.resolution, p.capped)
        return Actor(mesh, texture=p.texture)


@dataclass
class SphereUnit:
    """A tessellated sphere."""

    params: SphereParams = field(default_factory=SphereParams)

    def create_actor(self) -> Actor:
        p = self.params
        mesh = sphere_mesh(p.radius, p.theta_resolution, p.phi_resolution)
        return Actor(mesh, texture=p.texture)