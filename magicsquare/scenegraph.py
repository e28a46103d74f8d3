"""Meshes, textured actors and nested assemblies."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

import numpy as np

from magicsquare.transform import Transform, rotation_matrix, translation_matrix


@dataclass
class Texture:
    """An image applied to a surface; ``image`` is None when it could not be read."""

    path: str
    image: np.ndarray | None = None
    interpolate: bool = True


def load_texture(path: str) -> Texture:
    """Read an image file into a bilinearly interpolated texture."""
    from matplotlib import image as mpimg

    try:
        data = mpimg.imread(path)
    except (OSError, ValueError):
        data = None
    return Texture(path=path, image=data, interpolate=True)


def prop_matrix(position: Sequence[float], orientation: Sequence[float]) -> np.ndarray:
    """Matrix of a placed object: translate, then rotate about Z, X and Y (degrees)."""
    ox, oy, oz = orientation
    return (
        translation_matrix(*position)
        @ rotation_matrix(oz, (0.0, 0.0, 1.0))
        @ rotation_matrix(ox, (1.0, 0.0, 0.0))
        @ rotation_matrix(oy, (0.0, 1.0, 0.0))
    )


def _placement(position, orientation, user_transform: Transform | None) -> np.ndarray:
    matrix = prop_matrix(position, orientation)
    if user_transform is not None:
        matrix = user_transform.matrix @ matrix
    return matrix


@dataclass
class Mesh:
    """Polygonal surface: points, polygons as index tuples, optional UV coordinates."""

    points: np.ndarray
    polys: list[tuple[int, ...]] = field(default_factory=list)
    tcoords: np.ndarray | None = None

    def __post_init__(self) -> None:
        self.points = np.asarray(self.points, dtype=float).reshape(-1, 3)
        self.polys = [tuple(int(i) for i in poly) for poly in self.polys]
        count = len(self.points)
        for poly in self.polys:
            if any(i < 0 or i >= count for i in poly):
                raise ValueError(f"polygon {poly} refers to a missing point")
        if self.tcoords is not None:
            self.tcoords = np.asarray(self.tcoords, dtype=float).reshape(-1, 2)
            if len(self.tcoords) != count:
                raise ValueError("texture coordinates must match the points one to one")

    @property
    def bounds(self) -> tuple[float, float, float, float, float, float]:
        """(xmin, xmax, ymin, ymax, zmin, zmax) of the points."""
        lo = self.points.min(axis=0)
        hi = self.points.max(axis=0)
        return (
            float(lo[0]), float(hi[0]),
            float(lo[1]), float(hi[1]),
            float(lo[2]), float(hi[2]),
        )

    def transformed(self, matrix: np.ndarray) -> Mesh:
        """Return a copy with every point mapped through a 4x4 matrix."""
        m = np.asarray(matrix, dtype=float)
        homogeneous = np.hstack([self.points, np.ones((len(self.points), 1))])
        mapped = homogeneous @ m.T
        points = mapped[:, :3] / mapped[:, 3:4]
        tcoords = None if self.tcoords is None else self.tcoords.copy()
        return Mesh(points, list(self.polys), tcoords)


@dataclass
class Actor:
    """A mesh with its appearance and placement."""

    mesh: Mesh
    texture: Texture | None = None
    color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    orientation: tuple[float, float, float] = (0.0, 0.0, 0.0)
    user_transform: Transform | None = None

    def matrix(self) -> np.ndarray:
        """Local-to-parent matrix; the user transform is applied last."""
        return _placement(self.position, self.orientation, self.user_transform)


@dataclass
class Assembly:
    """A group of actors and assemblies placed together."""

    parts: list[Actor | Assembly] = field(default_factory=list)
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    orientation: tuple[float, float, float] = (0.0, 0.0, 0.0)
    user_transform: Transform | None = None

    def add_part(self, part: Actor | Assembly) -> None:
        """Append an actor or a sub-assembly."""
        self.parts.append(part)

    def matrix(self) -> np.ndarray:
        """Local-to-parent matrix; the user transform is applied last."""
        return _placement(self.position, self.orientation, self.user_transform)

    def iter_actors(self) -> Iterator[tuple[Actor, np.ndarray]]:
        """Yield every actor below this assembly with its world matrix."""
        yield from self._walk(np.eye(4))

    def _walk(self, parent: np.ndarray) -> Iterator[tuple[Actor, np.ndarray]]:
        own = parent @ self.matrix()
        for part in self.parts:
            if isinstance(part, Assembly):
                yield from part._walk(own)
            else:
                yield part, own @ part.matrix()