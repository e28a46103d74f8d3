"""Homogeneous 4x4 transforms with pre-multiplying composition."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np


def translation_matrix(x: float, y: float, z: float) -> np.ndarray:
    """Return a 4x4 matrix translating by (x, y, z)."""
    matrix = np.eye(4)
    matrix[:3, 3] = (x, y, z)
    return matrix


def rotation_matrix(angle: float, axis: Sequence[float]) -> np.ndarray:
    """Return a 4x4 matrix rotating by ``angle`` degrees about ``axis``.

    A zero angle or a zero-length axis gives the identity.
    """
    direction = np.asarray(axis, dtype=float)
    norm = float(np.linalg.norm(direction))
    if angle == 0 or norm == 0.0:
        return np.eye(4)
    x, y, z = direction / norm
    theta = math.radians(angle)
    c, s = math.cos(theta), math.sin(theta)
    t = 1.0 - c
    matrix = np.eye(4)
    matrix[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return matrix


class Transform:
    """A mutable transform; each new operation is applied to points first."""

    def __init__(self, matrix: np.ndarray | None = None) -> None:
        self.matrix = np.eye(4) if matrix is None else np.array(matrix, dtype=float)
        if self.matrix.shape != (4, 4):
            raise ValueError("a transform matrix must be 4x4")

    def identity(self) -> Transform:
        """Reset to the identity."""
        self.matrix = np.eye(4)
        return self

    def concatenate(self, matrix: np.ndarray | Transform) -> Transform:
        """Compose with ``matrix`` so that it acts on points before this transform."""
        other = matrix.matrix if isinstance(matrix, Transform) else np.asarray(matrix, float)
        self.matrix = self.matrix @ other
        return self

    def translate(self, x: float, y: float, z: float) -> Transform:
        """Compose a translation."""
        return self.concatenate(translation_matrix(x, y, z))

    def rotate_wxyz(self, angle: float, axis: Sequence[float]) -> Transform:
        """Compose a rotation of ``angle`` degrees about ``axis``."""
        return self.concatenate(rotation_matrix(angle, axis))

    def transform_point(self, point: Sequence[float]) -> tuple[float, float, float]:
        """Map a 3D point through the transform."""
        v = self.matrix @ np.array([point[0], point[1], point[2], 1.0])
        return float(v[0] / v[3]), float(v[1] / v[3]), float(v[2] / v[3])

    def copy(self) -> Transform:
        """Return an independent copy."""
        return Transform(self.matrix.copy())

    def __repr__(self) -> str:
        return f"Transform({self.matrix.tolist()!r})"