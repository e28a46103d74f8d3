"""Draws assemblies with matplotlib's 3D axes, looking from -Y with Z up."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from magicsquare.scenegraph import Actor, Assembly

BACKGROUND_BOTTOM = (0.0, 0.0, 0.0)
BACKGROUND_TOP = (0.2, 0.3, 0.4)
CAMERA_ELEVATION = 0.0
CAMERA_AZIMUTH = -90.0
EDGE_COLOR = (0.1, 0.1, 0.1)


def _actor_color(actor: Actor) -> tuple[float, float, float]:
    texture = actor.texture
    if texture is not None and texture.image is not None:
        image = np.asarray(texture.image)
        scale = 255.0 if np.issubdtype(image.dtype, np.integer) else 1.0
        if image.ndim == 2:
            grey = float(image.mean()) / scale
            return grey, grey, grey
        rgb = image[..., :3].reshape(-1, 3).mean(axis=0) / scale
        return tuple(float(min(max(c, 0.0), 1.0)) for c in rgb)  # type: ignore[return-value]
    return tuple(float(c) for c in actor.color)  # type: ignore[return-value]


def _fan_triangles(polys) -> list[tuple[int, int, int]]:
    triangles = []
    for poly in polys:
        ids = list(poly)
        if len(ids) < 3:
            continue
        first = ids[0]
        triangles.extend((first, a, b) for a, b in zip(ids[1:], ids[2:]))
    return triangles


def draw_assembly(ax, assembly: Assembly) -> list:
    """Add one polygon collection per actor of ``assembly`` to ``ax``."""
    collections = []
    for actor, matrix in assembly.iter_actors():
        mesh = actor.mesh.transformed(matrix)
        triangles = _fan_triangles(mesh.polys)
        if not triangles:
            continue
        points = np.asarray(mesh.points, dtype=float)
        collection = ax.plot_trisurf(
            points[:, 0],
            points[:, 1],
            points[:, 2],
            triangles=triangles,
            color=_actor_color(actor),
            shade=False,
            edgecolors=EDGE_COLOR,
            linewidths=0.3,
        )
        collections.append(collection)
    return collections


def _scene_bounds(props: Iterable[Assembly]) -> tuple[np.ndarray, np.ndarray] | None:
    chunks = [
        actor.mesh.transformed(matrix).points
        for prop in props
        for actor, matrix in prop.iter_actors()
        if len(actor.mesh.points)
    ]
    if not chunks:
        return None
    points = np.vstack(chunks)
    return points.min(axis=0), points.max(axis=0)


class Viewer:
    """A figure holding a 3D view of the displayed props over a gradient background."""

    def __init__(
        self,
        figure: Figure | None = None,
        rect: Sequence[float] = (0.0, 0.0, 1.0, 1.0),
    ) -> None:
        if figure is None:
            figure = Figure(figsize=(6, 6))
            FigureCanvasAgg(figure)
        self.figure = figure
        self.props: list[Assembly] = []

        self.background = figure.add_axes(list(rect))
        ramp = np.linspace(0.0, 1.0, 256)[:, None, None]
        gradient = (1.0 - ramp) * np.array(BACKGROUND_BOTTOM) + ramp * np.array(BACKGROUND_TOP)
        self.background.imshow(gradient, aspect="auto", origin="lower", extent=(0, 1, 0, 1))
        self.background.set_axis_off()
        self.background.set_zorder(0)

        self.axes = figure.add_axes(list(rect), projection="3d")
        self.axes.set_zorder(1)
        self._prepare_axes()

    def _prepare_axes(self) -> None:
        ax = self.axes
        ax.set_axis_off()
        ax.set_facecolor((0.0, 0.0, 0.0, 0.0))
        ax.patch.set_alpha(0.0)
        ax.view_init(elev=CAMERA_ELEVATION, azim=CAMERA_AZIMUTH)

    def __call__(self, props: Sequence[Assembly]) -> None:
        self.props = list(props)
        self.render()

    def render(self) -> None:
        """Redraw every prop and fit the view to them."""
        ax = self.axes
        ax.cla()
        self._prepare_axes()
        for prop in self.props:
            draw_assembly(ax, prop)
        bounds = _scene_bounds(self.props)
        if bounds is not None:
            lo, hi = bounds
            center = (lo + hi) / 2.0
            half = max(float((hi - lo).max()) / 2.0, 1e-6)
            ax.set_xlim(center[0] - half, center[0] + half)
            ax.set_ylim(center[1] - half, center[1] + half)
            ax.set_zlim(center[2] - half, center[2] + half)
        self.figure.canvas.draw_idle()

    def show(self, assembly: Assembly) -> None:
        """Display ``assembly`` alone."""
        self.props = [assembly]
        self.render()