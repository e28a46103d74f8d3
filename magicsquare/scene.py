"""Builds the demo solids and drives the cube puzzle's explode and face turns."""

from __future__ import annotations

import math
import time
from collections.abc import Callable, Sequence

from magicsquare.params import (
    CubeParams,
    CylinderParams,
    Direction,
    Face,
    FrustumParams,
    Position,
    SphereParams,
)
from magicsquare.scenegraph import Assembly, Texture, load_texture
from magicsquare.shapes import CubeUnit, CylindricalBodyUnit, SphereUnit, TrapezoidalFrustum
from magicsquare.transform import Transform

NORMALS: tuple[tuple[float, float, float], ...] = (
    (1.0, 0.0, 0.0),
    (-1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, -1.0, 0.0),
    (0.0, 0.0, 1.0),
    (0.0, 0.0, -1.0),
)

GRID_SIZE = 3
CUBE_SIZE = 5.0
SPACING = 0.2
STEP = CUBE_SIZE + SPACING
CENTER_OFFSET = (GRID_SIZE - 1) * STEP / 2.0
FACE_PITCH = 5.1
ANIMATION_STEPS = 20

# face -> (fixed layer index, which grid coordinate is fixed)
_FACE_LAYERS: dict[Face, tuple[int, int]] = {
    Face.U: (2, 2),
    Face.D: (0, 2),
    Face.L: (0, 0),
    Face.R: (2, 0),
    Face.F: (2, 1),
    Face.B: (0, 1),
}

Key = tuple[int, int, int]


def _grid() -> list[Key]:
    return [
        (x, y, z)
        for x in range(GRID_SIZE)
        for y in range(GRID_SIZE)
        for z in range(GRID_SIZE)
    ]


def _unit_direction(x: float, y: float, z: float) -> tuple[float, float, float]:
    length = math.sqrt(x * x + y * y + z * z)
    if length > 0:
        return x / length, y / length, z / length
    return x, y, z


class SceneBuilder:
    """Holds the displayed props and the state of the animated cube puzzle."""

    def __init__(
        self,
        texture_paths: Sequence[str] | None = None,
        renderer: Callable[[list[Assembly]], None] | None = None,
        frame_delay: float = 0.03,
    ) -> None:
        paths = list(texture_paths) if texture_paths is not None else [""] * 6
        if len(paths) != 6:
            raise ValueError("exactly six texture paths are required")
        self.texture_paths = paths
        self.renderer = renderer
        self.frame_delay = frame_delay
        self.props: list[Assembly] = []
        self.render_count = 0
        self.cubes: dict[Key, Assembly] = {}
        self.transforms: dict[Key, Transform] = {}
        self.initial_positions: dict[Key, Position] = {}
        self.explode_distance = 0.0
        self._textures: dict[str, Texture] = {}

    # -- display -----------------------------------------------------------

    def render(self) -> None:
        """Redraw the current props."""
        self.render_count += 1
        if self.renderer is not None:
            self.renderer(list(self.props))

    def clear(self) -> None:
        """Remove every displayed prop."""
        self.props.clear()

    def display_actor(self, assembly: Assembly) -> None:
        """Show ``assembly`` alone and redraw."""
        self.clear()
        self.props.append(assembly)
        self.render()

    def set_texture(self, path: str) -> Texture:
        """Return the texture read from ``path``."""
        texture = self._textures.get(path)
        if texture is None:
            texture = load_texture(path)
            self._textures[path] = texture
        return texture

    # -- building ----------------------------------------------------------

    def build_composite_unit(
        self, cube_params: CubeParams, frustum_params: Sequence[FrustumParams]
    ) -> Assembly:
        """A box with a frustum panel standing on each of its six faces."""
        if len(frustum_params) != 6:
            raise ValueError("one frustum per cube face is required")
        assembly = Assembly()
        assembly.add_part(CubeUnit(cube_params).create_actor())
        dims = (cube_params.x_length, cube_params.y_length, cube_params.z_length)
        for i, (normal, params) in enumerate(zip(NORMALS, frustum_params)):
            actor = TrapezoidalFrustum(params, normal).create_actor()
            offset = 0.5 * dims[i // 2]
            actor.position = (normal[0] * offset, normal[1] * offset, normal[2] * offset)
            assembly.add_part(actor)
        return assembly

    def _unit_params(self, frustum_height: float) -> tuple[CubeParams, list[FrustumParams]]:
        cube = CubeParams(5.0, 5.0, 5.0, texture=self.set_texture(self.texture_paths[0]))
        frustums = [
            FrustumParams(
                base_width=5.0,
                base_height=5.0,
                top_width=4.0,
                top_height=4.0,
                height=frustum_height,
                texture=self.set_texture(path),
            )
            for path in self.texture_paths
        ]
        return cube, frustums

    def create_sphere(self) -> Assembly:
        """Show a textured sphere."""
        self.clear()
        params = SphereParams(
            radius=5.0,
            theta_resolution=30,
            phi_resolution=30,
            texture=self.set_texture(self.texture_paths[3]),
        )
        unit = Assembly()
        unit.add_part(SphereUnit(params).create_actor())
        self.display_actor(unit)
        return unit

    def create_frustum(self) -> Assembly:
        """Show a single frustum panel facing +X."""
        self.clear()
        params = FrustumParams(
            base_width=5.0,
            base_height=5.0,
            top_width=4.0,
            top_height=4.0,
            height=1.0,
            texture=self.set_texture(self.texture_paths[2]),
        )
        unit = Assembly()
        unit.add_part(TrapezoidalFrustum(params, NORMALS[0]).create_actor())
        self.display_actor(unit)
        return unit

    def create_cylindrical_body(self) -> Assembly:
        """Show a capped, textured cylinder."""
        self.clear()
        params = CylinderParams(
            radius=1.5,
            height=4.0,
            resolution=64,
            capped=True,
            texture=self.set_texture(self.texture_paths[0]),
        )
        unit = Assembly()
        unit.add_part(CylindricalBodyUnit(params).create_actor())
        self.display_actor(unit)
        return unit

    def create_cube(self) -> Assembly:
        """Show a textured box; the inner assembly holding it is returned."""
        self.clear()
        cube = Assembly()
        params = CubeParams(5.0, 5.0, 5.0, texture=self.set_texture(self.texture_paths[1]))
        cube.add_part(CubeUnit(params).create_actor())
        unit = Assembly()
        unit.add_part(cube)
        self.display_actor(unit)
        return cube

    def create_cube_with_frustums(self) -> Assembly:
        """Show one box carrying six frustum panels."""
        cube, frustums = self._unit_params(0.2)
        unit = self.build_composite_unit(cube, frustums)
        self.display_actor(unit)
        return unit

    def create_rubiks_cube(self) -> Assembly:
        """Show a 3x3x3 block of composite units placed by position."""
        puzzle = Assembly()
        for x, y, z in _grid():
            cube, frustums = self._unit_params(0.1)
            unit = self.build_composite_unit(cube, frustums)
            unit.position = (
                x * STEP - CENTER_OFFSET,
                y * STEP - CENTER_OFFSET,
                z * STEP - CENTER_OFFSET,
            )
            puzzle.add_part(unit)
        self.display_actor(puzzle)
        return puzzle

    def create_rubiks_cubes(self) -> Assembly:
        """Show the 3x3x3 puzzle with one movable transform per cubelet."""
        puzzle = Assembly()
        self.cubes.clear()
        self.transforms.clear()
        self.initial_positions.clear()
        for x, y, z in _grid():
            cube, frustums = self._unit_params(0.1)
            unit = self.build_composite_unit(cube, frustums)
            pos = Position(
                x * STEP - CENTER_OFFSET,
                y * STEP - CENTER_OFFSET,
                z * STEP - CENTER_OFFSET,
            )
            transform = Transform().translate(pos.x, pos.y, pos.z)
            holder = Assembly(user_transform=transform)
            holder.add_part(unit)
            self.cubes[(x, y, z)] = holder
            self.transforms[(x, y, z)] = transform
            self.initial_positions[(x, y, z)] = pos
            puzzle.add_part(holder)
        self.display_actor(puzzle)
        return puzzle

    # -- animation ---------------------------------------------------------

    def _require_puzzle(self) -> None:
        if not self.transforms:
            raise RuntimeError("the animated puzzle has not been created")

    def explode(self, distance: float) -> None:
        """Push every outer cubelet ``distance`` away from the centre."""
        self._require_puzzle()
        self.explode_distance = distance
        for x, y, z in _grid():
            if (x, y, z) == (1, 1, 1):
                continue
            dx, dy, dz = _unit_direction(x - 1, y - 1, z - 1)
            start = self.initial_positions[(x, y, z)]
            self.transforms[(x, y, z)].identity().translate(
                start.x + dx * distance,
                start.y + dy * distance,
                start.z + dz * distance,
            )
        self.render()

    def rotate_face(
        self, face: Face, direction: Direction = Direction.CW, animate: bool = True
    ) -> list[Transform]:
        """Turn one face a quarter turn; returns the transforms that moved."""
        self._require_puzzle()
        angle = 90.0 if direction == Direction.CW else -90.0
        axis = (0.0, 1.0, 0.0)
        fixed, coordinate = _FACE_LAYERS[Face(face)]

        affected: list[Transform] = []
        positions: list[Position] = []
        for key in _grid():
            if key == (1, 1, 1) or key[coordinate] != fixed:
                continue
            x, y, z = key
            affected.append(self.transforms[(z, y, x)])
            positions.append(self.initial_positions[(z, y, x)])

        center = [0.0, 0.0, 0.0]
        center[coordinate] = (fixed - 1) * FACE_PITCH

        if animate:
            self.animate_rotation(affected, positions, center, axis, angle, ANIMATION_STEPS)
        else:
            self.apply_rotation(affected, positions, center, axis, angle)
        return affected

    def _place(
        self,
        transform: Transform,
        position: Position,
        center: Sequence[float],
        axis: Sequence[float],
        angle: float,
    ) -> None:
        transform.identity()
        transform.translate(-center[0], -center[1], -center[2])
        transform.rotate_wxyz(angle, axis)
        transform.translate(center[0], center[1], center[2])
        dx, dy, dz = _unit_direction(position.x, position.y, position.z)
        d = self.explode_distance
        transform.translate(dx * d, dy * d, dz * d)

    def animate_rotation(
        self,
        transforms: Sequence[Transform],
        positions: Sequence[Position],
        center: Sequence[float],
        axis: Sequence[float],
        total_angle: float,
        steps: int,
    ) -> None:
        """Turn the given cubelets in ``steps`` frames, redrawing after each."""
        if steps <= 0:
            raise ValueError("steps must be positive")
        step_angle = total_angle / steps
        for step in range(steps):
            for transform, position in zip(transforms, positions):
                self._place(transform, position, center, axis, (step + 1) * step_angle)
            self.render()
            if self.frame_delay > 0:
                time.sleep(self.frame_delay)

    def apply_rotation(
        self,
        transforms: Sequence[Transform],
        positions: Sequence[Position],
        center: Sequence[float],
        axis: Sequence[float],
        angle: float,
    ) -> None:
        """Turn the given cubelets at once and redraw."""
        for transform, position in zip(transforms, positions):
            self._place(transform, position, center, axis, angle)
        self.render()

    def unit_rotation(
        self, assembly: Assembly | None, x: float, y: float, z: float
    ) -> None:
        """Set an assembly's orientation in degrees and redraw; None is ignored."""
        if assembly is None:
            return
        assembly.orientation = (x, y, z)
        self.render()