"""Interactive demo: pick a solid, spin it, explode and turn the cube puzzle."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from magicsquare.params import Direction, Face
from magicsquare.scene import SceneBuilder
from magicsquare.scenegraph import Assembly
from magicsquare.transform import Transform
from magicsquare.viewer import Viewer

UNIT_NAMES = (
    "Cube",
    "Frustum",
    "Cylinder",
    "Sphere",
    "Cube + frustums",
    "Rubik's cube",
)
TIMER_INTERVAL_MS = 16
EXPLODE_MIN = 1.0
EXPLODE_MAX = 10.0


def _parse_speed(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


class MagicSquareController:
    """The demo's state: the shown solid, its spin and the puzzle's explode motion."""

    def __init__(
        self,
        builder: SceneBuilder | None = None,
        rotation_speed: float = 1.0,
        explode_speed: float = 0.2,
    ) -> None:
        self.builder = builder if builder is not None else SceneBuilder()
        self.current: Assembly | None = None
        self.rotation_angle = 0.0
        self.rotation_speed = rotation_speed
        self.explode_angle = 0.0
        self.explode_speed = explode_speed
        self.exploding = False
        self.rotating = False
        self.explode_running = False

    def create_unit(self, index: int) -> Assembly | None:
        """Build the solid at ``index`` of UNIT_NAMES; other indices change nothing."""
        factories = (
            self.builder.create_cube,
            self.builder.create_frustum,
            self.builder.create_cylindrical_body,
            self.builder.create_sphere,
            self.builder.create_cube_with_frustums,
            self.builder.create_rubiks_cube,
        )
        if 0 <= index < len(factories):
            self.current = factories[index]()
        return self.current

    def toggle_rotation(self, speed: float) -> bool:
        """Start spinning at ``speed`` degrees per frame, or stop; returns whether it spins."""
        if not self.rotating:
            self.rotation_speed = speed
            self.rotating = True
        else:
            self.rotating = False
        return self.rotating

    def rotate_step(self) -> None:
        """Advance the spin by one frame, moving the explode motion along with it."""
        self.rotation_angle += self.rotation_speed
        self.builder.unit_rotation(self.current, 0.0, self.rotation_angle, self.rotation_angle)
        self.explode_step()

    def toggle_explode(self) -> bool:
        """Start or stop the explode motion; returns whether it runs."""
        self.explode_running = not self.explode_running
        return self.explode_running

    def explode_step(self) -> None:
        """Move the cubelets one frame out or in, turning round at the limits."""
        if self.exploding:
            if self.explode_angle <= EXPLODE_MIN:
                self.exploding = False
            self.explode_angle -= self.explode_speed
        else:
            if self.explode_angle >= EXPLODE_MAX:
                self.exploding = True
            self.explode_angle += self.explode_speed
        if self.builder.transforms:
            self.builder.explode(self.explode_angle)

    def create_round(self) -> Assembly:
        """Build the animated cube puzzle."""
        self.current = self.builder.create_rubiks_cubes()
        return self.current

    def rotate_face(self, face: Face) -> list[Transform]:
        """Turn ``face`` of the puzzle a quarter turn clockwise."""
        return self.builder.rotate_face(Face(face), Direction.CW)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="magicsquare", description=__doc__)
    parser.add_argument(
        "--textures",
        nargs=6,
        metavar="IMAGE",
        default=[""] * 6,
        help="six texture images, one per face",
    )
    parser.add_argument(
        "--speed", type=float, default=1.0, help="spin in degrees per frame"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the demo window."""
    args = _parse_args(argv)

    import matplotlib.pyplot as plt
    from matplotlib.widgets import Button, RadioButtons, TextBox

    figure = plt.figure(figsize=(11, 7))
    viewer = Viewer(figure, rect=(0.25, 0.0, 0.75, 1.0))
    builder = SceneBuilder(texture_paths=args.textures, renderer=viewer)

    def render(props):
        viewer(props)
        figure.canvas.flush_events()

    builder.renderer = render
    controller = MagicSquareController(builder, rotation_speed=args.speed)

    rotation_timer = figure.canvas.new_timer(interval=TIMER_INTERVAL_MS)
    rotation_timer.add_callback(controller.rotate_step)
    explode_timer = figure.canvas.new_timer(interval=TIMER_INTERVAL_MS)
    explode_timer.add_callback(controller.explode_step)

    widgets: list[object] = []

    units = RadioButtons(figure.add_axes([0.02, 0.6, 0.2, 0.35]), UNIT_NAMES)
    units.on_clicked(lambda label: controller.create_unit(UNIT_NAMES.index(label)))
    widgets.append(units)

    speed_box = TextBox(
        figure.add_axes([0.1, 0.52, 0.12, 0.05]), "Speed", initial=str(controller.rotation_speed)
    )
    widgets.append(speed_box)

    rotate_button = Button(figure.add_axes([0.02, 0.45, 0.2, 0.05]), "Rotate")

    def on_rotate(_event) -> None:
        if controller.toggle_rotation(_parse_speed(speed_box.text)):
            rotation_timer.start()
            rotate_button.label.set_text("Stop")
        else:
            rotation_timer.stop()
            rotate_button.label.set_text("Rotate")

    rotate_button.on_clicked(on_rotate)
    widgets.append(rotate_button)

    round_button = Button(figure.add_axes([0.02, 0.38, 0.2, 0.05]), "Build puzzle")
    round_button.on_clicked(lambda _event: controller.create_round())
    widgets.append(round_button)

    explode_button = Button(figure.add_axes([0.02, 0.31, 0.2, 0.05]), "Explode")

    def on_explode(_event) -> None:
        if controller.toggle_explode():
            explode_timer.start()
            explode_button.label.set_text("Stop")
        else:
            explode_timer.stop()
            explode_button.label.set_text("Explode")

    explode_button.on_clicked(on_explode)
    widgets.append(explode_button)

    for i, face in enumerate(Face):
        column, row = i % 3, i // 3
        button = Button(
            figure.add_axes([0.02 + column * 0.068, 0.22 - row * 0.07, 0.06, 0.05]), face.name
        )

        def on_face(_event, face=face) -> None:
            try:
                controller.rotate_face(face)
            except RuntimeError:
                pass

        button.on_clicked(on_face)
        widgets.append(button)

    figure._magicsquare_widgets = widgets  # keep the widgets alive with the window
    plt.show()
    return 0