import pytest

from magicsquare.app import (
    EXPLODE_MAX,
    EXPLODE_MIN,
    UNIT_NAMES,
    MagicSquareController,
    _parse_args,
    _parse_speed,
)
from magicsquare.params import Face
from magicsquare.scene import SceneBuilder


@pytest.fixture
def controller(tmp_path):
    paths = [str(tmp_path / f"missing{i}.jpg") for i in range(6)]
    builder = SceneBuilder(texture_paths=paths, frame_delay=0)
    return MagicSquareController(builder)


def test_create_unit_shows_the_solid(controller):
    unit = controller.create_unit(3)
    assert controller.current is unit
    assert controller.builder.props == [unit]
    assert len(list(unit.iter_actors())) == 1


def test_create_unit_cube_returns_inner_assembly(controller):
    cube = controller.create_unit(0)
    assert controller.builder.props[0].parts == [cube]


def test_create_unit_rubiks_cube_has_full_grid(controller):
    puzzle = controller.create_unit(len(UNIT_NAMES) - 1)
    assert len(puzzle.parts) == 27


def test_create_unit_unknown_index_changes_nothing(controller):
    shown = controller.create_unit(1)
    renders = controller.builder.render_count
    assert controller.create_unit(len(UNIT_NAMES)) is shown
    assert controller.builder.render_count == renders


def test_toggle_rotation_starts_and_stops(controller):
    assert controller.toggle_rotation(2.5) is True
    assert controller.rotation_speed == 2.5
    assert controller.toggle_rotation(7.0) is False
    assert controller.rotation_speed == 2.5


def test_rotate_step_orients_current(controller):
    controller.create_unit(3)
    controller.toggle_rotation(1.5)
    controller.rotate_step()
    controller.rotate_step()
    angle = controller.rotation_angle
    assert angle == pytest.approx(2 * 1.5)
    assert controller.current.orientation == (0.0, angle, angle)


def test_rotate_step_without_solid_only_advances(controller):
    controller.rotate_step()
    assert controller.current is None
    assert controller.rotation_angle == pytest.approx(controller.rotation_speed)


def test_explode_step_moves_puzzle(controller):
    controller.create_round()
    controller.explode_step()
    assert controller.builder.explode_distance == pytest.approx(controller.explode_angle)
    assert controller.explode_angle == pytest.approx(controller.explode_speed)


def test_explode_motion_turns_round_within_limits(controller):
    angles = []
    for _ in range(200):
        controller.explode_step()
        angles.append(controller.explode_angle)
    speed = controller.explode_speed
    assert max(angles) <= EXPLODE_MAX + speed + 1e-9
    peak = angles.index(max(angles))
    assert angles[peak + 1] < angles[peak]
    assert min(angles[peak:]) >= EXPLODE_MIN - speed - 1e-9


def test_toggle_explode(controller):
    assert controller.toggle_explode() is True
    assert controller.toggle_explode() is False


def test_rotate_face_requires_puzzle(controller):
    with pytest.raises(RuntimeError):
        controller.rotate_face(Face.U)


def test_rotate_face_turns_one_layer(controller):
    controller.create_round()
    moved = controller.rotate_face(Face.U)
    assert len(moved) == 9
    assert all(t in controller.builder.transforms.values() for t in moved)


def test_parse_speed_falls_back_to_zero():
    assert _parse_speed("2.5") == 2.5
    assert _parse_speed("fast") == 0.0


def test_parse_args_textures():
    names = [f"t{i}.jpg" for i in range(6)]
    args = _parse_args(["--textures", *names, "--speed", "3"])
    assert args.textures == names
    assert args.speed == 3.0


def test_parse_args_rejects_wrong_texture_count():
    with pytest.raises(SystemExit):
        _parse_args(["--textures", "a.jpg", "b.jpg"])