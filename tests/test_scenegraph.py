import numpy as np
import pytest

from magicsquare.scenegraph import (
    Actor,
    Assembly,
    Mesh,
    Texture,
    load_texture,
    prop_matrix,
)
from magicsquare.transform import Transform, translation_matrix


def _point_mesh():
    return Mesh(np.zeros((1, 3)), [])


def _world_point(matrix, point=(0.0, 0.0, 0.0)):
    return Transform(matrix).transform_point(point)


def test_prop_matrix_without_orientation_is_translation():
    assert np.allclose(prop_matrix((1.0, 2.0, 3.0), (0.0, 0.0, 0.0)),
                       translation_matrix(1.0, 2.0, 3.0))


def test_prop_matrix_z_orientation_turns_x_into_y():
    m = prop_matrix((0.0, 0.0, 0.0), (0.0, 0.0, 90.0))
    assert _world_point(m, (1.0, 0.0, 0.0)) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)


def test_mesh_transformed_leaves_original():
    mesh = Mesh([[0, 0, 0], [1, 0, 0], [0, 1, 0]], [(0, 1, 2)])
    moved = mesh.transformed(translation_matrix(0.0, 0.0, 2.0))
    assert np.allclose(mesh.points[:, 2], 0.0)
    assert np.allclose(moved.points[:, 2], 2.0)
    assert moved.polys == mesh.polys


def test_mesh_bounds():
    mesh = Mesh([[-1, 0, 2], [3, -4, 5]], [])
    assert mesh.bounds == (-1.0, 3.0, -4.0, 0.0, 2.0, 5.0)


def test_mesh_rejects_bad_polygon():
    with pytest.raises(ValueError):
        Mesh([[0, 0, 0]], [(0, 1, 2)])


def test_mesh_rejects_mismatched_tcoords():
    with pytest.raises(ValueError):
        Mesh([[0, 0, 0], [1, 1, 1]], [], tcoords=[[0.0, 0.0]])


def test_actor_user_transform_applies_after_position():
    t = Transform().translate(0.0, 2.0, 0.0)
    actor = Actor(_point_mesh(), position=(1.0, 0.0, 0.0), user_transform=t)
    assert _world_point(actor.matrix()) == pytest.approx((1.0, 2.0, 0.0))


def test_nested_assembly_composes_positions():
    actor = Actor(_point_mesh())
    inner = Assembly(position=(1.0, 0.0, 0.0))
    inner.add_part(actor)
    outer = Assembly(position=(1.0, 2.0, 3.0))
    outer.add_part(inner)
    [(found, matrix)] = list(outer.iter_actors())
    assert found is actor
    assert _world_point(matrix) == pytest.approx((2.0, 2.0, 3.0))


def test_iter_actors_visits_every_actor():
    root = Assembly()
    actors = [Actor(_point_mesh()) for _ in range(4)]
    sub = Assembly()
    root.add_part(actors[0])
    root.add_part(sub)
    for a in actors[1:]:
        sub.add_part(a)
    assert [a for a, _ in root.iter_actors()] == actors


def test_load_texture_missing_file(tmp_path):
    path = str(tmp_path / "absent.jpg")
    tex = load_texture(path)
    assert tex.path == path
    assert tex.image is None
    assert tex.interpolate is True


def test_load_texture_reads_image(tmp_path):
    from matplotlib import image as mpimg

    path = tmp_path / "tex.png"
    mpimg.imsave(path, np.zeros((6, 9, 3)))
    tex = load_texture(str(path))
    assert isinstance(tex, Texture)
    assert tex.image.shape[:2] == (6, 9)