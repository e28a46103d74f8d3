import numpy as np
import pytest

from magicsquare.params import CubeParams
from magicsquare.scene import SceneBuilder
from magicsquare.scenegraph import Actor, Assembly, Texture
from magicsquare.shapes import CubeUnit, cube_mesh
from magicsquare.viewer import (
    BACKGROUND_TOP,
    CAMERA_AZIMUTH,
    CAMERA_ELEVATION,
    Viewer,
    draw_assembly,
)


def _cube_assembly(position=(0.0, 0.0, 0.0), color=(1.0, 0.7, 0.3), texture=None):
    actor = Actor(cube_mesh(2.0, 2.0, 2.0), texture=texture, color=color, position=position)
    assembly = Assembly()
    assembly.add_part(actor)
    return assembly, actor


def test_draw_assembly_one_collection_per_actor():
    viewer = Viewer()
    assembly, actor = _cube_assembly()
    second = Actor(cube_mesh(1.0, 1.0, 1.0))
    assembly.add_part(second)
    collections = draw_assembly(viewer.axes, assembly)
    assert len(collections) == len(list(assembly.iter_actors()))
    assert all(c in viewer.axes.collections for c in collections)


def test_face_color_from_actor_color():
    viewer = Viewer()
    assembly, _ = _cube_assembly(color=(1.0, 0.7, 0.3))
    viewer.show(assembly)
    viewer.figure.canvas.draw()
    face = viewer.axes.collections[0].get_facecolor()
    assert face[0][:3] == pytest.approx((1.0, 0.7, 0.3))


def test_face_color_from_texture_image():
    viewer = Viewer()
    image = np.zeros((4, 4, 3), dtype=np.uint8)
    texture = Texture(path="img.jpg", image=image)
    assembly, _ = _cube_assembly(color=(1.0, 1.0, 1.0), texture=texture)
    viewer.show(assembly)
    viewer.figure.canvas.draw()
    face = viewer.axes.collections[0].get_facecolor()
    assert face[0][:3] == pytest.approx((0.0, 0.0, 0.0))


def test_render_fits_limits_to_translated_actor():
    viewer = Viewer()
    assembly, actor = _cube_assembly(position=(10.0, 0.0, 0.0))
    viewer.show(assembly)
    xmin, xmax = viewer.axes.get_xlim()
    bounds = actor.mesh.bounds
    assert xmin <= bounds[0] + 10.0
    assert xmax >= bounds[1] + 10.0


def test_render_replaces_previous_props():
    viewer = Viewer()
    first, _ = _cube_assembly()
    second, _ = _cube_assembly(position=(3.0, 0.0, 0.0))
    viewer.show(first)
    viewer.show(second)
    assert viewer.props == [second]
    assert len(viewer.axes.collections) == 1


def test_camera_looks_from_negative_y():
    viewer = Viewer()
    assembly, _ = _cube_assembly()
    viewer.show(assembly)
    assert viewer.axes.elev == pytest.approx(CAMERA_ELEVATION)
    assert viewer.axes.azim == pytest.approx(CAMERA_AZIMUTH)


def test_background_gradient_ends_at_top_color():
    viewer = Viewer()
    data = viewer.background.images[0].get_array()
    assert np.asarray(data[-1, 0]) == pytest.approx(BACKGROUND_TOP)


def test_viewer_as_scene_renderer(tmp_path):
    viewer = Viewer()
    paths = [str(tmp_path / f"missing{i}.jpg") for i in range(6)]
    builder = SceneBuilder(texture_paths=paths, renderer=viewer, frame_delay=0)
    cube = builder.create_cube()
    assert viewer.props == builder.props
    assert len(viewer.axes.collections) == len(list(cube.iter_actors()))


def test_empty_render_leaves_no_collections():
    viewer = Viewer()
    assembly = Assembly()
    assembly.add_part(CubeUnit(CubeParams()).create_actor())
    viewer.show(assembly)
    viewer([])
    assert viewer.axes.collections == []