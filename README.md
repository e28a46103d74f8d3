# magicsquare

Build a 3×3×3 Rubik's cube out of units and watch it spin, explode and turn
its faces in a matplotlib 3D window.

Each unit is a box with a thin square frustum (a bevelled panel) standing on
each of its six faces. Single shapes can be shown too: a box, a frustum, a
cylinder, a sphere, and one box with its six frustums.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the viewer

```
magicsquare
magicsquare --speed 2.5 --textures a.png b.png c.png d.png e.png f.png
```

Options:

- `--textures IMAGE IMAGE IMAGE IMAGE IMAGE IMAGE`: six image files, read with
  matplotlib's `imread`. An image that cannot be read is ignored.
- `--speed DEGREES`: initial spin per frame (default 1.0).

The window has, on the left:

- radio buttons to pick the solid: Cube, Frustum, Cylinder, Sphere,
  Cube + frustums, Rubik's cube;
- a Speed box and a Rotate button that starts or stops spinning the shown
  solid at that many degrees per frame (about 60 frames a second). While it
  spins, the explode motion of the animated puzzle advances with it;
- Build puzzle, which builds the animated puzzle with one movable transform
  per piece;
- Explode, which starts or stops moving the outer pieces out from the centre
  and back again, turning round at distances 10 and 1;
- U, D, L, R, F and B buttons that give that face a quarter turn clockwise,
  animated over 20 frames. They do nothing until the puzzle has been built.

The view looks from −Y with Z up, over a gradient background.

## Using it as a library

```python
from magicsquare.params import CubeParams, Direction, Face, FrustumParams
from magicsquare.scene import SceneBuilder

builder = SceneBuilder()

# One box with a frustum on each face.
unit = builder.build_composite_unit(CubeParams(), [FrustumParams(height=0.2)] * 6)
for actor, matrix in unit.iter_actors():
    print(actor.mesh.transformed(matrix).bounds)

# The animated puzzle: explode it, then turn the upper face at once.
puzzle = builder.create_rubiks_cubes()
builder.explode(5.0)
moved = builder.rotate_face(Face.U, Direction.CW, animate=False)
print(len(moved))  # 8 pieces
```

`SceneBuilder(texture_paths=None, renderer=None, frame_delay=0.03)` takes six
image paths, a callable that is handed the list of displayed assemblies on
every redraw (a `Viewer` works), and the pause between animation frames.

The modules:

- `magicsquare.params`: the `Face` and `Direction` enums, `Position`, and the
  parameter dataclasses `CubeParams`, `FrustumParams`, `SphereParams`,
  `CylinderParams` and `ShapeConfig`.
- `magicsquare.transform`: 4×4 homogeneous transforms: `Transform` with
  `identity`, `translate`, `rotate_wxyz`, `concatenate`, `transform_point` and
  `copy`; `rotation_matrix(angle, axis)` in degrees and
  `translation_matrix(x, y, z)`.
- `magicsquare.scenegraph`: `Mesh` (points, polygons, UV coordinates, `bounds`,
  `transformed`), `Actor`, `Assembly` (`add_part`, `matrix`, `iter_actors`),
  `Texture`, `load_texture` and `prop_matrix`.
- `magicsquare.shapes`: `cube_mesh`, `frustum_mesh`, `cylinder_mesh`,
  `sphere_mesh`, and `CubeUnit`, `TrapezoidalFrustum`, `CylindricalBodyUnit`
  and `SphereUnit`, whose `create_actor` turns parameters into an `Actor`.
  Untextured boxes are grey and untextured frustums orange.
- `magicsquare.scene`: `SceneBuilder`, which builds and displays the solids
  (`create_cube`, `create_frustum`, `create_cylindrical_body`,
  `create_sphere`, `create_cube_with_frustums`, `create_rubiks_cube`,
  `create_rubiks_cubes`), explodes the puzzle (`explode`), turns its faces
  (`rotate_face`, `animate_rotation`, `apply_rotation`) and sets an
  assembly's orientation (`unit_rotation`).
- `magicsquare.viewer`: `Viewer` and `draw_assembly` for matplotlib drawing.
- `magicsquare.app`: `MagicSquareController` and the `main` entry point.

## What it does not do

- Textures are not mapped onto surfaces. A textured actor is drawn in the
  average colour of its image; one whose image could not be read is drawn in
  its base colour (white for textured boxes, frustums, cylinders and spheres).
- Face turns are not a working puzzle. Each turn places the affected pieces
  from their starting positions, always about the Y axis, so turns do not
  accumulate and the pieces' grid positions are never updated.
- Faces turn only clockwise from the window; `rotate_face` also takes
  `Direction.CCW`.