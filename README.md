# meshsculpt

Small, dependency-free tools for building and reshaping triangle meshes.

## Modules

- `meshsculpt.geometry`: the immutable `Vector` (also used for points) with
  `+`, `-`, scalar `*` and `/`, iteration and indexing by axis; a 4x4
  `Transform` composed with the ` @ ` operator and applied with `apply_point` /
  `apply_vector`; an axis-aligned `Box` with `from_center`, `center`,
  `diagonal`, `size`, `radius`, `volume`, `area`, `contains`, `contains_box`,
  `translate` and `scale`; and the helpers `dot`, `cross`, `length`,
  `normalize` (raises `ValueError` on a zero vector), `rotation_x`,
  `rotation_y` and `rotation_z` (angles in degrees).
- `meshsculpt.bernstein`: `binomial` (degrees 0 to 25), `bernstein_basis` and
  `bernstein_basis_derivative`.
- `meshsculpt.bezier`: `BezierPatch` holds a grid of control points, creates a
  flat test grid with one raised point (`create_patch`), evaluates points and
  partial derivatives (`point`, `partial_derivative_u`,
  `partial_derivative_v`), samples itself into a `BezierMesh` of vertices,
  triangle faces and normals (`to_mesh`), returns its scaled control grid
  (`control_grid`) and writes a mesh as Wavefront OBJ text (`write_obj`).
- `meshsculpt.deformations`: `FreeFormDeform` builds a lattice of control
  points (`create_grid`, `create_bounding_grid`), moves them (`modif_point`,
  `random_modif`), maps points into its frame (`local_coordinates`), warps
  points and meshes (`warp_point`, `warp_mesh`) and returns its lattice lines
  (`output_grid`). Twisting around an axis: `twist_point`, `twist_normal_z`,
  `twist_mesh`. Local translation inside a sphere of influence:
  `attenuation`, `translate_point`, `warp_mesh_on_sphere`. Results are
  `MeshDeform` objects, written as OBJ text by `write_mesh_deform`.
- `meshsculpt.default_program`: the default mesh and line shader sources, the
  `Primitive` enum, and a `PipelineCache` of `PipelineProgram` entries keyed by
  name and preprocessor definitions. `shader_definitions`,
  `create_default_program` and `program_for_attributes` pick the program that
  matches a set of vertex attributes. The cache compiles through a callable you
  supply; by default it hands out increasing integer handles.
- `meshsculpt.app`: an abstract `App` with `init`, `update`, `render`,
  `prerender`, `postrender`, `quit` and `vsync_off`, driven by
  `App.run(events, present)`; `AppError` is the exception for start-up or
  shutdown failures.
- `meshsculpt.scene`: `vertex_normals` (smooth per-vertex normals), `bounds`
  (a `Box` around points), `terrain_map_paths` (returns `TerrainMaps` for a map
  type), `visible_instances` (keeps the instances of regions that pass a
  visibility test) and `parse_world_args` (map type and region division from a
  list of arguments).

## A Bezier patch written to OBJ

```python
from meshsculpt.bezier import BezierPatch

patch = BezierPatch()
patch.create_patch(5, 5)        # 5 x 5 control points
mesh = patch.to_mesh(50)        # 50 x 50 samples with normals
patch.write_obj("bezier_patch.obj", mesh)
```

## Free-form deformation of a mesh

```python
from meshsculpt.geometry import Vector
from meshsculpt.deformations import FreeFormDeform, write_mesh_deform

deformer = FreeFormDeform()
deformer.create_grid(Vector(0, 0, 0), 2, 10, 10, 10)
deformer.modif_point(0, 0, 1, Vector(-0.2, 0.0, 1.0))

deformed = deformer.warp_mesh(positions, indices, normals)
write_mesh_deform("deformed.obj", deformed)
```

`warp_mesh` keeps the indices but does not carry normals over.

## Twisting a mesh

```python
from meshsculpt.deformations import twist_mesh, write_mesh_deform

twisted = twist_mesh(positions, indices, normals, 0, 350)
write_mesh_deform("twisted.obj", twisted)
```

Here `positions` is a list of `Vector` points, `indices` a flat list of
triangle vertex indices and `normals` a list of `Vector` normals (it may be
empty).

## Choosing a default program

```python
from meshsculpt.default_program import PipelineCache, Primitive, create_default_program

cache = PipelineCache()
handle = create_default_program(cache, Primitive.TRIANGLES, positions, normals=normals)
cache.release()
```

Asking again with the same primitive kind and matching attributes returns the
cached handle.

## What the package does not do

It draws nothing: there is no window, graphics context, shader compiler or
vertex buffer. `PipelineCache` and `App` take the compile, release, event and
present steps as callables supplied by the caller. It does not read OBJ files,
only writes them, and it has no command-line program.

## Running the tests

Install the package with its `test` extra and run pytest from the project
directory.