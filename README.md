# polymesh

Read a polygonal mesh stored as three CSV files and export its vertices and
edges in the AVS UCD ASCII format, ready to open in ParaView.

## Input files

The mesh is read from a directory holding three files. Each starts with one
header line, which is skipped; fields may be separated by commas, semicolons
or whitespace, and blank lines are ignored.

- `Cell0Ds.csv`: `id marker x y` per vertex. Ids must lie in
  `0 .. number of vertices - 1`. Vertices with a non-zero marker are grouped
  by marker in `marker_cell0ds` (and likewise in `marker_cell1ds`).
- `Cell1Ds.csv`: `id marker origin end` per edge. Ids must lie in
  `0 .. number of edges - 1`.
- `Cell2Ds.csv`: `id` per polygon, optionally followed by
  `marker num_vertices v1 ... vn num_edges e1 ... em`.

A missing file, a file with no data lines, a line with too few fields, a
value that is not a number, a negative value or an id out of range raises
`polymesh.mesh.MeshImportError`.

## Command line

```
pip install .
polymesh [DIRECTORY] [-o OUTPUT_DIR]
```

`DIRECTORY` (default `.`) holds the three CSV files. The command writes
`Cell0Ds.inp` (each vertex as a point cell) and `Cell1Ds.inp` (the vertices
and the edges as line cells) into `OUTPUT_DIR` (default `.`). If the mesh
cannot be read it prints `file not found: ...` to standard error and exits
with status 1; if the output cannot be written it prints
`cannot write output: ...` and exits with status 1.

## Library

```python
from polymesh.mesh import import_mesh
from polymesh.ucd import export_points, export_segments

mesh = import_mesh(".")
export_points("Cell0Ds.inp", mesh.cell0ds_coordinates)
export_segments("Cell1Ds.inp", mesh.cell0ds_coordinates, mesh.cell1ds_extrema)
```

`polymesh.mesh` provides `PolygonalMesh` (with `num_cell0ds`, `num_cell1ds`
and `num_cell2ds`), `import_mesh(directory)` and the single-file readers
`import_cell0ds`, `import_cell1ds` and `import_cell2ds`, each taking a mesh
and a path.

`polymesh.ucd` provides `export_points`, `export_segments`,
`export_polygons` and `export_polyhedra`, all taking points as
`(x, y, z)` sequences, plus optional properties (`UCDProperty`, with flat
per-item data) and material ids (used only when there is one per cell;
otherwise every cell gets material 0). The lower-level `create_*_cells`
functions and `write_ucd_ascii` are available too, along with `UCDCell` and
`CellType`. Polygons must have 3 or 4 vertices and polyhedra 4; other
shapes raise `ValueError`. Real numbers are written in scientific notation
with 16 digits after the point.

## What it does not do

- Only the ASCII UCD format is written; there is no reader for UCD files.
- The command exports vertices and edges only; polygons read from
  `Cell2Ds.csv` are loaded into the mesh but not exported by it.
- It does not display anything: open the `.inp` files in ParaView.

## Tests

```
pip install .[test]
pytest
```