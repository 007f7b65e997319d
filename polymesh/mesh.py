"""Loading of a polygonal mesh from its Cell0Ds, Cell1Ds and Cell2Ds CSV files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path

__all__ = [
    "CELL0DS_FILE",
    "CELL1DS_FILE",
    "CELL2DS_FILE",
    "MeshImportError",
    "PolygonalMesh",
    "import_cell0ds",
    "import_cell1ds",
    "import_cell2ds",
    "import_mesh",
]

CELL0DS_FILE = "Cell0Ds.csv"
CELL1DS_FILE = "Cell1Ds.csv"
CELL2DS_FILE = "Cell2Ds.csv"

_SEPARATORS = re.compile(r"[;,\s]+")


class MeshImportError(Exception):
    """Raised when a mesh file is missing, empty or malformed."""


@dataclass
class PolygonalMesh:
    """Vertices, edges and polygons of a two-dimensional mesh."""

    cell0ds_id: list[int] = field(default_factory=list)
    cell1ds_id: list[int] = field(default_factory=list)
    cell2ds_id: list[int] = field(default_factory=list)
    cell0ds_coordinates: list[list[float]] = field(default_factory=list)
    cell1ds_extrema: list[tuple[int, int]] = field(default_factory=list)
    cell0ds_marker: list[int] = field(default_factory=list)
    cell1ds_marker: list[int] = field(default_factory=list)
    cell2ds_vertices: list[list[int]] = field(default_factory=list)
    cell2ds_edges: list[list[int]] = field(default_factory=list)
    marker_cell0ds: dict[int, list[int]] = field(default_factory=dict)
    marker_cell1ds: dict[int, list[int]] = field(default_factory=dict)

    @property
    def num_cell0ds(self) -> int:
        return len(self.cell0ds_id)

    @property
    def num_cell1ds(self) -> int:
        return len(self.cell1ds_id)

    @property
    def num_cell2ds(self) -> int:
        return len(self.cell2ds_id)


def _read_records(path: str | os.PathLike[str], dimension: int) -> list[list[str]]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise MeshImportError(f"File '{os.fspath(path)}' cannot be opened") from exc
    lines = text.splitlines()[1:]
    records = [_SEPARATORS.split(line.strip()) for line in lines if line.strip()]
    if not records:
        raise MeshImportError(f"There is no cell {dimension}D")
    return records


def _require(record: list[str], count: int, path: str | os.PathLike[str]) -> None:
    if len(record) < count:
        raise MeshImportError(
            f"Line '{' '.join(record)}' in '{os.fspath(path)}' has too few fields"
        )


def _unsigned(token: str, path: str | os.PathLike[str]) -> int:
    try:
        value = int(token)
    except ValueError:
        raise MeshImportError(
            f"Invalid integer '{token}' in '{os.fspath(path)}'"
        ) from None
    if value < 0:
        raise MeshImportError(f"Negative value '{token}' in '{os.fspath(path)}'")
    return value


def _real(token: str, path: str | os.PathLike[str]) -> float:
    try:
        return float(token)
    except ValueError:
        raise MeshImportError(
            f"Invalid number '{token}' in '{os.fspath(path)}'"
        ) from None


def _index(token: str, count: int, path: str | os.PathLike[str]) -> int:
    value = _unsigned(token, path)
    if value >= count:
        raise MeshImportError(
            f"Id {value} in '{os.fspath(path)}' is out of range for {count} cells"
        )
    return value


def import_cell0ds(mesh: PolygonalMesh, path: str | os.PathLike[str]) -> None:
    """Read vertices (id, marker, x, y) into ``mesh``."""
    records = _read_records(path, 0)
    count = len(records)
    coordinates = [[0.0, 0.0, 0.0] for _ in range(count)]
    ids: list[int] = []
    markers: list[int] = []
    for record in records:
        _require(record, 4, path)
        cell_id = _index(record[0], count, path)
        marker = _unsigned(record[1], path)
        coordinates[cell_id][0] = _real(record[2], path)
        coordinates[cell_id][1] = _real(record[3], path)
        ids.append(cell_id)
        markers.append(marker)
        if marker != 0:
            mesh.marker_cell0ds.setdefault(marker, []).append(cell_id)
            mesh.marker_cell1ds.setdefault(marker, []).append(cell_id)
    mesh.cell0ds_id = ids
    mesh.cell0ds_marker = markers
    mesh.cell0ds_coordinates = coordinates


def import_cell1ds(mesh: PolygonalMesh, path: str | os.PathLike[str]) -> None:
    """Read edges (id, marker, origin, end) into ``mesh``."""
    records = _read_records(path, 1)
    count = len(records)
    extrema = [(0, 0)] * count
    ids: list[int] = []
    markers: list[int] = []
    for record in records:
        _require(record, 4, path)
        cell_id = _index(record[0], count, path)
        markers.append(_unsigned(record[1], path))
        extrema[cell_id] = (_unsigned(record[2], path), _unsigned(record[3], path))
        ids.append(cell_id)
    mesh.cell1ds_id = ids
    mesh.cell1ds_marker = markers
    mesh.cell1ds_extrema = extrema


def import_cell2ds(mesh: PolygonalMesh, path: str | os.PathLike[str]) -> None:
    """Read polygons into ``mesh``.

    Each line holds an id and, optionally, a marker followed by the number of
    vertices, the vertices, the number of edges and the edges.
    """
    records = _read_records(path, 2)
    ids: list[int] = []
    vertices_list: list[list[int]] = []
    edges_list: list[list[int]] = []
    for record in records:
        cell_id = _unsigned(record[0], path)
        vertices: list[int] = []
        edges: list[int] = []
        rest = record[1:]
        if rest:
            _require(record, 3, path)
            num_vertices = _unsigned(rest[1], path)
            vertex_end = 2 + num_vertices
            _require(record, 1 + vertex_end + 1, path)
            vertices = [_unsigned(token, path) for token in rest[2:vertex_end]]
            num_edges = _unsigned(rest[vertex_end], path)
            edge_tokens = rest[vertex_end + 1 : vertex_end + 1 + num_edges]
            if len(edge_tokens) < num_edges:
                _require(record, len(record) + 1, path)
            edges = [_unsigned(token, path) for token in edge_tokens]
        ids.append(cell_id)
        vertices_list.append(vertices)
        edges_list.append(edges)
    mesh.cell2ds_id = ids
    mesh.cell2ds_vertices = vertices_list
    mesh.cell2ds_edges = edges_list


def import_mesh(directory: str | os.PathLike[str] = ".") -> PolygonalMesh:
    """Read the three mesh files found in ``directory``."""
    base = Path(directory)
    mesh = PolygonalMesh()
    import_cell0ds(mesh, base / CELL0DS_FILE)
    import_cell1ds(mesh, base / CELL1DS_FILE)
    import_cell2ds(mesh, base / CELL2DS_FILE)
    return mesh