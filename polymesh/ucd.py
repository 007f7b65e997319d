"""Export of points, segments, polygons and polyhedra to the ASCII UCD format."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "CellType",
    "UCDProperty",
    "UCDCell",
    "create_point_cells",
    "create_line_cells",
    "create_polygon_cells",
    "create_polyhedra_cells",
    "write_ucd_ascii",
    "export_points",
    "export_segments",
    "export_polygons",
    "export_polyhedra",
]

Point = Sequence[float]


class CellType(Enum):
    """Kinds of cell known to the UCD format."""

    UNKNOWN = -1
    POINT = 0
    LINE = 1
    TRIANGLE = 2
    QUADRILATERAL = 3
    HEXAHEDRON = 4
    PRISM = 5
    TETRAHEDRON = 6
    PYRAMID = 7


_LABELS = {
    CellType.LINE: "line",
    CellType.TRIANGLE: "tri",
    CellType.QUADRILATERAL: "quad",
    CellType.HEXAHEDRON: "hex",
    CellType.PRISM: "prism",
    CellType.TETRAHEDRON: "tet",
    CellType.PYRAMID: "pyr",
    CellType.POINT: "pt",
}


@dataclass(frozen=True)
class UCDProperty:
    """A named field attached to points or cells.

    ``data`` is flat: the components of item ``i`` are
    ``data[num_components * i : num_components * (i + 1)]``.
    """

    label: str
    unit_label: str
    num_components: int
    data: Sequence[float]


@dataclass(frozen=True)
class UCDCell:
    """One cell: its type, the zero-based ids of its points and its material."""

    type: CellType
    point_ids: tuple[int, ...]
    material_id: int = 0

    def label(self) -> str:
        """Return the UCD keyword for this cell's type."""
        try:
            return _LABELS[self.type]
        except KeyError:
            raise ValueError("Type not supported") from None


def _material_for(materials: Sequence[int] | None, count: int, index: int) -> int:
    if materials is not None and len(materials) == count:
        return int(materials[index])
    return 0


def create_point_cells(
    points: Sequence[Point], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Make one point cell for each point."""
    count = len(points)
    return [
        UCDCell(CellType.POINT, (index,), _material_for(materials, count, index))
        for index in range(count)
    ]


def create_line_cells(
    segments: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Make one line cell for each (start, end) pair of point ids."""
    count = len(segments)
    cells = []
    for index, segment in enumerate(segments):
        start, end = segment[0], segment[1]
        cells.append(
            UCDCell(
                CellType.LINE,
                (int(start), int(end)),
                _material_for(materials, count, index),
            )
        )
    return cells


def create_polygon_cells(
    polygons: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Make triangle or quadrilateral cells; other polygons are rejected."""
    count = len(polygons)
    cells = []
    for index, vertices in enumerate(polygons):
        if len(vertices) == 3:
            cell_type = CellType.TRIANGLE
        elif len(vertices) == 4:
            cell_type = CellType.QUADRILATERAL
        else:
            raise ValueError("Polygon type not supported")
        cells.append(
            UCDCell(
                cell_type,
                tuple(int(v) for v in vertices),
                _material_for(materials, count, index),
            )
        )
    return cells


def create_polyhedra_cells(
    polyhedra: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Make tetrahedron cells; other polyhedra are rejected."""
    count = len(polyhedra)
    cells = []
    for index, vertices in enumerate(polyhedra):
        if len(vertices) != 4:
            raise ValueError("Polygon type not supported")
        cells.append(
            UCDCell(
                CellType.TETRAHEDRON,
                tuple(int(v) for v in vertices),
                _material_for(materials, count, index),
            )
        )
    return cells


def _real(value: float) -> str:
    return f"{float(value):.16e}"


def _coordinates(point: Point) -> tuple[float, float, float]:
    if len(point) < 3:
        raise ValueError("Each point needs three coordinates")
    return point[0], point[1], point[2]


def _property_lines(
    properties: Sequence[UCDProperty], count: int
) -> Iterator[str]:
    if not properties:
        return
    yield " ".join(
        [str(len(properties))] + [str(prop.num_components) for prop in properties]
    )
    for prop in properties:
        yield f"{prop.label}, {prop.unit_label}"
    for item in range(count):
        values = [str(item + 1)]
        for prop in properties:
            start = prop.num_components * item
            values.extend(
                _real(prop.data[start + component])
                for component in range(prop.num_components)
            )
        yield " ".join(values)


def _ucd_lines(
    points: Sequence[Point],
    cells: Sequence[UCDCell],
    point_properties: Sequence[UCDProperty],
    cell_properties: Sequence[UCDProperty],
) -> Iterator[str]:
    yield f"{len(points)} {len(cells)} {len(point_properties)} {len(cell_properties)} 0"
    for index, point in enumerate(points):
        x, y, z = _coordinates(point)
        yield f"{index + 1} {_real(x)} {_real(y)} {_real(z)}"
    for index, cell in enumerate(cells):
        ids = " ".join(str(pid + 1) for pid in cell.point_ids)
        head = f"{index + 1} {cell.material_id} {cell.label()}"
        yield f"{head} {ids}" if ids else head
    yield from _property_lines(point_properties, len(points))
    yield from _property_lines(cell_properties, len(cells))


def write_ucd_ascii(
    path: str | os.PathLike[str],
    points: Sequence[Point],
    cells: Sequence[UCDCell],
    point_properties: Iterable[UCDProperty] = (),
    cell_properties: Iterable[UCDProperty] = (),
) -> None:
    """Write points, cells and their properties to ``path`` as ASCII UCD."""
    point_properties = list(point_properties)
    cell_properties = list(cell_properties)
    lines = list(_ucd_lines(points, cells, point_properties, cell_properties))
    with open(path, "w", encoding="utf-8") as file:
        for line in lines:
            file.write(line + "\n")


def export_points(
    path: str | os.PathLike[str],
    points: Sequence[Point],
    point_properties: Iterable[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Write each point as a point cell.

    The properties are written as cell properties, one value set per point cell.
    """
    write_ucd_ascii(
        path,
        points,
        create_point_cells(points, materials),
        (),
        point_properties,
    )


def export_segments(
    path: str | os.PathLike[str],
    points: Sequence[Point],
    segments: Sequence[Sequence[int]],
    point_properties: Iterable[UCDProperty] = (),
    segment_properties: Iterable[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Write points and line cells joining them."""
    write_ucd_ascii(
        path,
        points,
        create_line_cells(segments, materials),
        point_properties,
        segment_properties,
    )


def export_polygons(
    path: str | os.PathLike[str],
    points: Sequence[Point],
    polygons: Sequence[Sequence[int]],
    point_properties: Iterable[UCDProperty] = (),
    polygon_properties: Iterable[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Write points and triangle or quadrilateral cells."""
    write_ucd_ascii(
        path,
        points,
        create_polygon_cells(polygons, materials),
        point_properties,
        polygon_properties,
    )


def export_polyhedra(
    path: str | os.PathLike[str],
    points: Sequence[Point],
    polyhedra: Sequence[Sequence[int]],
    point_properties: Iterable[UCDProperty] = (),
    polyhedra_properties: Iterable[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Write points and tetrahedron cells."""
    write_ucd_ascii(
        path,
        points,
        create_polyhedra_cells(polyhedra, materials),
        point_properties,
        polyhedra_properties,
    )