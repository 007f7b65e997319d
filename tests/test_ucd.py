import pytest

from polymesh.ucd import (
    CellType,
    UCDCell,
    UCDProperty,
    create_line_cells,
    create_point_cells,
    create_polygon_cells,
    create_polyhedra_cells,
    export_points,
    export_polygons,
    export_polyhedra,
    export_segments,
    write_ucd_ascii,
)

POINTS = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)]


def _read_lines(path):
    return path.read_text(encoding="utf-8").splitlines()


@pytest.mark.parametrize(
    "cell_type, label",
    [
        (CellType.POINT, "pt"),
        (CellType.LINE, "line"),
        (CellType.TRIANGLE, "tri"),
        (CellType.QUADRILATERAL, "quad"),
        (CellType.HEXAHEDRON, "hex"),
        (CellType.PRISM, "prism"),
        (CellType.TETRAHEDRON, "tet"),
        (CellType.PYRAMID, "pyr"),
    ],
)
def test_cell_labels(cell_type, label):
    assert UCDCell(cell_type, (0,), 0).label() == label


def test_unknown_cell_label_raises():
    with pytest.raises(ValueError):
        UCDCell(CellType.UNKNOWN, (0,), 0).label()


def test_point_cells_with_matching_materials():
    cells = create_point_cells(POINTS[:3], [4, 5, 6])
    assert [c.point_ids for c in cells] == [(0,), (1,), (2,)]
    assert [c.material_id for c in cells] == [4, 5, 6]
    assert all(c.type is CellType.POINT for c in cells)


def test_point_cells_ignore_mismatched_materials():
    cells = create_point_cells(POINTS, [7])
    assert [c.material_id for c in cells] == [0, 0, 0, 0]


def test_line_cells():
    cells = create_line_cells([(0, 1), (1, 2)], [3, 8])
    assert [c.point_ids for c in cells] == [(0, 1), (1, 2)]
    assert [c.material_id for c in cells] == [3, 8]
    assert all(c.type is CellType.LINE for c in cells)


def test_polygon_cells_types():
    cells = create_polygon_cells([(0, 1, 2), (0, 1, 2, 3)])
    assert [c.type for c in cells] == [CellType.TRIANGLE, CellType.QUADRILATERAL]
    assert [c.material_id for c in cells] == [0, 0]


def test_polygon_cells_reject_pentagon():
    with pytest.raises(ValueError):
        create_polygon_cells([(0, 1, 2, 3, 4)])


def test_polyhedra_cells():
    cells = create_polyhedra_cells([(0, 1, 2, 3)], [9])
    assert cells == [UCDCell(CellType.TETRAHEDRON, (0, 1, 2, 3), 9)]


def test_polyhedra_cells_reject_non_tetrahedra():
    with pytest.raises(ValueError):
        create_polyhedra_cells([(0, 1, 2)])


def test_export_points_layout(tmp_path):
    path = tmp_path / "points.inp"
    export_points(path, POINTS[:2])
    lines = _read_lines(path)
    assert lines[0] == "2 2 0 0 0"
    assert lines[1] == (
        "1 0.0000000000000000e+00 0.0000000000000000e+00 0.0000000000000000e+00"
    )
    assert lines[3].split() == ["1", "0", "pt", "1"]
    assert lines[4].split() == ["2", "0", "pt", "2"]
    assert len(lines) == 5


def test_export_points_properties_are_cell_properties(tmp_path):
    path = tmp_path / "points.inp"
    prop = UCDProperty("mass", "kg", 1, [2.0, 3.0])
    export_points(path, POINTS[:2], [prop])
    lines = _read_lines(path)
    assert lines[0].split() == ["2", "2", "0", "1", "0"]
    assert lines[5].split() == ["1", "1"]
    assert lines[6] == "mass, kg"
    assert [float(v) for v in lines[7].split()[1:]] == [2.0]
    assert [float(v) for v in lines[8].split()[1:]] == [3.0]


def test_export_segments_with_point_and_segment_properties(tmp_path):
    path = tmp_path / "segments.inp"
    points = POINTS[:2]
    velocity = UCDProperty("velocity", "m/s", 2, [1.0, 2.0, 3.0, 4.0])
    weight = UCDProperty("weight", "-", 1, [0.5])
    export_segments(path, points, [(0, 1)], [velocity], [weight])
    lines = _read_lines(path)
    assert lines[0].split() == ["2", "1", "1", "1", "0"]
    point_section = lines[4:8]
    assert point_section[0].split() == ["1", "2"]
    assert point_section[1] == "velocity, m/s"
    assert [float(v) for v in point_section[2].split()] == [1.0, 1.0, 2.0]
    assert [float(v) for v in point_section[3].split()] == [2.0, 3.0, 4.0]
    cell_section = lines[8:]
    assert cell_section[0].split() == ["1", "1"]
    assert cell_section[1] == "weight, -"
    assert [float(v) for v in cell_section[2].split()] == [1.0, 0.5]


def test_export_polygons(tmp_path):
    path = tmp_path / "polygons.inp"
    export_polygons(path, POINTS, [(0, 1, 2), (0, 1, 2, 3)])
    lines = _read_lines(path)
    assert lines[0].split() == ["4", "2", "0", "0", "0"]
    assert lines[5].split() == ["1", "0", "tri", "1", "2", "3"]
    assert lines[6].split() == ["2", "0", "quad", "1", "2", "3", "4"]


def test_export_polygons_rejects_unsupported(tmp_path):
    path = tmp_path / "bad.inp"
    with pytest.raises(ValueError):
        export_polygons(path, POINTS, [(0, 1)])
    assert not path.exists()


def test_export_polyhedra(tmp_path):
    path = tmp_path / "tets.inp"
    points = POINTS[:3] + [(0.0, 0.0, 1.0)]
    export_polyhedra(path, points, [(0, 1, 2, 3)], materials=[5])
    lines = _read_lines(path)
    assert lines[0].split() == ["4", "1", "0", "0", "0"]
    assert lines[5].split() == ["1", "5", "tet", "1", "2", "3", "4"]


def test_write_ucd_ascii_empty(tmp_path):
    path = tmp_path / "empty.inp"
    write_ucd_ascii(path, [], [])
    assert _read_lines(path) == ["0 0 0 0 0"]


def test_write_ucd_ascii_rejects_short_points(tmp_path):
    with pytest.raises(ValueError):
        write_ucd_ascii(tmp_path / "short.inp", [(1.0, 2.0)], [])


def test_write_to_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        export_points(tmp_path / "missing" / "out.inp", POINTS)