"""Command that reads a mesh and exports its vertices and edges as UCD files."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from polymesh.mesh import MeshImportError, import_mesh
from polymesh.ucd import export_points, export_segments

__all__ = ["main"]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polymesh",
        description="Export the vertices and edges of a polygonal mesh to UCD files.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="directory holding Cell0Ds.csv, Cell1Ds.csv and Cell2Ds.csv",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=".",
        help="directory where Cell0Ds.inp and Cell1Ds.inp are written",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the export; return the exit status."""
    args = _parser().parse_args(argv)
    try:
        mesh = import_mesh(args.directory)
    except MeshImportError as exc:
        print(f"file not found: {exc}", file=sys.stderr)
        return 1

    output = Path(args.output_dir)
    try:
        export_points(output / "Cell0Ds.inp", mesh.cell0ds_coordinates)
        export_segments(
            output / "Cell1Ds.inp",
            mesh.cell0ds_coordinates,
            mesh.cell1ds_extrema,
        )
    except OSError as exc:
        print(f"cannot write output: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())