"""lattice_diagrams — Lattice points on y = x²/a and matplotlib diagrams of them.

The math lives in lattice.py and is importable without touching matplotlib
state. The diagram modules render PNGs at 200 DPI into assets/ (created
automatically).

Usage:
    python scripts/lattice_diagrams --set narrow     # one card set
    python scripts/lattice_diagrams --all            # all card sets
    python scripts/lattice_diagrams --a 64 --view wide
    python scripts/lattice_diagrams --table 64 --view wide
    python scripts/lattice_diagrams --list           # list available

Requires: pip install numpy matplotlib
"""

from .lattice import (
    CurveSampler,
    InvalidArgument,
    LatticeResult,
    Point,
    compute_lattice_intersections,
    find_lattice_points,
    format_lattice_table,
    integer_points,
    lattice_step,
    satisfies_conic,
    square_free_part,
)

__all__ = [
    "CurveSampler",
    "InvalidArgument",
    "LatticeResult",
    "Point",
    "compute_lattice_intersections",
    "find_lattice_points",
    "format_lattice_table",
    "integer_points",
    "lattice_step",
    "satisfies_conic",
    "square_free_part",
]
