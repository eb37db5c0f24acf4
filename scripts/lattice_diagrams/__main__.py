"""CLI entry point for lattice_diagrams package.

Invoke as:  python scripts/lattice_diagrams --set narrow
"""

# Bootstrap: when run as `python scripts/lattice_diagrams` (directory path),
# re-execute through runpy so the package machinery resolves relative imports
# correctly and without DeprecationWarning.
if __name__ == "__main__" and not __package__:
    import os
    import runpy
    import sys

    _scripts_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if _scripts_dir not in sys.path:
        sys.path.insert(0, _scripts_dir)
    runpy.run_module("lattice_diagrams", run_name="__main__", alter_sys=True)
    raise SystemExit(0)  # unreachable, run_module already calls sys.exit()

import argparse
import sys

from ._common import VIEWS
from .lattice import InvalidArgument, find_lattice_points, format_lattice_table
from .parabola_diagrams import diagram_narrow_cards, diagram_single, diagram_wide_cards

# ---------------------------------------------------------------------------
# Diagram registry
# ---------------------------------------------------------------------------

DIAGRAMS = {
    "narrow": [
        ("narrow_cards.png", diagram_narrow_cards),
    ],
    "wide": [
        ("wide_cards.png", diagram_wide_cards),
    ],
}

# Descriptions for --list
SET_NAMES = {
    "narrow": "narrow cards, a = 1² … 25², view x ∈ [-50, 50], y ∈ [0, 100]",
    "wide": "wide cards, a = 32² … 56², view x ∈ [-630, 630], y ∈ [0, 500]",
}


def match_set(query):
    """Match a query like 'narrow', 'narrow_cards', or 'n' to a registry key."""
    q = query.strip().lower()

    # Exact match
    if q in DIAGRAMS:
        return q

    # Match by file stem
    for key, diagrams in DIAGRAMS.items():
        for filename, _ in diagrams:
            if q == filename.rsplit(".", 1)[0]:
                return key

    # Unique prefix
    hits = [key for key in DIAGRAMS if key.startswith(q)]
    if q and len(hits) == 1:
        return hits[0]

    return None


def resolve_view(args):
    """Start from the named view preset and apply any explicit bound."""
    view = VIEWS[args.view]
    overrides = {
        name: getattr(args, name)
        for name in ("x_min", "x_max", "y_min", "y_max")
        if getattr(args, name) is not None
    }
    return view._replace(**overrides)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate parabola lattice-intersection diagrams."
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--set", help="Diagram set to generate (e.g. narrow)")
    group.add_argument("--all", action="store_true", help="Generate all diagram sets")
    group.add_argument("--list", action="store_true", help="List available diagram sets")
    group.add_argument("--a", type=int, metavar="N", help="Draw y = x²/N on its own")
    group.add_argument(
        "--table", type=int, metavar="N", help="Print the lattice points of y = x²/N"
    )

    parser.add_argument(
        "--view",
        choices=sorted(VIEWS),
        default="card",
        help="View preset for --a and --table (default: card)",
    )
    parser.add_argument("--x-min", type=float)
    parser.add_argument("--x-max", type=float)
    parser.add_argument("--y-min", type=float)
    parser.add_argument("--y-max", type=float)
    parser.add_argument("--out", help="Output directory (default: <repo>/assets)")
    parser.add_argument(
        "--limit", type=int, default=20, help="Rows shown by --table (default: 20)"
    )
    parser.add_argument(
        "--horizontal", action="store_true", help="Lay the --table output out in rows"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.list:
        print("Available diagram sets:")
        for key in sorted(DIAGRAMS.keys()):
            print(f"\n  {key}: {SET_NAMES.get(key, key)}")
            for filename, _ in DIAGRAMS[key]:
                print(f"    {filename}")
        total = sum(len(d) for d in DIAGRAMS.values())
        print(f"\n{total} diagrams total.")
        return 0

    try:
        if args.table is not None:
            view = resolve_view(args)
            points = find_lattice_points(args.table, *view)
            print(f"y = x² / {args.table}")
            print(format_lattice_table(points, limit=args.limit, horizontal=args.horizontal))
            return 0

        if args.a is not None:
            diagram_single(args.a, resolve_view(args), out_dir=args.out)
            print("\nGenerated 1 diagram(s).")
            return 0
    except InvalidArgument as exc:
        print(f"error: {exc}")
        return 1

    if args.all:
        keys = sorted(DIAGRAMS.keys())
    else:
        key = match_set(args.set)
        if key is None:
            print(f"No diagram set named '{args.set}'.")
            print("Use --list to see available sets.")
            return 1
        keys = [key]

    total = 0
    for key in keys:
        print(f"{key}/")
        for _, func in DIAGRAMS[key]:
            func(out_dir=args.out)
            total += 1

    print(f"\nGenerated {total} diagram(s).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
