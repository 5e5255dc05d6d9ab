"""CLI entry point for the figure_regions package.

Invoke as:  python scripts/figure_regions --diagram split_screen
"""

# Bootstrap: when run as `python scripts/figure_regions` (directory path),
# re-execute through runpy so the package machinery resolves relative imports.
if __name__ == "__main__" and not __package__:
    import os
    import runpy
    import sys

    _scripts_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if _scripts_dir not in sys.path:
        sys.path.insert(0, _scripts_dir)
    runpy.run_module("figure_regions", run_name="__main__", alter_sys=True)
    raise SystemExit(0)  # unreachable, run_module already calls sys.exit()

import argparse
import logging
import sys

from . import _common
from .diagrams import (
    diagram_grid_layout,
    diagram_matrix_layout,
    diagram_nested_split,
    diagram_overlapping_regions,
    diagram_region_map,
    diagram_split_screen,
)

# ---------------------------------------------------------------------------
# Diagram registry
# ---------------------------------------------------------------------------

DIAGRAMS = {
    "split_screen": diagram_split_screen,
    "nested_split": diagram_nested_split,
    "grid_layout": diagram_grid_layout,
    "matrix_layout": diagram_matrix_layout,
    "overlapping_regions": diagram_overlapping_regions,
    "region_map": diagram_region_map,
}


def match_diagram(query):
    """Match a query like 'grid_layout', 'grid-layout' or 'grid_layout.png' to a registry key."""
    q = query.strip().lower().replace("-", "_")
    if q.endswith(".png"):
        q = q[: -len(".png")]

    if q in DIAGRAMS:
        return q

    # Unique prefix ("matrix" matches "matrix_layout")
    matches = [key for key in DIAGRAMS if key.startswith(q)]
    if len(matches) == 1:
        return matches[0]
    return None


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate multi-panel layout diagrams with matplotlib."
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--diagram", help="Diagram to generate (e.g. split_screen)")
    group.add_argument("--all", action="store_true", help="Generate all diagrams")
    group.add_argument("--list", action="store_true", help="List available diagrams")
    parser.add_argument(
        "--output",
        default=_common.OUTPUT_DIR,
        help=f"Directory to write PNGs into (default: {_common.OUTPUT_DIR})",
    )
    parser.add_argument(
        "--dpi", type=int, default=_common.DPI, help=f"Output resolution (default: {_common.DPI})"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log region transitions")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        print("Available diagrams:")
        for key in sorted(DIAGRAMS):
            print(f"  {key}.png")
        print(f"\n{len(DIAGRAMS)} diagrams total.")
        return 0

    if args.all:
        keys = sorted(DIAGRAMS)
    else:
        key = match_diagram(args.diagram)
        if key is None:
            print(f"No diagram named '{args.diagram}'.")
            print("Use --list to see available diagrams.")
            return 1
        keys = [key]

    print(f"{args.output}/")
    for key in keys:
        DIAGRAMS[key](output_dir=args.output, dpi=args.dpi)

    print(f"\nGenerated {len(keys)} diagram(s).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
