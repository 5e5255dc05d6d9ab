"""figure_regions: split a matplotlib figure into panels by coordinates.

A RegionAllocator validates layouts given as (left, right, bottom, top)
figure fractions and tracks which region is active.  RegionCanvas binds
each region to an Axes, and the layouts module builds grid and matrix
layouts.  The CLI renders the tutorial diagrams as PNGs:

Usage:
    python scripts/figure_regions --diagram split_screen   # one diagram
    python scripts/figure_regions --all                    # all diagrams
    python scripts/figure_regions --list                   # list available

Requires: pip install numpy matplotlib
"""

from .allocator import Region, RegionAllocator
from .canvas import RegionCanvas
from .errors import (
    AlreadyActiveError,
    InvalidLayoutError,
    InvalidRegionError,
    NotActiveError,
    RegionError,
    UnknownRegionError,
)
from .layouts import grid_regions, matrix_regions, subdivide

__all__ = [
    "AlreadyActiveError",
    "InvalidLayoutError",
    "InvalidRegionError",
    "NotActiveError",
    "Region",
    "RegionAllocator",
    "RegionCanvas",
    "RegionError",
    "UnknownRegionError",
    "grid_regions",
    "matrix_regions",
    "subdivide",
]
