"""Builders that turn grid and matrix layouts into region coordinates.

Each function returns a list of ``(left, right, bottom, top)`` tuples ready
for ``RegionAllocator.declare_layout``.  Nothing here touches an allocator
or a figure.
"""

import numpy as np

from .allocator import validate_coords
from .errors import InvalidLayoutError, InvalidRegionError

FULL_CANVAS = (0.0, 1.0, 0.0, 1.0)


def _check_count(name, value):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
        raise InvalidLayoutError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


def subdivide(parent, rows, cols, by_row=True):
    """Split ``parent`` into an equal ``rows`` x ``cols`` grid.

    Cells are ordered from the top-left, across each row when ``by_row`` is
    true and down each column otherwise.
    """
    rows = _check_count("rows", rows)
    cols = _check_count("cols", cols)
    try:
        left, right, bottom, top = validate_coords(parent)
    except InvalidRegionError as exc:
        raise InvalidLayoutError(f"bad parent region: {exc.reason}") from exc

    xs = np.linspace(left, right, cols + 1)
    # Row 0 sits at the top of the parent
    ys = np.linspace(top, bottom, rows + 1)

    cells = []
    if by_row:
        order = [(r, c) for r in range(rows) for c in range(cols)]
    else:
        order = [(r, c) for c in range(cols) for r in range(rows)]
    for r, c in order:
        cells.append((float(xs[c]), float(xs[c + 1]), float(ys[r + 1]), float(ys[r])))
    return cells


def grid_regions(rows, cols, by_row=True):
    """Equal grid over the whole canvas, filled by row or by column."""
    return subdivide(FULL_CANVAS, rows, cols, by_row=by_row)


def _relative_sizes(name, sizes, count):
    if sizes is None:
        return np.ones(count)
    try:
        arr = np.asarray(sizes, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidLayoutError(f"{name} must be numbers: {exc}") from exc
    if arr.ndim != 1 or arr.size != count:
        raise InvalidLayoutError(f"{name} needs {count} value(s), got {list(np.ravel(arr))}")
    if not np.all(np.isfinite(arr)) or np.any(arr <= 0):
        raise InvalidLayoutError(f"{name} must be positive, got {arr.tolist()}")
    return arr


def matrix_regions(matrix, widths=None, heights=None):
    """Regions for a matrix layout.

    ``matrix`` is a 2-D array of non-negative integers.  Panel ``n`` spans the
    bounding box of every cell holding ``n``; cells holding 0 stay empty.
    The panel numbers used must run 1..N without gaps.  ``widths`` and
    ``heights`` give relative column widths and row heights.
    """
    try:
        grid = np.asarray(matrix)
    except (TypeError, ValueError) as exc:
        raise InvalidLayoutError(f"layout matrix is not rectangular: {exc}") from exc
    if grid.ndim != 2 or grid.size == 0:
        raise InvalidLayoutError("layout matrix must be a non-empty 2-D array")
    if not np.issubdtype(grid.dtype, np.integer):
        if not np.issubdtype(grid.dtype, np.floating) or not np.all(np.mod(grid, 1) == 0):
            raise InvalidLayoutError("layout matrix must hold integers")
        grid = grid.astype(int)
    if np.any(grid < 0):
        raise InvalidLayoutError("layout matrix must not hold negative panel numbers")

    panels = int(grid.max())
    if panels == 0:
        raise InvalidLayoutError("layout matrix names no panels")
    missing = sorted(set(range(1, panels + 1)) - set(np.unique(grid).tolist()))
    if missing:
        raise InvalidLayoutError(f"layout matrix skips panel number(s) {missing}")

    nrows, ncols = grid.shape
    col_sizes = _relative_sizes("widths", widths, ncols)
    row_sizes = _relative_sizes("heights", heights, nrows)
    x_edges = np.concatenate(([0.0], np.cumsum(col_sizes) / col_sizes.sum()))
    y_edges = np.concatenate(([0.0], np.cumsum(row_sizes) / row_sizes.sum()))
    # Rounding can leave the last edge a hair above 1.0
    x_edges[-1] = 1.0
    y_edges[-1] = 1.0

    regions = []
    for panel in range(1, panels + 1):
        rows_idx, cols_idx = np.nonzero(grid == panel)
        r0, r1 = rows_idx.min(), rows_idx.max()
        c0, c1 = cols_idx.min(), cols_idx.max()
        regions.append(
            (
                float(x_edges[c0]),
                float(x_edges[c1 + 1]),
                float(1.0 - y_edges[r1 + 1]),
                float(1.0 - y_edges[r0]),
            )
        )
    return regions
