"""Diagram functions for the multi-panel layout tutorial.

Each function renders a single PNG through a RegionCanvas and returns the
path it wrote.  Register new diagrams in __main__.py after adding them here.

Requires: pip install numpy matplotlib
"""

import numpy as np

from ._common import STYLE, accent, outline_region, panel_title, setup_axes
from .allocator import Region, RegionAllocator
from .canvas import RegionCanvas
from .layouts import FULL_CANVAS, grid_regions, matrix_regions, subdivide

# Example data is identical on every run
SEED = 1234


def _sample_data():
    rng = np.random.default_rng(SEED)
    x = np.linspace(0, 10, 60)
    return {
        "x": x,
        "wave": np.sin(x) + rng.normal(0, 0.15, x.size),
        "normal": rng.normal(0, 1, 500),
        "scatter": rng.normal(0, 1, (2, 120)),
    }


def _draw_line(ax, data, color):
    setup_axes(ax)
    ax.plot(data["x"], data["wave"], color=color, linewidth=1.5)


def _draw_hist(ax, data, color):
    setup_axes(ax)
    ax.hist(data["normal"], bins=25, color=color + "90", edgecolor=color, linewidth=0.5)


def _draw_scatter(ax, data, color):
    setup_axes(ax)
    xs, ys = data["scatter"]
    ax.scatter(xs, ys + 0.5 * xs, s=10, color=color, alpha=0.8)


def _draw_bars(ax, data, color):
    setup_axes(ax)
    counts, _ = np.histogram(data["normal"], bins=5)
    ax.bar(np.arange(1, 6), counts, color=color + "90", edgecolor=color)


PLOTTERS = [_draw_line, _draw_hist, _draw_scatter, _draw_bars]


def _inset(coords, left_pad, right_pad, vertical_pad):
    """Pull a cell's edges in so tick labels stay inside the figure."""
    left, right, bottom, top = coords
    return (left + left_pad, right - right_pad, bottom + vertical_pad, top - vertical_pad)


# ---------------------------------------------------------------------------
# Screen splitting by coordinates: split_screen.png
# ---------------------------------------------------------------------------


def diagram_split_screen(output_dir=None, dpi=None):
    """Three regions declared by (left, right, bottom, top) coordinates."""
    data = _sample_data()
    layout = [
        (0.08, 0.95, 0.58, 0.92),  # wide top panel
        (0.08, 0.48, 0.08, 0.45),
        (0.57, 0.95, 0.08, 0.45),
    ]
    titles = ["region 1: (0.08, 0.95, 0.58, 0.92)", "region 2", "region 3"]

    with RegionCanvas(figsize=(8, 6)) as canvas:
        regions = canvas.declare_layout(layout)
        for region, title, plot in zip(regions, titles, PLOTTERS):
            with canvas.region(region.index) as ax:
                plot(ax, data, accent(region.index))
                panel_title(ax, title)
        return canvas.save("split_screen.png", output_dir=output_dir, dpi=dpi)


# ---------------------------------------------------------------------------
# Splitting a region again: nested_split.png
# ---------------------------------------------------------------------------


def diagram_nested_split(output_dir=None, dpi=None):
    """Left half holds one plot; the right half is subdivided 2 x 1."""
    data = _sample_data()
    left_half = (0.0, 0.5, 0.0, 1.0)
    right_half = (0.5, 1.0, 0.0, 1.0)
    cells = [left_half] + subdivide(right_half, 2, 1)
    layout = [_inset(cell, 0.07, 0.02, 0.07) for cell in cells]

    with RegionCanvas(figsize=(9, 5)) as canvas:
        canvas.declare_layout(layout)
        for index, plot in zip(range(1, len(layout) + 1), PLOTTERS):
            ax = canvas.activate(index)
            plot(ax, data, accent(index))
            panel_title(ax, f"region {index}")
            canvas.deactivate(index)
        return canvas.save("nested_split.png", output_dir=output_dir, dpi=dpi)


# ---------------------------------------------------------------------------
# Grid layout: grid_layout.png
# ---------------------------------------------------------------------------


def diagram_grid_layout(output_dir=None, dpi=None):
    """2 x 2 grids filled by row (left) and by column (right)."""
    halves = [(0.02, 0.48, 0.04, 0.86), (0.52, 0.98, 0.04, 0.86)]
    fills = [("filled by row", True), ("filled by column", False)]

    with RegionCanvas(figsize=(10, 5)) as canvas:
        canvas.declare_layout(halves)
        for index, (label, by_row) in enumerate(fills, start=1):
            with canvas.region(index) as ax:
                setup_axes(ax, xlim=(0, 1), ylim=(0, 1), grid=False)
                ax.set_xticks([])
                ax.set_yticks([])
                panel_title(ax, f"2 x 2 grid, {label}")
                # Number the cells in the order the grid hands them out
                cells = RegionAllocator().declare_layout(grid_regions(2, 2, by_row=by_row))
                for cell in cells:
                    outline_region(ax, _shrink(cell, 0.03), accent(cell.index))
        return canvas.save("grid_layout.png", output_dir=output_dir, dpi=dpi)


def _shrink(region, margin):
    return Region(
        region.index,
        region.left + margin,
        region.right - margin,
        region.bottom + margin,
        region.top - margin,
    )


# ---------------------------------------------------------------------------
# Matrix layout: matrix_layout.png
# ---------------------------------------------------------------------------


def diagram_matrix_layout(output_dir=None, dpi=None):
    """Panel 1 spans the top row; panels 2 and 3 share the bottom row."""
    data = _sample_data()
    matrix = [
        [1, 1, 1],
        [2, 0, 3],
    ]
    cells = matrix_regions(matrix, widths=[3, 1, 2], heights=[1, 1])
    layout = [_inset(cell, 0.06, 0.02, 0.08) for cell in cells]

    with RegionCanvas(figsize=(9, 6)) as canvas:
        for region in canvas.declare_layout(layout):
            with canvas.region(region.index) as ax:
                PLOTTERS[region.index - 1](ax, data, accent(region.index))
                panel_title(ax, f"panel {region.index}")
        canvas.figure.text(
            0.5,
            0.01,
            "matrix [[1, 1, 1], [2, 0, 3]], widths 3:1:2",
            color=STYLE["text_dim"],
            fontsize=9,
            ha="center",
        )
        return canvas.save("matrix_layout.png", output_dir=output_dir, dpi=dpi)


# ---------------------------------------------------------------------------
# Overlapping regions: overlapping_regions.png
# ---------------------------------------------------------------------------


def diagram_overlapping_regions(output_dir=None, dpi=None):
    """An inset region drawn on top of a full-figure region."""
    data = _sample_data()
    layout = [(0.08, 0.96, 0.08, 0.92), (0.62, 0.92, 0.58, 0.86)]

    with RegionCanvas(figsize=(8, 6)) as canvas:
        main, inset = canvas.declare_layout(layout)
        with canvas.region(main.index) as ax:
            _draw_line(ax, data, STYLE["accent1"])
            panel_title(ax, "region 1 with an overlapping inset")
        with canvas.region(inset.index) as ax:
            _draw_hist(ax, data, STYLE["accent2"])
            ax.tick_params(labelsize=6)
        return canvas.save("overlapping_regions.png", output_dir=output_dir, dpi=dpi)


# ---------------------------------------------------------------------------
# Region map: region_map.png
# ---------------------------------------------------------------------------


def diagram_region_map(output_dir=None, dpi=None):
    """Outline of each region of a split-screen layout on the unit square."""
    layout = [(0.0, 1.0, 0.5, 1.0), (0.0, 0.5, 0.0, 0.5), (0.5, 1.0, 0.0, 0.5)]

    with RegionCanvas(figsize=(6, 6)) as canvas:
        canvas.declare_layout([(0.1, 0.95, 0.1, 0.9)])
        with canvas.region(1) as ax:
            setup_axes(ax, xlim=(0, 1), ylim=(0, 1), aspect="equal")
            ax.set_xlabel("left / right", color=STYLE["axis"])
            ax.set_ylabel("bottom / top", color=STYLE["axis"])
            panel_title(ax, "figure fractions of a 3-region split")

            outline_region(ax, Region(1, *FULL_CANVAS), STYLE["grid"], label="")
            for region in RegionAllocator().declare_layout(layout):
                outline_region(ax, _shrink(region, 0.01), accent(region.index))
        return canvas.save("region_map.png", output_dir=output_dir, dpi=dpi)
