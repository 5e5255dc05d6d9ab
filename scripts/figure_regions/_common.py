"""Shared style, helpers, and constants for figure_regions diagrams."""

import os

import matplotlib

matplotlib.use("Agg")

import matplotlib.patheffects as pe  # noqa: E402
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import Rectangle  # noqa: E402

# ---------------------------------------------------------------------------
# Paths and settings
# ---------------------------------------------------------------------------

OUTPUT_DIR = "figures"  # relative to the working directory
DPI = 200
FIGSIZE = (8, 6)

# ---------------------------------------------------------------------------
# Dark theme style
# ---------------------------------------------------------------------------

STYLE = {
    "bg": "#1a1a2e",  # Dark blue-gray background
    "grid": "#2a2a4a",  # Subtle grid lines
    "axis": "#8888aa",  # Axis lines and labels
    "text": "#e0e0f0",  # Primary text
    "text_dim": "#8888aa",  # Secondary/dim text
    "accent1": "#4fc3f7",  # Cyan
    "accent2": "#ff7043",  # Orange
    "accent3": "#66bb6a",  # Green
    "accent4": "#ab47bc",  # Purple
    "warn": "#ffd54f",  # Yellow, annotations
}

# Cycled through when panels need distinct colors
ACCENTS = [STYLE["accent1"], STYLE["accent2"], STYLE["accent3"], STYLE["accent4"], STYLE["warn"]]


def accent(index):
    """Accent color for 1-based panel ``index``."""
    return ACCENTS[(index - 1) % len(ACCENTS)]


def setup_axes(ax, xlim=None, ylim=None, grid=True, aspect=None):
    """Apply consistent dark styling to axes."""
    ax.set_facecolor(STYLE["bg"])
    if xlim:
        ax.set_xlim(xlim)
    if ylim:
        ax.set_ylim(ylim)
    if aspect:
        ax.set_aspect(aspect)
    ax.tick_params(colors=STYLE["axis"], labelsize=8)
    for spine in ax.spines.values():
        spine.set_color(STYLE["grid"])
        spine.set_linewidth(0.5)
    if grid:
        ax.grid(True, color=STYLE["grid"], linewidth=0.5, alpha=0.5)
    ax.set_axisbelow(True)


def panel_title(ax, text, color=None):
    """Bold panel title in the theme's text color."""
    ax.set_title(text, color=color or STYLE["text"], fontsize=10, fontweight="bold", pad=6)


def outline_region(ax, region, color, label=None):
    """Draw a region's rectangle (in unit-square data coordinates) with its index."""
    ax.add_patch(
        Rectangle(
            (region.left, region.bottom),
            region.width,
            region.height,
            facecolor=color + "30",
            edgecolor=color,
            linewidth=1.5,
        )
    )
    ax.text(
        region.left + region.width / 2,
        region.bottom + region.height / 2,
        label if label is not None else str(region.index),
        color=color,
        fontsize=14,
        fontweight="bold",
        ha="center",
        va="center",
        path_effects=[pe.withStroke(linewidth=3, foreground=STYLE["bg"])],
    )


def new_figure(figsize=None):
    return plt.figure(figsize=figsize or FIGSIZE, facecolor=STYLE["bg"])


def close_figure(fig):
    plt.close(fig)


def save(fig, filename, output_dir=None, dpi=None):
    """Save a figure as ``filename`` under ``output_dir`` and return its path."""
    out_dir = output_dir or OUTPUT_DIR
    os.makedirs(out_dir, exist_ok=True)
    out = os.path.join(out_dir, filename)
    fig.savefig(
        out,
        dpi=dpi or DPI,
        facecolor=STYLE["bg"],
    )
    print(f"  {os.path.relpath(out)}")
    return out
