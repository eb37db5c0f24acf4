"""Shared style, helpers, and constants for lattice diagram generation."""

import os
from typing import NamedTuple

import matplotlib

matplotlib.use("Agg")

import matplotlib.patheffects as pe  # noqa: E402
import matplotlib.pyplot as plt  # noqa: E402

# ---------------------------------------------------------------------------
# Paths and settings
# ---------------------------------------------------------------------------

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
ASSETS_DIR = os.path.join(REPO_ROOT, "assets")
DPI = 200

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
    "warn": "#ffd54f",  # Yellow, lattice points
    "surface": "#252545",  # Slightly lighter surface for fills
}

# Curve colors, cycled per card
COLORS = [
    STYLE["accent1"],
    STYLE["accent3"],
    STYLE["accent2"],
    STYLE["accent4"],
    "#f06292",
    "#a1887f",
    "#90a4ae",
    "#aed581",
    "#7986cb",
    "#4db6ac",
]

# ---------------------------------------------------------------------------
# Views and card sets
# ---------------------------------------------------------------------------


class ViewRange(NamedTuple):
    x_min: float
    x_max: float
    y_min: float
    y_max: float


VIEWS = {
    "card": ViewRange(-50, 50, 0, 100),
    "wide": ViewRange(-630, 630, 0, 500),
}

CARD_SETS = {
    # Perfect squares 1² to 25²
    "narrow": [n * n for n in range(1, 26)],
    # Perfect squares 32² to 56²
    "wide": [n * n for n in range(32, 57)],
}


def setup_axes(ax, xlim=None, ylim=None, grid=True, aspect=None):
    """Apply consistent dark styling to axes."""
    ax.set_facecolor(STYLE["bg"])
    if xlim:
        ax.set_xlim(xlim)
    if ylim:
        ax.set_ylim(ylim)
    if aspect:
        ax.set_aspect(aspect)
    ax.tick_params(colors=STYLE["axis"], labelsize=7)
    for spine in ax.spines.values():
        spine.set_color(STYLE["grid"])
        spine.set_linewidth(0.5)
    if grid:
        ax.grid(True, color=STYLE["grid"], linewidth=0.5, alpha=0.5)
    ax.set_axisbelow(True)


def draw_label(ax, x, y, text, color, ha="left", fontsize=7):
    """Text with a background-colored stroke so it stays readable over lines."""
    ax.text(
        x,
        y,
        text,
        color=color,
        fontsize=fontsize,
        ha=ha,
        va="bottom",
        path_effects=[pe.withStroke(linewidth=2, foreground=STYLE["bg"])],
    )


def save(fig, filename, out_dir=None):
    """Save a figure as PNG under out_dir (ASSETS_DIR by default)."""
    assets_dir = out_dir or ASSETS_DIR
    os.makedirs(assets_dir, exist_ok=True)
    out = os.path.join(assets_dir, filename)
    fig.savefig(
        out,
        dpi=DPI,
        bbox_inches="tight",
        facecolor=STYLE["bg"],
        pad_inches=0.2,
    )
    plt.close(fig)
    rel = os.path.relpath(out, REPO_ROOT)
    print(f"  {rel}")
    return out
