"""Diagram functions for parabola lattice intersections."""

import math

import matplotlib.pyplot as plt
import numpy as np

from ._common import (
    CARD_SETS,
    COLORS,
    STYLE,
    VIEWS,
    draw_label,
    save,
    setup_axes,
)
from .lattice import (
    CurveSampler,
    InvalidArgument,
    compute_lattice_intersections,
    validate_parameter,
    validate_range,
)

# Cards with more lattice points than this show dots without coordinate labels
LABEL_LIMIT = 15


def sqrt_label(a):
    """'√a = 8' for perfect squares, '√a = 1.41' otherwise."""
    root = math.isqrt(a)
    if root * root == a:
        return f"√a = {root}"
    return f"√a = {math.sqrt(a):.2f}"


# ---------------------------------------------------------------------------
# Building blocks (axes are always passed in)
# ---------------------------------------------------------------------------


def draw_parabola(ax, a, color, view, label_limit=None, fontsize=7):
    """Plot y = x²/a and its lattice points on ax; return the LatticeResult.

    Lattice points get "(x, y)" labels unless there are more than
    label_limit of them.
    """
    result = compute_lattice_intersections(a, *view)
    xs, ys = CurveSampler(a, *view).as_arrays()
    ax.plot(xs, ys, color=color, lw=1.8, solid_capstyle="round", zorder=3)

    if result.lattice_points:
        pts = np.array(result.lattice_points, dtype=float)
        ax.plot(
            pts[:, 0],
            pts[:, 1],
            "o",
            color=STYLE["warn"],
            markeredgecolor=STYLE["bg"],
            markeredgewidth=0.5,
            markersize=3.5,
            zorder=5,
        )

    if label_limit is None or len(result.lattice_points) <= label_limit:
        dx = 0.01 * (view.x_max - view.x_min)
        dy = 0.01 * (view.y_max - view.y_min)
        for x, y in result.lattice_points:
            # Negative x labelled to the left, the rest to the right
            if x < 0:
                draw_label(ax, x - dx, y + dy, f"({x}, {y})", STYLE["text"], "right", fontsize)
            else:
                draw_label(ax, x + dx, y + dy, f"({x}, {y})", STYLE["text"], "left", fontsize)

    return result


def draw_card(ax, a, color, view):
    """One styled card: parabola, formula, √a and intersection count."""
    try:
        validate_parameter(a)
        validate_range(*view)
    except InvalidArgument as exc:
        setup_axes(ax, grid=False)
        ax.set_title(f"y = x² / {a}", color=STYLE["text_dim"], fontsize=10)
        ax.text(
            0.5,
            0.5,
            f"invalid parameter\n{exc}",
            transform=ax.transAxes,
            color=STYLE["accent2"],
            fontsize=7,
            ha="center",
            va="center",
            wrap=True,
        )
        return None

    setup_axes(
        ax,
        xlim=(view.x_min, view.x_max),
        ylim=(view.y_min, view.y_max),
    )
    ax.axhline(0, color=STYLE["axis"], lw=0.8, alpha=0.6)
    ax.axvline(0, color=STYLE["axis"], lw=0.8, alpha=0.6)
    result = draw_parabola(ax, a, color, view, label_limit=LABEL_LIMIT, fontsize=5)

    count = len(result.lattice_points)
    ax.set_title(
        f"y = x² / {a}",
        color=color,
        fontsize=10,
        fontweight="bold",
        pad=4,
    )
    ax.set_xlabel(
        f"{sqrt_label(a)}    {count} intersections",
        color=STYLE["text_dim"],
        fontsize=7,
    )
    return result


# ---------------------------------------------------------------------------
# Card grids
# ---------------------------------------------------------------------------


def diagram_card_grid(values, filename, view, columns=5, title=None, out_dir=None):
    """A grid of parabola cards, one per parameter, saved as a single PNG."""
    rows = max(1, math.ceil(len(values) / columns))
    x_span = view.x_max - view.x_min
    y_span = view.y_max - view.y_min
    # A flat view (y_min == y_max) gets the wide card
    card_w = 2.6 if y_span > 0 and x_span / y_span <= 1.5 else 3.6
    card_h = 2.4
    fig = plt.figure(figsize=(columns * card_w, rows * card_h), facecolor=STYLE["bg"])

    for i, a in enumerate(values):
        ax = fig.add_subplot(rows, columns, i + 1)
        draw_card(ax, a, COLORS[i % len(COLORS)], view)

    if title:
        fig.suptitle(
            title,
            color=STYLE["text"],
            fontsize=14,
            fontweight="bold",
            y=1.01,
        )
    fig.tight_layout()
    return save(fig, filename, out_dir)


def diagram_narrow_cards(out_dir=None):
    """Perfect squares 1² to 25² on the card view."""
    return diagram_card_grid(
        CARD_SETS["narrow"],
        "narrow_cards.png",
        VIEWS["card"],
        columns=5,
        title="Lattice Intersections of y = x² / a  (a = 1² … 25²)",
        out_dir=out_dir,
    )


def diagram_wide_cards(out_dir=None):
    """Perfect squares 32² to 56² on the wide view."""
    return diagram_card_grid(
        CARD_SETS["wide"],
        "wide_cards.png",
        VIEWS["wide"],
        columns=3,
        title="Lattice Intersections of y = x² / a  (a = 32² … 56²)",
        out_dir=out_dir,
    )


# ---------------------------------------------------------------------------
# Single parabola
# ---------------------------------------------------------------------------


def diagram_single(a, view=None, out_dir=None):
    """One large diagram of y = x²/a with every lattice point labelled."""
    view = view or VIEWS["card"]
    validate_parameter(a)
    validate_range(*view)

    fig = plt.figure(figsize=(8, 6), facecolor=STYLE["bg"])
    ax = fig.add_subplot(111)
    setup_axes(
        ax,
        xlim=(view.x_min, view.x_max),
        ylim=(view.y_min, view.y_max),
    )
    ax.axhline(0, color=STYLE["axis"], lw=1.0, alpha=0.7)
    ax.axvline(0, color=STYLE["axis"], lw=1.0, alpha=0.7)

    try:
        result = draw_parabola(ax, a, STYLE["accent1"], view)
    except InvalidArgument:
        plt.close(fig)
        raise

    ax.set_title(
        f"y = x² / {a}",
        color=STYLE["text"],
        fontsize=14,
        fontweight="bold",
        pad=12,
    )
    ax.set_xlabel("x", color=STYLE["axis"], fontsize=10)
    ax.set_ylabel("y", color=STYLE["axis"], fontsize=10)
    ax.text(
        0.02,
        0.97,
        f"{sqrt_label(a)}\n{len(result.lattice_points)} intersections",
        transform=ax.transAxes,
        color=STYLE["text_dim"],
        fontsize=9,
        va="top",
    )

    fig.tight_layout()
    return save(fig, f"parabola_a{a}.png", out_dir)
