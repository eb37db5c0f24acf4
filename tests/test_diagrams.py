"""Tests for the matplotlib rendering layer."""

import os

import matplotlib.pyplot as plt
import pytest

from lattice_diagrams._common import CARD_SETS, VIEWS, ViewRange, save
from lattice_diagrams.lattice import InvalidArgument
from lattice_diagrams.parabola_diagrams import (
    diagram_card_grid,
    diagram_single,
    draw_card,
    draw_parabola,
    sqrt_label,
)


@pytest.fixture
def ax():
    fig = plt.figure()
    yield fig.add_subplot(111)
    plt.close(fig)


def test_sqrt_label():
    """Perfect squares print an integer root, others two decimals."""
    assert sqrt_label(64) == "√a = 8"
    assert sqrt_label(2) == "√a = 1.41"


def test_card_sets_are_perfect_squares():
    """Both card sets hold 25 perfect squares."""
    assert CARD_SETS["narrow"][0] == 1
    assert CARD_SETS["narrow"][-1] == 625
    assert CARD_SETS["wide"][0] == 1024
    assert CARD_SETS["wide"][-1] == 3136
    for values in CARD_SETS.values():
        assert len(values) == 25


def test_draw_parabola_plots_curve_and_points(ax):
    """Curve and lattice dots are drawn and the result is returned."""
    result = draw_parabola(ax, 64, "white", VIEWS["card"])
    assert len(result.lattice_points) == 13
    assert len(ax.lines) == 2
    assert len(ax.texts) == 13


def test_draw_parabola_respects_label_limit(ax):
    """No coordinate labels when there are more points than the limit."""
    result = draw_parabola(ax, 1, "white", VIEWS["card"], label_limit=5)
    assert len(result.lattice_points) == 21
    assert len(ax.texts) == 0


def test_draw_card_degrades_on_invalid_parameter(ax):
    """An invalid parameter leaves a message on the card instead of raising."""
    assert draw_card(ax, 0, "white", VIEWS["card"]) is None
    assert any("invalid parameter" in t.get_text() for t in ax.texts)


def test_draw_card_labels(ax):
    """Cards show the formula and intersection count."""
    result = draw_card(ax, 16, "white", VIEWS["card"])
    assert ax.get_title() == "y = x² / 16"
    assert f"{len(result.lattice_points)} intersections" in ax.get_xlabel()


def test_diagram_single_writes_png(tmp_path):
    """A single parabola diagram is saved under the output directory."""
    out = diagram_single(64, VIEWS["wide"], out_dir=str(tmp_path))
    assert out == os.path.join(str(tmp_path), "parabola_a64.png")
    assert os.path.getsize(out) > 0


def test_diagram_single_raises_for_invalid_parameter(tmp_path):
    """The single diagram surfaces InvalidArgument to the caller."""
    with pytest.raises(InvalidArgument):
        diagram_single(-4, out_dir=str(tmp_path))
    assert not os.listdir(tmp_path)


def test_card_grid_writes_png(tmp_path, capsys):
    """A card grid is saved as one PNG and its path printed."""
    out = diagram_card_grid(
        [1, 2, 4, 9], "grid.png", ViewRange(-20, 20, 0, 40), columns=2, out_dir=str(tmp_path)
    )
    assert os.path.isfile(out)
    assert "grid.png" in capsys.readouterr().out


def test_save_creates_directory(tmp_path):
    """save() creates missing output directories."""
    fig = plt.figure()
    out = save(fig, "empty.png", out_dir=str(tmp_path / "nested" / "assets"))
    assert os.path.isfile(out)


def test_card_grid_flat_view(tmp_path):
    """A view with y_min == y_max still renders."""
    out = diagram_card_grid([4], "flat.png", ViewRange(-10, 10, 5, 5), out_dir=str(tmp_path))
    assert os.path.isfile(out)


def test_draw_card_degrades_on_non_finite_view(ax):
    """A NaN bound leaves a message on the card before any limits are set."""
    assert draw_card(ax, 4, "white", ViewRange(float("nan"), 10, 0, 100)) is None
    assert any("invalid parameter" in t.get_text() for t in ax.texts)


@pytest.mark.parametrize(
    "view",
    [ViewRange(float("nan"), 10, 0, 100), ViewRange(-10, 10, 0, float("inf"))],
)
def test_diagram_single_rejects_non_finite_view(tmp_path, view):
    """Non-finite bounds raise InvalidArgument without opening a figure."""
    before = plt.get_fignums()
    with pytest.raises(InvalidArgument):
        diagram_single(4, view, out_dir=str(tmp_path))
    assert plt.get_fignums() == before
    assert not os.listdir(tmp_path)


def test_draw_parabola_plots_sampled_curve(ax):
    """The curve line carries the sampler's points."""
    draw_parabola(ax, 1, "white", VIEWS["card"], label_limit=0)
    xs = ax.lines[0].get_xdata()
    assert len(xs) == 41
    assert xs[0] == -10.0
    assert xs[-1] == 10.0
