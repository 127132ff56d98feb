from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

BAR_COLOR = "#0b7fa2"
LABEL_COLOR = "#163238"
BAR_AREA_FRACTION = 0.8  # leave room right of the longest bar for its label


def _plain(v: float) -> str:
    return str(int(v)) if v.is_integer() else repr(v)


def draw_breakdown_chart(breakdown: Mapping[str, float], ax: Optional[Axes] = None) -> Figure:
    """Draw one horizontal bar per category, first category on top.

    Bars are scaled against the largest value (at least 1), so an all-zero
    breakdown draws empty bars instead of dividing by zero.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 0.5 * max(len(breakdown), 1) + 1))
    else:
        fig = ax.figure

    labels = list(breakdown.keys())
    values = [float(v) for v in breakdown.values()]
    vmax = max(values + [1.0])

    ax.clear()
    widths = [(v / vmax) * BAR_AREA_FRACTION for v in values]
    ypos = list(range(len(labels)))
    ax.barh(ypos, widths, height=0.6, color=BAR_COLOR)
    for y, w, label, v in zip(ypos, widths, labels, values):
        ax.text(
            max(w, 0.0) + 0.01,
            y,
            f"{label} — {_plain(v)} kg",
            va="center",
            ha="left",
            color=LABEL_COLOR,
            fontsize=9,
        )

    ax.set_xlim(0, 1)
    ax.set_ylim(len(labels) - 0.5, -0.5)  # first category on top
    ax.set_axis_off()
    return fig


@contextmanager
def breakdown_figure(breakdown: Mapping[str, float]) -> Iterator[Figure]:
    """Yield a drawn breakdown chart; the figure is closed on exit, even on error."""
    fig, ax = plt.subplots(figsize=(8, 0.5 * max(len(breakdown), 1) + 1))
    try:
        draw_breakdown_chart(breakdown, ax=ax)
        yield fig
    finally:
        plt.close(fig)
