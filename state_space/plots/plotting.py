# state_space/plots/plotting.py
# One figure comparing several SearchResult objects on a 2x2 grid of bar charts.
from __future__ import annotations
from typing import Sequence

import matplotlib.pyplot as plt

from ..core.metrics import SearchResult

# (attribute, panel title); failed runs plot as 0 for cost
_PANELS = (
    ("nodes_expanded", "Nodes Expanded"),
    ("cost", "Path Cost"),
    ("time_s", "Time (s)"),
    ("peak_kb", "Peak Memory (KB)"),
)


def _value(r: SearchResult, attr: str) -> float:
    if attr == "cost" and not r.success:
        return 0.0
    return getattr(r, attr) or 0


def bar_compare(results: Sequence[SearchResult], title: str = "Search Comparison"):
    names = [r.algo if r.success else f"{r.algo} (failed)" for r in results]

    fig, axs = plt.subplots(2, 2, figsize=(11, 8))
    for ax, (attr, label) in zip(axs.ravel(), _PANELS):
        ax.bar(names, [_value(r, attr) for r in results])
        ax.set_title(label)
        ax.tick_params(axis="x", rotation=45)
    fig.suptitle(title)
    fig.tight_layout(rect=[0, 0, 1, 0.95])
    return fig
