"""
Rendering point sets: a CSV dump plus a PNG scatter drawn with matplotlib.

The axes frame the region where obtuse apexes live: x in [0, 1], y in
[0, 0.625], with the bounding half-disk over the base drawn behind the points.
"""
from __future__ import annotations

import csv
import logging
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

from ..config import PLOT_LINE_WEIGHT, PLOT_POINT_SIZE, DataPaths
from ..core.vector import V2

log = logging.getLogger(__name__)


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "billiards-unfold[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "billiards-unfold[diagnostics]"') from e


@dataclass(frozen=True)
class PlotSpec:
    name: str
    png_path: Path
    line_weight: float = PLOT_LINE_WEIGHT
    point_size: float = PLOT_POINT_SIZE
    color: str = "#666699"


def save_points_as_csv(points: Iterable[V2], file_path: Path) -> int:
    n = 0
    with Path(file_path).open("w", encoding="utf-8", newline="") as f:
        w = csv.writer(f)
        for p in points:
            w.writerow(p.to_float())
            n += 1
    return n


def render(spec: PlotSpec, points: Sequence[V2], excluded: Sequence[V2] = ()) -> Path:
    np = _need_numpy()
    plt = _need_matplotlib()
    from matplotlib.patches import Circle

    fig, ax = plt.subplots(figsize=(16, 10), constrained_layout=True)
    try:
        ax.set_axisbelow(True)
        ax.grid(True, which="major", color="0.88", linewidth=0.7)
        ax.set_xlim(0.0, 1.0)
        ax.set_ylim(0.0, 0.625)
        ax.set_aspect("equal")
        ax.add_patch(Circle((0.5, 0.0), 0.5, facecolor="0.95", edgecolor="0.7", zorder=0))

        if len(excluded):
            xy = np.array([p.to_float() for p in excluded], dtype=float)
            ax.scatter(xy[:, 0], xy[:, 1], s=spec.point_size * 6, facecolors="none",
                       edgecolors="0.8", linewidths=spec.line_weight * 0.25, label="excluded")
        if len(points):
            xy = np.array([p.to_float() for p in points], dtype=float)
            ax.scatter(xy[:, 0], xy[:, 1], s=spec.point_size * 12, facecolors="none",
                       edgecolors=spec.color, linewidths=spec.line_weight * 0.5, label=spec.name)

        ax.legend(loc="upper left", frameon=True)
        ax.set_title(f"{spec.name} ({len(points)} points)")
        spec.png_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(spec.png_path, dpi=100)
    finally:
        plt.close(fig)
    log.debug("wrote %s", spec.png_path)
    return spec.png_path


def plot_point_set(
    paths: DataPaths,
    name: str,
    points: Sequence[V2],
    *,
    excluded: Sequence[V2] = (),
    png_path: Optional[Path] = None,
) -> Path:
    """
    Write data/plots/<name>.csv and the PNG, then copy the PNG to
    data/plot.png, where the most recent plot is always kept.
    """
    paths.plots.mkdir(parents=True, exist_ok=True)
    csv_path = paths.plots / f"{name}.csv"
    save_points_as_csv(points, csv_path)

    png_path = Path(png_path) if png_path else csv_path.with_suffix(".png")
    render(PlotSpec(name=name, png_path=png_path), points, excluded)

    try:
        shutil.copyfile(png_path, paths.latest_plot)
    except OSError as e:
        print(f"warning: completed plot couldn't be copied to {paths.latest_plot} ({e}), "
              f"check {paths.plots}", file=sys.stderr)
    return png_path
