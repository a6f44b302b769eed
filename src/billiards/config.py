"""
Locating the data root.

Search order:
  1) explicit path (the CLI's --root)
  2) BILLIARDS_ROOT environment variable
  3) nearest ancestor of the working directory holding a `.billiards_root` file

Below the root, all data lives in `data/`:
  data/point_set/<name>.json
  data/plots/<name>.csv, data/plots/<name>.png
  data/plot.png   (copy of the most recent plot)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .core.errors import RootNotFoundError

ROOT_MARKER = ".billiards_root"
ROOT_ENV = "BILLIARDS_ROOT"

DEFAULT_GRID_DENSITY = 32
# turn bounds above this are reported as a lower bound by `billiards check`
CHECK_TURN_LIMIT = 64
PLOT_LINE_WEIGHT = 2.0
PLOT_POINT_SIZE = 1.4


def find_root_from_path(path: Path) -> Optional[Path]:
    path = path.resolve()
    for candidate in (path, *path.parents):
        if (candidate / ROOT_MARKER).is_file():
            return candidate
    return None


def find_root(explicit: Optional[Union[str, Path]] = None) -> Path:
    if explicit:
        return Path(explicit).expanduser()

    env = os.environ.get(ROOT_ENV, "").strip()
    if env:
        return Path(env).expanduser()

    root = find_root_from_path(Path.cwd())
    if root is None:
        raise RootNotFoundError(
            f"Couldn't find the file '{ROOT_MARKER}' in this directory or any of its "
            f"ancestors. Set {ROOT_ENV} to a valid path to use this program outside "
            "the repository directory."
        )
    return root


@dataclass(frozen=True)
class DataPaths:
    root: Path

    @property
    def data(self) -> Path:
        return self.root / "data"

    @property
    def point_sets(self) -> Path:
        return self.data / "point_set"

    @property
    def plots(self) -> Path:
        return self.data / "plots"

    @property
    def latest_plot(self) -> Path:
        return self.data / "plot.png"
