# tests/test_plot.py

import pytest
from fractions import Fraction as F

from billiards.config import DataPaths
from billiards.core.vector import V2
from billiards.diagnostics import plot

POINTS = [V2(F(1, 2), F(1, 4)), V2(F(1, 4), F(1, 8))]


def test_csv_export(tmp_path):
    path = tmp_path / "pts.csv"
    assert plot.save_points_as_csv(POINTS, path) == 2
    assert path.read_text(encoding="utf-8").splitlines() == ["0.5,0.25", "0.25,0.125"]


def test_plot_point_set(tmp_path):
    pytest.importorskip("numpy")
    pytest.importorskip("matplotlib")
    paths = DataPaths(tmp_path)
    png = plot.plot_point_set(paths, "demo", POINTS[:1], excluded=POINTS[1:])
    assert png == paths.plots / "demo.png"
    assert png.stat().st_size > 0
    assert paths.latest_plot.read_bytes() == png.read_bytes()


def test_plot_empty_set(tmp_path):
    pytest.importorskip("numpy")
    pytest.importorskip("matplotlib")
    paths = DataPaths(tmp_path)
    png = plot.plot_point_set(paths, "empty", [], png_path=tmp_path / "out" / "empty.png")
    assert png.is_file()
