# tests/test_cli.py

import pytest

from billiards import cli
from billiards.config import ROOT_ENV


def _run(capsys, *argv):
    rc = cli.main(list(argv))
    out = capsys.readouterr()
    return rc, out.out, out.err


def test_check_valid(capsys):
    rc, out, _ = _run(capsys, "check", "1/2", "1/4", "--turns", "2")
    assert rc == 0
    assert "max turns = 3" in out
    assert "turns [2]: valid" in out


def test_check_invalid(capsys):
    rc, out, _ = _run(capsys, "check", "1/2", "0.5", "--turns=-2")
    assert rc == 0
    assert "turns [-2]: invalid" in out


def test_check_degenerate_apex(capsys):
    rc, _, err = _run(capsys, "check", "1", "0", "--turns", "1")
    assert rc == 1
    assert err.startswith("error:")


def test_bad_turns_is_usage_error(capsys):
    with pytest.raises(SystemExit) as e:
        cli.main(["check", "1/2", "1/4", "--turns", "1,x"])
    assert e.value.code == 2


def test_bad_grid_density_is_usage_error(tmp_path, capsys):
    with pytest.raises(SystemExit):
        cli.main(["--root", str(tmp_path), "pointset", "create", "demo", "-c", "3", "-g", "1"])


def test_pointset_lifecycle(tmp_path, capsys):
    root = ["--root", str(tmp_path)]

    rc, _, err = _run(capsys, *root, "pointset", "create", "demo", "-c", "5", "-g", "6", "--seed", "3")
    assert rc == 0
    assert "saved 5 points as 'demo'" in err
    assert (tmp_path / "data" / "point_set" / "demo.json").is_file()

    rc, _, err = _run(capsys, *root, "pointset", "create", "demo", "-c", "5")
    assert rc == 1
    assert "already exists" in err

    rc, out, _ = _run(capsys, *root, "pointset", "list")
    assert rc == 0
    assert "| demo " in out

    rc, out, _ = _run(capsys, *root, "pointset", "print", "demo")
    assert rc == 0
    lines = out.strip().splitlines()
    assert len(lines) == 5
    for line in lines:
        x, y = map(float, line.split(","))
        assert 0 < x < 1 and 0 < y < 0.5

    rc, _, _ = _run(capsys, *root, "pointset", "delete", "demo")
    assert rc == 0
    rc, _, err = _run(capsys, *root, "pointset", "print", "demo")
    assert rc == 1
    assert "no point set named 'demo'" in err


def test_root_from_environment(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv(ROOT_ENV, str(tmp_path))
    rc, _, _ = _run(capsys, "pointset", "create", "envset", "-c", "2", "--seed", "1")
    assert rc == 0
    assert (tmp_path / "data" / "point_set" / "envset.json").is_file()


def test_pointset_plot(tmp_path, capsys):
    pytest.importorskip("numpy")
    pytest.importorskip("matplotlib")
    root = ["--root", str(tmp_path)]
    _run(capsys, *root, "pointset", "create", "demo", "-c", "20", "-g", "10", "--seed", "7")

    rc, _, err = _run(capsys, *root, "pointset", "plot", "demo", "--turns", "1")
    assert rc == 0
    assert "of 20 points pass turns [1]" in err
    assert (tmp_path / "data" / "plots" / "demo.png").is_file()
    assert (tmp_path / "data" / "plots" / "demo.csv").is_file()
    assert (tmp_path / "data" / "plot.png").is_file()


def test_check_near_base_reports_capped_bound(capsys):
    rc, out, _ = _run(capsys, "check", "1/2", "1/4096", "--turns", "1")
    assert rc == 0
    assert "B0: generator" in out
    assert "max turns >= 64" in out
    assert "turns [1]:" in out


def test_pointset_plot_partitions_by_turns(tmp_path, monkeypatch, capsys):
    from fractions import Fraction as F

    from billiards.core.vector import V2
    from billiards.data.point_set import Manager
    from billiards.diagnostics import plot

    calls = {}

    def fake_plot(paths, name, points, *, excluded, png_path):
        calls["points"] = list(points)
        calls["excluded"] = list(excluded)
        return tmp_path / "fake.png"

    monkeypatch.setattr(plot, "plot_point_set", fake_plot)
    obtuse, square = V2(F(1, 2), F(1, 4)), V2(F(1, 2), F(1, 2))
    Manager(tmp_path / "data" / "point_set").save("demo", [square, obtuse])

    rc, _, err = _run(capsys, "--root", str(tmp_path), "pointset", "plot", "demo", "--turns", "2")
    assert rc == 0
    assert "1 of 2 points pass turns [2]" in err
    assert calls == {"points": [obtuse], "excluded": [square]}
