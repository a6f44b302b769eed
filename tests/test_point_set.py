# tests/test_point_set.py

import json
import random
import pytest
from fractions import Fraction as F

from billiards.core.errors import (
    CorruptPointSetError,
    InvalidPointSetNameError,
    PointSetExistsError,
    PointSetNotFoundError,
)
from billiards.core.vector import V2
from billiards.data.point_set import Manager, random_from_grid


@pytest.fixture
def manager(tmp_path):
    return Manager(tmp_path / "data" / "point_set")


def test_random_points_are_obtuse_apexes():
    pts = list(random_from_grid(8, 200, rng=random.Random(1)))
    assert len(pts) == 200
    for p in pts:
        assert isinstance(p.re, F) and isinstance(p.im, F)
        assert 256 % p.re.denominator == 0
        assert 256 % p.im.denominator == 0
        assert p.im > 0
        assert (p.re - F(1, 2)) ** 2 + p.im ** 2 < F(1, 4)


def test_random_points_reproducible():
    a = list(random_from_grid(16, 20, rng=random.Random(42)))
    b = list(random_from_grid(16, 20, rng=random.Random(42)))
    assert a == b
    assert list(random_from_grid(16, 0)) == []


def test_random_points_bad_arguments():
    with pytest.raises(ValueError):
        list(random_from_grid(1, 5))
    with pytest.raises(ValueError):
        list(random_from_grid(8, -1))


def test_save_load_roundtrip_is_exact(manager):
    pts = [V2(F(1, 3), F(1, 7)), V2(F(5, 8), F(1, 4))]
    info = manager.save("demo", pts, grid_density=3)
    assert info.name == "demo"
    assert info.count == 2
    assert manager.exists("demo")

    loaded = manager.load("demo")
    assert loaded.points == pts
    assert loaded.grid_density == 3
    assert loaded.info.count == 2
    assert loaded.created == info.created

    doc = json.loads((manager.path / "demo.json").read_text(encoding="utf-8"))
    assert doc["points"][0] == ["1/3", "1/7"]
    assert doc["count"] == 2


def test_overwrite_is_explicit(manager):
    manager.save("demo", [V2(F(1, 2), F(1, 4))])
    with pytest.raises(PointSetExistsError):
        manager.save("demo", [])
    info = manager.save("demo", [], overwrite=True)
    assert info.count == 0
    assert manager.load("demo").points == []


def test_list_sorted_case_insensitive(manager):
    assert manager.list() == []
    for name in ("gamma", "Beta", "alpha"):
        manager.save(name, [V2(F(1, 2), F(1, 4))])
    infos = manager.list()
    assert [i.name for i in infos] == ["alpha", "Beta", "gamma"]
    assert all(i.count == 1 for i in infos)


def test_delete(manager):
    manager.save("demo", [])
    manager.delete("demo")
    assert not manager.exists("demo")
    with pytest.raises(PointSetNotFoundError):
        manager.load("demo")
    with pytest.raises(PointSetNotFoundError):
        manager.delete("demo")


@pytest.mark.parametrize("name", ["../escape", ".hidden", "a/b", "", "demo\n"])
def test_invalid_names(manager, name):
    with pytest.raises(InvalidPointSetNameError):
        manager.save(name, [])


def test_corrupt_file(manager):
    manager.path.mkdir(parents=True)
    (manager.path / "bad.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(CorruptPointSetError):
        manager.load("bad")

    (manager.path / "bad.json").write_text(
        json.dumps({"created": "2020-01-01T00:00:00+00:00", "points": [["1/0", "1"]]}),
        encoding="utf-8",
    )
    with pytest.raises(CorruptPointSetError):
        manager.load("bad")


def test_list_skips_corrupt_files(manager, capsys):
    manager.save("good", [V2(F(1, 2), F(1, 4))])
    (manager.path / "broken.json").write_text("{not json", encoding="utf-8")
    (manager.path / "nodate.json").write_text(json.dumps({"points": []}), encoding="utf-8")

    infos = manager.list()
    assert [i.name for i in infos] == ["good"]
    err = capsys.readouterr().err
    assert "warning: skipping" in err
    assert "broken.json" in err
    assert "nodate.json" in err
