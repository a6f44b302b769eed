"""
billiards.data.point_set
------------------------
Named collections of apex points stored as JSON under data/point_set/.

Coordinates are written as "p/q" strings so exact values survive a round trip.
"""
from __future__ import annotations

import json
import logging
import random
import re
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from fractions import Fraction
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional

from ..core.errors import (
    CorruptPointSetError,
    InvalidPointSetNameError,
    PointSetExistsError,
    PointSetNotFoundError,
)
from ..core.vector import V2

log = logging.getLogger(__name__)

_NAME_RE = re.compile(r"[A-Za-z0-9_-][A-Za-z0-9_.-]*")


@dataclass(frozen=True)
class PointSetInfo:
    name: str
    count: int
    created: datetime
    grid_density: Optional[int] = None


@dataclass(frozen=True)
class PointSet:
    name: str
    created: datetime
    points: List[V2]
    grid_density: Optional[int] = None

    @property
    def info(self) -> PointSetInfo:
        return PointSetInfo(self.name, len(self.points), self.created, self.grid_density)


def random_from_grid(grid_density: int, count: int, *, rng: Optional[random.Random] = None) -> Iterator[V2]:
    """
    Yield `count` random obtuse-triangle apexes on the grid of step 2**-grid_density.

    A point is kept when it lies strictly inside the upper half-disk with the
    base [0, 1] as diameter, which is where the apex angle exceeds 90 degrees.
    """
    if grid_density < 2:
        raise ValueError("grid_density must be at least 2")
    if count < 0:
        raise ValueError("count must be non-negative")
    rng = rng or random.Random()

    scale = 1 << grid_density
    half = scale // 2
    produced = 0
    while produced < count:
        i = rng.randrange(1, scale)
        j = rng.randrange(1, half + 1)
        # (i/scale - 1/2)^2 + (j/scale)^2 < 1/4, scaled by scale^2
        if (2 * i - scale) ** 2 + 4 * j * j < scale * scale:
            produced += 1
            yield V2(Fraction(i, scale), Fraction(j, scale))


def _encode_point(p: V2) -> List[str]:
    return [str(Fraction(p.re)), str(Fraction(p.im))]


def _decode_point(raw: Any) -> V2:
    re_s, im_s = raw
    return V2(Fraction(re_s), Fraction(im_s))


class Manager:
    """File-backed store of point sets, one JSON file per set."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _file(self, name: str) -> Path:
        if not _NAME_RE.fullmatch(name):
            raise InvalidPointSetNameError(f"invalid point set name '{name}'")
        return self.path / f"{name}.json"

    def exists(self, name: str) -> bool:
        return self._file(name).is_file()

    def save(
        self,
        name: str,
        points: Iterable[V2],
        *,
        overwrite: bool = False,
        grid_density: Optional[int] = None,
    ) -> PointSetInfo:
        file_path = self._file(name)
        if file_path.exists() and not overwrite:
            raise PointSetExistsError(f"point set '{name}' already exists (use overwrite)")

        pts = list(points)
        created = datetime.now(timezone.utc).replace(microsecond=0)
        doc: Dict[str, Any] = {
            "name": name,
            "created": created.isoformat(),
            "count": len(pts),
            "grid_density": grid_density,
            "points": [_encode_point(p) for p in pts],
        }
        self.path.mkdir(parents=True, exist_ok=True)
        tmp = file_path.with_suffix(".json.tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(doc, f, indent=1)
        tmp.replace(file_path)
        log.debug("saved %d points to %s", len(pts), file_path)
        return PointSetInfo(name, len(pts), created, grid_density)

    def _read(self, file_path: Path) -> Dict[str, Any]:
        try:
            with file_path.open("r", encoding="utf-8") as f:
                doc = json.load(f)
        except FileNotFoundError:
            raise PointSetNotFoundError(f"no point set named '{file_path.stem}'") from None
        except (OSError, json.JSONDecodeError) as e:
            raise CorruptPointSetError(f"couldn't read {file_path}: {e}") from e
        if not isinstance(doc, dict):
            raise CorruptPointSetError(f"{file_path}: expected a JSON object")
        return doc

    @staticmethod
    def _created(doc: Dict[str, Any], file_path: Path) -> datetime:
        try:
            return datetime.fromisoformat(doc["created"])
        except (KeyError, TypeError, ValueError) as e:
            raise CorruptPointSetError(f"{file_path}: bad 'created' field") from e

    def load(self, name: str) -> PointSet:
        file_path = self._file(name)
        doc = self._read(file_path)
        try:
            points = [_decode_point(raw) for raw in doc["points"]]
        except (KeyError, TypeError, ValueError, ZeroDivisionError) as e:
            raise CorruptPointSetError(f"{file_path}: bad 'points' field") from e
        log.debug("loaded %d points from %s", len(points), file_path)
        return PointSet(
            name=doc.get("name", name),
            created=self._created(doc, file_path),
            points=points,
            grid_density=doc.get("grid_density"),
        )

    def list(self) -> List[PointSetInfo]:
        """Summaries of every readable set; unreadable files are skipped with a warning."""
        if not self.path.is_dir():
            return []
        out = []
        for file_path in self.path.glob("*.json"):
            try:
                info = self._info(file_path)
            except CorruptPointSetError as e:
                log.debug("skipping %s", file_path, exc_info=True)
                print(f"warning: skipping {e}", file=sys.stderr)
                continue
            out.append(info)
        out.sort(key=lambda info: info.name.lower())
        return out

    def _info(self, file_path: Path) -> PointSetInfo:
        doc = self._read(file_path)
        count = doc.get("count")
        try:
            count = int(count) if count is not None else len(doc.get("points", []))
        except (TypeError, ValueError) as e:
            raise CorruptPointSetError(f"{file_path}: bad 'count' field") from e
        return PointSetInfo(
            name=doc.get("name", file_path.stem),
            count=count,
            created=self._created(doc, file_path),
            grid_density=doc.get("grid_density"),
        )

    def delete(self, name: str) -> None:
        file_path = self._file(name)
        try:
            file_path.unlink()
        except FileNotFoundError:
            raise PointSetNotFoundError(f"no point set named '{name}'") from None
        log.debug("deleted %s", file_path)
