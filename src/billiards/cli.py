from __future__ import annotations

import argparse
import logging
import random
import sys
from fractions import Fraction
from typing import List, Optional

from .config import CHECK_TURN_LIMIT, DEFAULT_GRID_DENSITY, DataPaths, find_root
from .core.errors import BilliardsError
from .core.singularity import BaseSingularity
from .core.vector import V2


def _parse_fraction(s: str) -> Fraction:
    try:
        return Fraction(s.strip())
    except (ValueError, ZeroDivisionError):
        raise argparse.ArgumentTypeError(f"expected a rational number like 1/3 or 0.25, got {s!r}")


def _parse_turns(s: str):
    from .unfold.turns import parse_turns

    try:
        return parse_turns(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _non_negative(s: str) -> int:
    try:
        v = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError("expected integer")
    if v < 0:
        raise argparse.ArgumentTypeError("expected a non-negative integer")
    return v


def _grid_density(s: str) -> int:
    v = _non_negative(s)
    if v < 2:
        raise argparse.ArgumentTypeError("grid density must be at least 2")
    return v


def _manager(args: argparse.Namespace):
    from .data.point_set import Manager

    paths = DataPaths(find_root(args.root))
    return paths, Manager(paths.point_sets)


# -------- pointset --------
def cmd_pointset_create(args: argparse.Namespace) -> int:
    from .data.point_set import random_from_grid

    _, manager = _manager(args)
    rng = random.Random(args.seed)
    points = random_from_grid(args.grid_density, args.count, rng=rng)
    info = manager.save(args.name, points, overwrite=args.overwrite, grid_density=args.grid_density)
    print(f"saved {info.count} points as '{info.name}'", file=sys.stderr)
    return 0


def cmd_pointset_list(args: argparse.Namespace) -> int:
    from .diagnostics.tabulator import Tabulator

    _, manager = _manager(args)
    table = Tabulator(["name", "count", "created"])
    for info in manager.list():
        table.append([info.name, info.count, info.created.strftime("%a, %d %b %Y %H:%M:%S %z")])
    table.display()
    return 0


def cmd_pointset_print(args: argparse.Namespace) -> int:
    _, manager = _manager(args)
    point_set = manager.load(args.name)
    for p in point_set.points:
        x, y = p.to_float()
        print(f"{x},{y}")
    return 0


def cmd_pointset_plot(args: argparse.Namespace) -> int:
    from .diagnostics.plot import plot_point_set
    from .unfold.validity import filter_valid

    paths, manager = _manager(args)
    point_set = manager.load(args.name)

    points: List[V2] = point_set.points
    excluded: List[V2] = []
    if args.turns is not None:
        kept = set(filter_valid(points, args.turns))
        excluded = [p for p in points if p not in kept]
        points = [p for p in points if p in kept]
        print(f"{len(points)} of {len(point_set.points)} points pass turns {list(args.turns)}", file=sys.stderr)

    png = plot_point_set(paths, args.name, points, excluded=excluded, png_path=args.out)
    print(f"wrote {png}", file=sys.stderr)
    return 0


def cmd_pointset_delete(args: argparse.Namespace) -> int:
    _, manager = _manager(args)
    manager.delete(args.name)
    print(f"deleted point set '{args.name}'", file=sys.stderr)
    return 0


# -------- check --------
def cmd_check(args: argparse.Namespace) -> int:
    from .unfold.params import Params
    from .unfold.validity import is_valid

    apex = V2(args.x, args.y)
    limit = max([CHECK_TURN_LIMIT] + [abs(t) for t in args.turns])
    params = Params(apex, turn_limit=limit)
    print(f"apex      = ({args.x}, {args.y})")
    for s in BaseSingularity:
        g = params.turn_vec(s, 1)
        bound = params.max_turn_around(s)
        shown = f">= {bound}" if bound == limit else f"= {bound}"
        print(f"  {s.name}: generator = ({g.re}, {g.im}), max turns {shown}")
    verdict = is_valid(apex, args.turns)
    print(f"turns {list(args.turns)}: {'valid' if verdict else 'invalid'}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="billiards", description="Unfolding explorer for obtuse triangular billiards.")
    p.add_argument("--root", default=None, help="data root (default: $BILLIARDS_ROOT or nearest .billiards_root)")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    # pointset
    p_ps = sub.add_parser("pointset", help="Manipulates sets of random points")
    ps = p_ps.add_subparsers(dest="pointset_cmd", required=True)

    p_create = ps.add_parser("create", help="Creates a new random point set")
    p_create.add_argument("name", help="The name of the new point set")
    p_create.add_argument("-c", "--count", type=_non_negative, required=True, help="The number of random points to generate")
    p_create.add_argument("-g", "--grid-density", type=_grid_density, default=DEFAULT_GRID_DENSITY,
                          metavar="DENSITY", help="The density of the generating grid, in log base 2")
    p_create.add_argument("-o", "--overwrite", action="store_true", help="Overwrite this set if it already exists")
    p_create.add_argument("--seed", type=int, default=None, help="Random seed")
    p_create.set_defaults(func=cmd_pointset_create)

    p_list = ps.add_parser("list", help="Lists all point sets")
    p_list.set_defaults(func=cmd_pointset_list)

    p_print = ps.add_parser("print", help="Prints a specified point set")
    p_print.add_argument("name", help="The name of the point set to print")
    p_print.set_defaults(func=cmd_pointset_print)

    p_plot = ps.add_parser("plot", help="Plots a specified point set")
    p_plot.add_argument("name", help="The name of the point set to plot")
    p_plot.add_argument("--turns", type=_parse_turns, default=None, help='Only keep apexes valid for these turns, e.g. "1,-2"')
    p_plot.add_argument("--out", default=None, help="PNG path (default: data/plots/<name>.png)")
    p_plot.set_defaults(func=cmd_pointset_plot)

    p_delete = ps.add_parser("delete", help="Deletes a point set")
    p_delete.add_argument("name", help="The name of the point set to delete")
    p_delete.set_defaults(func=cmd_pointset_delete)

    # check
    p_check = sub.add_parser("check", help="Test one apex against a turn sequence")
    p_check.add_argument("x", type=_parse_fraction, help="apex x (e.g. 1/3)")
    p_check.add_argument("y", type=_parse_fraction, help="apex y (e.g. 1/4)")
    p_check.add_argument("--turns", type=_parse_turns, required=True, help='e.g. "1,-2,3"')
    p_check.set_defaults(func=cmd_check)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")

    try:
        return int(args.func(args) or 0)
    except BilliardsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
