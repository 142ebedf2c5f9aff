# state_space/cli.py
"""
Command-line driver: run one of the searches on a built-in example space.

    state-space maze --algorithm astar --animate
    state-space maze --file my_maze.txt --start 1 1 --goal 9 5
    state-space knight --algorithm bfs --start 0 0 --goal 7 7
    state-space romania --algorithm dijkstra --start Arad --goal Bucharest

Exit status is 0 when a path was found, 1 when the goal is unreachable or the
expansion budget ran out.
"""
from __future__ import annotations
import argparse
import random
import sys
from typing import List, Optional

from .algorithms.registry import ALGORITHMS, supports
from .core.config import configure_logging, load_settings
from .problems.knight import KnightMove
from .problems.maze import DEMO_GOAL, DEMO_MAZE, DEMO_START, Maze, load_maze
from .problems.romania import romania_problem


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--algorithm", choices=sorted(ALGORITHMS), default=None,
                        help="search strategy (default: astar, or bfs on spaces without costs)")
    common.add_argument("--seed", type=int, default=None, help="seed for random search")
    common.add_argument("--max-expansions", type=int, default=None,
                        help="give up after this many expansions")
    common.add_argument("--log-level", type=str.upper, default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="logging level")

    ap = argparse.ArgumentParser(prog="state-space", description="State-space search over example problems.")
    sub = ap.add_subparsers(dest="problem", required=True)

    maze = sub.add_parser("maze", parents=[common], help="find a route through a text maze")
    maze.add_argument("--file", default=None, help="maze text file ('X' = wall); default: built-in maze")
    maze.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), default=None)
    maze.add_argument("--goal", type=int, nargs=2, metavar=("X", "Y"), default=None)
    maze.add_argument("--animate", action="store_true", help="print the frontier after every expansion")
    maze.add_argument("--no-color", action="store_true", help="plain ASCII rendering")

    knight = sub.add_parser("knight", parents=[common], help="knight moves on a chess board")
    knight.add_argument("--size", type=int, nargs=2, metavar=("W", "H"), default=(8, 8))
    knight.add_argument("--start", type=int, nargs=2, metavar=("I", "J"), default=(0, 0))
    knight.add_argument("--goal", type=int, nargs=2, metavar=("I", "J"), default=None)

    romania = sub.add_parser("romania", parents=[common], help="AIMA Romania road map")
    romania.add_argument("--start", default="Arad")
    romania.add_argument("--goal", default="Bucharest")
    return ap


def _maze_case(args, ap):
    kwargs = dict(animate=args.animate, color=not args.no_color)
    try:
        space = load_maze(args.file, **kwargs) if args.file else Maze.from_string(DEMO_MAZE, **kwargs)
    except (ValueError, OSError) as e:
        ap.error(str(e))
    start = tuple(args.start) if args.start else DEMO_START
    goal = tuple(args.goal) if args.goal else DEMO_GOAL
    for label, cell in (("start", start), ("goal", goal)):
        if not space.is_open(cell):
            ap.error(f"{label} {cell} is a wall or outside the maze")
    return space, start, goal


def _knight_case(args, ap):
    try:
        space = KnightMove(tuple(args.size))
    except ValueError as e:
        ap.error(str(e))
    start = tuple(args.start)
    goal = tuple(args.goal) if args.goal else (args.size[0] - 1, args.size[1] - 1)
    for label, sq in (("start", start), ("goal", goal)):
        if not space.is_in_board(sq):
            ap.error(f"{label} {sq} is off the board")
    return space, start, goal


def _romania_case(args, ap):
    space = romania_problem()
    for label, city in (("start", args.start), ("goal", args.goal)):
        if city not in space.data.graph:
            ap.error(f"unknown {label} city {city!r}")
    return space, args.start, args.goal


def main(argv: Optional[List[str]] = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)
    try:
        settings = load_settings()
    except ValueError as e:
        ap.error(str(e))
    configure_logging(args.log_level or settings.log_level)

    space, start, goal = {"maze": _maze_case, "knight": _knight_case, "romania": _romania_case}[args.problem](args, ap)

    name = args.algorithm or ("astar" if supports(space, "astar") else "bfs")
    if not supports(space, name):
        ap.error(f"{name} needs edge costs or a heuristic, which the {args.problem} space does not provide")

    entry = ALGORITHMS[name]
    kwargs = dict(max_expansions=args.max_expansions if args.max_expansions is not None else settings.max_expansions,
                  trace_memory=settings.trace_memory)
    if name == "random":
        seed = args.seed if args.seed is not None else settings.seed
        kwargs["rng"] = random.Random(seed)

    result = entry.run(space, start, goal, **kwargs)

    if not result.success:
        print(f"{entry.label}: no path from {start!r} to {goal!r} ({result.error}); "
              f"expanded {result.nodes_expanded} states")
        return 1

    print(f"Steps found from {start!r} to {goal!r} using {entry.label}:")
    if isinstance(space, Maze):
        print(space.draw_maze_path(result.path))
    else:
        print(result.path)
    print(f"length={result.length} cost={result.cost:g} expanded={result.nodes_expanded} time={result.time_s:.4f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
