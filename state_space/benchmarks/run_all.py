# state_space/benchmarks/run_all.py
# Runs every registered algorithm that the chosen space supports and dumps the numbers to results.json.
from __future__ import annotations

import argparse
import json
import random
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..algorithms.registry import ALGORITHMS, supports
from ..core.config import load_settings
from ..core.metrics import SearchResult
from ..problems.grid import make_grid_problem
from ..problems.knight import KnightMove
from ..problems.maze import DEMO_GOAL, DEMO_MAZE, DEMO_START, Maze
from ..problems.romania import romania_problem

# Defaults when STATE_SPACE_SEED / STATE_SPACE_MAX_EXPANSIONS are unset.
DEFAULT_SEED = 0
DEFAULT_MAX_EXPANSIONS = 200_000  # keeps random/DFS bounded on the maze


def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"


def load_case(name: str) -> Tuple[Any, Any, Any]:
    """(space, init, goal) for one of the built-in problems."""
    if name == "maze":
        return Maze.from_string(DEMO_MAZE), DEMO_START, DEMO_GOAL
    if name == "grid":
        return make_grid_problem(), (0, 0), (4, 6)
    if name == "romania":
        return romania_problem(), "Arad", "Bucharest"
    if name == "knight":
        return KnightMove((8, 8)), (0, 0), (7, 7)
    raise ValueError(f"unknown benchmark problem {name!r}")


def run_all(
    space,
    init,
    goal,
    seed: int = DEFAULT_SEED,
    max_expansions: Optional[int] = DEFAULT_MAX_EXPANSIONS,
    trace_memory: bool = True,
) -> List[SearchResult]:
    results = []
    for key, entry in ALGORITHMS.items():
        if not supports(space, key):
            print(f"  Skipping {entry.label}: space lacks the required capability ({entry.requires})")
            continue
        kwargs: Dict[str, Any] = dict(max_expansions=max_expansions, trace_memory=trace_memory)
        if key == "random":
            kwargs["rng"] = random.Random(seed)
        print(f"→ Running {entry.label} ...")
        r = entry.run(space, init, goal, **kwargs)
        print(
            f"  {r.algo}: "
            f"{'OK' if r.success else 'FAIL'} "
            f"cost={r.cost} "
            f"expanded={r.nodes_expanded}, "
            f"time={_fmt_time(r.time_s)}s"
        )
        results.append(r)
    return results


def to_rows(results: List[SearchResult]) -> List[Dict[str, Any]]:
    return [
        {
            "algo": r.algo,
            "success": r.success,
            "cost": r.cost if r.success else None,
            "length": r.length if r.success else None,
            "nodes_expanded": r.nodes_expanded,
            "time_s": r.time_s,
            "peak_kb": r.peak_kb,
            "error": r.error,
        }
        for r in results
    ]


def main(argv=None):
    ap = argparse.ArgumentParser(description="Run every search algorithm on one example problem.")
    ap.add_argument("--problem", choices=["maze", "grid", "romania", "knight"], default="maze")
    ap.add_argument("--out", default=str(Path(__file__).with_name("results.json")), help="where to write JSON")
    args = ap.parse_args(argv)
    try:
        settings = load_settings()
    except ValueError as e:
        ap.error(str(e))

    space, init, goal = load_case(args.problem)
    results = run_all(
        space, init, goal,
        seed=DEFAULT_SEED if settings.seed is None else settings.seed,
        max_expansions=DEFAULT_MAX_EXPANSIONS if settings.max_expansions is None else settings.max_expansions,
        trace_memory=settings.trace_memory,
    )
    if not results:
        raise SystemExit("No algorithm applies to this problem.")

    out = {"problem": args.problem, "results": to_rows(results), "ts": time.time()}
    print(json.dumps(out, indent=2))
    Path(args.out).write_text(json.dumps(out, indent=2))
    return out


if __name__ == "__main__":
    main()
