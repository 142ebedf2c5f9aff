# state_space/algorithms/registry.py
# Name -> algorithm table used by the CLI and the benchmark runner.
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict

from .astar import a_star_search
from .bfs import breadth_first_search
from .dfs import depth_first_search
from .dijkstra import dijkstra
from .greedy import greedy_best_first_search
from .random_search import random_search

# Capability tier an algorithm needs from the space.
PLAIN, COST, HEURISTIC = "plain", "cost", "heuristic"


@dataclass(frozen=True)
class AlgorithmEntry:
    label: str
    run: Callable
    requires: str


ALGORITHMS: Dict[str, AlgorithmEntry] = {
    "random": AlgorithmEntry("Random", random_search, PLAIN),
    "bfs": AlgorithmEntry("BFS", breadth_first_search, PLAIN),
    "dfs": AlgorithmEntry("DFS", depth_first_search, PLAIN),
    "dijkstra": AlgorithmEntry("Dijkstra", dijkstra, COST),
    "greedy": AlgorithmEntry("Greedy", greedy_best_first_search, HEURISTIC),
    "astar": AlgorithmEntry("A*", a_star_search, HEURISTIC),
}


def tier_of(space) -> str:
    """Highest capability tier ``space`` provides, judged by the methods it has."""
    if callable(getattr(space, "heuristic", None)) and callable(getattr(space, "cost", None)):
        return HEURISTIC
    if callable(getattr(space, "cost", None)):
        return COST
    return PLAIN


def supports(space, name: str) -> bool:
    order = (PLAIN, COST, HEURISTIC)
    return order.index(tier_of(space)) >= order.index(ALGORITHMS[name].requires)
