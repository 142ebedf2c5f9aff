# state_space/algorithms/greedy.py
from __future__ import annotations
from typing import Optional
from ..core.frontiers import PriorityQueue
from ..core.metrics import SearchResult
from ..core.problem import HeuristicStateSpace, State
from .graph_search import frontier_search

def greedy_best_first_search(
    space: HeuristicStateSpace,
    init: State,
    goal: State,
    *,
    max_expansions: Optional[int] = None,
    trace_memory: bool = False,
) -> SearchResult:
    # greedy: f = h, accumulated cost is ignored
    frontier = PriorityQueue(key=lambda s: space.heuristic(s, goal))
    return frontier_search(space, init, goal, frontier, "Greedy",
                           max_expansions=max_expansions, trace_memory=trace_memory)
