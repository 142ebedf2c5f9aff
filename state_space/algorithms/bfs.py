from __future__ import annotations
from typing import Optional
from ..core.frontiers import FIFOQueue
from ..core.metrics import SearchResult
from ..core.problem import StateSpace, State
from .graph_search import frontier_search

def breadth_first_search(
    space: StateSpace,
    init: State,
    goal: State,
    *,
    max_expansions: Optional[int] = None,
    trace_memory: bool = False,
) -> SearchResult:
    """Level-by-level expansion; returns a path with the fewest edges."""
    return frontier_search(space, init, goal, FIFOQueue(), "BFS",
                           max_expansions=max_expansions, trace_memory=trace_memory)
