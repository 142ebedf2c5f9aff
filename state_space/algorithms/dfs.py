# state_space/algorithms/dfs.py
# This code implements Depth-First Search (DFS) using a LIFO stack; the last neighbour listed is tried first.
from __future__ import annotations
from typing import Optional
from ..core.frontiers import LIFOStack
from ..core.metrics import SearchResult
from ..core.problem import StateSpace, State
from .graph_search import frontier_search

def depth_first_search(
    space: StateSpace,
    init: State,
    goal: State,
    *,
    max_expansions: Optional[int] = None,
    trace_memory: bool = False,
) -> SearchResult:
    return frontier_search(space, init, goal, LIFOStack(), "DFS",
                           max_expansions=max_expansions, trace_memory=trace_memory)
