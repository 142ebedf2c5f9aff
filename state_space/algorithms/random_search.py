# state_space/algorithms/random_search.py
# Expands a uniformly random frontier state each step. Neither complete nor optimal; mostly a baseline.
from __future__ import annotations
import random
from typing import Optional

from ..core.frontiers import RandomBag
from ..core.metrics import SearchResult
from ..core.problem import StateSpace, State
from .graph_search import frontier_search


def random_search(
    space: StateSpace,
    init: State,
    goal: State,
    *,
    rng: Optional[random.Random] = None,
    max_expansions: Optional[int] = None,
    trace_memory: bool = False,
) -> SearchResult:
    """
    Pass a seeded ``random.Random`` as ``rng`` to make the run reproducible;
    without one a fresh, unseeded generator is used.
    """
    return frontier_search(space, init, goal, RandomBag(rng), "Random",
                           max_expansions=max_expansions, trace_memory=trace_memory)
