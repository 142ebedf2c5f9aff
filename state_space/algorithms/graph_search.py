# state_space/algorithms/graph_search.py
# The expansion loop shared by random, breadth-first, depth-first and greedy search.
# Only the frontier differs between them; it decides which discovered state is expanded next.
from __future__ import annotations
import logging
from typing import Optional, Sequence

from ..core.metrics import SearchResult, MeasuredRun, NO_PATH, BUDGET_EXHAUSTED
from ..core.problem import StateSpace, State
from ..core.utils import reconstruct_path, path_cost

logger = logging.getLogger(__name__)


def report_progress(space: StateSpace, init: State, goal: State, open_states: Sequence[State]) -> None:
    hook = getattr(space, "display_progress", None)
    if hook is not None:
        hook(init, goal, open_states)


def cost_of(space: StateSpace, path) -> float:
    """Edge cost of a found path; plain spaces count every edge as 1."""
    if hasattr(space, "cost"):
        return path_cost(space, path)
    return float(len(path) - 1)


def frontier_search(
    space: StateSpace,
    init: State,
    goal: State,
    frontier,
    name: str,
    max_expansions: Optional[int] = None,
    trace_memory: bool = False,
) -> SearchResult:
    """
    Expand states in the order ``frontier`` hands them out.

    A neighbour is added only if it is not the current state, not already in
    the frontier and not yet expanded; its predecessor is recorded on insertion.
    """
    parents = {}
    closed = set()
    expanded = 0
    frontier.push(init)
    logger.debug("%s: searching from %r to %r", name, init, goal)

    with MeasuredRun(trace_memory) as meter:
        while len(frontier):
            current = frontier.pop()

            if current == goal:
                path = reconstruct_path(parents, current)
                logger.debug("%s: found path of %d states after %d expansions", name, len(path), expanded)
                return SearchResult(name, True, path, cost_of(space, path), expanded, meter.elapsed, meter.peak_kb)

            if max_expansions is not None and expanded >= max_expansions:
                logger.debug("%s: stopped after %d expansions", name, expanded)
                return SearchResult(name, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb,
                                    error=BUDGET_EXHAUSTED)

            expanded += 1
            for neighbour in space.neighbours(current):
                if neighbour != current and neighbour not in frontier and neighbour not in closed:
                    frontier.push(neighbour)
                    parents[neighbour] = current

            closed.add(current)
            report_progress(space, init, goal, frontier.to_list())

    logger.debug("%s: frontier exhausted after %d expansions, %r unreachable", name, expanded, goal)
    return SearchResult(name, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb, error=NO_PATH)
