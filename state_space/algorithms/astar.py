# state_space/algorithms/astar.py
from __future__ import annotations
import logging
from typing import Optional

from ..core.frontiers import MinPriorityQueue
from ..core.metrics import SearchResult, MeasuredRun, NO_PATH, BUDGET_EXHAUSTED
from ..core.problem import HeuristicStateSpace, State
from ..core.utils import reconstruct_path
from .graph_search import report_progress

logger = logging.getLogger(__name__)


def a_star_search(
    space: HeuristicStateSpace,
    init: State,
    goal: State,
    *,
    max_expansions: Optional[int] = None,
    trace_memory: bool = False,
) -> SearchResult:
    """
    A*: expands by f = g + h.

    Optimal when the heuristic is admissible and costs are non-negative.
    Expanded states are closed for good, even if a cheaper route to one of
    them turns up later; with a consistent heuristic that never happens.
    """
    name = "A*"
    open_ = MinPriorityQueue()
    distances = {init: 0.0}
    parents = {}
    closed = set()
    expanded = 0

    open_.enqueue(space.heuristic(init, goal), init)
    logger.debug("%s: searching from %r to %r", name, init, goal)

    with MeasuredRun(trace_memory) as meter:
        while not open_.is_empty():
            current = open_.dequeue()
            if current in closed:
                continue

            if current == goal:
                path = reconstruct_path(parents, goal)
                logger.debug("%s: found path of cost %s after %d expansions", name, distances[goal], expanded)
                return SearchResult(name, True, path, distances[goal], expanded, meter.elapsed, meter.peak_kb)

            if max_expansions is not None and expanded >= max_expansions:
                logger.debug("%s: stopped after %d expansions", name, expanded)
                return SearchResult(name, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb,
                                    error=BUDGET_EXHAUSTED)

            expanded += 1
            current_dist = distances[current]
            for neighbour in space.neighbours(current):
                if neighbour == current or neighbour in closed:
                    continue
                g = current_dist + float(space.cost(current, neighbour))
                if neighbour not in open_ or neighbour not in distances or g < distances[neighbour]:
                    distances[neighbour] = g
                    parents[neighbour] = current
                    open_.enqueue(g + space.heuristic(neighbour, goal), neighbour)

            closed.add(current)
            report_progress(space, init, goal, open_.to_list())

    logger.debug("%s: frontier exhausted after %d expansions, %r unreachable", name, expanded, goal)
    return SearchResult(name, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb, error=NO_PATH)
