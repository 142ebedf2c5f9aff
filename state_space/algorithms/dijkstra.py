# state_space/algorithms/dijkstra.py
# Uniform-cost search: always expands the frontier state with the smallest distance from the start.
from __future__ import annotations
import logging
from typing import Optional

from ..core.frontiers import MinPriorityQueue
from ..core.metrics import SearchResult, MeasuredRun, NO_PATH, BUDGET_EXHAUSTED
from ..core.problem import CostStateSpace, State
from ..core.utils import reconstruct_path
from .graph_search import report_progress

logger = logging.getLogger(__name__)


def dijkstra(
    space: CostStateSpace,
    init: State,
    goal: State,
    *,
    max_expansions: Optional[int] = None,
    trace_memory: bool = False,
) -> SearchResult:
    """
    Optimal for non-negative edge costs.

    A state is re-enqueued each time a shorter route to it is found. Entries
    left behind by those improvements are skipped when they surface, since the
    state was already expanded at its best distance.
    """
    name = "Dijkstra"
    queue = MinPriorityQueue()
    distances = {init: 0.0}
    parents = {}
    closed = set()
    expanded = 0

    queue.enqueue(0.0, init)
    logger.debug("%s: searching from %r to %r", name, init, goal)

    with MeasuredRun(trace_memory) as meter:
        while not queue.is_empty():
            current = queue.dequeue()
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
                if neighbour == current:
                    continue
                d = current_dist + float(space.cost(current, neighbour))
                if neighbour not in distances or d < distances[neighbour]:
                    distances[neighbour] = d
                    queue.enqueue(d, neighbour)
                    parents[neighbour] = current

            closed.add(current)
            report_progress(space, init, goal, queue.to_list())

    logger.debug("%s: frontier exhausted after %d expansions, %r unreachable", name, expanded, goal)
    return SearchResult(name, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb, error=NO_PATH)
