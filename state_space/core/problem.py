# Defines the capability tiers every search algorithm is written against (neighbours, costs, heuristic).
# state_space/core/problem.py
from __future__ import annotations
from typing import Hashable, Protocol, Sequence

State = Hashable


class StateSpace(Protocol):
    """Base tier: a graph given implicitly by its neighbour function.

    Concrete spaces should subclass this explicitly so they pick up the
    no-op ``display_progress``.
    """

    def neighbours(self, state: State) -> Sequence[State]: ...

    # Called once per search iteration with the current frontier; observation only.
    def display_progress(self, init: State, goal: State, open_states: Sequence[State]) -> None:
        return None


class CostStateSpace(StateSpace, Protocol):
    """Adds edge weights. Dijkstra and A* assume they are non-negative."""

    def cost(self, current: State, next_state: State) -> float: ...


class HeuristicStateSpace(CostStateSpace, Protocol):
    """Adds a goal-distance estimate. A* is optimal only if it never overestimates."""

    def heuristic(self, state: State, goal: State) -> float: ...
