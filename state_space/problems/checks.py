# state_space/problems/checks.py
from __future__ import annotations
import math
from collections import deque

from ..core.problem import StateSpace, State


def check_state_space(space: StateSpace, init: State, goal: State | None = None, max_states: int = 10_000) -> str:
    """
    Walks states breadth-first from ``init`` and checks that every edge cost
    (and the heuristic, when the space has one and ``goal`` is given) is a
    finite, non-negative number.
    """
    has_cost = callable(getattr(space, "cost", None))
    has_h = goal is not None and callable(getattr(space, "heuristic", None))
    seen = {init}
    q = deque([init])
    while q and len(seen) <= max_states:
        s = q.popleft()
        if has_h:
            h = space.heuristic(s, goal)
            if h is None or not math.isfinite(h) or h < 0:
                raise AssertionError(f"heuristic({s!r}, {goal!r}) = {h!r}; must be finite and >= 0")
        for s2 in space.neighbours(s):
            if has_cost:
                c = space.cost(s, s2)
                if c is None or not math.isfinite(c) or c < 0:
                    raise AssertionError(f"cost({s!r}, {s2!r}) = {c!r}; must be finite and >= 0")
            if s2 not in seen:
                seen.add(s2)
                q.append(s2)
    return f"OK: visited {len(seen)} states; costs and heuristic well-formed."
