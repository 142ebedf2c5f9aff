# state_space/core/utils.py
# Helpers shared by every algorithm: turning a predecessor map into a path, and pricing a path.
from __future__ import annotations
from typing import Dict, List, Sequence

from .problem import CostStateSpace, State


def reconstruct_path(parents: Dict[State, State], goal: State) -> List[State]:
    """
    Walk predecessors back from ``goal`` and return the path init -> goal.

    ``parents`` is consumed: each visited entry is popped, so the caller must
    not rely on it afterwards. The start is the first state with no entry.
    """
    path = []
    cur = goal
    while cur in parents:
        path.append(cur)
        cur = parents.pop(cur)
    path.append(cur)
    path.reverse()
    return path


def path_cost(space: CostStateSpace, path: Sequence[State]) -> float:
    total = 0.0
    for a, b in zip(path, path[1:]):
        total += float(space.cost(a, b))
    return total
