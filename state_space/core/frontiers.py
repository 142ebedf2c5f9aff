# state_space/core/frontiers.py
from __future__ import annotations
import heapq
import itertools
import math
import random
from collections import deque
from functools import total_ordering
from typing import Any, Iterator, List, Optional


class FIFOQueue:
    def __init__(self):
        self.q = deque()
    def push(self, x): self.q.append(x)
    def pop(self): return self.q.popleft()
    def __len__(self): return len(self.q)
    def __contains__(self, x): return x in self.q
    def __iter__(self): return iter(self.q)
    def peek(self): return self.q[0]
    def to_list(self): return list(self.q)


class LIFOStack:
    def __init__(self):
        self.q = []
    def push(self, x): self.q.append(x)
    def pop(self): return self.q.pop()
    def __len__(self): return len(self.q)
    def __contains__(self, x): return x in self.q
    def __iter__(self): return iter(self.q)
    def peek(self): return self.q[-1]
    def to_list(self): return list(self.q)


class RandomBag:
    """Unordered frontier; pop() removes a uniformly random element."""
    def __init__(self, rng: Optional[random.Random] = None):
        self.q: List[Any] = []
        self.rng = rng if rng is not None else random.Random()
    def push(self, x): self.q.append(x)
    def pop(self):
        if not self.q:
            raise IndexError("pop from empty RandomBag")
        return self.q.pop(self.rng.randrange(len(self.q)))
    def __len__(self): return len(self.q)
    def __contains__(self, x): return x in self.q
    def __iter__(self): return iter(self.q)
    def to_list(self): return list(self.q)


@total_ordering
class NotNan:
    """A float that is guaranteed not to be NaN, so comparisons form a total order."""
    __slots__ = ("value",)

    def __init__(self, value: float):
        value = float(value)
        if math.isnan(value):
            raise ValueError("Priority should not be NaN")
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, NotNan):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other):
        if not isinstance(other, NotNan):
            return NotImplemented
        return self.value < other.value

    def __hash__(self):
        return hash(self.value)

    def __float__(self):
        return self.value

    def __repr__(self):
        return f"NotNan({self.value!r})"


class MinPriorityQueue:
    """
    Min-heap keyed by an explicit numeric priority.

    The same element may be enqueued several times with different priorities;
    each entry is kept and the smallest surfaces first. Equal priorities come out
    in insertion order, so elements themselves never need to be comparable.
    """
    def __init__(self):
        self.h: List[tuple] = []
        self.counter = itertools.count()

    def enqueue(self, priority: float, element: Any) -> None:
        key = NotNan(priority)  # raises before the heap is touched
        heapq.heappush(self.h, (key, next(self.counter), element))

    def dequeue(self) -> Any:
        if not self.h:
            raise IndexError("dequeue from empty MinPriorityQueue")
        return heapq.heappop(self.h)[2]

    def is_empty(self) -> bool:
        return not self.h

    def __len__(self): return len(self.h)

    def __contains__(self, element) -> bool:
        return any(entry[2] == element for entry in self.h)

    def __iter__(self) -> Iterator[Any]:
        return (entry[2] for entry in self.h)

    def to_list(self) -> List[Any]:
        """Elements in heap order (not sorted); meant for progress reporting."""
        return [entry[2] for entry in self.h]


class PriorityQueue:
    """Min-heap by key(x), with the push/pop interface of the other frontiers."""
    def __init__(self, key):
        self.key = key
        self.h = MinPriorityQueue()
    def push(self, x): self.h.enqueue(self.key(x), x)
    def pop(self): return self.h.dequeue()
    def __len__(self): return len(self.h)
    def __contains__(self, x): return x in self.h
    def __iter__(self): return iter(self.h)
    def to_list(self): return self.h.to_list()
