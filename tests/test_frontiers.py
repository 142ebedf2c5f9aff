import math
import random

import pytest

from state_space.core.frontiers import (
    FIFOQueue, LIFOStack, MinPriorityQueue, NotNan, PriorityQueue, RandomBag,
)


class TestNotNan:
    def test_rejects_nan(self):
        with pytest.raises(ValueError):
            NotNan(float("nan"))

    def test_orders_like_floats(self):
        assert NotNan(1.0) < NotNan(2.5)
        assert NotNan(-math.inf) < NotNan(0)
        assert NotNan(3) == NotNan(3.0)
        assert max(NotNan(1), NotNan(7), NotNan(4)) == NotNan(7)


class TestMinPriorityQueue:
    def test_dequeues_in_non_decreasing_order(self):
        rng = random.Random(0)
        q = MinPriorityQueue()
        keys = [rng.uniform(-100, 100) for _ in range(200)]
        for i, k in enumerate(keys):
            q.enqueue(k, i)
        out = []
        while not q.is_empty():
            out.append(keys[q.dequeue()])
        assert out == sorted(keys)

    def test_nan_priority_rejected_and_queue_untouched(self):
        q = MinPriorityQueue()
        q.enqueue(1.0, "a")
        with pytest.raises(ValueError):
            q.enqueue(float("nan"), "b")
        assert len(q) == 1
        assert "b" not in q

    def test_infinite_priorities_allowed(self):
        q = MinPriorityQueue()
        q.enqueue(math.inf, "far")
        q.enqueue(0.0, "near")
        assert q.dequeue() == "near"
        assert q.dequeue() == "far"

    def test_empty_dequeue_raises(self):
        q = MinPriorityQueue()
        assert q.is_empty()
        with pytest.raises(IndexError):
            q.dequeue()

    def test_contains_and_to_list(self):
        q = MinPriorityQueue()
        for k, e in [(3, "c"), (1, "a"), (2, "b")]:
            q.enqueue(k, e)
        assert "b" in q
        assert "z" not in q
        assert sorted(q.to_list()) == ["a", "b", "c"]
        assert len(q) == 3

    def test_ties_do_not_compare_elements(self):
        q = MinPriorityQueue()
        q.enqueue(1.0, {"x": 1})
        q.enqueue(1.0, {"y": 2})
        assert q.dequeue() == {"x": 1}

    def test_same_element_smallest_key_first(self):
        q = MinPriorityQueue()
        q.enqueue(5.0, "s")
        q.enqueue(2.0, "s")
        q.enqueue(3.0, "t")
        assert [q.dequeue() for _ in range(3)] == ["s", "t", "s"]


def test_fifo_and_lifo_order():
    f, s = FIFOQueue(), LIFOStack()
    for x in (1, 2, 3):
        f.push(x)
        s.push(x)
    assert 2 in f and 2 in s
    assert [f.pop() for _ in range(3)] == [1, 2, 3]
    assert [s.pop() for _ in range(3)] == [3, 2, 1]


def test_random_bag_is_reproducible_with_seed():
    def drain(seed):
        bag = RandomBag(random.Random(seed))
        for x in range(20):
            bag.push(x)
        return [bag.pop() for _ in range(20)]

    order = drain(11)
    assert order == drain(11)
    assert sorted(order) == list(range(20))
    # neither insertion order nor its reverse
    assert order != list(range(20))
    assert order != list(range(19, -1, -1))
    assert drain(11) != drain(12)
    with pytest.raises(IndexError):
        RandomBag().pop()


def test_keyed_priority_queue():
    pq = PriorityQueue(key=len)
    for w in ("ccc", "a", "bb"):
        pq.push(w)
    assert "bb" in pq
    assert [pq.pop() for _ in range(3)] == ["a", "bb", "ccc"]


def test_priority_queues_iterate_over_pending_elements():
    q = MinPriorityQueue()
    for p, x in ((3.0, "c"), (1.0, "a"), (2.0, "b")):
        q.enqueue(p, x)
    assert sorted(q) == ["a", "b", "c"]
    q.dequeue()
    assert sorted(q) == ["b", "c"]

    pq = PriorityQueue(key=len)
    for w in ("ccc", "a"):
        pq.push(w)
    assert sorted(pq) == ["a", "ccc"]


def test_fifo_and_lifo_peek_without_removing():
    f, s = FIFOQueue(), LIFOStack()
    for x in (1, 2, 3):
        f.push(x)
        s.push(x)
    assert f.peek() == 1 and s.peek() == 3
    assert len(f) == len(s) == 3
