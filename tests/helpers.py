import random

from state_space.algorithms.astar import a_star_search
from state_space.algorithms.bfs import breadth_first_search
from state_space.algorithms.dfs import depth_first_search
from state_space.algorithms.dijkstra import dijkstra
from state_space.algorithms.greedy import greedy_best_first_search
from state_space.algorithms.random_search import random_search
from state_space.core.problem import HeuristicStateSpace


class WeightedGraph(HeuristicStateSpace):
    """Directed graph from an adjacency dict {u: {v: cost}} with an optional heuristic table."""

    def __init__(self, edges, h=None):
        self.edges = edges
        self.h = h or {}

    def neighbours(self, state):
        return list(self.edges.get(state, {}))

    def cost(self, current, next_state):
        return self.edges[current][next_state]

    def heuristic(self, state, goal):
        return self.h.get(state, 0.0)


def seeded_random_search(space, init, goal, **kw):
    return random_search(space, init, goal, rng=random.Random(7), **kw)


SEARCHES = {
    "random": seeded_random_search,
    "bfs": breadth_first_search,
    "dfs": depth_first_search,
    "dijkstra": dijkstra,
    "greedy": greedy_best_first_search,
    "astar": a_star_search,
}


def assert_valid_path(space, path, init, goal):
    assert path[0] == init
    assert path[-1] == goal
    for a, b in zip(path, path[1:]):
        assert b in space.neighbours(a), f"{a!r} -> {b!r} is not an edge"
