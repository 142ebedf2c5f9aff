# Uniform Cost Search is Dijkstra's algorithm stopped at the goal; kept under its textbook name.
# state_space/algorithms/ucs.py
from __future__ import annotations
from .dijkstra import dijkstra

uniform_cost_search = dijkstra
