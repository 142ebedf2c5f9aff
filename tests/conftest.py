import pytest

from state_space.problems.grid import GridProblem
from state_space.problems.knight import KnightMove
from state_space.problems.romania import romania_problem


@pytest.fixture
def open_grid():
    return GridProblem(3, 3)


@pytest.fixture
def walled_grid():
    # middle column is solid: (0,0) cannot reach (0,2)
    return GridProblem(3, 3, walls={(0, 1), (1, 1), (2, 1)})


@pytest.fixture
def board():
    return KnightMove((8, 8))


@pytest.fixture
def romania():
    return romania_problem()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("STATE_SPACE_MAX_EXPANSIONS", "STATE_SPACE_SEED",
                 "STATE_SPACE_TRACE_MEMORY", "STATE_SPACE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
