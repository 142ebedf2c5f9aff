import pytest

from state_space.cli import main


def test_knight_defaults_to_bfs(capsys):
    assert main(["knight"]) == 0
    out = capsys.readouterr().out
    assert "using BFS" in out
    assert "length=6" in out


def test_knight_rejects_heuristic_search():
    with pytest.raises(SystemExit) as exc:
        main(["knight", "--algorithm", "astar"])
    assert exc.value.code == 2


def test_romania_dijkstra(capsys):
    assert main(["romania", "--algorithm", "dijkstra"]) == 0
    out = capsys.readouterr().out
    assert "cost=418" in out
    assert "Rimnicu Vilcea" in out


def test_unknown_city_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["romania", "--goal", "Atlantis"])
    assert exc.value.code == 2


def test_demo_maze_astar(capsys):
    assert main(["maze", "--no-color"]) == 0
    out = capsys.readouterr().out
    assert "using A*" in out
    assert "S" in out and "E" in out


def test_maze_without_route_exits_1(tmp_path, capsys):
    p = tmp_path / "split.txt"
    p.write_text("XXXXX\nX X X\nXXXXX\n")
    assert main(["maze", "--file", str(p), "--start", "1", "1", "--goal", "3", "1"]) == 1
    assert "no path" in capsys.readouterr().out


def test_maze_start_in_wall_is_usage_error(tmp_path):
    p = tmp_path / "m.txt"
    p.write_text("XXX\nX X\nXXX\n")
    with pytest.raises(SystemExit):
        main(["maze", "--file", str(p), "--start", "0", "0", "--goal", "1", "1"])


def test_seeded_random_search_is_repeatable(capsys):
    assert main(["knight", "--algorithm", "random", "--seed", "3"]) == 0
    first = capsys.readouterr().out.splitlines()[1]
    assert main(["knight", "--algorithm", "random", "--seed", "3"]) == 0
    assert capsys.readouterr().out.splitlines()[1] == first


def test_budget_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("STATE_SPACE_MAX_EXPANSIONS", "2")
    assert main(["romania", "--algorithm", "bfs"]) == 1
    assert "expansion budget exhausted" in capsys.readouterr().out


def test_empty_knight_board_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["knight", "--size", "0", "8"])
    assert exc.value.code == 2
    assert "board must be at least 1x1" in capsys.readouterr().err


@pytest.mark.parametrize("text", [None, "XXX\nX\nXXX\n"], ids=["missing", "ragged"])
def test_unreadable_maze_file_is_usage_error(tmp_path, text):
    p = tmp_path / "maze.txt"
    if text is not None:
        p.write_text(text)
    with pytest.raises(SystemExit) as exc:
        main(["maze", "--file", str(p)])
    assert exc.value.code == 2
