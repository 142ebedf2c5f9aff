import json

import matplotlib
matplotlib.use("Agg")

import pytest

from state_space.benchmarks import plot_results, run_all
from state_space.plots.plotting import bar_compare


def test_run_all_on_grid_runs_every_algorithm(capsys):
    space, init, goal = run_all.load_case("grid")
    results = run_all.run_all(space, init, goal)
    assert [r.algo for r in results] == ["Random", "BFS", "DFS", "Dijkstra", "Greedy", "A*"]
    assert all(r.success for r in results)
    by_name = {r.algo: r for r in results}
    assert by_name["Dijkstra"].cost == by_name["A*"].cost == by_name["BFS"].cost == 10.0


def test_run_all_skips_unsupported_algorithms(capsys):
    space, init, goal = run_all.load_case("knight")
    results = run_all.run_all(space, init, goal)
    assert [r.algo for r in results] == ["Random", "BFS", "DFS"]
    assert "Skipping Dijkstra" in capsys.readouterr().out


def test_unknown_case():
    with pytest.raises(ValueError):
        run_all.load_case("chess960")


def test_main_writes_json_then_report(tmp_path, capsys):
    out = tmp_path / "results.json"
    run_all.main(["--problem", "romania", "--out", str(out)])
    data = json.loads(out.read_text())
    assert data["problem"] == "romania"
    rows = {r["algo"]: r for r in data["results"]}
    assert rows["A*"]["cost"] == 418.0

    plot_results.main(["--results", str(out), "--out-dir", str(tmp_path / "report")])
    names = sorted(p.name for p in (tmp_path / "report").iterdir())
    assert names == ["cost.png", "nodes_expanded.png", "results.md", "time.png"]
    assert "| A* | 418.000000 |" in (tmp_path / "report" / "results.md").read_text()


def test_load_rows_requires_successes(tmp_path):
    p = tmp_path / "r.json"
    p.write_text(json.dumps({"results": [{"algo": "X", "success": False}]}))
    with pytest.raises(SystemExit):
        plot_results.load_rows(p)


def test_bar_compare_figure():
    space, init, goal = run_all.load_case("grid")
    fig = bar_compare(run_all.run_all(space, init, goal), title="grid")
    assert len(fig.axes) == 4
    assert fig._suptitle.get_text() == "grid"


def test_main_reads_shared_settings(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("STATE_SPACE_MAX_EXPANSIONS", "1")
    monkeypatch.setenv("STATE_SPACE_TRACE_MEMORY", "off")
    data = run_all.main(["--problem", "romania", "--out", str(tmp_path / "r.json")])
    rows = data["results"]
    assert [r["algo"] for r in rows] == ["Random", "BFS", "DFS", "Dijkstra", "Greedy", "A*"]
    assert all(r["error"] == "expansion budget exhausted" for r in rows)
    assert all(r["peak_kb"] is None for r in rows)


def test_main_rejects_malformed_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("STATE_SPACE_SEED", "soon")
    with pytest.raises(SystemExit) as exc:
        run_all.main(["--problem", "grid", "--out", str(tmp_path / "r.json")])
    assert exc.value.code == 2
