# state_space/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import io
import json
import math
from pathlib import Path
from typing import Dict, List

import matplotlib.pyplot as plt

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"


def load_rows(path: Path = RESULTS_JSON) -> List[Dict]:
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m state_space.benchmarks.run_all")
    data = json.loads(path.read_text())
    # Keep only successful runs
    rows = [r for r in data.get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows


def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        return math.inf if v is None else v
    return sorted(rows, key=key_fn)


def _bar(ax, rows, metric, title, ylabel):
    algos = [r["algo"] for r in rows]
    vals = [r.get(metric) or 0 for r in rows]

    x = list(range(len(algos)))
    ax.bar(x, vals)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(algos, rotation=20, ha="right")

    top = max(vals) or 1
    for xi, v in zip(x, vals):
        if isinstance(v, float) and v < 0.01:
            label = f"{v:.4f}"
        elif isinstance(v, float):
            label = f"{v:.3f}"
        else:
            label = f"{v}"
        ax.text(xi, v + 0.01 * top, label, ha="center", va="bottom", fontsize=8)


def fmt_table(rows) -> str:
    # Markdown table
    lines = [
        "| Algorithm | Cost | Length | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, float):
            return f"{x:.6f}"
        if isinstance(x, int):
            return f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r['algo']} | {fnum(r.get('cost'))} | {fnum(r.get('length'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)


def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()


CHARTS = (
    ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes", "nodes_expanded.png"),
    ("time_s", "Wall Time (lower is better)", "seconds", "time.png"),
    ("cost", "Path Cost (lower is better)", "cost", "cost.png"),
)


def write_report(rows, out_dir: Path) -> List[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []

    md_path = out_dir / "results.md"
    md_path.write_text(fmt_table(rows))
    written.append(md_path)

    for metric, title, ylabel, filename in CHARTS:
        fig, ax = plt.subplots(figsize=(6, 4))
        _bar(ax, _sorted(rows, metric), metric, title, ylabel)
        fig.tight_layout()
        png = out_dir / filename
        png.write_bytes(fig_to_png_bytes(fig))
        plt.close(fig)
        written.append(png)
    return written


def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot results.json written by run_all.")
    ap.add_argument("--results", default=str(RESULTS_JSON))
    ap.add_argument("--out-dir", default=str(HERE))
    args = ap.parse_args(argv)

    for p in write_report(load_rows(Path(args.results)), Path(args.out_dir)):
        print(f"Wrote {p}")


if __name__ == "__main__":
    main()
