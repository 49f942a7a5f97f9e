# tools/plot_trace.py
import argparse
import csv
import math
from pathlib import Path

# Use a non-interactive backend that writes to files
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

def to_float(v):
    try:
        return float(v)
    except (TypeError, ValueError):
        return math.nan

def read_trace(path: Path):
    steps, data, times, values = [], [], [], []
    with path.open(newline="") as f:
        for row in csv.DictReader(f):
            steps.append(int(row["step"]))
            data.append(to_float(row.get("data")))
            times.append(to_float(row.get("time")))
            values.append(to_float(row.get("value")))
    return steps, data, times, values

def plot_trace(trace_path: Path, out_path: Path) -> Path:
    if not trace_path.exists():
        raise FileNotFoundError(f"Could not find trace at {trace_path}. "
                                f"Run `python main.py irregular --trace {trace_path}` first.")
    steps, data, times, values = read_trace(trace_path)
    if not steps:
        raise RuntimeError(f"{trace_path} has a header but no rows.")

    # x axis: clock time when present, otherwise the step index
    xs = times if not all(math.isnan(t) for t in times) else steps
    xlabel = "time" if xs is times else "step"

    fig = plt.figure(figsize=(10, 6))
    plt.plot(xs, data, linewidth=1, alpha=0.5, label="raw")
    plt.plot(xs, values, linewidth=2, label="EMWA")
    plt.title("EMWA trace"); plt.xlabel(xlabel); plt.ylabel("value"); plt.legend()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    print(f"saved: {out_path}")
    return out_path

def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("trace", type=Path)
    p.add_argument("-o", "--out", type=Path, default=None)
    args = p.parse_args(argv)
    out = args.out or args.trace.with_suffix(".png")
    plot_trace(args.trace, out)

if __name__ == "__main__":
    main()
