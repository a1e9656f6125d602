# Huffman Text Codec
# experiments.py
# 10/18/26

"""
Benchmark: Huffman text codec

Compresses synthetic text datasets with repeated runs and records how well
and how fast the codec does on each one

Outputs (in --outdir):
  - metrics.csv     (raw row per run per dataset)
  - summary.csv     (grouped mean/stdev)
  - *.png           (charts)

How to run:
  python experiments.py --outdir results --runs 5
  python experiments.py --outdir results --runs 3 --size_kb 256 --max_kb 2048
  python experiments.py --outdir results --generators english_like,zipf64,unicode_mixed --no_plots
"""

from __future__ import annotations

import argparse
import csv
import random
import statistics
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple, Callable

import matplotlib.pyplot as plt

import codec


# Utilities

def now_ns() -> int:
    return time.perf_counter_ns()

def ns_to_ms(ns: int) -> float:
    return ns / 1_000_000.0

def safe_mkdir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


# Synthetic dataset generators (all return str)

def _sample(rng: random.Random, alphabet: str, weights: List[float], size: int) -> str:
    return "".join(rng.choices(alphabet, weights=weights, k=size))

def gen_uniform(size: int, alphabet: int = 95, seed: int = 0) -> str:
    rng = random.Random(seed)
    chars = "".join(chr(32 + i) for i in range(alphabet))
    return _sample(rng, chars, [1.0] * len(chars), size)

def gen_repetitive(size: int, dominant: str = "A", dom_frac: float = 0.90, seed: int = 0) -> str:
    rng = random.Random(seed)
    others = [chr(c) for c in range(33, 127) if chr(c) != dominant]
    out = []
    for _ in range(size):
        if rng.random() < dom_frac:
            out.append(dominant)
        else:
            out.append(rng.choice(others))
    return "".join(out)

def gen_zipf_like(size: int, alphabet: int = 64, s: float = 1.2, seed: int = 0) -> str:
    rng = random.Random(seed)
    chars = "".join(chr(48 + i) for i in range(alphabet))
    weights = [1.0 / ((i + 1) ** s) for i in range(alphabet)]
    return _sample(rng, chars, weights, size)

def gen_english_like(size: int, seed: int = 0) -> str:
    rng = random.Random(seed)
    chars = (
        " etaoinshrdlcumwfgypbvkjxq"
        "ETAOINSHRDLCUMWFGYPBVKJXQ"
        "\n.,"
    )
    weights = []
    for ch in chars:
        if ch == ' ':
            weights.append(13.0)
        elif ch in "\n.,":
            weights.append(1.5)
        elif ch.lower() in "etaoinshrdlu":
            weights.append(6.0)
        elif ch.lower() in "cmfwgypbvk":
            weights.append(2.5)
        else:
            weights.append(1.2)
    return _sample(rng, chars, weights, size)

def gen_unicode_mixed(size: int, seed: int = 0) -> str:
    # Latin text with accented letters, CJK, and astral-plane emoji mixed in
    rng = random.Random(seed)
    chars = "abcdefghij éüñ漢字かな\U0001F600\U0001F680"
    weights = [5.0] * 10 + [8.0] + [1.0] * 7 + [0.3, 0.3]
    return _sample(rng, chars, weights, size)

GENERATOR_REGISTRY: Dict[str, Callable[[int, int], str]] = {
    "uniform95": lambda size, seed: gen_uniform(size, alphabet=95, seed=seed),
    "zipf64": lambda size, seed: gen_zipf_like(size, alphabet=64, s=1.2, seed=seed),
    "repetitive90": lambda size, seed: gen_repetitive(size, dominant="A", dom_frac=0.90, seed=seed),
    "repetitive99": lambda size, seed: gen_repetitive(size, dominant="A", dom_frac=0.99, seed=seed),
    "english_like": lambda size, seed: gen_english_like(size, seed=seed),
    "unicode_mixed": lambda size, seed: gen_unicode_mixed(size, seed=seed),
}

def generate_dataset(name: str, size_chars: int, seed: int) -> Tuple[str, str]:
    fn = GENERATOR_REGISTRY.get(name)
    if fn is None:
        raise ValueError(f"unknown generator {name!r}, choose from {', '.join(sorted(GENERATOR_REGISTRY))}")
    return name, fn(size_chars, seed)




# Experiment runner

@dataclass
class MetricRow:
    exp_name: str
    dataset_name: str
    input_chars: int
    run_id: int
    unique_symbols: int

    original_bytes: int  # UTF-8 size of the input
    tree_bytes: int
    compressed_bytes: int  # whole container
    trash_bits: int
    bits_per_symbol: float
    compression_ratio: float

    encode_ms: float
    decode_ms: float
    total_ms: float

    correctness_ok: int  # 1 or 0


def run_one(text: str) -> MetricRow:
    t0 = now_ns()
    encoding = codec.encode(text)
    compressed = encoding.to_bytes()
    t1 = now_ns()
    encode_ms = ns_to_ms(t1 - t0)

    t2 = now_ns()
    decoded = codec.decompress(compressed)
    t3 = now_ns()
    decode_ms = ns_to_ms(t3 - t2)

    original_bytes = len(text.encode("utf-8"))
    return MetricRow(
        exp_name="",
        dataset_name="",
        input_chars=len(text),
        run_id=0,
        unique_symbols=len(encoding.frequency_table),
        original_bytes=original_bytes,
        tree_bytes=len(encoding.tree_bytes),
        compressed_bytes=len(compressed),
        trash_bits=encoding.trash_bits,
        bits_per_symbol=encoding.encoded_bits / (len(text) + 1),
        compression_ratio=len(compressed) / max(1, original_bytes),
        encode_ms=encode_ms,
        decode_ms=decode_ms,
        total_ms=encode_ms + decode_ms,
        correctness_ok=1 if decoded == text else 0,
    )


def write_csv(path: Path, rows: List[MetricRow]) -> None:
    fields = list(MetricRow.__dataclass_fields__.keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for r in rows:
            w.writerow({k: getattr(r, k) for k in fields})


def mean_stdev(vals: List[float]) -> Tuple[float, float]:
    if len(vals) == 1:
        return vals[0], 0.0
    return statistics.mean(vals), statistics.stdev(vals)


SUMMARY_METRICS = ("compression_ratio", "bits_per_symbol", "encode_ms", "decode_ms", "total_ms")

def group_summary(rows: List[MetricRow], out_path: Path) -> None:
    """
    Group by exp_name, dataset_name, input_chars and compute mean/stdev
    """
    key_to: Dict[Tuple[str, str, int], List[MetricRow]] = {}
    for r in rows:
        key = (r.exp_name, r.dataset_name, r.input_chars)
        key_to.setdefault(key, []).append(r)

    summary_fields = ["exp_name", "dataset_name", "input_chars", "n_runs"]
    for metric in SUMMARY_METRICS:
        summary_fields += [f"{metric}_mean", f"{metric}_stdev"]
    summary_fields.append("correctness_ok_rate")

    with out_path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=summary_fields)
        w.writeheader()
        for key, items in sorted(key_to.items()):
            exp_name, dataset_name, input_chars = key
            row = {
                "exp_name": exp_name,
                "dataset_name": dataset_name,
                "input_chars": input_chars,
                "n_runs": len(items),
                "correctness_ok_rate": sum(x.correctness_ok for x in items) / len(items),
            }
            for metric in SUMMARY_METRICS:
                m, s = mean_stdev([getattr(x, metric) for x in items])
                row[f"{metric}_mean"] = m
                row[f"{metric}_stdev"] = s
            w.writerow(row)



# Plotting

def plot_experiment_1(rows: List[MetricRow], outdir: Path) -> None:
    exp_rows = [r for r in rows if r.exp_name == "exp1_distribution"]
    if not exp_rows:
        return

    datasets = sorted(set(r.dataset_name for r in exp_rows))

    def mean_for(dataset: str, field: str) -> float:
        vals = [getattr(r, field) for r in exp_rows if r.dataset_name == dataset]
        return statistics.mean(vals) if vals else float("nan")

    x = list(range(len(datasets)))

    plt.figure()
    plt.bar(x, [mean_for(d, "compression_ratio") for d in datasets])
    plt.axhline(1.0, color="gray", linestyle="--", linewidth=1)
    plt.xticks(x, datasets, rotation=20, ha="right")
    plt.ylabel("Compressed Bytes / Original UTF-8 Bytes")
    plt.title("Experiment 1: Compression Ratio by Distribution")
    plt.tight_layout()
    plt.savefig(outdir / "exp1_compression_ratio.png", dpi=200)
    plt.close()

    plt.figure()
    plt.plot(x, [mean_for(d, "encode_ms") for d in datasets], marker="o", label="compress")
    plt.plot(x, [mean_for(d, "decode_ms") for d in datasets], marker="o", label="decompress")
    plt.xticks(x, datasets, rotation=20, ha="right")
    plt.ylabel("Time (ms)")
    plt.title("Experiment 1: Compress / Decompress Time by Distribution")
    plt.legend()
    plt.tight_layout()
    plt.savefig(outdir / "exp1_time.png", dpi=200)
    plt.close()


def plot_experiment_2(rows: List[MetricRow], outdir: Path) -> None:
    exp_rows = [r for r in rows if r.exp_name == "exp2_size_scaling"]
    if not exp_rows:
        return

    distributions = sorted(set(r.dataset_name for r in exp_rows))

    for dist in distributions:
        dist_rows = [r for r in exp_rows if r.dataset_name == dist]
        sizes = sorted(set(r.input_chars for r in dist_rows))

        def mean_size(size: int, field: str) -> float:
            vals = [getattr(r, field) for r in dist_rows if r.input_chars == size]
            return statistics.mean(vals) if vals else float("nan")

        plt.figure()
        plt.plot(sizes, [mean_size(s, "encode_ms") for s in sizes], marker="o", label="compress")
        plt.plot(sizes, [mean_size(s, "decode_ms") for s in sizes], marker="o", label="decompress")
        plt.xlabel("Input Size (characters)")
        plt.ylabel("Time (ms)")
        plt.title(f"Experiment 2: Time vs Size ({dist})")
        plt.legend()
        plt.tight_layout()
        plt.savefig(outdir / f"exp2_time_{dist}.png", dpi=200)
        plt.close()

        plt.figure()
        plt.plot(sizes, [mean_size(s, "compression_ratio") for s in sizes], marker="o")
        plt.xscale("log", base=2)
        plt.xlabel("Input Size (characters)")
        plt.ylabel("Compressed Bytes / Original UTF-8 Bytes")
        plt.title(f"Experiment 2: Compression Ratio vs Size ({dist})")
        plt.tight_layout()
        plt.savefig(outdir / f"exp2_compression_ratio_{dist}.png", dpi=200)
        plt.close()





# Main

def parse_csv_list(s: str) -> List[str]:
    return [x.strip() for x in s.split(",") if x.strip()]

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Benchmark the Huffman text codec on synthetic datasets")
    ap.add_argument("--outdir", type=str, default="results", help="Output directory for CSV and plots")
    ap.add_argument("--runs", type=int, default=5, help="Repetitions per configuration (>=3 recommended for timing)")
    ap.add_argument("--seed", type=int, default=123, help="Base random seed")
    ap.add_argument("--generators", type=str, default="uniform95,zipf64,repetitive90,english_like,unicode_mixed",
                    help="Comma-separated dataset generator names")

    # Experiment toggles
    ap.add_argument("--no_exp1", action="store_true", help="Disable experiment 1 (distribution)")
    ap.add_argument("--no_exp2", action="store_true", help="Disable experiment 2 (size scaling)")
    ap.add_argument("--no_plots", action="store_true", help="Only write the CSV files")

    ap.add_argument("--size_kb", type=int, default=64, help="Experiment 1 fixed input size in K characters")
    ap.add_argument("--min_kb", type=int, default=1, help="Experiment 2 min size in K characters (power-of-two growth)")
    ap.add_argument("--max_kb", type=int, default=512, help="Experiment 2 max size in K characters")
    return ap

def run_experiments(args: argparse.Namespace) -> List[MetricRow]:
    rows: List[MetricRow] = []
    gen_names = parse_csv_list(args.generators)

    # Experiment 1: distributions (fixed size)
    if not args.no_exp1:
        fixed_size = max(1, args.size_kb) * 1024
        for gen_name in gen_names:
            for run_id in range(1, args.runs + 1):
                dataset_name, text = generate_dataset(gen_name, fixed_size, args.seed + run_id)
                row = run_one(text)
                row.exp_name = "exp1_distribution"
                row.dataset_name = dataset_name
                row.run_id = run_id
                rows.append(row)
            print(f"exp1 {gen_name}: {args.runs} runs done")

    # Experiment 2: size scaling (powers of 2)
    if not args.no_exp2:
        min_chars = max(1, args.min_kb) * 1024
        max_chars = max(1, args.max_kb) * 1024

        sizes: List[int] = []
        s = min_chars
        while s <= max_chars:
            sizes.append(s)
            s *= 2

        for gen_name in gen_names:
            for size_c in sizes:
                for run_id in range(1, args.runs + 1):
                    dataset_name, text = generate_dataset(gen_name, size_c, args.seed + 10_000 + size_c + run_id)
                    row = run_one(text)
                    row.exp_name = "exp2_size_scaling"
                    row.dataset_name = dataset_name
                    row.run_id = run_id
                    rows.append(row)
            print(f"exp2 {gen_name}: {len(sizes)} sizes x {args.runs} runs done")

    return rows

def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    outdir = Path(args.outdir)
    safe_mkdir(outdir)

    rows = run_experiments(args)

    # Write raw and summary
    metrics_csv = outdir / "metrics.csv"
    summary_csv = outdir / "summary.csv"
    write_csv(metrics_csv, rows)
    group_summary(rows, summary_csv)

    # Plots
    if not args.no_plots:
        plot_experiment_1(rows, outdir)
        plot_experiment_2(rows, outdir)

    ok_rate = sum(r.correctness_ok for r in rows) / max(1, len(rows))
    print(f"Wrote {len(rows)} rows to {metrics_csv}")
    print(f"Wrote grouped summary to {summary_csv}")
    print(f"Correctness rate across all runs: {ok_rate:.3f}")
    if not args.no_plots:
        print("Charts saved in:", outdir.resolve())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
