import csv

import matplotlib
matplotlib.use("Agg")

import pytest

import experiments


@pytest.mark.parametrize("name", sorted(experiments.GENERATOR_REGISTRY))
def test_generators_are_sized_and_seeded(name):
    _, a = experiments.generate_dataset(name, 500, seed=7)
    _, b = experiments.generate_dataset(name, 500, seed=7)
    assert isinstance(a, str)
    assert len(a) == 500
    assert a == b


def test_unknown_generator_raises():
    with pytest.raises(ValueError):
        experiments.generate_dataset("nope", 10, seed=0)


def test_run_one_records_metrics():
    _, text = experiments.generate_dataset("repetitive99", 4000, seed=1)
    row = experiments.run_one(text)

    assert row.correctness_ok == 1
    assert row.input_chars == 4000
    assert row.original_bytes == 4000
    assert 0 <= row.trash_bits <= 7
    assert row.compressed_bytes < row.original_bytes
    assert row.compression_ratio == pytest.approx(row.compressed_bytes / row.original_bytes)
    assert row.bits_per_symbol < 2


def test_main_writes_csv_files(tmp_path, capsys):
    outdir = tmp_path / "results"
    rc = experiments.main([
        "--outdir", str(outdir), "--runs", "2", "--size_kb", "1", "--min_kb", "1", "--max_kb", "2",
        "--generators", "english_like,unicode_mixed", "--no_plots",
    ])
    assert rc == 0
    assert "Correctness rate across all runs: 1.000" in capsys.readouterr().out

    with (outdir / "metrics.csv").open(encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    # exp1: 2 generators x 2 runs, exp2: 2 generators x 2 sizes x 2 runs
    assert len(rows) == 4 + 8
    assert all(r["correctness_ok"] == "1" for r in rows)

    with (outdir / "summary.csv").open(encoding="utf-8") as f:
        summary = list(csv.DictReader(f))
    assert len(summary) == 2 + 4
    assert all(float(r["correctness_ok_rate"]) == 1.0 for r in summary)
    assert all(r["n_runs"] == "2" for r in summary)
    assert not list(outdir.glob("*.png"))


def test_plots_are_written(tmp_path):
    rows = []
    for exp_name, size in (("exp1_distribution", 256), ("exp2_size_scaling", 256), ("exp2_size_scaling", 512)):
        _, text = experiments.generate_dataset("zipf64", size, seed=3)
        row = experiments.run_one(text)
        row.exp_name = exp_name
        row.dataset_name = "zipf64"
        rows.append(row)

    experiments.plot_experiment_1(rows, tmp_path)
    experiments.plot_experiment_2(rows, tmp_path)

    names = {p.name for p in tmp_path.glob("*.png")}
    assert names == {
        "exp1_compression_ratio.png",
        "exp1_time.png",
        "exp2_time_zipf64.png",
        "exp2_compression_ratio_zipf64.png",
    }
