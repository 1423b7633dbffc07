"""
test_cli.py
~~~~~~~~~~~

End-to-end tests of the command line pipeline on tiny CSV files.
"""

import numpy as np
import pytest

from scratchnet.cli import main, parse_args, run


def _write_split(tmp_path, name, n, seed):
    rng = np.random.default_rng(seed)
    labels = rng.integers(0, 3, size=n)
    vec_lines = []
    for label in labels:
        pixels = rng.integers(0, 60, size=4)
        pixels[label] += 180
        vec_lines.append(",".join(str(p) for p in pixels))
    vectors = tmp_path / f"{name}_vectors.csv"
    label_file = tmp_path / f"{name}_labels.csv"
    vectors.write_text("\n".join(vec_lines) + "\n")
    label_file.write_text("\n".join(str(l) for l in labels) + "\n")
    return str(vectors), str(label_file)


@pytest.fixture
def cli_args(tmp_path):
    train_v, train_l = _write_split(tmp_path, "train", 40, seed=0)
    test_v, test_l = _write_split(tmp_path, "test", 15, seed=1)
    return [
        "--train-vectors", train_v, "--train-labels", train_l,
        "--test-vectors", test_v, "--test-labels", test_l,
        "--layers", "4", "6", "3",
        "--lr", "0.01",
        "--epochs", "3",
        "--output-dir", str(tmp_path / "out"),
        "--runs-root", str(tmp_path / "runs"),
        "--tag", "cli",
        "--quiet",
    ]


@pytest.mark.unit
class TestParseArgs:

    def test_defaults(self):
        args = parse_args([])
        assert args.layers == [784, 128, 64, 10]
        assert args.optimizer == "adam"
        assert args.lr == 0.0001
        assert args.momentum == 0.6
        assert args.l2 == 0.0
        assert args.seed == 0
        assert args.epochs == 15
        assert args.patience == 2
        assert args.val_frac == 0.1

    def test_rejects_unknown_optimizer(self):
        with pytest.raises(SystemExit):
            parse_args(["--optimizer", "sgd"])


@pytest.mark.integration
class TestPipeline:

    def test_writes_prediction_files(self, cli_args, tmp_path):
        main(cli_args + ["--no-plots"])
        train_preds = (tmp_path / "out" / "train_predictions.csv").read_text().splitlines()
        test_preds = (tmp_path / "out" / "test_predictions.csv").read_text().splitlines()
        assert len(train_preds) == 40
        assert len(test_preds) == 15
        assert all(p in {"0", "1", "2"} for p in train_preds + test_preds)

    def test_saves_run_logs_and_plots(self, cli_args, tmp_path):
        metrics = run(parse_args(cli_args + ["--optimizer", "momentum"]))
        assert 0.0 <= metrics["accuracy"] <= 1.0
        run_dirs = list((tmp_path / "runs").iterdir())
        assert len(run_dirs) == 1
        run_dir = run_dirs[0]
        assert (run_dir / "history.csv").exists()
        assert (run_dir / "history.json").exists()
        assert (run_dir / "metrics_summary.json").exists()
        assert (run_dir / "plots" / "confusion_matrix_cli.png").exists()

    def test_missing_data_propagates(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            main([
                "--train-vectors", str(tmp_path / "missing.csv"),
                "--train-labels", str(tmp_path / "missing_labels.csv"),
                "--runs-root", str(tmp_path / "runs"),
                "--quiet",
            ])
