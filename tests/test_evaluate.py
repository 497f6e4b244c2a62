from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from tests.conftest import write_tsv
from toxicityai.evaluation.evaluate import compute_metrics, evaluate_model, evaluate_saved_model, report_metrics
from toxicityai.store import ModelStore
from toxicityai.training.trainer import train_model


def test_compute_metrics_known_values():
    metrics = compute_metrics(pd.Series([0, 1, 1, 0]), [0.1, 0.9, 0.4, 0.6], threshold=0.5)

    assert metrics.accuracy == pytest.approx(0.5)
    assert metrics.f1 == pytest.approx(0.5)
    assert metrics.auc == pytest.approx(0.75)
    assert metrics.confusion == {"tn": 1, "fp": 1, "fn": 1, "tp": 1}
    assert metrics.rows == 4


def test_auc_is_zero_for_single_class():
    metrics = compute_metrics(pd.Series([1, 1]), [0.7, 0.8])

    assert metrics.auc == 0.0
    assert metrics.accuracy == 1.0


def test_tiny_dataset_scenario_is_better_than_chance(context, tmp_path: Path):
    train = write_tsv(
        tmp_path / "train.tsv",
        [(1, "This is terrible"), (0, "I love this"), (1, "terrible, just terrible"), (0, "I really love this")],
    )
    test = write_tsv(tmp_path / "test.tsv", [(1, "This is terrible stuff"), (0, "I love this a lot")])

    model = train_model(context, context.load(train))
    metrics = evaluate_model(context, model, context.load(test))

    assert metrics.accuracy >= 0.5


def test_evaluate_held_out(context, fitted_model, test_df):
    metrics = evaluate_model(context, fitted_model, test_df)

    assert metrics.rows == len(test_df)
    assert 0.0 <= metrics.auc <= 1.0
    assert metrics.accuracy >= 0.5


def test_empty_dataset_gives_zero_metrics(context, fitted_model, test_df):
    metrics = evaluate_model(context, fitted_model, test_df.iloc[0:0])

    assert metrics.rows == 0
    assert metrics.accuracy == 0.0


def test_report_metrics_prints_percentages(context, capsys):
    metrics = compute_metrics(pd.Series([0, 1]), [0.2, 0.8])

    report_metrics(context, metrics)

    out = capsys.readouterr().out
    assert "=============== Model quality metrics evaluation ===============" in out
    lines = out.splitlines()
    headline = [line for line in lines if line.startswith("- ")][:3]
    assert headline == ["- Accuracy: 100.00%", "- Auc: 100.00%", "- F1Score: 100.00%"]
    assert "- log_loss: " in out
    assert "[INFO]" not in out
    assert "End of model evaluation" in out


def test_evaluate_saved_model(context, fitted_model, config):
    ModelStore(config.model_path).save(fitted_model)

    metrics = evaluate_saved_model(context, model_path=config.model_path, dataset_path=config.test_path)

    assert metrics == evaluate_model(context, fitted_model, context.load(config.test_path))


def test_probability_at_threshold_is_not_toxic():
    metrics = compute_metrics(pd.Series([0, 1]), [0.5, 0.5], threshold=0.5)

    assert metrics.confusion == {"tn": 1, "fp": 0, "fn": 1, "tp": 0}
