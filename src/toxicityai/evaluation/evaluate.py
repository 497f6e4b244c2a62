# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from pathlib import Path

import pandas as pd
from sklearn.metrics import (
    accuracy_score,
    confusion_matrix,
    f1_score,
    log_loss,
    precision_score,
    recall_score,
    roc_auc_score,
)
from sklearn.pipeline import Pipeline

from ..context import RunContext
from ..features import FEATURE_COLUMNS, enrich_dataframe
from ..schemas import LABEL_COLUMN, EvaluationMetrics
from ..store import ModelStore


def _safe_auc(y_true: pd.Series, y_prob: list[float]) -> float:
    try:
        value = float(roc_auc_score(y_true, y_prob))
    except ValueError:
        return 0.0
    if value != value:  # NaN
        return 0.0
    return value


def _safe_log_loss(y_true: pd.Series, y_prob: list[float]) -> float:
    try:
        return float(log_loss(y_true, y_prob, labels=[0, 1]))
    except ValueError:
        return 0.0


def compute_metrics(y_true: pd.Series, y_prob: list[float], threshold: float = 0.5) -> EvaluationMetrics:
    y_pred = [1 if score > threshold else 0 for score in y_prob]
    tn, fp, fn, tp = confusion_matrix(y_true, y_pred, labels=[0, 1]).ravel()
    return EvaluationMetrics(
        accuracy=float(accuracy_score(y_true, y_pred)),
        auc=_safe_auc(y_true, y_prob),
        f1=float(f1_score(y_true, y_pred, zero_division=0)),
        precision=float(precision_score(y_true, y_pred, zero_division=0)),
        recall=float(recall_score(y_true, y_pred, zero_division=0)),
        log_loss=_safe_log_loss(y_true, y_prob),
        confusion={"tn": int(tn), "fp": int(fp), "fn": int(fn), "tp": int(tp)},
        rows=int(len(y_pred)),
    )


def evaluate_model(context: RunContext, model: Pipeline, dataset: pd.DataFrame) -> EvaluationMetrics:
    """Score ``dataset`` with ``model`` and compare against its labels."""
    if dataset.empty:
        return EvaluationMetrics(accuracy=0.0, auc=0.0, f1=0.0, precision=0.0, recall=0.0, log_loss=0.0)
    enriched = enrich_dataframe(dataset)
    y_true = enriched[LABEL_COLUMN].astype(int)
    probs = model.predict_proba(enriched[FEATURE_COLUMNS])[:, 1].tolist()
    return compute_metrics(y_true, probs, threshold=context.config.threshold)


def report_metrics(context: RunContext, metrics: EvaluationMetrics) -> None:
    console = context.console
    console.blank()
    console.rule("Model quality metrics evaluation")
    headline = {"Accuracy": metrics.accuracy, "Auc": metrics.auc, "F1Score": metrics.f1}
    console.metrics_table(headline, title=f"Test data ({metrics.rows} rows)", percent=True, ordered=True)
    console.metrics_table(metrics.as_table(), title="Details")
    console.rule("End of model evaluation")


def evaluate_saved_model(context: RunContext, *, model_path: Path, dataset_path: Path) -> EvaluationMetrics:
    model = ModelStore(model_path).load()
    return evaluate_model(context, model, context.load(dataset_path))
