# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import hashlib
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import joblib
import pandas as pd
import sklearn
from sklearn.ensemble import GradientBoostingClassifier
from sklearn.pipeline import Pipeline

from ..config import AppConfig
from ..context import RunContext
from ..errors import TrainingError
from ..features import FEATURE_COLUMNS, build_preprocessor, enrich_dataframe
from ..schemas import LABEL_COLUMN


def _timestamp_key() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")


def file_fingerprint(path: Path) -> str:
    digest = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(65536), b""):
            digest.update(chunk)
    return digest.hexdigest()


def build_pipeline(config: AppConfig) -> Pipeline:
    return Pipeline(
        steps=[
            ("preprocessor", build_preprocessor()),
            (
                "clf",
                GradientBoostingClassifier(
                    n_estimators=config.num_trees,
                    max_leaf_nodes=config.num_leaves,
                    min_samples_leaf=config.min_samples_leaf,
                    random_state=config.seed,
                ),
            ),
        ]
    )


def train_model(context: RunContext, dataset: pd.DataFrame) -> Pipeline:
    if dataset.empty:
        raise TrainingError("Training dataset has no rows")
    labels = dataset[LABEL_COLUMN].astype(int)
    if labels.nunique() < 2:
        raise TrainingError(f"Training dataset needs both labels, found only {sorted(labels.unique().tolist())}")
    min_leaf = context.config.min_samples_leaf
    if len(dataset) < 2 * min_leaf:
        context.console.warn(
            f"Only {len(dataset)} training rows for min_samples_leaf={min_leaf}; "
            "trees cannot split and every prediction will be the class prior"
        )

    enriched = enrich_dataframe(dataset)
    pipeline = build_pipeline(context.config)

    context.console.rule("Create and Train the Model")
    try:
        pipeline.fit(enriched[FEATURE_COLUMNS], labels)
    except (ValueError, TypeError, MemoryError) as exc:
        raise TrainingError(f"Model fitting failed: {exc}") from exc
    context.console.rule("End of training")
    context.console.blank()
    return pipeline


def build_metadata(context: RunContext, dataset: pd.DataFrame) -> dict[str, Any]:
    config = context.config
    labels = dataset[LABEL_COLUMN].astype(int)
    metadata: dict[str, Any] = {
        "model_version": _timestamp_key(),
        "created_at_utc": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "train_rows": int(len(dataset)),
        "labels_positive": int(labels.sum()),
        "labels_negative": int((1 - labels).sum()),
        "features": list(FEATURE_COLUMNS),
        "threshold": float(config.threshold),
        "hyperparameters": {
            "num_trees": config.num_trees,
            "num_leaves": config.num_leaves,
            "min_samples_leaf": config.min_samples_leaf,
            "seed": config.seed,
        },
        "sklearn_version": sklearn.__version__,
        "joblib_version": joblib.__version__,
        "pandas_version": pd.__version__,
    }
    if config.train_path.is_file():
        metadata["train_path"] = str(config.train_path)
        metadata["train_sha256"] = file_fingerprint(config.train_path)
    return metadata
