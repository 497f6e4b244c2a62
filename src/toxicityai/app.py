# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Command-line flow: train or load the model, then classify the arguments."""

from __future__ import annotations

import json
import sys
from typing import Sequence

from sklearn.pipeline import Pipeline

from .config import AppConfig
from .context import RunContext
from .errors import ToxicityAIError
from .evaluation.evaluate import evaluate_model, report_metrics
from .features import top_tokens
from .inference.predictor import MLPredictor
from .schemas import PredictionResult
from .store import ModelStore
from .training.trainer import build_metadata, file_fingerprint, train_model


def stringify_args(args: Sequence[str]) -> str:
    return " ".join(args)


def train_evaluate_and_save(context: RunContext, store: ModelStore) -> Pipeline:
    config = context.config
    train_df = context.load(config.train_path)
    model = train_model(context, train_df)

    test_df = context.load(config.test_path)
    context.console.rule("Evaluating Model accuracy with Test data")
    report_metrics(context, evaluate_model(context, model, test_df))

    store.save(model, metadata=build_metadata(context, train_df))
    context.console.success(f"Model saved to {store.model_path}")
    return model


def _warn_if_stale(context: RunContext, store: ModelStore) -> None:
    recorded = store.load_metadata().get("train_sha256")
    train_path = context.config.train_path
    if not recorded or not train_path.is_file():
        return
    if file_fingerprint(train_path) != recorded:
        context.console.warn(
            f"Training data {train_path} changed since the stored model was built; "
            f"delete {store.model_path} to retrain"
        )


def load_existing(context: RunContext, store: ModelStore) -> Pipeline:
    context.console.info(f"Model appears to exist already: {store.model_path}")
    model = store.load()
    context.console.info("Model loaded from file.")
    _warn_if_stale(context, store)
    if context.config.evaluate_on_load:
        test_df = context.load(context.config.test_path)
        context.console.rule("Evaluating Model accuracy with Test data")
        report_metrics(context, evaluate_model(context, model, test_df))
    return model


def obtain_model(context: RunContext) -> Pipeline:
    store = ModelStore(context.config.model_path, metadata_path=context.config.metadata_path)
    if store.exists():
        return load_existing(context, store)
    return train_evaluate_and_save(context, store)


def emit_prediction(context: RunContext, result: PredictionResult) -> None:
    print(json.dumps(result.to_json_dict()), flush=True)
    if context.config.verbose:
        label = "Toxic" if result.prediction else "Not toxic"
        context.console.info(f"Sentiment: {label} | Confidence: {result.probability:.4f}")
        tokens = top_tokens(result.text, max_items=4)
        if tokens:
            context.console.info(f"Top tokens: {', '.join(tokens)}")


def main(argv: Sequence[str] | None = None, *, config: AppConfig | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    context = RunContext.create(config or AppConfig.from_env())
    try:
        model = obtain_model(context)
        predictor = MLPredictor(model, threshold=context.config.threshold)
        result = predictor.predict(stringify_args(args))
    except ToxicityAIError as exc:
        context.console.error(str(exc))
        return 1
    emit_prediction(context, result)
    return 0


def run() -> None:
    raise SystemExit(main())
