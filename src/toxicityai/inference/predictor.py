# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from typing import Iterable

import pandas as pd
from sklearn.pipeline import Pipeline

from ..config import AppConfig
from ..features import FEATURE_COLUMNS, enrich_dataframe
from ..schemas import LABEL_COLUMN, TEXT_COLUMN, PredictionResult
from ..store import ModelStore


def _safe_text(value: object) -> str:
    return str(value or "")


class MLPredictor:
    def __init__(self, model: Pipeline, *, threshold: float = 0.5) -> None:
        self.model = model
        self.threshold = threshold

    def _score_frame(self, frame: pd.DataFrame) -> list[PredictionResult]:
        enriched = enrich_dataframe(frame)
        x = enriched[FEATURE_COLUMNS]
        probs = self.model.predict_proba(x)[:, 1].tolist()
        if hasattr(self.model, "decision_function"):
            scores = [float(value) for value in self.model.decision_function(x).ravel().tolist()]
        else:
            scores = list(probs)
        return [
            PredictionResult(
                prediction=bool(prob > self.threshold),
                probability=float(prob),
                score=score,
                text=text,
            )
            for text, prob, score in zip(enriched[TEXT_COLUMN].tolist(), probs, scores)
        ]

    def predict(self, text: str) -> PredictionResult:
        frame = pd.DataFrame([{LABEL_COLUMN: False, TEXT_COLUMN: _safe_text(text)}])
        return self._score_frame(frame)[0]

    def predict_batch(self, texts: Iterable[str]) -> list[PredictionResult]:
        items = [_safe_text(text) for text in texts]
        if not items:
            return []
        frame = pd.DataFrame({LABEL_COLUMN: [False] * len(items), TEXT_COLUMN: items})
        return self._score_frame(frame)


def load_predictor(config: AppConfig) -> MLPredictor:
    model = ModelStore(config.model_path, metadata_path=config.metadata_path).load()
    return MLPredictor(model, threshold=config.threshold)
