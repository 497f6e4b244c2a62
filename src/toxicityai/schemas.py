# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

LABEL_COLUMN = "label"
TEXT_COLUMN = "text"


class ColumnKind(str, Enum):
    BOOL = "bool"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class ColumnSpec:
    name: str
    kind: ColumnKind
    index: int


DEFAULT_COLUMNS = (
    ColumnSpec(LABEL_COLUMN, ColumnKind.BOOL, 0),
    ColumnSpec(TEXT_COLUMN, ColumnKind.TEXT, 1),
)


@dataclass(slots=True)
class Sample:
    label: bool
    text: str


@dataclass(slots=True)
class PredictionResult:
    prediction: bool
    probability: float
    score: float
    text: str = ""

    def to_json_dict(self) -> dict[str, bool | float]:
        return {"Prediction": self.prediction, "Probability": self.probability, "Score": self.score}


@dataclass(slots=True)
class EvaluationMetrics:
    accuracy: float
    auc: float
    f1: float
    precision: float
    recall: float
    log_loss: float
    confusion: dict[str, int] = field(default_factory=dict)
    rows: int = 0

    def as_table(self) -> dict[str, float]:
        return {
            "accuracy": self.accuracy,
            "auc": self.auc,
            "f1": self.f1,
            "precision": self.precision,
            "recall": self.recall,
            "log_loss": self.log_loss,
        }
