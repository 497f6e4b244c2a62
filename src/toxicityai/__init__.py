# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Toxic comment classifier."""

from .config import AppConfig
from .context import RunContext
from .inference.predictor import MLPredictor, load_predictor
from .schemas import EvaluationMetrics, PredictionResult, Sample
from .store import ModelStore

__all__ = [
    "AppConfig",
    "RunContext",
    "Sample",
    "PredictionResult",
    "EvaluationMetrics",
    "MLPredictor",
    "ModelStore",
    "load_predictor",
]
