# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Joblib-backed persistence for fitted pipelines.

Saving overwrites in place; a crash mid-write leaves a truncated file that
``load`` reports as corrupt.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import joblib
from sklearn.pipeline import Pipeline

from .errors import CorruptModelError, ModelNotFoundError


class ModelStore:
    def __init__(self, model_path: Path, *, metadata_path: Path | None = None) -> None:
        self.model_path = Path(model_path)
        self.metadata_path = (
            Path(metadata_path)
            if metadata_path is not None
            else self.model_path.with_name(f"{self.model_path.stem}.metadata.json")
        )

    def exists(self) -> bool:
        return self.model_path.is_file()

    def save(self, model: Pipeline, metadata: dict[str, Any] | None = None) -> Path:
        self.model_path.parent.mkdir(parents=True, exist_ok=True)
        with self.model_path.open("wb") as handle:
            joblib.dump(model, handle)
        if metadata is not None:
            self.metadata_path.write_text(json.dumps(metadata, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
        return self.model_path

    def load(self) -> Pipeline:
        if not self.exists():
            raise ModelNotFoundError(self.model_path)
        try:
            with self.model_path.open("rb") as handle:
                model = joblib.load(handle)
        except Exception as exc:
            raise CorruptModelError(self.model_path, f"{type(exc).__name__}: {exc}") from exc
        if not hasattr(model, "predict_proba"):
            raise CorruptModelError(self.model_path, f"stored object {type(model).__name__} is not a classifier")
        return model

    def load_metadata(self) -> dict[str, Any]:
        if not self.metadata_path.exists():
            return {}
        try:
            payload = json.loads(self.metadata_path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return payload if isinstance(payload, dict) else {}
