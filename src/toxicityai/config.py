# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import get_bool_env, get_env, get_float_env, get_int_env

DEFAULT_TRAIN_FILE = "comments-train.tsv"
DEFAULT_TEST_FILE = "comments-test.tsv"
DEFAULT_MODEL_FILE = "Model.joblib"


@dataclass(frozen=True)
class AppConfig:
    train_path: Path
    test_path: Path
    model_path: Path
    num_trees: int = 50
    num_leaves: int = 50
    min_samples_leaf: int = 20
    seed: int = 0
    threshold: float = 0.5
    evaluate_on_load: bool = False
    verbose: bool = False
    rich_output: bool = True

    @property
    def metadata_path(self) -> Path:
        return self.model_path.with_name(f"{self.model_path.stem}.metadata.json")

    @classmethod
    def from_data_dir(cls, data_dir: str | Path, **overrides: object) -> "AppConfig":
        root = Path(data_dir)
        return cls(
            train_path=root / DEFAULT_TRAIN_FILE,
            test_path=root / DEFAULT_TEST_FILE,
            model_path=root / DEFAULT_MODEL_FILE,
            **overrides,  # type: ignore[arg-type]
        )

    @classmethod
    def from_env(cls, base_dir: str | Path | None = None) -> "AppConfig":
        base = Path(base_dir) if base_dir is not None else Path.cwd()
        data_dir = Path(get_env("TOXICITY_DATA_DIR", str(base / "Data")) or base / "Data")
        threshold = min(max(get_float_env("TOXICITY_THRESHOLD", 0.5), 0.0), 1.0)
        return cls(
            train_path=data_dir / (get_env("TOXICITY_TRAIN_FILE", DEFAULT_TRAIN_FILE) or DEFAULT_TRAIN_FILE),
            test_path=data_dir / (get_env("TOXICITY_TEST_FILE", DEFAULT_TEST_FILE) or DEFAULT_TEST_FILE),
            model_path=data_dir / (get_env("TOXICITY_MODEL_FILE", DEFAULT_MODEL_FILE) or DEFAULT_MODEL_FILE),
            num_trees=max(get_int_env("TOXICITY_NUM_TREES", 50), 1),
            num_leaves=max(get_int_env("TOXICITY_NUM_LEAVES", 50), 2),
            min_samples_leaf=max(get_int_env("TOXICITY_MIN_SAMPLES_LEAF", 20), 1),
            seed=get_int_env("TOXICITY_SEED", 0),
            threshold=threshold,
            evaluate_on_load=get_bool_env("TOXICITY_EVALUATE_ON_LOAD", False),
            verbose=get_bool_env("TOXICITY_VERBOSE", False),
            rich_output=get_bool_env("TOXICITY_RICH", True),
        )
