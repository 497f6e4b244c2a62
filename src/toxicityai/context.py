# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Per-run state shared by the loader, trainer, evaluator and predictor."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from .config import AppConfig
from .console import MLConsole
from .schemas import DEFAULT_COLUMNS, ColumnSpec
from .training.dataset import load_dataset


@dataclass(frozen=True)
class RunContext:
    config: AppConfig
    console: MLConsole
    columns: tuple[ColumnSpec, ...] = DEFAULT_COLUMNS
    separator: str = "\t"
    has_header: bool = True

    @classmethod
    def create(cls, config: AppConfig, *, console: MLConsole | None = None) -> "RunContext":
        return cls(config=config, console=console or MLConsole(enabled=config.rich_output))

    def load(self, path: Path) -> pd.DataFrame:
        return load_dataset(path, self.columns, separator=self.separator, has_header=self.has_header)
