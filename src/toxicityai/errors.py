# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Failure kinds raised by the loader, trainer and model store."""

from __future__ import annotations

from pathlib import Path


class ToxicityAIError(Exception):
    """Base class for every failure that aborts a run."""


class DatasetNotFoundError(ToxicityAIError, FileNotFoundError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Dataset not found: {path}")
        self.path = path


class DatasetParseError(ToxicityAIError, ValueError):
    def __init__(self, path: Path, message: str, *, line: int | None = None) -> None:
        where = f"{path}:{line}" if line is not None else str(path)
        super().__init__(f"Malformed dataset {where}: {message}")
        self.path = path
        self.line = line


class ModelNotFoundError(ToxicityAIError, FileNotFoundError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Model not found: {path}")
        self.path = path


class CorruptModelError(ToxicityAIError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Model file {path} is unreadable: {reason}")
        self.path = path


class TrainingError(ToxicityAIError):
    pass
