# tests/conftest.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd
import pytest

from toxicityai.config import AppConfig
from toxicityai.context import RunContext
from toxicityai.training.trainer import train_model

TOXIC = [
    "You are a complete idiot",
    "This is terrible, stupid garbage",
    "Shut up you stupid idiot",
    "What a pathetic idiot",
    "Your edits are stupid trash",
    "You worthless stupid troll",
    "Idiot, this is terrible",
    "Stupid moron, go away",
]

CLEAN = [
    "Thanks for the helpful edit",
    "I love this article",
    "Please add a citation, thanks",
    "Great work on the summary",
    "Thank you for fixing the dates",
    "I love the new layout",
    "Thanks, the references look great",
    "Welcome to the project, happy editing",
]

HELD_OUT = [
    (True, "stupid idiot troll"),
    (False, "thanks, I love the summary"),
    (True, "this is terrible garbage, idiot"),
    (False, "great article, thank you"),
]


def write_tsv(path: Path, rows: Iterable[tuple[object, str]], *, header: str | None = "Sentiment\tSentimentText") -> Path:
    lines = [header] if header is not None else []
    lines.extend(f"{label}\t{text}" for label, text in rows)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def training_rows() -> list[tuple[int, str]]:
    rows: list[tuple[int, str]] = []
    for toxic, clean in zip(TOXIC, CLEAN):
        rows.append((1, toxic))
        rows.append((0, clean))
    return rows


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    root = tmp_path / "Data"
    write_tsv(root / "comments-train.tsv", training_rows())
    write_tsv(root / "comments-test.tsv", [(int(label), text) for label, text in HELD_OUT])
    return root


@pytest.fixture
def config(data_dir: Path) -> AppConfig:
    return AppConfig.from_data_dir(
        data_dir,
        num_trees=20,
        num_leaves=4,
        min_samples_leaf=1,
        seed=0,
        rich_output=False,
    )


@pytest.fixture
def context(config: AppConfig) -> RunContext:
    return RunContext.create(config)


@pytest.fixture
def train_df(context: RunContext, config: AppConfig) -> pd.DataFrame:
    return context.load(config.train_path)


@pytest.fixture
def test_df(context: RunContext, config: AppConfig) -> pd.DataFrame:
    return context.load(config.test_path)


@pytest.fixture
def fitted_model(context: RunContext, train_df: pd.DataFrame):
    return train_model(context, train_df)
