# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import re
import unicodedata
from collections import Counter

import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.feature_extraction.text import TfidfVectorizer

from .schemas import TEXT_COLUMN

URL_RE = re.compile(r"https?://[^\s<>\"']+|www\.[^\s<>\"']+", flags=re.IGNORECASE)
NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]", flags=re.IGNORECASE)
TOKEN_RE = re.compile(r"[a-z0-9_'-]{3,40}", flags=re.IGNORECASE)
REPEATED_CHAR_RE = re.compile(r"(.)\1{4,}")
UPPER_RE = re.compile(r"[A-Z]")
ALNUM_RE = re.compile(r"[A-Za-z0-9]")
DIGIT_RE = re.compile(r"\d")
WHITESPACE_RE = re.compile(r"\s+")

NUMERIC_COLUMNS = [
    "url_count",
    "symbol_ratio",
    "upper_ratio",
    "digit_ratio",
    "repeat_char_flag",
    "exclaim_count",
]

FEATURE_COLUMNS = [TEXT_COLUMN, *NUMERIC_COLUMNS]


def _safe_text(value: object) -> str:
    if value is None or (isinstance(value, float) and value != value):
        return ""
    return str(value)


def normalize_text(text: str) -> str:
    """Lower-case, drop diacritics and collapse runs of whitespace."""
    decomposed = unicodedata.normalize("NFKD", _safe_text(text))
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return WHITESPACE_RE.sub(" ", stripped.lower()).strip()


def _symbol_ratio(text: str) -> float:
    if not text:
        return 0.0
    return min(len(NON_ALNUM_RE.findall(text)) / max(len(text), 1), 1.0)


def _ratio_for_regex(text: str, pattern: re.Pattern[str]) -> float:
    if not text:
        return 0.0
    den = len(ALNUM_RE.findall(text))
    if den <= 0:
        return 0.0
    return min(len(pattern.findall(text)) / float(den), 1.0)


def enrich_dataframe(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    if TEXT_COLUMN not in out.columns:
        out[TEXT_COLUMN] = ""
    out[TEXT_COLUMN] = out[TEXT_COLUMN].map(_safe_text)
    raw = out[TEXT_COLUMN]
    out["url_count"] = raw.map(lambda text: int(len(URL_RE.findall(text))))
    out["symbol_ratio"] = raw.map(_symbol_ratio)
    out["upper_ratio"] = raw.map(lambda text: _ratio_for_regex(text, UPPER_RE))
    out["digit_ratio"] = raw.map(lambda text: _ratio_for_regex(text, DIGIT_RE))
    out["repeat_char_flag"] = raw.map(lambda text: 1 if REPEATED_CHAR_RE.search(text) else 0)
    out["exclaim_count"] = raw.map(lambda text: int(text.count("!")))
    return out


def build_preprocessor() -> ColumnTransformer:
    return ColumnTransformer(
        transformers=[
            (
                "word_tfidf",
                TfidfVectorizer(analyzer="word", ngram_range=(1, 2), preprocessor=normalize_text, min_df=1),
                TEXT_COLUMN,
            ),
            (
                "char_tfidf",
                TfidfVectorizer(analyzer="char_wb", ngram_range=(3, 3), preprocessor=normalize_text, min_df=1),
                TEXT_COLUMN,
            ),
            ("num", "passthrough", NUMERIC_COLUMNS),
        ],
        sparse_threshold=0.3,
    )


def top_tokens(text: str, max_items: int = 5) -> list[str]:
    tokens = [match.group(0) for match in TOKEN_RE.finditer(normalize_text(text))]
    if not tokens:
        return []
    freq = Counter(tokens)
    return [token for token, _count in freq.most_common(max_items)]
