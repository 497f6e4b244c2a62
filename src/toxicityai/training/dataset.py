# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Sequence

import pandas as pd

from ..errors import DatasetNotFoundError, DatasetParseError
from ..schemas import DEFAULT_COLUMNS, LABEL_COLUMN, TEXT_COLUMN, ColumnKind, ColumnSpec, Sample

TRUE_TOKENS = {"1", "true", "t", "yes", "y"}
FALSE_TOKENS = {"0", "false", "f", "no", "n"}


def _safe_text(value: object) -> str:
    if value is None or (isinstance(value, float) and value != value):
        return ""
    return str(value)


def parse_bool_token(token: str) -> bool | None:
    lowered = token.strip().lower()
    if lowered in TRUE_TOKENS:
        return True
    if lowered in FALSE_TOKENS:
        return False
    try:
        number = float(lowered)
    except ValueError:
        return None
    if number != number:  # NaN
        return None
    return number != 0.0


def _empty_frame(columns: Sequence[ColumnSpec]) -> pd.DataFrame:
    data = {spec.name: pd.Series(dtype=bool if spec.kind == ColumnKind.BOOL else object) for spec in columns}
    return pd.DataFrame(data)


def _convert_column(raw: pd.Series, spec: ColumnSpec, *, path: Path, first_line: int) -> pd.Series:
    values: list[object] = []
    for offset, value in enumerate(raw.tolist()):
        line = first_line + offset
        if value is None or (isinstance(value, float) and value != value):
            raise DatasetParseError(path, f"missing column {spec.index} ({spec.name})", line=line)
        if spec.kind == ColumnKind.BOOL:
            parsed = parse_bool_token(str(value))
            if parsed is None:
                raise DatasetParseError(path, f"'{value}' is not a boolean for column {spec.name}", line=line)
            values.append(parsed)
        else:
            values.append(str(value))
    dtype = bool if spec.kind == ColumnKind.BOOL else object
    return pd.Series(values, dtype=dtype, name=spec.name)


def load_dataset(
    path: str | Path,
    columns: Sequence[ColumnSpec] = DEFAULT_COLUMNS,
    *,
    separator: str = "\t",
    has_header: bool = True,
) -> pd.DataFrame:
    """Read a delimited file into a frame typed by ``columns``.

    Quoting is disabled so free text keeps its quote characters. A file with
    only a header row yields an empty frame with the schema's columns.
    """
    source = Path(path)
    if not source.is_file():
        raise DatasetNotFoundError(source)

    try:
        raw = pd.read_csv(
            source,
            sep=separator,
            header=None,
            skiprows=1 if has_header else 0,
            dtype=str,
            keep_default_na=False,
            quoting=csv.QUOTE_NONE,
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError:
        return _empty_frame(columns)
    except pd.errors.ParserError as exc:
        raise DatasetParseError(source, str(exc).strip()) from exc
    except UnicodeDecodeError as exc:
        raise DatasetParseError(source, f"not valid UTF-8 ({exc.reason})") from exc

    first_line = 2 if has_header else 1
    if raw.empty:
        return _empty_frame(columns)
    width = raw.shape[1]
    converted: dict[str, pd.Series] = {}
    for spec in columns:
        if spec.index >= width:
            raise DatasetParseError(
                source,
                f"expected at least {spec.index + 1} columns, found {width}",
                line=first_line,
            )
        converted[spec.name] = _convert_column(raw[spec.index], spec, path=source, first_line=first_line)
    return pd.DataFrame(converted)


def to_samples(df: pd.DataFrame) -> list[Sample]:
    return [
        Sample(label=bool(item.get(LABEL_COLUMN, False)), text=_safe_text(item.get(TEXT_COLUMN)))
        for item in df.to_dict(orient="records")
    ]


def to_dataframe(rows: Iterable[Sample]) -> pd.DataFrame:
    data = [{LABEL_COLUMN: bool(row.label), TEXT_COLUMN: row.text} for row in rows]
    if not data:
        return _empty_frame(DEFAULT_COLUMNS)
    return pd.DataFrame(data)
