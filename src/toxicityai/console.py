# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import sys
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape
from rich.table import Table


@dataclass
class MLConsole:
    enabled: bool = True

    def __post_init__(self) -> None:
        self._console = Console(color_system="auto", soft_wrap=True) if self.enabled else None
        self._errors = Console(color_system="auto", soft_wrap=True, stderr=True) if self.enabled else None

    def rule(self, text: str) -> None:
        line = f"=============== {text} ==============="
        if self._console:
            self._console.print(f"[bold magenta]{escape(line)}[/bold magenta]")
        else:
            print(line)

    def blank(self) -> None:
        if self._console:
            self._console.print()
        else:
            print()

    def info(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold cyan]INFO[/bold cyan] {escape(text)}")
        else:
            print(f"[INFO] {text}")

    def warn(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold yellow]WARN[/bold yellow] {escape(text)}")
        else:
            print(f"[WARN] {text}")

    def success(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold green]OK[/bold green] {escape(text)}")
        else:
            print(f"[OK] {text}")

    def error(self, text: str) -> None:
        if self._errors:
            self._errors.print(f"[bold red]ERROR[/bold red] {escape(text)}")
        else:
            print(f"[ERROR] {text}", file=sys.stderr)

    def metrics_table(self, metrics: dict[str, float], *, title: str, percent: bool = False, ordered: bool = False) -> None:
        keys = list(metrics.keys()) if ordered else sorted(metrics.keys())
        fmt = "{:.2%}" if percent else "{:.4f}"
        if self._console:
            table = Table(title=title, show_lines=True)
            table.add_column("Metric", style="bold")
            table.add_column("Value", justify="right")
            for key in keys:
                table.add_row(key, fmt.format(float(metrics[key])))
            self._console.print(table)
            return

        print(title)
        for key in keys:
            print(f"- {key}: {fmt.format(float(metrics[key]))}")
