from __future__ import annotations

from typing import Iterable, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def print_json(data) -> None:
    console.print_json(data=data)


def ok(msg: str) -> None:
    console.print(f"[bold green]OK[/] {escape(msg)}")


def warn(msg: str) -> None:
    console.print(f"[bold yellow]WARN[/] {escape(msg)}")


def err(msg: str) -> None:
    console.print(f"[bold red]ERR[/] {escape(msg)}")


def print_table(title: str, columns: Sequence[str], rows: Iterable[Sequence[object]]) -> None:
    table = Table(title=title)
    for i, name in enumerate(columns):
        table.add_column(name, style="bold" if i == 0 else None)
    for row in rows:
        table.add_row(*(escape(str(v)) for v in row))
    console.print(table)
