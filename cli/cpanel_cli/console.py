from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console()

_PREFIXES = {
    "info": "[bold cyan]•[/]",
    "ok": "[bold green]OK[/]",
    "warn": "[bold yellow]WARN[/]",
    "err": "[bold red]ERR[/]",
}


def _emit(kind: str, msg: str) -> None:
    console.print(f"{_PREFIXES[kind]} {escape(msg)}")


def print_json(data: Any) -> None:
    """Pretty-print an API result; any JSON value is accepted."""
    console.print_json(data=data)


def info(msg: str) -> None:
    _emit("info", msg)


def ok(msg: str) -> None:
    _emit("ok", msg)


def warn(msg: str) -> None:
    _emit("warn", msg)


def err(msg: str) -> None:
    _emit("err", msg)
