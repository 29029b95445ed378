"""Colour-coded console output (Rich).

Kept apart from logging: the console is for the person running the
installer, the log file is the full record.
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape

_console = Console(highlight=False, soft_wrap=True)

RULE = "=" * 48


def print_status(message: str) -> None:
    _console.print(f"[blue]\\[INFO][/blue] {escape(message)}")


def print_success(message: str) -> None:
    _console.print(f"[green]\\[SUCCESS][/green] {escape(message)}")


def print_warning(message: str) -> None:
    _console.print(f"[yellow]\\[WARNING][/yellow] {escape(message)}")


def print_error(message: str) -> None:
    _console.print(f"[red]\\[ERROR][/red] {escape(message)}")


def print_errors(message: str, hints: Sequence[str] = ()) -> None:
    print_error(message)
    for hint in hints:
        print_error(hint)


def print_banner(title: str, *, style: str = "blue") -> None:
    _console.print(f"[{style}]{RULE}[/{style}]")
    _console.print(f"[{style}]{escape(title).center(len(RULE)).rstrip()}[/{style}]")
    _console.print(f"[{style}]{RULE}[/{style}]")
    _console.print()


def print_plain(message: str = "") -> None:
    _console.print(escape(message))
