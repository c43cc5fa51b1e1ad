"""Colored terminal output.

Everything the user is meant to read goes through a rich Console so tests can
capture it by passing their own Console(file=...).
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


def make_console() -> Console:
    return Console(highlight=False)


def heading(console: Console, text: str) -> None:
    console.print(f"[bold white]{escape(text)}[/]")


def command(console: Console, text: str) -> None:
    console.print(f"[white]{escape(text)}[/]")


def success(console: Console, text: str) -> None:
    console.print(f"[bold green]{escape(text)}[/]")


def warn(console: Console, text: str) -> None:
    console.print(f"[bold yellow]{escape(text)}[/]")


def error(console: Console, text: str) -> None:
    console.print(f"[red]{escape(text)}[/]")


def plain(console: Console, text: str) -> None:
    console.print(escape(text))
