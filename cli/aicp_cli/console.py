from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console()


def _tagged(tag: str, msg: str) -> None:
    console.print(f"{tag} {escape(msg)}")


def print_json(data) -> None:
    console.print_json(data=data)


def info(msg: str) -> None:
    _tagged("[bold cyan]•[/]", msg)


def ok(msg: str) -> None:
    _tagged("[bold green]OK[/]", msg)


def warn(msg: str) -> None:
    _tagged("[bold yellow]WARN[/]", msg)


def err(msg: str) -> None:
    _tagged("[bold red]ERR[/]", msg)


def print(*args, **kwargs):
    """Proxy to the shared rich Console.print()."""
    console.print(*args, **kwargs)
