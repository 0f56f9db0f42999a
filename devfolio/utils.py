"""Shared utility functions for devfolio.

Provides JSON I/O, file-system helpers, and Rich-based console reporting used
by the store, the exporter and the CLI.  Status output goes to stdout;
errors and warnings go to stderr so ``devfolio render`` can stream a page on
stdout.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# JSON documents
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Read a JSON document.

    A top-level value that is not an object comes back as ``{"_root": value}``
    so callers always receive a mapping.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    document = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(document, dict):
        return document
    return {"_root": document}


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Write *data* as indented UTF-8 JSON, creating parent directories.

    The write happens in a worker thread.
    """
    text = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    await asyncio.to_thread(write_text, Path(path), text)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create *path* (and parents) if missing and return it resolved."""
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory.resolve()


def write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def write_bytes(path: Path, content: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(rows: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column field/value table followed by a blank line."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Field", style="dim", no_wrap=True)
    table.add_column("Value", overflow="fold")
    for field, value in rows.items():
        table.add_row(field, str(value))
    console.print(table)
    console.print()


def print_success(message: str) -> None:
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red message to stderr."""
    err_console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow message to stderr."""
    err_console.print(f"[bold yellow]{message}[/bold yellow]")
