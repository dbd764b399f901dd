#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent interface across all commands.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"


class InfoPanel:
    """
    Simple panel for displaying status/info.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


class TableDisplay:
    """
    Formatted tables for tag weights and documents.
    """

    @staticmethod
    def show_tag_weights(weights: list[tuple[str, int]], title: str = "Tags"):
        """Display a ranked (tag, count) table."""
        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("#", style=COLOR_INFO, width=5)
        table.add_column("Tag", overflow="fold")
        table.add_column("Count", justify="right", width=8)

        for rank, (tag, count) in enumerate(weights, start=1):
            table.add_row(str(rank), tag, str(count))

        console.print(table)

    @staticmethod
    def show_documents(documents: list[dict[str, Any]], tag_field: str, title: str = "Documents"):
        """Display matching documents with their stored tags."""
        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("Key", style=COLOR_INFO)
        table.add_column("Tags", overflow="fold")

        for doc in documents:
            tags = doc.get(tag_field) or []
            if isinstance(tags, dict):
                tags_str = "; ".join(f"{locale}: {', '.join(values)}" for locale, values in sorted(tags.items()))
            else:
                tags_str = ", ".join(tags)
            table.add_row(str(doc.get("_key", "")), tags_str)

        console.print(table)


def show_spinner(message: str, task_fn: Callable, *args, **kwargs):
    """
    Show a spinner while executing a task.
    Returns the result of task_fn.
    """
    with console.status(f"[bold {COLOR_INFO}]{message}[/bold {COLOR_INFO}]"):
        return task_fn(*args, **kwargs)


def print_error(message: str):
    """Print an error message."""
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {message}")


def print_warning(message: str):
    """Print a warning message."""
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {message}")


def print_info(message: str):
    """Print an info message."""
    console.print(f"[{COLOR_INFO}]ℹ[/{COLOR_INFO}] {message}")
