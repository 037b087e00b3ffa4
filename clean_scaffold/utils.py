"""Shared helpers for clean-scaffold.

Provides feature-name derivation (PascalName / camelName) and the Rich-based
notice helpers every user-facing message goes through.
"""

from __future__ import annotations

import re

from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------

_SNAKE_CASE_RE = re.compile(r"^[a-z][a-z0-9]*(_[a-z0-9]+)*$")


def to_pascal(feature_name: str) -> str:
    """Convert a ``snake_case`` feature name to a PascalName.

    Splits on ``_`` and upper-cases only the first character of each
    segment; the rest of the segment is kept as-is.

    Examples::

        to_pascal("clean_arch")  -> "CleanArch"
        to_pascal("a_b_c")       -> "ABC"
        to_pascal("user_iD")     -> "UserID"
    """
    return "".join(part[:1].upper() + part[1:] for part in feature_name.split("_"))


def to_camel(pascal_name: str) -> str:
    """Lower-case the first character of a PascalName (``UserProfile`` -> ``userProfile``)."""
    return pascal_name[:1].lower() + pascal_name[1:]


def is_snake_case(feature_name: str) -> bool:
    """Return ``True`` if *feature_name* is lower-case words joined by underscores."""
    return bool(_SNAKE_CASE_RE.match(feature_name))


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_info(message: str) -> None:
    console.print(f"[cyan]{message}[/cyan]")


def print_summary_table(rows: list[tuple[str, str]], title: str = "Summary") -> None:
    """Print a two-column table.

    Unlike a dict, *rows* may repeat a label (one row per artifact).

    Args:
        rows: ``(label, value)`` pairs, printed in order.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Path")

    for label, value in rows:
        table.add_row(label, str(value))

    console.print(table)
    console.print()
