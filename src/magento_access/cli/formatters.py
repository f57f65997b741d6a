"""Output formatters for CLI commands."""

import csv
import io
import json
from collections.abc import Sequence
from typing import Any, TypeVar

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from magento_access.api.results import ApiResult, Empty, Failed, Ok
from magento_access.cli.config import OutputFormat

console = Console()
error_console = Console(stderr=True)

T = TypeVar("T")


def unwrap_result(result: ApiResult[T]) -> T | None:
    """Report Empty/Failed results and return the value of an Ok result."""
    match result:
        case Ok(value=value):
            return value
        case Empty():
            print_warning("The store returned no data.")
        case Failed(reason=reason):
            print_error(f"Request failed: {reason}")
    return None


def format_output(
    data: BaseModel | Sequence[BaseModel],
    output_format: OutputFormat,
    *,
    title: str | None = None,
    columns: list[str] | None = None,
) -> None:
    """Format and print models in the specified format.

    Args:
        data: A Pydantic model or a list of models
        output_format: Output format (table, json, csv)
        title: Optional title for table output
        columns: Optional column names to include (for table/csv)
    """
    items = [data] if isinstance(data, BaseModel) else list(data)
    rows = [item.model_dump(mode="json", exclude_none=True) for item in items]

    if output_format == OutputFormat.JSON:
        _format_json(rows)
    elif output_format == OutputFormat.CSV:
        _format_csv(rows, columns)
    else:
        _format_table(rows, title, columns)


def _format_json(data: list[dict[str, Any]]) -> None:
    if len(data) == 1:
        console.print_json(json.dumps(data[0], default=str))
    else:
        console.print_json(json.dumps(data, default=str))


def _format_csv(data: list[dict[str, Any]], columns: list[str] | None) -> None:
    if not data:
        return

    if columns is None:
        columns = list(data[0].keys())

    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=columns, extrasaction="ignore")
    writer.writeheader()
    writer.writerows(data)
    console.print(output.getvalue(), end="")


def _snake_to_title(s: str) -> str:
    """Convert snake_case to Title Case for table headers."""
    return " ".join(word.capitalize() for word in s.split("_"))


def _format_table(
    data: list[dict[str, Any]],
    title: str | None,
    columns: list[str] | None,
) -> None:
    if not data:
        console.print("[dim]No data[/dim]")
        return

    if columns is None:
        columns = list(data[0].keys())

    table = Table(title=title, show_header=True, header_style="bold")
    for col in columns:
        table.add_column(_snake_to_title(col))

    for row in data:
        table.add_row(*[str(row.get(col, "")) for col in columns])

    console.print(table)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]Error:[/red] {message}")


def print_success(message: str) -> None:
    console.print(f"[green]✓[/green] {message}")


def print_warning(message: str) -> None:
    console.print(f"[yellow]Warning:[/yellow] {message}")


def print_info(message: str) -> None:
    console.print(f"[blue]i[/blue] {message}")
