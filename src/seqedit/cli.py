from __future__ import annotations

"""CLI entrypoint for seqedit."""

from typing import List

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import DistanceQuery, build_query
from .distance import distance_grid
from .grid import Grid

app = typer.Typer(help="Levenshtein edit distance between two strings.")
console = Console()


def _load_query(first: str, second: str, unit: str, ignore_case: bool) -> DistanceQuery:
    try:
        return build_query(
            first=first, second=second, unit=unit, case_sensitive=not ignore_case
        )
    except ValueError as exc:
        console.print(f"[red]Invalid arguments[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1)


def _grid_table(grid: Grid, first: List[str], second: List[str]) -> Table:
    table = Table(title="Edit distance table")
    table.add_column("")
    table.add_column("ε", justify="right")
    for element in first:
        table.add_column(escape(element), justify="right")
    labels = ["ε", *(escape(element) for element in second)]
    for label, row in zip(labels, grid.rows()):
        table.add_row(label, *(str(v) for v in row))
    return table


@app.command()
def distance(
    first: str = typer.Argument(..., help="Source string."),
    second: str = typer.Argument(..., help="Target string."),
    unit: str = typer.Option(
        "char", "--unit", "-u", help="Element granularity: 'char' or 'word'."
    ),
    ignore_case: bool = typer.Option(
        False, "--ignore-case", "-i", help="Lower-case both inputs before comparing."
    ),
    show_grid: bool = typer.Option(
        False, "--show-grid", help="Render the filled dynamic-programming table."
    ),
) -> None:
    query = _load_query(first, second, unit, ignore_case)
    first_tokens, second_tokens = query.tokens()
    grid = distance_grid(first_tokens, second_tokens)

    if show_grid:
        console.print(_grid_table(grid, first_tokens, second_tokens))
    console.print(grid[grid.height - 1, grid.width - 1])


@app.command()
def grid(
    first: str = typer.Argument(..., help="Source string."),
    second: str = typer.Argument(..., help="Target string."),
    unit: str = typer.Option("char", "--unit", "-u", help="'char' or 'word'."),
    ignore_case: bool = typer.Option(False, "--ignore-case", "-i"),
) -> None:
    query = _load_query(first, second, unit, ignore_case)
    table = distance_grid(*query.tokens())
    typer.echo(str(table), nl=False)


if __name__ == "__main__":  # pragma: no cover
    app()
