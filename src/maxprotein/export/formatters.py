"""Output formatters for selection results."""

from __future__ import annotations

import json
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from maxprotein.optimizer.models import ComparisonResult, FoodVector, SelectionResult


def _food_to_dict(food) -> dict:
    return {
        "description": food.description,
        "amount": food.amount,
        "amount_g": food.amount_g,
        "kcal": food.kcal,
        "protein_g": food.protein_g,
    }


def result_to_dict(result: SelectionResult) -> dict:
    """Convert a SelectionResult to a JSON-serializable dict."""
    return {
        "algorithm": result.algorithm.value,
        "candidate_count": result.candidate_count,
        "total_kcal_budget": result.total_kcal_budget,
        "foods": [_food_to_dict(f) for f in result.foods],
        "total_kcal": result.total_kcal,
        "total_protein_g": result.total_protein_g,
        "elapsed_seconds": round(result.elapsed_seconds, 6),
    }


class TableFormatter:
    """Format results as Rich tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich console for output. If None, creates a new one.
        """
        self.console = console or Console()

    def format(self, result: SelectionResult) -> None:
        """Print the selected foods and totals to the console."""
        header = (
            f"[bold]{result.algorithm.value.upper()}[/bold] - "
            f"n = {result.candidate_count}, budget = {result.total_kcal_budget} kcal"
        )
        self.console.print(Panel(header, title="Max Protein"))

        if not result.foods:
            self.console.print("[yellow]No foods fit within the calorie budget.[/yellow]")

        table = Table(title="Selected Foods")
        table.add_column("Food", style="cyan", max_width=50)
        table.add_column("Serving", max_width=30)
        table.add_column("kcal", justify="right")
        table.add_column("Protein (g)", justify="right", style="green")

        for food in result.foods:
            table.add_row(
                escape(food.description[:50]),
                f"{escape(food.amount)} ({food.amount_g} g)",
                str(food.kcal),
                str(food.protein_g),
            )

        table.add_row(
            "[bold]TOTAL[/bold]",
            "",
            f"[bold]{result.total_kcal}[/bold]",
            f"[bold]{result.total_protein_g}[/bold]",
            style="bold",
        )
        self.console.print(table)
        self.console.print(f"[dim]Time: {result.elapsed_seconds:.6f}s[/dim]")

    def format_comparison(self, comparison: ComparisonResult) -> None:
        """Print greedy and exhaustive results side by side."""
        table = Table(title="Greedy vs Exhaustive")
        table.add_column("Algorithm")
        table.add_column("Foods", justify="right")
        table.add_column("kcal", justify="right")
        table.add_column("Protein (g)", justify="right", style="green")
        table.add_column("Time (s)", justify="right")

        for result in (comparison.greedy, comparison.exhaustive):
            table.add_row(
                result.algorithm.value,
                str(len(result.foods)),
                str(result.total_kcal),
                str(result.total_protein_g),
                f"{result.elapsed_seconds:.6f}",
            )
        self.console.print(table)

        if comparison.protein_gap > 0:
            self.console.print(
                f"[yellow]Greedy is {comparison.protein_gap} g of protein "
                f"short of optimal.[/yellow]"
            )
        else:
            self.console.print("[green]Greedy found an optimal selection.[/green]")

    def format_benchmark(self, results: list[SelectionResult]) -> None:
        """Print one row per benchmarked candidate count."""
        title = f"{results[0].algorithm.value} benchmark" if results else "Benchmark"
        table = Table(title=title)
        table.add_column("n", justify="right")
        table.add_column("Elapsed (s)", justify="right")
        table.add_column("Sum kcal", justify="right")
        table.add_column("Protein (g)", justify="right", style="green")

        for result in results:
            table.add_row(
                str(result.candidate_count),
                f"{result.elapsed_seconds:.6f}",
                str(result.total_kcal),
                str(result.total_protein_g),
            )
        self.console.print(table)


class JSONFormatter:
    """Format results as JSON for programmatic use."""

    def format(self, result: SelectionResult) -> str:
        return json.dumps(result_to_dict(result), indent=2)


class TextFormatter:
    """Plain one-line-per-food format."""

    def format_foods(self, foods: FoodVector, total_kcal: int, total_protein_g: int) -> str:
        lines = [
            f"{food.description} (100 g where each {food.amount} is {food.amount_g} g)"
            f" kcal={food.kcal} protein={food.protein_g} g"
            for food in foods
        ]
        lines.append(f"total kcal={total_kcal} total_protein={total_protein_g} g")
        return "\n".join(lines)

    def format(self, result: SelectionResult) -> str:
        return self.format_foods(result.foods, result.total_kcal, result.total_protein_g)


def format_result(
    result: SelectionResult,
    output_format: str = "table",
    console: Optional[Console] = None,
) -> Optional[str]:
    """Format a selection result in the specified format.

    Args:
        result: Selection result to format
        output_format: One of 'table', 'json', 'text'
        console: Rich console (for table format)

    Returns:
        Formatted string for json/text, None for table (prints directly)
    """
    if output_format == "table":
        TableFormatter(console).format(result)
        return None
    elif output_format == "json":
        return JSONFormatter().format(result)
    elif output_format == "text":
        return TextFormatter().format(result)
    else:
        raise ValueError(f"Unknown output format: {output_format}")
