"""CLI interface using Typer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from maxprotein.app_logging import configure_logging
from maxprotein.config import get_settings
from maxprotein.config.settings import Settings, default_config_path
from maxprotein.optimizer.models import (
    CandidateLimitError,
    DatasetError,
    FoodVector,
    SelectionAlgorithm,
)

app = typer.Typer(
    help="Maximize protein within a calorie budget, greedily or by exhaustive search",
    no_args_is_help=True,
)
console = Console()

config_app = typer.Typer(help="Manage configuration")
app.add_typer(config_app, name="config")


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict) -> None:
    """Output JSON response to stdout."""
    print(json.dumps(response, indent=2))


def load_dataset(path: Optional[Path]) -> FoodVector:
    """Load every valid food from the dataset.

    Raises typer.Exit(1) with a friendly message if the dataset cannot be loaded.
    """
    from maxprotein.data.abbrev_loader import load_usda_abbrev

    settings = get_settings()
    path = path or settings.data.abbrev_path
    if path is None:
        console.print("[red]No dataset given.[/red]")
        console.print(
            "Pass a path to ABBREV.txt or set [cyan]data.abbrev_path[/cyan] "
            "in the config file."
        )
        raise typer.Exit(1)

    try:
        return load_usda_abbrev(path, settings.data.encoding)
    except DatasetError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def load_candidates(
    path: Optional[Path],
    min_kcal: Optional[int],
    max_kcal: Optional[int],
    count: Optional[int],
) -> FoodVector:
    """Load the dataset and filter it, filling unset bounds from settings."""
    from maxprotein.optimizer.filter import filter_food_vector

    settings = get_settings()
    return filter_food_vector(
        load_dataset(path),
        settings.selection.min_kcal if min_kcal is None else min_kcal,
        settings.selection.max_kcal if max_kcal is None else max_kcal,
        settings.selection.candidate_count if count is None else count,
    )


def resolve_algorithm(algorithm: Optional[SelectionAlgorithm]) -> SelectionAlgorithm:
    """Return the requested algorithm, or the configured default.

    Raises typer.Exit(1) if the configured default is not a known algorithm.
    """
    if algorithm is not None:
        return algorithm

    configured = get_settings().selection.algorithm
    try:
        return SelectionAlgorithm(configured)
    except ValueError:
        choices = ", ".join(a.value for a in SelectionAlgorithm)
        console.print(
            f"[red]Unknown algorithm in config: {escape(str(configured))}[/red]"
        )
        console.print(f"Set selection.algorithm to one of: {choices}")
        raise typer.Exit(1)


def resolve_budget(budget: Optional[int]) -> int:
    return get_settings().selection.total_kcal if budget is None else budget


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logging"
    ),
) -> None:
    """Maximize protein within a calorie budget."""
    configure_logging(verbose)


# ============================================================================
# Main Commands
# ============================================================================


@app.command()
def optimize(
    path: Optional[Path] = typer.Argument(
        None, help="Path to USDA ABBREV.txt (defaults to data.abbrev_path)"
    ),
    algorithm: Optional[SelectionAlgorithm] = typer.Option(
        None, "--algorithm", "-a", help="Selection algorithm"
    ),
    min_kcal: Optional[int] = typer.Option(
        None, "--min-kcal", min=0, help="Minimum kcal per food"
    ),
    max_kcal: Optional[int] = typer.Option(
        None, "--max-kcal", min=0, help="Maximum kcal per food"
    ),
    count: Optional[int] = typer.Option(
        None, "--count", "-n", min=0, help="Maximum number of candidate foods"
    ),
    budget: Optional[int] = typer.Option(
        None, "--budget", "-b", min=0, help="Total calorie budget"
    ),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format: table, json, text"
    ),
) -> None:
    """Select foods that maximize protein within the calorie budget."""
    from maxprotein.export.formatters import format_result
    from maxprotein.optimizer.runner import run_selection

    foods = load_candidates(path, min_kcal, max_kcal, count)
    selected_algorithm = resolve_algorithm(algorithm)

    try:
        result = run_selection(foods, selected_algorithm, resolve_budget(budget))
    except CandidateLimitError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    try:
        output = format_result(
            result,
            output_format or get_settings().defaults.output_format,
            console,
        )
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if output is not None:
        print(output)


@app.command()
def compare(
    path: Optional[Path] = typer.Argument(
        None, help="Path to USDA ABBREV.txt (defaults to data.abbrev_path)"
    ),
    min_kcal: Optional[int] = typer.Option(
        None, "--min-kcal", min=0, help="Minimum kcal per food"
    ),
    max_kcal: Optional[int] = typer.Option(
        None, "--max-kcal", min=0, help="Maximum kcal per food"
    ),
    count: Optional[int] = typer.Option(
        None, "--count", "-n", min=0, help="Maximum number of candidate foods"
    ),
    budget: Optional[int] = typer.Option(
        None, "--budget", "-b", min=0, help="Total calorie budget"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output as JSON"
    ),
) -> None:
    """Run greedy and exhaustive selection on the same candidates."""
    from maxprotein.export.formatters import TableFormatter, result_to_dict
    from maxprotein.optimizer.runner import compare_algorithms

    foods = load_candidates(path, min_kcal, max_kcal, count)

    try:
        comparison = compare_algorithms(foods, resolve_budget(budget))
    except CandidateLimitError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if json_output:
        output_json({
            "greedy": result_to_dict(comparison.greedy),
            "exhaustive": result_to_dict(comparison.exhaustive),
            "protein_gap": comparison.protein_gap,
        })
    else:
        TableFormatter(console).format_comparison(comparison)


@app.command()
def benchmark(
    path: Optional[Path] = typer.Argument(
        None, help="Path to USDA ABBREV.txt (defaults to data.abbrev_path)"
    ),
    sizes: Optional[str] = typer.Option(
        None, "--sizes", "-s", help="Comma-separated candidate counts, e.g. 5,10,15"
    ),
    algorithm: Optional[SelectionAlgorithm] = typer.Option(
        None, "--algorithm", "-a", help="Selection algorithm"
    ),
    min_kcal: Optional[int] = typer.Option(
        None, "--min-kcal", min=0, help="Minimum kcal per food"
    ),
    max_kcal: Optional[int] = typer.Option(
        None, "--max-kcal", min=0, help="Maximum kcal per food"
    ),
    budget: Optional[int] = typer.Option(
        None, "--budget", "-b", min=0, help="Total calorie budget"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output as JSON"
    ),
) -> None:
    """Time an algorithm over growing candidate counts."""
    from maxprotein.export.formatters import TableFormatter, result_to_dict
    from maxprotein.optimizer import runner

    settings = get_settings()
    if sizes:
        try:
            size_list = [int(s.strip()) for s in sizes.split(",") if s.strip()]
        except ValueError:
            console.print(f"[red]Invalid sizes: {escape(sizes)}[/red]")
            raise typer.Exit(1)
    else:
        size_list = settings.benchmark.sizes

    if any(n < 0 for n in size_list):
        console.print("[red]Sizes must be non-negative.[/red]")
        raise typer.Exit(1)

    source = load_dataset(path)
    selected_algorithm = resolve_algorithm(algorithm)

    def progress(result) -> None:
        if not json_output:
            console.print(
                f"  n = {result.candidate_count}: {result.elapsed_seconds:.6f}s"
            )

    try:
        results = runner.benchmark(
            source,
            size_list,
            selected_algorithm,
            settings.selection.min_kcal if min_kcal is None else min_kcal,
            settings.selection.max_kcal if max_kcal is None else max_kcal,
            resolve_budget(budget),
            progress_callback=progress,
        )
    except CandidateLimitError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if json_output:
        output_json({
            "algorithm": selected_algorithm.value,
            "runs": [result_to_dict(r) for r in results],
        })
    else:
        TableFormatter(console).format_benchmark(results)


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="Config file (defaults to ~/.maxprotein/config.yaml)"
    ),
) -> None:
    """Print the effective configuration as YAML."""
    import yaml

    settings = Settings.load(config_path)
    print(yaml.dump(settings.to_dict(), default_flow_style=False, sort_keys=False))


@config_app.command("init")
def config_init(
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="Config file (defaults to ~/.maxprotein/config.yaml)"
    ),
    abbrev_path: Optional[Path] = typer.Option(
        None, "--abbrev", help="Path to USDA ABBREV.txt"
    ),
    force: bool = typer.Option(
        False, "--force", help="Overwrite an existing config file"
    ),
) -> None:
    """Write a config file with default settings."""
    target = config_path or default_config_path()
    if target.exists() and not force:
        console.print(f"[yellow]Config already exists: {escape(str(target))}[/yellow]")
        console.print("Use [cyan]--force[/cyan] to overwrite.")
        raise typer.Exit(1)

    settings = Settings()
    if abbrev_path:
        settings.data.abbrev_path = abbrev_path.expanduser().resolve()
    settings.save(target)
    console.print(f"[green]Wrote config to {escape(str(target))}[/green]")


if __name__ == "__main__":
    app()
