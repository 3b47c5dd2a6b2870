"""CLI interface for the construct analyzer."""

import json
import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from construct_analyzer.config.loader import (
    ConfigurationError,
    get_enabled_signal_names,
    get_pillar,
    load_config,
    resolve_config,
)
from construct_analyzer.consts import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV_VAR
from construct_analyzer.models.model_config import Pillar, Signal
from construct_analyzer.models.model_eval import TotalScorePolicy
from construct_analyzer.pipeline import run_batch_analysis

app = typer.Typer(
    name="construct-analyzer",
    help="Construct Analyzer - Score package health from collected signals",
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    """Configure logging from --verbose or the log level env var."""
    level = "DEBUG" if verbose else os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _parse_weight_overrides(entries: list[str] | None) -> dict[str, float]:
    """Parse repeated NAME=VALUE options into a weight override mapping."""
    overrides: dict[str, float] = {}
    for entry in entries or []:
        name, separator, raw_weight = entry.partition("=")
        name = name.strip()
        if not separator or not name:
            console.print(f"[red]Error:[/red] Invalid --weight '{entry}', expected NAME=VALUE")
            raise typer.Exit(1)
        try:
            overrides[name] = float(raw_weight)
        except ValueError:
            console.print(f"[red]Error:[/red] Invalid weight for '{name}': '{raw_weight}'")
            raise typer.Exit(1)
    return overrides


def _describe_benchmark(signal: Signal) -> str:
    """Short human-readable description of a signal's benchmark."""
    benchmark = signal.benchmark
    if benchmark.kind == "checklist":
        items = ", ".join(f"{name}={value:+g}" for name, value in benchmark.items.items())
        return f"checklist (start {benchmark.starting_score}): {items}"
    thresholds = " / ".join(f"{threshold:g}" for threshold in benchmark.thresholds)
    return f"{benchmark.kind}: {thresholds}"


@app.command()
def score(
    package_files: list[Path] = typer.Argument(..., help="Collected package data JSON file(s)"),
    config: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Scoring configuration JSON (default: $CONSTRUCT_ANALYZER_CONFIG or built-in)",
    ),
    weights: list[str] = typer.Option(
        None, "--weight", "-w", help="Override a signal weight as NAME=VALUE (repeatable)"
    ),
    policy: str = typer.Option(
        None, "--policy", help="Total score policy: 'unweighted' or 'weighted'"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Score collected package data and print the results as JSON."""
    _configure_logging(verbose)

    overrides = _parse_weight_overrides(weights)

    if policy is not None:
        try:
            policy = TotalScorePolicy(policy.lower())
        except ValueError:
            console.print(
                f"[red]Error:[/red] Invalid policy '{policy}'. Must be: unweighted, weighted"
            )
            raise typer.Exit(1)

    try:
        results = run_batch_analysis(
            package_files,
            config_path=config,
            weight_overrides=overrides,
            policy=policy,
        )
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    payload = [result.model_dump(mode="json") for result in results]
    typer.echo(json.dumps(payload[0] if len(payload) == 1 else payload, indent=2))


@app.command()
def signals(
    config: Path = typer.Option(None, "--config", "-c", help="Scoring configuration JSON"),
    pillar: str = typer.Option(None, "--pillar", "-p", help="Only show this pillar"),
    include_disabled: bool = typer.Option(
        False, "--include-disabled", help="Also show disabled signals"
    ),
) -> None:
    """List configured pillars, signals, weights and benchmarks."""
    try:
        scoring_config = resolve_config(config)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    pillars: tuple[Pillar, ...] = scoring_config.pillars
    if pillar:
        selected = get_pillar(scoring_config, pillar)
        if selected is None:
            names = ", ".join(p.name for p in scoring_config.pillars)
            console.print(f"[red]Error:[/red] Unknown pillar '{pillar}'. Available: {names}")
            raise typer.Exit(1)
        pillars = (selected,)

    table = Table(title=f"Scoring Signals ({scoring_config.total_score_policy.value} total)")
    table.add_column("Pillar", style="cyan")
    table.add_column("Signal", style="bold")
    table.add_column("Weight", justify="right", style="magenta")
    table.add_column("Benchmark", style="blue")
    table.add_column("Enabled", justify="center")
    table.add_column("Description", style="dim")

    for p in pillars:
        for signal in p.signals:
            if not signal.enabled and not include_disabled:
                continue
            table.add_row(
                p.name,
                signal.name,
                f"{signal.weight:g}",
                _describe_benchmark(signal),
                "[green]yes[/green]" if signal.enabled else "[dim]no[/dim]",
                signal.description,
            )

    console.print(table)


@app.command("validate-config")
def validate_config(
    path: Path = typer.Argument(..., help="Scoring configuration JSON to validate"),
) -> None:
    """Validate a scoring configuration file."""
    try:
        scoring_config = load_config(path)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    enabled = get_enabled_signal_names(scoring_config)
    console.print(
        f"[green]Configuration OK:[/green] {len(scoring_config.pillars)} pillars, "
        f"{len(enabled)} enabled signals"
    )


if __name__ == "__main__":
    app()
