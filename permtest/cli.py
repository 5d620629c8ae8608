"""Typer-based CLI for the two-sample permutation test."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from permtest.config import DEFAULT_TRIALS_PER_WORKER, DEFAULT_WORKERS, PermutationConfig
from permtest.errors import ConfigurationError, PermtestError
from permtest.hypothesis import format_report, run_from_files
from permtest.logging_utils import configure_logging
from permtest.stats.evidence import classify_p_value

app = typer.Typer(help="Two-sample permutation test on the difference of means.")


@app.command()
def run(
    control: Path = typer.Argument(Path("control.dat"), help="Control sample, one number per line."),
    treatment: Path = typer.Argument(
        Path("treatment.dat"), help="Treatment sample, one number per line."
    ),
    workers: int = typer.Option(DEFAULT_WORKERS, "--workers", "-w", help="Independent trial tasks."),
    trials_per_worker: int = typer.Option(
        DEFAULT_TRIALS_PER_WORKER, "--trials-per-worker", "-t", help="Permutations per task."
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Run-level seed for reproducible results."),
    threads: Optional[int] = typer.Option(None, "--threads", help="Thread pool size."),
    json_output: bool = typer.Option(False, "--json", help="Print the report as JSON."),
    log_level: str = typer.Option("warning", "--log-level", help="critical/error/warning/info/debug"),
) -> None:
    """Run the permutation test on CONTROL and TREATMENT and print the report."""
    configure_logging(log_level)
    try:
        config = PermutationConfig(
            workers=workers,
            trials_per_worker=trials_per_worker,
            seed=seed,
            max_threads=threads,
        )
    except ConfigurationError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    try:
        report = run_from_files(control, treatment, config)
    except PermtestError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if json_output:
        typer.echo(json.dumps(report.as_dict(), indent=2))
    else:
        typer.echo(format_report(report))


@app.command()
def classify(p_value: float = typer.Argument(..., help="p-value to describe.")) -> None:
    """Print the conventional wording for a p-value."""
    typer.echo(classify_p_value(p_value))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
