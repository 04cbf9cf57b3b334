"""
Command-line interface for discrete_bayes
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..classifier import NaiveBayesClassifier
from ..core.config import Config
from ..core.exceptions import DiscreteBayesError
from ..persistence import load_model


app = typer.Typer(help="Discrete Naive Bayes classifier.", add_completion=False, no_args_is_help=True)
console = Console()

_state: Dict[str, Config] = {}


def setup_logging(config: Config, debug: bool = False, verbose: bool = False) -> None:
    """Setup logging from config, with --verbose/--debug overrides"""
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = logging.INFO
    else:
        log_level = getattr(logging, str(config.get('logging.level', 'WARNING')).upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format=config.get('logging.format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
        datefmt='%H:%M:%S'
    )
    logging.getLogger('discrete_bayes').setLevel(log_level)


def parse_observations(values: List[str]) -> Dict[str, str]:
    """Turn ["Fever=yes", "Red spots=no"] into {"Fever": "yes", "Red spots": "no"}"""
    observations: Dict[str, str] = {}
    for item in values:
        feature, sep, state = item.partition("=")
        if not sep or not feature or not state:
            raise typer.BadParameter(f"Expected FEATURE=STATE, got {item!r}", param_hint="--observe")
        if feature in observations:
            raise typer.BadParameter(f"Feature {feature!r} observed more than once", param_hint="--observe")
        observations[feature] = state
    return observations


def _load(model: str) -> NaiveBayesClassifier:
    try:
        return load_model(model, config=_state["config"])
    except DiscreteBayesError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1)


@app.callback()
def main(
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to a YAML config file"),
    tolerance: Optional[float] = typer.Option(
        None, "--tolerance", help="Accept probability sums within this distance of 1.0"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at INFO level"),
    debug: bool = typer.Option(False, "--debug", help="Log at DEBUG level"),
) -> None:
    """Inspect, validate and query Naive Bayes model files."""
    try:
        config = Config(config_path)
        if tolerance is not None:
            config.set('classifier.tolerance', tolerance)
    except DiscreteBayesError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1)
    setup_logging(config, debug=debug, verbose=verbose)
    _state['config'] = config


@app.command()
def show(model: str = typer.Argument(..., help="Path to a YAML model file")) -> None:
    """Print the priors and conditional probabilities of a model."""
    classifier = _load(model)
    labels = classifier.get_labels()

    priors = Table(title="Priors", show_lines=True)
    priors.add_column("Label")
    priors.add_column("P(label)", justify="right")
    for label, prior in zip(labels, classifier.get_priors()):
        priors.add_row(label, f"{prior:.4f}")
    console.print(priors)

    for feature in classifier.get_features():
        table = Table(title=f"P({feature} | label)", show_lines=True)
        table.add_column("State")
        for label in labels:
            table.add_column(label, justify="right")
        for state in classifier.get_states(feature):
            table.add_row(state, *(f"{p:.4f}" for p in classifier.get_conditionals(feature, state)))
        console.print(table)


@app.command()
def validate(model: str = typer.Argument(..., help="Path to a YAML model file")) -> None:
    """Check that priors and conditionals sum to 1.0."""
    classifier = _load(model)
    try:
        classifier.validate()
    except DiscreteBayesError as exc:
        console.print(f"[red]Inconsistent:[/red] {exc}")
        raise typer.Exit(code=1)
    console.print("[green]✓ Model is consistent[/green]")


@app.command()
def classify(
    model: str = typer.Argument(..., help="Path to a YAML model file"),
    observe: Optional[List[str]] = typer.Option(None, "--observe", "-o", help="Observed FEATURE=STATE (repeatable)"),
    as_json: bool = typer.Option(False, "--json", help="Print the posterior as JSON"),
) -> None:
    """Compute the posterior over class labels given observed feature states."""
    observations = parse_observations(observe or [])
    classifier = _load(model)
    try:
        posterior = classifier.posterior(observations)
    except DiscreteBayesError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1)

    if as_json:
        console.print_json(data={
            "observations": posterior.observations,
            "posterior": posterior.as_dict(),
            "most_probable": posterior.most_probable(),
            "evidence": posterior.evidence,
        })
        return

    table = Table(title="Posterior", show_lines=True)
    table.add_column("Label")
    table.add_column("P(label | observations)", justify="right")
    best = posterior.most_probable()
    for label, probability in posterior.as_dict().items():
        name = f"[bold]{label}[/bold]" if label == best else label
        table.add_row(name, f"{probability:.6f}")
    console.print(table)


if __name__ == "__main__":
    app()
