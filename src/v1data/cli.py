from __future__ import annotations

"""Command line interface for v1data using Typer."""

from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

import json
import logging

import typer
import yaml
from pydantic import ValidationError

from ._typer import bad_parameter, fail
from .config import Settings, load_settings
from .core import ArraySeries, ListSeries, MainCollection, to_array_series
from .core.convert import LOOKUP_MODES
from .generate import demo_collection, linear_sample, linear_values, make_rng, random_nodes
from .types import KIND_DTYPES
from .io import SeriesFormatError, load_array_series, save_array_series
from .utils.logging import get_logger

app = typer.Typer(help="Labeled, dated measurement series utilities")
logger = logging.getLogger(__name__)


def _parse_override_value(raw: str) -> object:
    lower = raw.lower()
    if lower in {"true", "false"}:
        return lower == "true"
    if lower in {"null", "none"}:
        return None
    for cast in (int, float):
        try:
            return cast(raw)
        except ValueError:
            pass
    return raw


def _apply_override(data: Dict[str, object], keys: List[str], raw_value: str) -> None:
    target = data
    for key in keys[:-1]:
        existing = target.get(key)
        if not isinstance(existing, dict):
            bad_parameter(f"unknown configuration key: {'.'.join(keys)}", param_hint="--set")
        target = existing
    if keys[-1] not in target:
        bad_parameter(f"unknown configuration key: {'.'.join(keys)}", param_hint="--set")
    # string fields keep the raw text
    current = target[keys[-1]]
    target[keys[-1]] = raw_value if isinstance(current, str) else _parse_override_value(raw_value)


def _resolve_kind(kind: Optional[str], settings: Settings) -> str:
    kind = (kind or settings.numeric.kind).lower()
    if kind not in KIND_DTYPES:
        bad_parameter(f"unknown numeric kind: {kind}", param_hint="--kind")
    return kind


def _load(path: Path, settings: Settings, debug: bool) -> ArraySeries:
    try:
        return load_array_series(path, encoding=settings.codec.encoding)
    except (SeriesFormatError, OSError) as exc:
        if debug:
            logger.exception("failed to load %s", path)
            raise
        fail(f"Failed to load {path}: {exc}")


def _save(path: Path, series: ArraySeries, settings: Settings, debug: bool) -> None:
    try:
        save_array_series(path, series, encoding=settings.codec.encoding)
    except OSError as exc:
        if debug:
            logger.exception("failed to save %s", path)
            raise
        fail(f"Failed to save {path}: {exc}")


def _report(collection: MainCollection) -> None:
    for series in collection.series():
        lo, hi = series.min_max_difference
        typer.echo(f"{series}: length = {series.length}, min/max |Y1-Y2| = ({lo}, {hi})")
    typer.echo(f"max |Y1| = {collection.max_y1_magnitude()}")
    repeating = collection.repeating_x_coordinates()
    typer.echo("repeating X: " + (", ".join(map(str, repeating)) if repeating else "none"))


@app.callback()
def init(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        dir_okay=False,
        file_okay=True,
        help="Path to a YAML or JSON configuration file.",
    ),
    set_overrides: List[str] = typer.Option(
        [],
        "--set",
        help="Override configuration values using dotted paths, e.g. render.format=.3f",
    ),
) -> None:
    """Initialise the Typer context with validated settings."""

    if config is not None and not config.exists():
        bad_parameter(f"configuration file not found: {config}", param_hint="--config")

    try:
        settings = load_settings(config) if config else Settings()
    except (TypeError, ValueError, yaml.YAMLError) as exc:
        bad_parameter(f"failed to load configuration: {exc}", param_hint="--config")

    if set_overrides:
        data = settings.model_dump()
        for override in set_overrides:
            key, sep, raw_value = override.partition("=")
            if not sep or not key:
                bad_parameter("overrides must be of the form --set section.key=value", param_hint="--set")
            _apply_override(data, key.split("."), raw_value)
        try:
            settings = Settings.model_validate(data)
        except ValidationError as exc:
            bad_parameter(f"invalid configuration override: {exc}", param_hint="--set")

    get_logger(level=settings.logging.level)
    ctx.obj = settings


@app.command()
def demo(
    ctx: typer.Context,
    n_array: Optional[int] = typer.Option(None, "--n-array", min=0),
    n_list: Optional[int] = typer.Option(None, "--n-list", min=0),
    nodes: Optional[int] = typer.Option(None, "--nodes", min=0),
    seed: Optional[int] = typer.Option(None, "--seed"),
    kind: Optional[str] = typer.Option(None, "--kind", help="real or complex"),
) -> None:
    """Generate a demo collection and print it with its aggregates."""

    cfg: Settings = ctx.obj
    kind = _resolve_kind(kind, cfg)

    collection = demo_collection(
        n_array if n_array is not None else cfg.demo.n_array,
        n_list if n_list is not None else cfg.demo.n_list,
        n_nodes=nodes if nodes is not None else cfg.demo.n_nodes,
        kind=kind,
        step=cfg.demo.step,
        seed=seed if seed is not None else cfg.demo.seed,
    )
    typer.echo(collection.render_long(cfg.render.format))
    _report(collection)


@app.command()
def generate(
    ctx: typer.Context,
    output: Path = typer.Argument(..., dir_okay=False),
    key: str = typer.Option("Array_0", "--key", "-k"),
    x: List[float] = typer.Option([], "--x", help="Explicit coordinates; repeat the option."),
    nodes: Optional[int] = typer.Option(None, "--nodes", min=0),
    seed: Optional[int] = typer.Option(None, "--seed"),
    kind: Optional[str] = typer.Option(None, "--kind"),
    debug: bool = typer.Option(False, "--debug", help="Show tracebacks on failure"),
) -> None:
    """Save an array-backed series with ``y1 = x`` and ``y2 = 3x``."""

    cfg: Settings = ctx.obj
    kind = _resolve_kind(kind, cfg)

    if x:
        xs = list(x)
    else:
        rng = make_rng(seed if seed is not None else cfg.demo.seed)
        xs = random_nodes(nodes if nodes is not None else cfg.demo.n_nodes, rng, cfg.demo.step)

    series = ArraySeries.from_function(key, datetime.now(), xs, linear_values(kind), kind=kind)
    _save(output, series, cfg, debug)
    typer.echo(f"Saved {series} to {output}")


@app.command()
def convert(
    ctx: typer.Context,
    output: Path = typer.Argument(..., dir_okay=False),
    x: List[float] = typer.Option(..., "--x", help="Coordinates; repeat the option."),
    key: str = typer.Option("List_0", "--key", "-k"),
    lookup: str = typer.Option("positional", "--lookup", help="positional or first_match"),
    kind: Optional[str] = typer.Option(None, "--kind"),
    debug: bool = typer.Option(False, "--debug"),
) -> None:
    """Build a list-backed series, convert it to arrays and save it."""

    cfg: Settings = ctx.obj
    if lookup not in LOOKUP_MODES:
        bad_parameter(f"lookup must be one of {', '.join(LOOKUP_MODES)}", param_hint="--lookup")
    kind = _resolve_kind(kind, cfg)

    source = ListSeries.from_function(key, datetime.now(), x, linear_sample(kind))
    series = to_array_series(source, lookup=lookup, kind=kind)
    typer.echo(source.render_long(cfg.render.format))
    _save(output, series, cfg, debug)
    typer.echo(f"Saved {series} to {output}")


@app.command()
def show(
    ctx: typer.Context,
    path: Path = typer.Argument(..., dir_okay=False),
    index: Optional[int] = typer.Option(None, "--index", "-i", help="Print a single sample."),
    debug: bool = typer.Option(False, "--debug"),
) -> None:
    """Print a saved series in long form."""

    cfg: Settings = ctx.obj
    series = _load(path, cfg, debug)
    if index is None:
        typer.echo(series.render_long(cfg.render.format))
        return
    sample = series[index]
    typer.echo(sample.format(cfg.render.format) if sample is not None else f"index {index}: absent")


@app.command()
def stats(
    ctx: typer.Context,
    paths: List[Path] = typer.Argument(..., dir_okay=False),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON summary."),
    debug: bool = typer.Option(False, "--debug"),
) -> None:
    """Load saved series into one collection and print the aggregates."""

    cfg: Settings = ctx.obj
    collection = MainCollection()
    for path in paths:
        series = _load(path, cfg, debug)
        if not collection.add(series):
            typer.secho(f"Skipped {path}: duplicate key {series.key!r} and date", err=True)

    if as_json:
        summary = {
            "count": len(collection),
            "max_y1_magnitude": collection.max_y1_magnitude(),
            "repeating_x": collection.repeating_x_coordinates(),
        }
        typer.echo(json.dumps(summary))
        return
    typer.echo(str(collection))
    _report(collection)


def main() -> None:
    """Execute the Typer application."""

    app()


if __name__ == "__main__":
    main()
