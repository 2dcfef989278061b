"""Helpers for turning library errors into Typer exceptions."""

from __future__ import annotations

from typing import NoReturn, Optional

import typer


def bad_parameter(message: str, *, param_hint: Optional[str] = None) -> NoReturn:
    """Raise :class:`typer.BadParameter`, naming the offending option if known."""

    if param_hint is None:
        raise typer.BadParameter(message)
    raise typer.BadParameter(message, param_hint=param_hint)


def fail(message: str, code: int = 1) -> NoReturn:
    """Print ``message`` to stderr and exit with ``code``."""

    typer.secho(message, err=True)
    raise typer.Exit(code)
