"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and normalization results.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import CaseCodecError
from .models.datatypes import NormalizedText


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CaseCodecError):
        typer.secho(f"{command_name} failed: {exc.detail}", fg=typer.colors.RED, err=True)
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_normalized(result: NormalizedText, show_offsets: bool = False) -> None:
    """Print normalized text and, optionally, its offset map and counters."""

    typer.echo(result.text)
    if show_offsets:
        typer.echo("Offsets: " + " ".join(str(offset) for offset in result.offsets))
        typer.echo(f"Units: {result.unit_count}")
        typer.echo(f"Markers: {result.marker_count}")
