from __future__ import annotations

from typing import Any, Iterable

import typer

from models.reports import TrendReport

BANNER_LINES = (
    "       _(   '`.   _\\x/__",
    "  .=(`(    .   )   /X\\        CLOUD COMPUTING",
    "---- Welcome to the Sensor Feed Simulator. ---- ",
    "This program simulates a day's temperature fluctuations every 5 minutes.",
    "- Temperatures are collected continuously from simulated sensors",
    "- sensors deviate +/- 15% from the true temperature.",
    "- Every 10 seconds, an analysis process analyzes the temperatures.",
)


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_banner() -> None:
    for line in BANNER_LINES:
        typer.echo(line)


def render_report(report: TrendReport) -> None:
    typer.echo(report.format_line())
