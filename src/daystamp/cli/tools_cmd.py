"""daystamp elapsed / daystamp parse: single-purpose helpers."""

from __future__ import annotations

from datetime import timedelta

import click

from ..utils.timestamp import format_elapsed_time, parse_iso8601


@click.command()
@click.argument("seconds", type=int)
def elapsed_cmd(seconds: int) -> None:
    """Render SECONDS as a stopwatch reading (H:MM:SS or MM:SS)."""
    click.echo(format_elapsed_time(timedelta(seconds=seconds)))


@click.command()
@click.argument("text")
def parse_cmd(text: str) -> None:
    """Parse an ISO 8601 instant and print it normalised to UTC."""
    parsed = parse_iso8601(text)
    if parsed is None:
        click.echo(f"Not an ISO 8601 instant: {text}", err=True)
        raise SystemExit(1)
    click.echo(parsed.isoformat().replace("+00:00", "Z"))
