"""daystamp CLI entry point."""

import logging
from pathlib import Path

import click

from .config_cmd import config_cmd
from .preview_cmd import preview_cmd
from .tools_cmd import elapsed_cmd, parse_cmd


@click.group()
@click.version_option(package_name="daystamp")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Override settings file (default: ~/.config/daystamp/daystamp.yaml)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """Preview chat-style date and time labels."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


cli.add_command(preview_cmd, "preview")
cli.add_command(elapsed_cmd, "elapsed")
cli.add_command(parse_cmd, "parse")
cli.add_command(config_cmd, "config")
