"""Root CLI group for ratetier.

Global flags only reach the settings when given on the command line, so
``RATETIER_*`` env vars and ``ratetier.toml`` still apply to unset flags.
"""

from __future__ import annotations

import click

from ratetier import __version__
from ratetier.commands import register_commands
from ratetier.commands._context import AppContext
from ratetier.config.settings import RateSettings

_FLAG_NAMES = ("json_output", "quiet", "verbose", "log_json")


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="ratetier")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print bare rates only.")
@click.option("-v", "--verbose", is_flag=True, help="Show error detail and debug logs.")
@click.option("--log-json", is_flag=True, help="Write log lines to stderr as JSON.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read this ratetier.toml instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """ratetier: balance-tiered interest rate resolver."""
    given = {name: True for name in _FLAG_NAMES if flags[name]}
    ctx.obj = AppContext(RateSettings.from_cli(config_path=config_path, **given))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
