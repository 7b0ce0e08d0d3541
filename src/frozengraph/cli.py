"""Root CLI group for frozengraph with global flags and command registration."""

from __future__ import annotations

import click

from frozengraph import __version__
from frozengraph.commands import register_commands
from frozengraph.commands._base import GraphGroup
from frozengraph.commands._context import AppContext
from frozengraph.config.settings import FrozenGraphSettings


@click.group(
    cls=GraphGroup,
    invoke_without_command=True,
    examples="""\
  frozengraph demo --edge TAS VIC
  frozengraph --strict --json demo --edge TAS NZ
  frozengraph check --raw-edge TAS NZ
  frozengraph -q uuid -n 3""",
)
@click.version_option(version=__version__, prog_name="frozengraph")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--strict", is_flag=True, help="Fail when an edge names a missing vertex.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    strict: bool,
    config_path: str | None,
) -> None:
    """frozengraph: immutable graph toolkit."""
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
        "strict": strict,
    }
    # Unset flags must not mask env vars or TOML values.
    settings = FrozenGraphSettings.from_cli(
        config_path=config_path,
        **{name: True for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
