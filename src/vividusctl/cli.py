"""Root CLI group for vividusctl with global flags and command registration."""

from __future__ import annotations

import click

from vividusctl import __version__
from vividusctl.commands import register_commands
from vividusctl.commands._base import VividusGroup
from vividusctl.commands._context import AppContext
from vividusctl.config.settings import VividusSettings


def _parse_properties(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str]:
    """Turn repeated ``-P KEY=VALUE`` options into a dict (last one wins)."""
    properties: dict[str, str] = {}
    for raw in values:
        key, sep, value = raw.partition("=")
        if not sep or not key.strip():
            msg = f"expected KEY=VALUE, got {raw!r}"
            raise click.BadParameter(msg)
        properties[key.strip()] = value
    return properties


@click.group(
    cls=VividusGroup,
    invoke_without_command=True,
    examples="""\
  vividusctl check-dependencies
  vividusctl -P vividus.variables.env=qa run-stories
  vividusctl -P fileToSaveExitCode=exit-code.txt run-stories --treat-known-issues-only-as-passed
  vividusctl -P expectedRunStatistics=expected.json validate-run-statistics
  vividusctl -P file=steps.txt print-steps""",
)
@click.version_option(version=__version__, prog_name="vividusctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-P",
    "--property",
    "properties",
    multiple=True,
    callback=_parse_properties,
    metavar="KEY=VALUE",
    help="Project property; vividus.* keys become JVM system properties.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    properties: dict[str, str],
) -> None:
    """vividusctl — run and check VIVIDUS test projects."""
    settings = VividusSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        cli_properties=properties,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
