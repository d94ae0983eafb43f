# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys

import click
from click_help_colors import HelpColorsGroup

from schedview_lib.executions.cli import executions
from schedview_lib.index.cli import index
from schedview_lib.jobs.cli import jobs
from schedview_lib.version import __version__

# support both --help and -h
_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(
    cls=HelpColorsGroup,
    help_headers_color="bright_blue",
    help_options_color="bright_blue",
    invoke_without_command=True,
    context_settings=_CONTEXT_SETTINGS,
)
@click.option(
    "--version",
    is_flag=True,
    help="Print the current version of schedview and exit.",
)
@click.pass_context
def cli(ctx: click.Context, version: bool):
    """
    Run any schedview command.

    schedview is a read-only dashboard of a distributed job scheduler,
    summarizing the health of jobs and their execution history.
    """
    if version:
        print(__version__)
        sys.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        sys.exit(0)


cli.add_command(index)
cli.add_command(jobs)
cli.add_command(executions)
