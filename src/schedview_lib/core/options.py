# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Command-line options shared by all schedview commands.
"""

from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import click

from .config import CFG

F = TypeVar("F", bound=Callable)


def store_options(func: F) -> F:
    """
    Add the options selecting the store to read from to a click command.
    """
    options = [
        click.option(
            "-b",
            "--backend",
            type=str,
            default=None,
            help=f"Name of the store backend to read from. Defaults to '{CFG.store.backend}'.",
        ),
        click.option(
            "-d",
            "--data-dir",
            type=click.Path(file_okay=False, path_type=Path),
            default=None,
            envvar=CFG.env_vars.data_dir,
            help="Directory containing the store data.",
        ),
        click.option(
            "-k",
            "--keyspace",
            type=str,
            default=None,
            help=f"Keyspace to read from. Defaults to '{CFG.store.keyspace}'.",
        ),
        click.option(
            "-n",
            "--node-name",
            type=str,
            default=None,
            help="Name of the node serving the dashboard. Defaults to the hostname.",
        ),
        click.option(
            "--yaml", "as_yaml", is_flag=True, help="Output the view in YAML format."
        ),
    ]

    # apply in reverse so that the options are listed in the order above
    for option in reversed(options):
        func = option(func)

    return func
