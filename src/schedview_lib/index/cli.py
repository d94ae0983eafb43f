# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys
from pathlib import Path
from typing import NoReturn

import click
from click_help_colors import HelpColorsCommand
from rich.console import Console

from schedview_lib.core.config import CFG
from schedview_lib.core.error import SVError
from schedview_lib.core.logger import get_logger
from schedview_lib.core.options import store_options
from schedview_lib.index.presenter import IndexPresenter
from schedview_lib.views.assembler import ViewAssembler

logger = get_logger(__name__)


@click.command(
    short_help="Display information about the scheduler cluster.",
    help="Display the scheduler version, the current cluster leader, the serving node, and the configured store.",
    cls=HelpColorsCommand,
    help_options_color="bright_blue",
)
@store_options
def index(
    backend: str | None,
    data_dir: Path | None,
    keyspace: str | None,
    node_name: str | None,
    as_yaml: bool,
) -> NoReturn:
    try:
        assembler = ViewAssembler.fromBackend(backend, data_dir, keyspace, node_name)
        presenter = IndexPresenter(assembler.buildIndexView())
        presenter.render(Console(record=False, markup=False), as_yaml)
        sys.exit(0)
    except SVError as e:
        logger.error(e)
        print()
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        print()
        sys.exit(CFG.exit_codes.unexpected_error)
