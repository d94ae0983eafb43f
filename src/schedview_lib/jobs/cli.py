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
from schedview_lib.jobs.presenter import JobsPresenter
from schedview_lib.views.assembler import ViewAssembler

logger = get_logger(__name__)


@click.command(
    short_help="Display the jobs and their health.",
    help="""Display all jobs of the scheduler. The health of each job is derived from its latest execution group:
success if no execution failed, danger if all executions failed, warning if some failed,
and unknown if the job has not been executed yet.""",
    cls=HelpColorsCommand,
    help_options_color="bright_blue",
)
@click.option(
    "-e",
    "--extra",
    is_flag=True,
    help="Show the full definitions of the jobs.",
)
@store_options
def jobs(
    extra: bool,
    backend: str | None,
    data_dir: Path | None,
    keyspace: str | None,
    node_name: str | None,
    as_yaml: bool,
) -> NoReturn:
    try:
        assembler = ViewAssembler.fromBackend(backend, data_dir, keyspace, node_name)
        view = assembler.buildJobsView()

        presenter = JobsPresenter(view, extra)
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
