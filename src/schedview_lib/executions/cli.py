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
from schedview_lib.executions.presenter import ExecutionsPresenter
from schedview_lib.views.assembler import ViewAssembler

logger = get_logger(__name__)


@click.command(
    short_help="Display the execution history of a job.",
    help=f"""Display the most recent executions of the specified job, grouped by the scheduling event
that launched them. At most {CFG.dashboard.max_executions} executions are shown.

{click.style("JOB", fg="green")}   The name of the job.""",
    cls=HelpColorsCommand,
    help_options_color="bright_blue",
)
@click.argument(
    "job",
    type=str,
    metavar=click.style("JOB", fg="green"),
)
@store_options
def executions(
    job: str,
    backend: str | None,
    data_dir: Path | None,
    keyspace: str | None,
    node_name: str | None,
    as_yaml: bool,
) -> NoReturn:
    try:
        assembler = ViewAssembler.fromBackend(backend, data_dir, keyspace, node_name)
        view = assembler.buildExecutionsView(job)

        if not view.by_group:
            logger.info(f"No executions found for job '{job}'.")

        presenter = ExecutionsPresenter(view)
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
