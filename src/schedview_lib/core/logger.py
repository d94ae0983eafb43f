# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from .config import CFG


def get_logger(name: str, show_time: bool = False) -> logging.Logger:
    """
    Return a schedview logger writing colored records to stderr.

    Records go to stderr so that views dumped to stdout (e.g. with `--yaml`)
    stay machine-readable. Debug records and timestamps are enabled
    by setting the SCHEDVIEW_DEBUG environment variable.

    Args:
        name (str): Name of the logger, usually `__name__`.
        show_time (bool): Prefix records with timestamps even outside debug mode.

    Returns:
        logging.Logger: The configured logger.
    """
    debug_mode = os.environ.get(CFG.env_vars.debug_mode) is not None
    level = logging.DEBUG if debug_mode else logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    # repeated calls must not duplicate the output
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(_create_handler(show_time or debug_mode))

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger


def _create_handler(show_time: bool) -> RichHandler:
    return RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        show_level=True,
        show_time=show_time,
        log_time_format=CFG.date_formats.standard,
        tracebacks_width=None,
        tracebacks_code_width=None,
    )
