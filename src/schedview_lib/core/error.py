# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout schedview.

This module defines the schedview-specific exceptions: the common recoverable
error, lookup errors raised by store and cluster backends, and render errors
raised by presenters. Each exception carries an associated exit code used by
schedview commands to report failures consistently.
"""

from schedview_lib.core.config import CFG


class SVError(Exception):
    """Common exception type for all recoverable schedview errors."""

    exit_code = CFG.exit_codes.default


class SVLookupError(SVError):
    """
    Raised when the store or the cluster membership could not be queried.

    Never surfaces as a failed view; callers substitute empty or default values.
    """

    pass


class SVRenderError(SVError):
    """Raised when an assembled view could not be rendered."""

    exit_code = CFG.exit_codes.render_error
