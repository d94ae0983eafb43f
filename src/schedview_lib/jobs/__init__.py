# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Job list of the dashboard.

This module provides the `jobs` command and `JobsPresenter`, which formats
all jobs of the scheduler together with their health into a Rich panel.
"""

from .cli import jobs
from .presenter import JobsPresenter

__all__ = ["JobsPresenter", "jobs"]
