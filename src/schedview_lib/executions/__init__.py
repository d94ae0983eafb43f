# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Execution history of a job.

This module provides the `executions` command and `ExecutionsPresenter`,
which displays the most recent executions of a job grouped by the scheduling
event that launched them.
"""

from .cli import executions
from .presenter import ExecutionsPresenter

__all__ = ["ExecutionsPresenter", "executions"]
