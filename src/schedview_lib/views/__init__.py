# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Aggregation of executions and assembly of dashboard views.

This module turns raw, unordered execution records read from the store
into grouped, ordered, size-bounded and health-classified views:

- `group_executions`, `classify_executions`, `bound_executions`: pure
  functions over snapshots of executions.

- `DashboardContext`: identity metadata of the cluster collected once per request.

- `ViewAssembler`: composes the index view, the job list, and the execution
  history of a job from the store and the cluster membership.
"""

from .aggregate import bound_executions, classify_executions, group_executions
from .assembler import ViewAssembler
from .context import DashboardContext
from .models import ExecutionEntry, ExecutionsView, IndexView, JobEntry, JobsView

__all__ = [
    "DashboardContext",
    "ExecutionEntry",
    "ExecutionsView",
    "IndexView",
    "JobEntry",
    "JobsView",
    "ViewAssembler",
    "bound_executions",
    "classify_executions",
    "group_executions",
]
