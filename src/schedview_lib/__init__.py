# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of the schedview command-line tool.

This package provides a read-only operational dashboard of a distributed
job-scheduling agent. It reads jobs, executions, and cluster membership from
a store backend, aggregates executions into groups, classifies the health of
jobs, and renders the resulting views for operators. All schedview commands
ultimately delegate to the functionality implemented here.
"""

from .schedview import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "core",
    "executions",
    "index",
    "jobs",
    "properties",
    "store",
    "views",
]
