# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Landing page of the dashboard.

This module provides the `index` command and `IndexPresenter`, which shows
the identity metadata of the scheduler cluster: version, current leader,
serving node, and the configured store.
"""

from .cli import index
from .presenter import IndexPresenter

__all__ = ["IndexPresenter", "index"]
