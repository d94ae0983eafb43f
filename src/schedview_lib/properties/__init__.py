# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Records read from the store of the scheduling agent.

This module provides the data representations underlying schedview's model:
jobs, their executions, cluster members, and the health status derived
from the outcomes of executions.
"""
