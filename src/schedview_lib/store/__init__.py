# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Read-only access to the store and the cluster membership of the scheduling agent.

This module defines the interfaces schedview consumes from its collaborators:

- `StoreInterface`: listing jobs, the latest execution group of a job,
  and the full execution history of a job.

- `ClusterInterface`: resolving the currently elected cluster leader.

- `BackendMeta`: a metaclass that registers available store backends and
  selects one by name, from an environment variable, or from the configuration.
  The `@backend` decorator registers implementations automatically.

The `FileBackend` implementation reads snapshots of the store from YAML files.
"""

from .file import FileBackend
from .interface import ClusterInterface, StoreInterface
from .meta import BackendMeta, backend

__all__ = [
    "BackendMeta",
    "ClusterInterface",
    "FileBackend",
    "StoreInterface",
    "backend",
]
