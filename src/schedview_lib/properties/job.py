# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Representation of jobs tracked by the scheduling agent.

This module defines the `Job` dataclass, a read-only snapshot of a job
definition as stored by the agent. Apart from the name, the dashboard
does not interpret any of the job's attributes; they are shown verbatim
to the operator as a pretty-printed JSON definition.
"""

import json
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Self

from schedview_lib.core.common import (
    format_datetime,
    parse_bool,
    parse_datetime,
    parse_tags,
)
from schedview_lib.core.config import CFG


@dataclass(frozen=True)
class Job:
    """
    Dataclass storing the definition of a scheduled job.
    """

    # Unique name of the job
    name: str

    # Schedule expression of the job
    schedule: str | None = None

    # Command executed by the job
    command: str | None = None

    # Owner of the job
    owner: str | None = None

    # E-mail address of the owner
    owner_email: str | None = None

    # Number of successful runs
    success_count: int = 0

    # Number of failed runs
    error_count: int = 0

    # Time of the last successful run
    last_success: datetime | None = None

    # Time of the last failed run
    last_error: datetime | None = None

    # Whether the job is disabled
    disabled: bool = False

    # Tags used to select target nodes
    tags: dict[str, str] = field(default_factory=dict)

    # Number of retries of a failed run
    retries: int = 0

    # Name of the job this job depends on
    parent_job: str | None = None

    # Names of jobs depending on this job
    dependent_jobs: list[str] = field(default_factory=list)

    # Concurrency policy of the job
    concurrency: str | None = None

    @classmethod
    def fromDict(cls, data: dict[str, object]) -> Self:
        """
        Construct a Job from a dictionary loaded from a store snapshot.

        Unknown keys are ignored.

        Args:
            data (dict[str, object]): Dictionary containing field names and values.

        Returns:
            Job: The constructed job.

        Raises:
            TypeError: If the job name is missing or tags or dependent jobs are malformed.
            ValueError: If a timestamp or the disabled flag cannot be parsed.
        """
        init_kwargs = {}
        for f in fields(cls):
            if f.name not in data:
                continue

            value = data[f.name]
            if f.name in {"last_success", "last_error"}:
                init_kwargs[f.name] = parse_datetime(value)
            elif f.name == "tags":
                init_kwargs[f.name] = parse_tags(value)
            elif f.name == "dependent_jobs":
                if value is not None and not isinstance(value, list):
                    raise TypeError(f"Invalid dependent jobs '{value}': expected a list.")
                init_kwargs[f.name] = [str(x) for x in value or []]
            elif f.name == "disabled":
                init_kwargs[f.name] = value is not None and parse_bool(value)
            else:
                init_kwargs[f.name] = value

        return cls(**init_kwargs)

    def toDict(self) -> dict[str, object]:
        """
        Convert the Job into a dictionary. Fields that are None are ignored.

        Returns:
            dict[str, object]: Dictionary with timestamps formatted as strings.
        """
        result: dict[str, object] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue

            if isinstance(value, datetime):
                result[f.name] = format_datetime(value)
            elif isinstance(value, dict):
                result[f.name] = dict(value)
            elif isinstance(value, list):
                result[f.name] = list(value)
            else:
                result[f.name] = value

        return result

    def toJson(self, indent: int | None = None) -> str:
        """
        Return the pretty-printed JSON definition of the job.

        Args:
            indent (int | None): Indentation to use.
                Defaults to `CFG.dashboard.definition_indent`.

        Returns:
            str: JSON representation of the job.
        """
        if indent is None:
            indent = CFG.dashboard.definition_indent

        return json.dumps(self.toDict(), indent=indent, ensure_ascii=False)
