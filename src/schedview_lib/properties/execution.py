# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Self

from schedview_lib.core.common import (
    decode_text,
    format_datetime,
    parse_bool,
    parse_datetime,
)


@dataclass(frozen=True)
class Execution:
    """
    A single recorded run of a job.

    Executions are created by the agent and never modified afterwards.
    """

    # Name of the job this execution belongs to
    job_name: str

    # Batch identifier shared by executions launched by the same firing
    group: int

    # Whether the run succeeded
    success: bool

    # Captured output of the run
    output: str = ""

    # Node the run was executed on
    node_name: str | None = None

    # Start of the run
    started_at: datetime | None = None

    # End of the run
    finished_at: datetime | None = None

    # Attempt number of the run (retries increase it)
    attempt: int = 1

    @classmethod
    def fromDict(cls, data: dict[str, object]) -> Self:
        """
        Construct an Execution from a dictionary loaded from a store snapshot.

        Args:
            data (dict[str, object]): Dictionary containing field names and values.

        Returns:
            Execution: The constructed execution.

        Raises:
            TypeError: If required fields are missing.
            ValueError: If a value cannot be converted.
        """
        init_kwargs = {}
        for f in fields(cls):
            if f.name not in data:
                continue

            value = data[f.name]
            if f.name in {"started_at", "finished_at"}:
                init_kwargs[f.name] = parse_datetime(value)
            elif f.name in {"group", "attempt"}:
                init_kwargs[f.name] = int(value)
            elif f.name == "success":
                init_kwargs[f.name] = parse_bool(value)
            elif f.name == "output":
                init_kwargs[f.name] = decode_text(value)
            else:
                init_kwargs[f.name] = value

        return cls(**init_kwargs)

    def toDict(self) -> dict[str, object]:
        """
        Convert the Execution into a dictionary. Fields that are None are ignored.

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
            else:
                result[f.name] = value

        return result
