# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Render-ready view models of the dashboard.

View models are assembled fresh for every request by `ViewAssembler`
and discarded after rendering. They only hold data; all business
logic is applied before they are constructed.
"""

from dataclasses import dataclass, field

from schedview_lib.properties.execution import Execution
from schedview_lib.properties.job import Job
from schedview_lib.properties.status import HealthStatus

from .context import DashboardContext


@dataclass(frozen=True)
class JobEntry:
    """A job augmented with its health and its pretty-printed definition."""

    job: Job
    status: HealthStatus
    definition: str

    def toDict(self) -> dict[str, object]:
        return {**self.job.toDict(), "status": str(self.status)}


@dataclass(frozen=True)
class ExecutionEntry:
    """An execution augmented with a truncated preview of its output."""

    execution: Execution
    output_preview: str

    def toDict(self) -> dict[str, object]:
        return {**self.execution.toDict(), "output_preview": self.output_preview}


@dataclass(frozen=True)
class IndexView:
    """Data of the dashboard landing page."""

    context: DashboardContext

    def toDict(self) -> dict[str, object]:
        return {"context": self.context.toDict()}


@dataclass(frozen=True)
class JobsView:
    """Data of the job list."""

    context: DashboardContext
    jobs: list[JobEntry] = field(default_factory=list)

    def toDict(self) -> dict[str, object]:
        return {
            "context": self.context.toDict(),
            "jobs": [entry.toDict() for entry in self.jobs],
        }


@dataclass(frozen=True)
class ExecutionsView:
    """
    Data of the execution history of a single job.

    `by_group` lists the keys of `groups` in ascending order
    and defines the order in which the groups are displayed.
    """

    context: DashboardContext
    job_name: str
    groups: dict[int, list[ExecutionEntry]] = field(default_factory=dict)
    by_group: list[int] = field(default_factory=list)

    def toDict(self) -> dict[str, object]:
        return {
            "context": self.context.toDict(),
            "job_name": self.job_name,
            "groups": {
                group: [entry.toDict() for entry in self.groups[group]]
                for group in self.by_group
            },
        }
