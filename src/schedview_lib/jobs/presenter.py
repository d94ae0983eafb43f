# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass, field

from rich.console import Console, Group
from rich.padding import Padding
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from schedview_lib.core.common import format_datetime
from schedview_lib.core.config import CFG
from schedview_lib.properties.status import HealthStatus
from schedview_lib.views.models import JobEntry, JobsView
from schedview_lib.views.presenter import Presenter


class JobsPresenter(Presenter):
    """
    Present the jobs of the scheduler together with their health.
    """

    # Mark used to denote the health of a job.
    _STATUS_MARK = "●"

    def __init__(self, view: JobsView, extra: bool = False):
        """
        Initialize the presenter with an assembled job list.

        Args:
            view (JobsView): The job list to present.
            extra (bool): Should show the full definitions of the jobs.
        """
        super().__init__(view)
        self._extra = extra
        self._stats = JobsStatistics()

    def createPanel(self, console: Console | None = None) -> Group:
        console = console or Console()

        sections = [
            Padding(Presenter._createContextTable(self._view.context), (0, 1)),
            Text(""),
            Rule(style=CFG.jobs_presenter.rule_style),
            Text(""),
        ]

        if self._view.jobs:
            sections.append(self._createJobsTable())
            sections.append(Text(""))
            sections.append(self._stats.createStatsText())
        else:
            sections.append(
                Text(
                    "No jobs found.",
                    style=CFG.jobs_presenter.secondary_style,
                    justify="center",
                )
            )

        if self._extra:
            for entry in self._view.jobs:
                sections.extend(JobsPresenter._createDefinitionSection(entry))

        return Presenter._wrapInPanel(
            Group(*sections),
            "JOBS",
            console,
            CFG.jobs_presenter.title_style,
            CFG.jobs_presenter.border_style,
            CFG.jobs_presenter.min_width,
            CFG.jobs_presenter.max_width,
        )

    def _createJobsTable(self) -> Table:
        """
        Construct a Rich Table with one row per job.

        Returns:
            Table: The jobs table.

        Notes:
            - Recollects internal job statistics in `self._stats`.
        """
        self._stats = JobsStatistics()
        table = Table(
            box=None, padding=(0, 1), header_style=CFG.jobs_presenter.headers_style
        )
        for header in [
            "S",
            "Job Name",
            "Schedule",
            "Status",
            "Success",
            "Errors",
            "Last Success",
            "Last Error",
        ]:
            table.add_column(Text(header, style="bold"), justify="center")

        for entry in self._view.jobs:
            self._stats.addJob(entry.status)
            table.add_row(*JobsPresenter._createJobRow(entry))

        return table

    @staticmethod
    def _createJobRow(entry: JobEntry) -> list[Text]:
        """
        Create a single row of job data.

        Args:
            entry (JobEntry): Job to show information for.

        Returns:
            list[Text]: List of formatted cell values.
        """
        job = entry.job
        main = CFG.jobs_presenter.main_style
        return [
            Text(JobsPresenter._STATUS_MARK, style=entry.status.color),
            Text(job.name, style=f"{main} strike" if job.disabled else main),
            Text(job.schedule or "", style=main),
            Text(str(entry.status), style=entry.status.color),
            Text(str(job.success_count), style=main),
            Text(str(job.error_count), style=main),
            Text(format_datetime(job.last_success), style=main),
            Text(format_datetime(job.last_error), style=main),
        ]

    @staticmethod
    def _createDefinitionSection(entry: JobEntry) -> list:
        """
        Create a section showing the pretty-printed definition of a job.

        Args:
            entry (JobEntry): Job to show the definition for.

        Returns:
            list: Renderables forming the section.
        """
        return [
            Text(""),
            Rule(
                title=Text(entry.job.name, style=CFG.jobs_presenter.title_style),
                style=CFG.jobs_presenter.rule_style,
            ),
            Text(""),
            Padding(
                Text(entry.definition, style=CFG.jobs_presenter.definition_style),
                (0, 2),
            ),
        ]


@dataclass
class JobsStatistics:
    """
    Dataclass for collecting statistics about the health of jobs.
    """

    # Number of jobs with the given health.
    n_jobs: dict[HealthStatus, int] = field(default_factory=dict)

    def addJob(self, status: HealthStatus) -> None:
        """
        Count a job with the given health.

        Args:
            status (HealthStatus): Health of the job.
        """
        self.n_jobs[status] = self.n_jobs.get(status, 0) + 1

    def createStatsText(self) -> Text:
        """
        Generate Rich Text summarizing the number of jobs with each health.

        Returns:
            Text: Rich Text object listing health labels and counts.
        """
        spacing = "    "
        secondary = CFG.jobs_presenter.secondary_style
        line = Text(" Jobs" + spacing, style=f"{secondary} bold")

        total = 0
        for status in HealthStatus:
            if status in self.n_jobs:
                count = self.n_jobs[status]
                total += count
                line.append(f"{status} ", style=f"{status.color} bold")
                line.append(str(count), style=secondary)
                line.append(spacing)

        # sum of all jobs
        line.append(
            f"{CFG.jobs_presenter.sum_jobs_code} ",
            style=f"{CFG.status_colors.sum} bold",
        )
        line.append(str(total), style=secondary)

        return line
