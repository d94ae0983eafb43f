# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from pathlib import Path
from typing import Self

from schedview_lib.core.common import truncate_text
from schedview_lib.core.config import CFG
from schedview_lib.core.error import SVLookupError
from schedview_lib.core.logger import get_logger
from schedview_lib.properties.execution import Execution
from schedview_lib.properties.job import Job
from schedview_lib.properties.status import HealthStatus
from schedview_lib.store import BackendMeta, ClusterInterface, StoreInterface

from .aggregate import bound_executions, classify_executions, group_executions
from .context import DashboardContext
from .models import ExecutionEntry, ExecutionsView, IndexView, JobEntry, JobsView

logger = get_logger(__name__)


class ViewAssembler:
    """
    Compose render-ready dashboard views from store snapshots and identity metadata.

    The assembler only reads from its collaborators. Failed lookups never abort
    a view; the affected sections are left empty or neutral instead.
    """

    def __init__(
        self,
        store: StoreInterface,
        cluster: ClusterInterface,
        backend: str,
        node_name: str | None = None,
        keyspace: str | None = None,
    ):
        """
        Initialize the assembler.

        Args:
            store (StoreInterface): Store to read jobs and executions from.
            cluster (ClusterInterface): Cluster membership to resolve the leader from.
            backend (str): Identifier of the store backend.
            node_name (str | None): Name of the serving node. Defaults to the configured one.
            keyspace (str | None): Keyspace of the store. Defaults to the configured one.
        """
        self._store = store
        self._cluster = cluster
        self._backend = backend
        self._node_name = node_name
        self._keyspace = keyspace

    @classmethod
    def fromBackend(
        cls,
        backend_name: str | None = None,
        data_dir: Path | None = None,
        keyspace: str | None = None,
        node_name: str | None = None,
    ) -> Self:
        """
        Create an assembler reading from a registered store backend.

        The backend serves both as the store and as the cluster membership.

        Args:
            backend_name (str | None): Name of the backend. If None, the backend is
                selected from the environment variable or the configuration.
            data_dir (Path | None): Directory with the store data. Defaults to the configured one.
            keyspace (str | None): Keyspace of the store. Defaults to the configured one.
            node_name (str | None): Name of the serving node. Defaults to the configured one.

        Returns:
            ViewAssembler: The assembler.

        Raises:
            SVError: If no backend with the selected name is registered.
        """
        Backend = BackendMeta.obtain(backend_name)
        keyspace = keyspace or CFG.store.keyspace
        data_dir = data_dir or CFG.store.data_dir
        logger.debug(
            f"Reading from the '{Backend}' backend in '{data_dir}' (keyspace '{keyspace}')."
        )

        backend = Backend(data_dir, keyspace)
        return cls(backend, backend, str(Backend), node_name, keyspace)

    def buildIndexView(self) -> IndexView:
        """
        Assemble the data of the dashboard landing page.

        Returns:
            IndexView: Identity metadata only.
        """
        return IndexView(
            context=self._buildContext(CFG.dashboard.index_path_prefix),
        )

    def buildJobsView(self) -> JobsView:
        """
        Assemble the job list with the health of every job.

        Returns:
            JobsView: Identity metadata and all jobs. The list of jobs is empty
            if the jobs could not be read from the store.
        """
        context = self._buildContext(CFG.dashboard.jobs_path_prefix)

        try:
            jobs = self._store.listJobs()
        except SVLookupError as e:
            logger.warning(f"Could not list jobs: {e}")
            jobs = []

        return JobsView(
            context=context,
            jobs=[self._createJobEntry(job) for job in jobs],
        )

    def buildExecutionsView(self, job_name: str) -> ExecutionsView:
        """
        Assemble the execution history of a job.

        Only the most recent executions are kept; they are then partitioned
        into execution groups ordered by ascending group id.

        Args:
            job_name (str): Name of the job.

        Returns:
            ExecutionsView: Identity metadata and the grouped executions.
            No groups are present if the job has no executions
            or they could not be read from the store.
        """
        context = self._buildContext(CFG.dashboard.executions_path_prefix)

        try:
            executions = self._store.listExecutions(job_name)
        except SVLookupError as e:
            logger.warning(f"Could not list executions of job '{job_name}': {e}")
            executions = []

        groups, by_group = group_executions(bound_executions(executions))

        return ExecutionsView(
            context=context,
            job_name=job_name,
            groups={
                group: [ViewAssembler._createExecutionEntry(x) for x in members]
                for group, members in groups.items()
            },
            by_group=by_group,
        )

    def getJobStatus(self, job: Job) -> HealthStatus:
        """
        Classify the health of a job from its latest execution group.

        Args:
            job (Job): The job to classify.

        Returns:
            HealthStatus: Health of the job. UNKNOWN if the job has no executions
            or they could not be read from the store.
        """
        try:
            executions = self._store.getLastExecutionGroup(job.name)
        except SVLookupError as e:
            logger.warning(f"Could not get the last execution group of '{job.name}': {e}")
            return HealthStatus.UNKNOWN

        return classify_executions(executions)

    def _buildContext(self, path_prefix: str) -> DashboardContext:
        return DashboardContext.build(
            self._cluster,
            self._backend,
            path_prefix,
            node_name=self._node_name,
            keyspace=self._keyspace,
        )

    def _createJobEntry(self, job: Job) -> JobEntry:
        return JobEntry(
            job=job,
            status=self.getJobStatus(job),
            definition=job.toJson(),
        )

    @staticmethod
    def _createExecutionEntry(execution: Execution) -> ExecutionEntry:
        return ExecutionEntry(
            execution=execution,
            output_preview=truncate_text(execution.output),
        )
