# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Store backend reading snapshots of the agent's store from YAML files.

The snapshot of a keyspace is laid out as follows:

    <data_dir>/<keyspace>/jobs/<job_name>.yaml         one job definition per file
    <data_dir>/<keyspace>/executions/<job_name>.yaml   list of executions of the job
    <data_dir>/<keyspace>/members.yaml                 list of cluster members

Executions are listed in the order they were recorded. The cluster leader
is the member marked with `leader: true`.
"""

from pathlib import Path

import yaml

from schedview_lib.core.common import load_yaml_loader
from schedview_lib.core.error import SVLookupError
from schedview_lib.core.logger import get_logger
from schedview_lib.properties.execution import Execution
from schedview_lib.properties.job import Job
from schedview_lib.properties.member import Member

from .interface import ClusterInterface, StoreInterface
from .meta import BackendMeta, backend

logger = get_logger(__name__)

SafeLoader: type[yaml.SafeLoader] = load_yaml_loader()


@backend
class FileBackend(StoreInterface, ClusterInterface, metaclass=BackendMeta):
    """
    Implementation of StoreInterface and ClusterInterface for YAML snapshots.
    """

    def __init__(self, data_dir: Path, keyspace: str):
        """
        Initialize the backend.

        Args:
            data_dir (Path): Directory containing the snapshots of all keyspaces.
            keyspace (str): Keyspace to read from.
        """
        self._data_dir = data_dir
        self._keyspace = keyspace

    @staticmethod
    def envName() -> str:
        return "file"

    def listJobs(self) -> list[Job]:
        jobs_dir = self._keyspaceDir() / "jobs"
        if not jobs_dir.is_dir():
            logger.debug(f"No jobs directory in '{jobs_dir.parent}'.")
            return []

        jobs = [
            self._convert(Job, self._loadYaml(file), file)
            for file in jobs_dir.glob("*.yaml")
        ]

        return sorted(jobs, key=lambda job: job.name)

    def getLastExecutionGroup(self, job_name: str) -> list[Execution]:
        executions = self.listExecutions(job_name)
        if not executions:
            return []

        last_group = max(execution.group for execution in executions)
        return [execution for execution in executions if execution.group == last_group]

    def listExecutions(self, job_name: str) -> list[Execution]:
        file = self._keyspaceDir() / "executions" / f"{job_name}.yaml"
        if not file.is_file():
            logger.debug(f"No executions recorded for job '{job_name}'.")
            return []

        data = self._loadYaml(file) or []
        if not isinstance(data, list):
            raise SVLookupError(f"Invalid executions file '{file}': expected a list.")

        executions = []
        for item in data:
            if not isinstance(item, dict):
                raise SVLookupError(f"Invalid record in '{file}': expected a mapping.")
            # the owning job is implied by the file name
            executions.append(
                self._convert(Execution, {**item, "job_name": job_name}, file)
            )

        return executions

    def currentLeader(self) -> Member | None:
        file = self._keyspaceDir() / "members.yaml"
        if not file.is_file():
            raise SVLookupError(f"Cluster membership file '{file}' does not exist.")

        data = self._loadYaml(file) or []
        if not isinstance(data, list):
            raise SVLookupError(f"Invalid membership file '{file}': expected a list.")

        for item in data:
            if isinstance(item, dict) and item.get("leader"):
                return self._convert(Member, item, file)

        logger.debug("No leader found in the cluster membership.")
        return None

    def _keyspaceDir(self) -> Path:
        """
        Return the directory of the configured keyspace.

        Raises:
            SVLookupError: If the directory does not exist.
        """
        directory = self._data_dir / self._keyspace
        if not directory.is_dir():
            raise SVLookupError(
                f"Keyspace '{self._keyspace}' does not exist in '{self._data_dir}'."
            )

        return directory

    @staticmethod
    def _loadYaml(file: Path) -> object:
        """
        Load and parse a YAML file.

        Raises:
            SVLookupError: If the file cannot be read or parsed.
        """
        logger.debug(f"Loading '{file}'.")
        try:
            with file.open("r", encoding="utf-8") as input:
                return yaml.load(input, Loader=SafeLoader)
        except yaml.YAMLError as e:
            raise SVLookupError(f"Could not parse '{file}': {e}.") from e
        except (OSError, UnicodeDecodeError) as e:
            raise SVLookupError(f"Could not read '{file}': {e}.") from e

    @staticmethod
    def _convert(
        cls: type[Job] | type[Execution] | type[Member], data: object, file: Path
    ) -> Job | Execution | Member:
        """
        Construct a record from a dictionary, reporting invalid data as a lookup error.
        """
        if not isinstance(data, dict):
            raise SVLookupError(f"Invalid record in '{file}': expected a mapping.")

        try:
            return cls.fromDict(data)
        except (TypeError, ValueError) as e:
            raise SVLookupError(f"Invalid record in '{file}': {e}.") from e
