# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from abc import ABC, abstractmethod

from schedview_lib.properties.execution import Execution
from schedview_lib.properties.job import Job
from schedview_lib.properties.member import Member


class StoreInterface(ABC):
    """
    Abstract base class for read-only access to the store of the scheduling agent.

    Concrete store backends must implement these methods to allow
    schedview to read jobs and executions uniformly.

    All methods should raise SVLookupError when the store cannot be queried.
    Missing data is not an error: a job without executions has an empty list of them.
    """

    @staticmethod
    def envName() -> str:
        """
        Return the name of the store backend.

        Returns:
            str: The backend name.
        """
        raise NotImplementedError(
            "envName method is not implemented for this store implementation"
        )

    @abstractmethod
    def listJobs(self) -> list[Job]:
        """
        Retrieve all jobs known to the store.

        Returns:
            list[Job]: Jobs ordered by name.

        Raises:
            SVLookupError: If the jobs could not be read.
        """
        pass

    @abstractmethod
    def getLastExecutionGroup(self, job_name: str) -> list[Execution]:
        """
        Retrieve the executions of the most recent execution group of a job.

        Args:
            job_name (str): Name of the job.

        Returns:
            list[Execution]: Executions sharing the highest group id of the job.
            Empty list if the job has no executions.

        Raises:
            SVLookupError: If the executions could not be read.
        """
        pass

    @abstractmethod
    def listExecutions(self, job_name: str) -> list[Execution]:
        """
        Retrieve all executions of a job.

        Args:
            job_name (str): Name of the job.

        Returns:
            list[Execution]: Executions of the job, oldest first.
            Empty list if the job has no executions.

        Raises:
            SVLookupError: If the executions could not be read.
        """
        pass


class ClusterInterface(ABC):
    """
    Abstract base class for read-only access to the cluster membership.
    """

    @abstractmethod
    def currentLeader(self) -> Member | None:
        """
        Return the member currently elected as the cluster leader.

        Returns:
            Member | None: The leader, or None if no leader is currently known.

        Raises:
            SVLookupError: If the membership could not be queried.
        """
        pass
