# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass
from typing import Self

from schedview_lib.core.config import CFG
from schedview_lib.core.error import SVLookupError
from schedview_lib.core.logger import get_logger
from schedview_lib.store.interface import ClusterInterface
from schedview_lib.version import __version__

logger = get_logger(__name__)


@dataclass(frozen=True)
class DashboardContext:
    """
    Identity metadata shown in every dashboard view.

    Built once per request from explicit collaborator calls and passed
    explicitly to the view assembler.
    """

    # Version of the scheduler
    version: str

    # Name of the current cluster leader (empty if unknown)
    leader_name: str

    # Name of the node serving the request
    member_name: str

    # Identifier of the configured store backend
    backend: str

    # Keyspace the store data is read from
    keyspace: str

    # Relative base path of the dashboard
    path: str

    # Relative base path of the API
    api_path: str

    @classmethod
    def build(
        cls,
        cluster: ClusterInterface,
        backend: str,
        path_prefix: str,
        node_name: str | None = None,
        keyspace: str | None = None,
        version: str = __version__,
    ) -> Self:
        """
        Collect the identity metadata for a single request.

        A failure to resolve the cluster leader does not abort the request;
        the leader name is left empty instead.

        Args:
            cluster (ClusterInterface): Cluster membership to resolve the leader from.
            backend (str): Identifier of the store backend.
            path_prefix (str): Upward traversal from the view to the root (e.g. "../").
            node_name (str | None): Name of the serving node.
                Defaults to `CFG.store.node_name`.
            keyspace (str | None): Keyspace of the store.
                Defaults to `CFG.store.keyspace`.
            version (str): Version of the scheduler.

        Returns:
            DashboardContext: The assembled context.
        """
        return cls(
            version=version,
            leader_name=DashboardContext._resolveLeaderName(cluster),
            member_name=node_name or CFG.store.node_name,
            backend=backend,
            keyspace=keyspace or CFG.store.keyspace,
            path=f"{path_prefix}{CFG.dashboard.dashboard_path_prefix}",
            api_path=f"{path_prefix}{CFG.dashboard.api_path_prefix}",
        )

    @staticmethod
    def _resolveLeaderName(cluster: ClusterInterface) -> str:
        """
        Return the name of the current leader or an empty string if it is unknown.
        """
        try:
            leader = cluster.currentLeader()
        except SVLookupError as e:
            logger.warning(f"Could not resolve the cluster leader: {e}")
            return ""

        if leader is None:
            logger.debug("No cluster leader is currently known.")
            return ""

        return leader.name

    def toDict(self) -> dict[str, str]:
        """
        Convert the context into a dictionary.

        Returns:
            dict[str, str]: Dictionary of all fields.
        """
        return {
            "version": self.version,
            "leader_name": self.leader_name,
            "member_name": self.member_name,
            "backend": self.backend,
            "keyspace": self.keyspace,
            "path": self.path,
            "api_path": self.api_path,
        }
