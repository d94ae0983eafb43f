# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from enum import Enum
from typing import Self

from schedview_lib.core.config import CFG
from schedview_lib.core.logger import get_logger

logger = get_logger(__name__)


class HealthStatus(Enum):
    """
    Health of a job derived from the outcomes of its latest execution group.
    """

    SUCCESS = 1
    DANGER = 2
    WARNING = 3
    UNKNOWN = 4

    def __str__(self) -> str:
        """
        Return the lowercase string representation of the enum variant.

        Returns:
            str: The name of the status in lowercase.
        """
        return self.name.lower()

    @classmethod
    def fromCounts(cls, succeeded: int, failed: int) -> Self:
        """
        Determine the HealthStatus from the number of successful and failed executions.

        Args:
            succeeded (int): Number of successful executions in the group.
            failed (int): Number of failed executions in the group.

        Returns:
            HealthStatus: UNKNOWN if there are no executions at all,
            SUCCESS if nothing failed, DANGER if nothing succeeded,
            WARNING otherwise.
        """
        logger.debug(
            f"Converting to HealthStatus from {succeeded} succeeded and {failed} failed."
        )
        match (succeeded, failed):
            case (0, 0):
                return cls.UNKNOWN
            case (_, 0):
                return cls.SUCCESS
            case (0, _):
                return cls.DANGER
            case _:
                return cls.WARNING

    @property
    def color(self) -> str:
        """
        Return the display color associated with this HealthStatus.

        Returns:
            str: A string representing the color for presentation purposes.
        """
        return {
            self.SUCCESS: CFG.status_colors.success,
            self.DANGER: CFG.status_colors.danger,
            self.WARNING: CFG.status_colors.warning,
            self.UNKNOWN: CFG.status_colors.unknown,
        }[self]
