# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Pure functions aggregating raw execution records for display.

None of the functions here touch the store; they operate on
snapshots of executions that were already fetched.
"""

from collections import defaultdict
from collections.abc import Sequence

from schedview_lib.core.config import CFG
from schedview_lib.properties.execution import Execution
from schedview_lib.properties.status import HealthStatus


def group_executions(
    executions: Sequence[Execution],
) -> tuple[dict[int, list[Execution]], list[int]]:
    """
    Partition executions of a job into execution groups.

    Args:
        executions (Sequence[Execution]): Executions of a single job in any order.

    Returns:
        tuple[dict[int, list[Execution]], list[int]]: Mapping of group ids
        to the executions sharing the id (in input order) and the distinct
        group ids in ascending order.
    """
    groups: dict[int, list[Execution]] = defaultdict(list)
    for execution in executions:
        groups[execution.group].append(execution)

    return dict(groups), sorted(groups)


def classify_executions(executions: Sequence[Execution] | None) -> HealthStatus:
    """
    Classify the health of a job from its latest execution group.

    Args:
        executions (Sequence[Execution] | None): Executions of the latest group.

    Returns:
        HealthStatus: UNKNOWN if there are no executions, otherwise the status
        derived from the number of successful and failed executions.
    """
    succeeded = 0
    failed = 0
    for execution in executions or []:
        if execution.success:
            succeeded += 1
        else:
            failed += 1

    return HealthStatus.fromCounts(succeeded, failed)


def bound_executions(
    executions: Sequence[Execution], limit: int | None = None
) -> list[Execution]:
    """
    Keep only the most recent executions.

    Args:
        executions (Sequence[Execution]): Executions ordered oldest first.
        limit (int | None): Maximal number of executions to keep.
            Defaults to `CFG.dashboard.max_executions`.

    Returns:
        list[Execution]: The last `limit` executions in their original order.
    """
    if limit is None:
        limit = CFG.dashboard.max_executions

    if len(executions) > limit:
        return list(executions[len(executions) - limit :])

    return list(executions)
