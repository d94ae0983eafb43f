# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass, field
from typing import Self

from schedview_lib.core.common import parse_tags


@dataclass(frozen=True)
class Member:
    """
    A node of the scheduling cluster as reported by the membership layer.
    """

    # Name of the node
    name: str

    # Address the node is reachable at
    address: str | None = None

    # Membership status of the node (e.g. alive, left, failed)
    status: str | None = None

    # Tags announced by the node
    tags: dict[str, str] = field(default_factory=dict)

    @classmethod
    def fromDict(cls, data: dict[str, object]) -> Self:
        """
        Construct a Member from a dictionary loaded from a membership snapshot.

        Args:
            data (dict[str, object]): Dictionary with at least the `name` key.

        Returns:
            Member: The constructed member.

        Raises:
            TypeError: If the name is missing or the tags are not a mapping.
        """
        if "name" not in data:
            raise TypeError("Member is missing a name.")

        return cls(
            name=str(data["name"]),
            address=data.get("address"),
            status=data.get("status"),
            tags=parse_tags(data.get("tags")),
        )
