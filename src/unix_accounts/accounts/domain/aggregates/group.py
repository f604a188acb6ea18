"""Group aggregate for the accounts context."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Group:
    """A group record read from the group file.

    Group names are unique by convention only; nothing here enforces it.

    Attributes:
        name: The group name.
        id: The numeric group ID.
        members: Explicit (secondary) member names in declared order. An empty
            member field is kept as a single empty-string placeholder.
    """

    name: str
    id: int
    members: tuple[str, ...] = ()

    def __str__(self) -> str:
        """Return string representation."""
        return f"Group({self.name}, {self.id})"

    def lists_member(self, username: str) -> bool:
        """Check whether a user name appears in the explicit member list."""
        return username in self.members
