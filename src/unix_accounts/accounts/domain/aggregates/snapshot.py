"""Account snapshot aggregate for the accounts context."""

from __future__ import annotations

from dataclasses import dataclass

from accounts.domain.aggregates.group import Group
from accounts.domain.aggregates.user import User


@dataclass(frozen=True)
class AccountSnapshot:
    """One immutable, fully parsed copy of the local account database.

    Groups and users keep the order in which they appeared in their source
    files. A snapshot is never updated in place; a reparse produces a new one.
    """

    groups: tuple[Group, ...] = ()
    users: tuple[User, ...] = ()

    @classmethod
    def empty(cls) -> "AccountSnapshot":
        """Return a snapshot holding no groups and no users."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.groups and not self.users
