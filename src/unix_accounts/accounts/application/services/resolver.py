"""Relationship resolver for read operations.

Answers lookups and user/group membership queries over one snapshot. All
queries are linear scans in source order; nothing is cached or indexed.
"""

from __future__ import annotations

from accounts.domain.aggregates import AccountSnapshot, Group, User


class RelationshipResolver:
    """Read-only queries over an AccountSnapshot.

    Membership is the union of two mechanisms: a user's primary group ID
    matching the group's ID, and the user's name appearing in the group's
    explicit member list. Results never contain the same record twice.
    """

    def __init__(self, snapshot: AccountSnapshot):
        self._snapshot = snapshot

    @property
    def snapshot(self) -> AccountSnapshot:
        return self._snapshot

    def user_by_id(self, user_id: int) -> User | None:
        """Return the first user with the given ID, or None."""
        for user in self._snapshot.users:
            if user.id == user_id:
                return user
        return None

    def user_by_name(self, name: str) -> User | None:
        """Return the first user with the given name, or None."""
        for user in self._snapshot.users:
            if user.name == name:
                return user
        return None

    def group_by_id(self, group_id: int) -> Group | None:
        """Return the first group with the given ID, or None."""
        for group in self._snapshot.groups:
            if group.id == group_id:
                return group
        return None

    def group_by_name(self, name: str) -> Group | None:
        """Return the first group with the given name, or None."""
        for group in self._snapshot.groups:
            if group.name == name:
                return group
        return None

    def users_in_group(self, group: Group) -> list[User]:
        """List every user that is a member of a group.

        Users whose primary group is the group come first, in snapshot
        order. Explicit members follow in declared order; names that do not
        resolve to a user are skipped.

        Args:
            group: The group to expand

        Returns:
            Member users without duplicates
        """
        users = [user for user in self._snapshot.users if user.primary_group_id == group.id]

        for name in group.members:
            user = self.user_by_name(name)
            if user is None:
                continue
            # Compare by identity: two distinct records may hold equal values.
            if any(existing is user for existing in users):
                continue
            users.append(user)

        return users

    def groups_of_user(self, user: User) -> list[Group]:
        """List every group a user is a member of, in snapshot order.

        Args:
            user: The user to expand

        Returns:
            Groups matching the user's primary group ID or listing the user,
            each once
        """
        return [
            group
            for group in self._snapshot.groups
            if group.id == user.primary_group_id or group.lists_member(user.name)
        ]
