"""Account directory service.

Holds the current snapshot of the account database and replaces it
wholesale on every reparse.
"""

from __future__ import annotations

from accounts.application.observability import (
    AccountDirectoryProbe,
    DefaultAccountDirectoryProbe,
)
from accounts.application.services.resolver import RelationshipResolver
from accounts.domain.aggregates import AccountSnapshot, Group, User
from accounts.infrastructure.parser import AccountFileParser
from accounts.ports.exceptions import AccountsError, SourceUnavailableError
from accounts.ports.sources import LineSource


class AccountDirectory:
    """Application service for reading and querying the account database.

    A new directory holds the empty snapshot until reparse() succeeds.
    Snapshots are immutable, so a resolver or snapshot obtained before a
    reparse keeps answering from the data it was built on.

    Reparsing is not synchronized; callers must not reparse one directory
    from several threads at once.
    """

    def __init__(
        self,
        group_source: LineSource,
        user_source: LineSource,
        parser: AccountFileParser | None = None,
        probe: AccountDirectoryProbe | None = None,
    ):
        """Initialize the directory.

        Args:
            group_source: Source of group file lines.
            user_source: Source of passwd file lines.
            parser: Optional parser; a default one is created when omitted.
            probe: Optional domain probe for observability.
        """
        self._group_source = group_source
        self._user_source = user_source
        self._parser = parser or AccountFileParser()
        self._probe = probe or DefaultAccountDirectoryProbe()
        self._snapshot = AccountSnapshot.empty()

    @property
    def group_source(self) -> LineSource:
        return self._group_source

    @property
    def user_source(self) -> LineSource:
        return self._user_source

    @property
    def snapshot(self) -> AccountSnapshot:
        """The current snapshot."""
        return self._snapshot

    def reparse(self) -> AccountSnapshot:
        """Parse both sources and replace the current snapshot.

        On failure the directory is left holding the empty snapshot, never a
        partially built one, and the error is re-raised.

        Returns:
            The new snapshot

        Raises:
            SourceUnavailableError: If a source cannot be opened or read
            MalformedRecordError: If a data line has the wrong field count
        """
        self._snapshot = AccountSnapshot.empty()
        try:
            snapshot = self._parser.parse_sources(self._group_source, self._user_source)
        except SourceUnavailableError as e:
            self._probe.source_unavailable(source=e.source, error=str(e))
            raise
        except AccountsError as e:
            self._probe.reparse_failed(error=str(e))
            raise

        self._snapshot = snapshot
        self._probe.snapshot_loaded(
            group_count=len(snapshot.groups),
            user_count=len(snapshot.users),
        )
        return snapshot

    def resolver(self) -> RelationshipResolver:
        """Return a resolver bound to the current snapshot."""
        return RelationshipResolver(self._snapshot)

    def user_by_id(self, user_id: int) -> User | None:
        return self.resolver().user_by_id(user_id)

    def user_by_name(self, name: str) -> User | None:
        return self.resolver().user_by_name(name)

    def group_by_id(self, group_id: int) -> Group | None:
        return self.resolver().group_by_id(group_id)

    def group_by_name(self, name: str) -> Group | None:
        return self.resolver().group_by_name(name)

    def users_in_group(self, group: Group) -> list[User]:
        return self.resolver().users_in_group(group)

    def groups_of_user(self, user: User) -> list[Group]:
        return self.resolver().groups_of_user(user)
