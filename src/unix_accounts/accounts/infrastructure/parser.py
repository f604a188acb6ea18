"""Parser for the local group and passwd files.

Both files are line oriented with colon separated fields. Lines starting
with "#" are comments. Every other line must have exactly the field count of
its file kind or the whole parse fails; malformed numeric fields do not fail
the parse and are stored as 0.
"""

from __future__ import annotations

import posixpath
import re
from typing import Iterable, Iterator

from accounts.domain.aggregates import AccountSnapshot, Group, User
from accounts.infrastructure.observability import DefaultParserProbe, ParserProbe
from accounts.ports.exceptions import MalformedRecordError
from accounts.ports.sources import LineSource

GROUP_FILE_KIND = "group"
PASSWD_FILE_KIND = "passwd"

GROUP_FIELD_COUNT = 4
PASSWD_FIELD_COUNT = 7

COMMENT_PREFIX = "#"
FIELD_SEPARATOR = ":"
MEMBER_SEPARATOR = ","

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def clean_path(path: str) -> str:
    """Return the shortest lexically equivalent path.

    Redundant separators and "." segments are dropped and ".." segments are
    resolved against the preceding segment. An empty path becomes ".".
    """
    cleaned = posixpath.normpath(path)
    # normpath keeps a leading "//" as POSIX allows; a home directory never needs it
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _strip_line_ending(line: str) -> str:
    """Drop one trailing line feed, then one trailing carriage return."""
    line = line.removesuffix("\n")
    return line.removesuffix("\r")


class AccountFileParser:
    """Builds an AccountSnapshot from group and passwd lines.

    The parser holds no state between calls; every call to parse() produces
    a brand new snapshot or raises.
    """

    def __init__(self, probe: ParserProbe | None = None):
        """Initialize the parser.

        Args:
            probe: Optional domain probe for observability.
        """
        self._probe = probe or DefaultParserProbe()

    def parse(
        self, group_lines: Iterable[str], user_lines: Iterable[str]
    ) -> AccountSnapshot:
        """Parse group and passwd lines into a snapshot.

        Groups are parsed first. A failure in either input produces no
        snapshot at all.

        Args:
            group_lines: Lines of the group file
            user_lines: Lines of the passwd file

        Returns:
            The parsed snapshot

        Raises:
            MalformedRecordError: If a data line has the wrong field count
        """
        groups = self.parse_groups(group_lines)
        users = self.parse_users(user_lines)
        return AccountSnapshot(groups=groups, users=users)

    def parse_sources(
        self, group_source: LineSource, user_source: LineSource
    ) -> AccountSnapshot:
        """Open both sources and parse them.

        Raises:
            SourceUnavailableError: If a source cannot be opened or read
            MalformedRecordError: If a data line has the wrong field count
        """
        with group_source.open_lines() as lines:
            groups = self.parse_groups(lines)
        with user_source.open_lines() as lines:
            users = self.parse_users(lines)
        return AccountSnapshot(groups=groups, users=users)

    def parse_groups(self, lines: Iterable[str]) -> tuple[Group, ...]:
        """Parse group file lines of the form name:password:gid:members."""
        groups: list[Group] = []
        for index, fields in self._records(lines, GROUP_FILE_KIND, GROUP_FIELD_COUNT):
            groups.append(
                Group(
                    name=fields[0],
                    id=self._parse_id(fields[2], GROUP_FILE_KIND, index, "gid"),
                    members=tuple(fields[3].split(MEMBER_SEPARATOR)),
                )
            )
        self._probe.file_parsed(file_kind=GROUP_FILE_KIND, record_count=len(groups))
        return tuple(groups)

    def parse_users(self, lines: Iterable[str]) -> tuple[User, ...]:
        """Parse passwd file lines of the form name:password:uid:gid:gecos:home:shell."""
        users: list[User] = []
        for index, fields in self._records(lines, PASSWD_FILE_KIND, PASSWD_FIELD_COUNT):
            users.append(
                User.create(
                    name=fields[0],
                    id=self._parse_id(fields[2], PASSWD_FILE_KIND, index, "uid"),
                    primary_group_id=self._parse_id(
                        fields[3], PASSWD_FILE_KIND, index, "gid"
                    ),
                    full_name=fields[4],
                    home_directory=clean_path(fields[5]),
                    shell=fields[6],
                )
            )
        self._probe.file_parsed(file_kind=PASSWD_FILE_KIND, record_count=len(users))
        return tuple(users)

    def _records(
        self,
        lines: Iterable[str],
        file_kind: str,
        expected_field_count: int,
    ) -> Iterator[tuple[int, list[str]]]:
        """Yield (record_index, fields) for every data line.

        The record index counts accepted records only; comment lines do not
        advance it.
        """
        record_index = 0
        for raw_line in lines:
            line = _strip_line_ending(raw_line)
            if line.startswith(COMMENT_PREFIX):
                self._probe.comment_skipped(file_kind=file_kind)
                continue

            fields = line.split(FIELD_SEPARATOR)
            if len(fields) != expected_field_count:
                self._probe.malformed_record(
                    file_kind=file_kind,
                    record_index=record_index,
                    field_count=len(fields),
                    expected_field_count=expected_field_count,
                )
                raise MalformedRecordError(
                    file_kind=file_kind,
                    record_index=record_index,
                    field_count=len(fields),
                    expected_field_count=expected_field_count,
                )
            yield record_index, fields
            record_index += 1

    def _parse_id(self, value: str, file_kind: str, record_index: int, field: str) -> int:
        """Parse a numeric ID field, falling back to 0 when it is not an integer."""
        if _INTEGER_PATTERN.fullmatch(value):
            return int(value)
        self._probe.numeric_field_defaulted(
            file_kind=file_kind,
            record_index=record_index,
            field=field,
            value=value,
        )
        return 0
