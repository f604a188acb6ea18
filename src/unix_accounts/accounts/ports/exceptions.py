"""Exceptions for the accounts bounded context.

These exceptions abort a parse of the account database. They should be
caught and handled by the caller deciding whether a failed reparse should
fall back to anything.
"""

from __future__ import annotations


class AccountsError(Exception):
    """Base exception for account database reading."""

    pass


class SourceUnavailableError(AccountsError):
    """Raised when an account source cannot be opened or read.

    Attributes:
        source: Description of the source (usually its file path)
    """

    def __init__(self, source: str, reason: str | None = None):
        message = f"account source {source} is unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.source = source


class MalformedRecordError(AccountsError):
    """Raised when a data line has the wrong number of fields.

    The record index is the count of records already accepted from the same
    file, not the physical line number: comment lines are not counted.

    Attributes:
        file_kind: "group" or "passwd"
        record_index: 0-based count of valid records accepted before the bad line
        field_count: Number of fields found on the bad line
        expected_field_count: Number of fields a record of this kind must have
    """

    def __init__(
        self,
        file_kind: str,
        record_index: int,
        field_count: int,
        expected_field_count: int,
    ):
        super().__init__(
            f"unexpected field count in {file_kind} file on record {record_index}: "
            f"got {field_count}, expected {expected_field_count}"
        )
        self.file_kind = file_kind
        self.record_index = record_index
        self.field_count = field_count
        self.expected_field_count = expected_field_count
