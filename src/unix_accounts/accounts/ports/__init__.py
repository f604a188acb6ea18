"""Ports for the accounts bounded context.

Ports define the collaborator contracts and the errors that cross them.
"""

from accounts.ports.exceptions import (
    AccountsError,
    MalformedRecordError,
    SourceUnavailableError,
)
from accounts.ports.sources import LineSource

__all__ = [
    "AccountsError",
    "LineSource",
    "MalformedRecordError",
    "SourceUnavailableError",
]
