"""Infrastructure for the accounts bounded context.

File-backed line sources and the parser that turns their lines into
domain aggregates.
"""

from accounts.infrastructure.parser import AccountFileParser
from accounts.infrastructure.sources import FileLineSource, InMemoryLineSource

__all__ = [
    "AccountFileParser",
    "FileLineSource",
    "InMemoryLineSource",
]
