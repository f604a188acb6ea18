"""Source protocols for the accounts bounded context.

The parser only needs two line-producing sources. How they are located and
opened is left to implementations of this protocol.
"""

from __future__ import annotations

from typing import ContextManager, Iterator, Protocol


class LineSource(Protocol):
    """Protocol for a readable, line-oriented account source."""

    @property
    def description(self) -> str:
        """Human readable identification of the source, used in errors and logs."""
        ...

    def open_lines(self) -> ContextManager[Iterator[str]]:
        """Open the source and yield its text lines.

        The source is released when the context exits, even on error.

        Raises:
            SourceUnavailableError: If the source cannot be opened or read
        """
        ...
