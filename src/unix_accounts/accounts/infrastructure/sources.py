"""Line sources for the account database files.

FileLineSource reads a file from disk; InMemoryLineSource serves text that
the caller already holds. Both satisfy the LineSource protocol.
"""

from __future__ import annotations

import io
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO

from accounts.ports.exceptions import SourceUnavailableError


class FileLineSource:
    """A line source backed by a text file on the local filesystem."""

    def __init__(self, path: str | Path, encoding: str = "utf-8"):
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    @property
    def description(self) -> str:
        return str(self._path)

    @contextmanager
    def open_lines(self) -> Iterator[Iterator[str]]:
        """Open the file and yield an iterator over its lines.

        Bytes that are not valid in the encoding are kept as surrogate escapes
        rather than failing the read. Lines end at line feeds only, so a carriage
        return inside a field stays part of the field.

        Raises:
            SourceUnavailableError: If the file cannot be opened or read
        """
        try:
            handle = open(
                self._path,
                encoding=self._encoding,
                errors="surrogateescape",
                newline="\n",
            )
        except OSError as e:
            raise SourceUnavailableError(self.description, e.strerror) from e

        with handle:
            yield self._read(handle)

    def _read(self, handle: TextIO) -> Iterator[str]:
        try:
            for line in handle:
                yield line
        except OSError as e:
            raise SourceUnavailableError(self.description, str(e)) from e

    def __repr__(self) -> str:
        return f"FileLineSource({self.description!r})"


class InMemoryLineSource:
    """A line source serving text held in memory."""

    def __init__(self, text: str, description: str = "<memory>"):
        self._text = text
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    @contextmanager
    def open_lines(self) -> Iterator[Iterator[str]]:
        """Yield an iterator over the held text's lines."""
        yield iter(io.StringIO(self._text))

    def __repr__(self) -> str:
        return f"InMemoryLineSource({self._description!r})"
