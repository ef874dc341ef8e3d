"""Protocols for md2mdoc.

Defines the two collaborators the engine is driven by: something that
yields lines and something that accepts text.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol


class LineSource(Protocol):
    """Protocol for line sources.

    Any iterable of strings qualifies: open text files, sys.stdin,
    io.StringIO, lists. Iteration ending is end-of-stream.

    """

    def __iter__(self) -> Iterator[str]:
        """Yield lines, each normally ending with a newline."""
        ...


class TextSink(Protocol):
    """Protocol for output sinks.

    Text files, sys.stdout, io.StringIO and StringBuilder all qualify.

    """

    def write(self, text: str, /) -> int:
        """Append text to the sink."""
        ...
