"""Output accumulator for whole-document conversion.

convert() collects every fragment a Converter yields and joins them once
at the end. The builder also satisfies the TextSink protocol, so it can
stand in for a file wherever md2mdoc.io writes output.

Thread Safety:
One StringBuilder per convert() call; nothing is shared.
"""

from __future__ import annotations

from collections.abc import Iterable


class StringBuilder:
    """Collect mdoc fragments and join them once.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.extend([".Sh NAME\\n", ".Pp\\n"]).build()
            '.Sh NAME\\n.Pp\\n'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, fragment: str) -> StringBuilder:
        """Add one fragment; empty fragments are ignored."""
        if fragment:
            self._parts.append(fragment)
        return self

    def extend(self, fragments: Iterable[str]) -> StringBuilder:
        """Add fragments from any iterable, including a live converter."""
        for fragment in fragments:
            self.append(fragment)
        return self

    def write(self, fragment: str) -> int:
        """TextSink entry point; returns the number of characters taken."""
        self.append(fragment)
        return len(fragment)

    def build(self) -> str:
        return "".join(self._parts)
