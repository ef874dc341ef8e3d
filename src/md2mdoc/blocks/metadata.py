"""Document prologue handlers: author:, date: and title: lines."""

from __future__ import annotations

from collections.abc import Iterator

from md2mdoc.macros import Macro, macro

AUTHOR_PREFIX = "author:"
DATE_PREFIX = "date:"
TITLE_PREFIX = "title:"


def has_prefix(body: str, prefix: str) -> bool:
    """Case-insensitive exact prefix match (prefix must be lowercase)."""
    return body[: len(prefix)].lower() == prefix


class MetadataHandlerMixin:
    """Mixin providing prologue macro handlers.

    The keyword is removed and the trimmed remainder becomes the macro
    argument. ``title:`` also opens the document with ``.Os``.

    """

    def _handle_author(self, body: str) -> Iterator[str]:
        yield macro(Macro.AUTHOR, body[len(AUTHOR_PREFIX) :].strip())

    def _handle_date(self, body: str) -> Iterator[str]:
        yield macro(Macro.DATE, body[len(DATE_PREFIX) :].strip())

    def _handle_title(self, body: str) -> Iterator[str]:
        yield macro(Macro.TITLE, body[len(TITLE_PREFIX) :].strip())
        yield macro(Macro.OS)
