"""Default handler for lines with no block-level syntax."""

from __future__ import annotations

from collections.abc import Iterator

from md2mdoc.charsets import LEADING_WHITESPACE
from md2mdoc.inline import InlineScanner
from md2mdoc.macros import Macro, macro
from md2mdoc.state import ConversionState

NAME_SEPARATOR = "--"


def name_description_macros(body: str) -> Iterator[str]:
    """Split ``name -- description`` into ``.Nm`` and ``.Nd`` lines.

    Without a separator the whole line is the name and no ``.Nd`` is
    emitted.
    """
    name, separator, description = body.partition(NAME_SEPARATOR)
    yield macro(Macro.NAME, name.strip())
    if separator:
        yield macro(Macro.DESCRIPTION, description.strip())


class TextHandlerMixin:
    """Mixin providing plain text conversion.

    Leading blanks are trimmed while the stripping mode is on. The first
    text line after a NAME heading is read as ``name -- description``;
    every other line goes through the inline scanner.

    """

    _state: ConversionState
    _scanner: InlineScanner

    def _handle_blank(self, body: str) -> Iterator[str]:
        yield macro(Macro.PARAGRAPH)

    def _handle_text(self, body: str) -> Iterator[str]:
        if self._state.stripping_leading_whitespace:
            body = body.lstrip(LEADING_WHITESPACE)

        if self._state.pending_name_description:
            self._state.pending_name_description = False
            yield from name_description_macros(body)
            return

        yield from self._scanner.scan(body + "\n")
