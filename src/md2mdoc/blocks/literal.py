"""No-format (literal) block and comment block handlers.

Literal blocks open with ``<`` or a backtick fence and close with ``>`` or
another fence. Their lines are copied verbatim.

Comment blocks open with ``<!--`` and close on the line containing
``-->``. Nothing inside them, markers included, reaches the output.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from md2mdoc.config import ConvertConfig
from md2mdoc.macros import Macro, display_begin, macro
from md2mdoc.state import ConversionState
from md2mdoc.utils.logger import get_logger

logger = get_logger(__name__)

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
FENCE = "```"
DISPLAY_OPEN = "<"
DISPLAY_CLOSE = ">"


def is_display_close(body: str) -> bool:
    """True for a line that ends the current literal block."""
    return body.startswith(DISPLAY_CLOSE) or body.startswith(FENCE)


class LiteralBlockHandlerMixin:
    """Mixin providing literal block conversion."""

    _state: ConversionState
    _config: ConvertConfig

    def _handle_display_begin(self, body: str) -> Iterator[str]:
        if self._state.in_code_block:
            logger.debug("line %d: literal block already open", self._state.lineno)
        self._state.stripping_leading_whitespace = False
        self._state.in_code_block = True
        yield display_begin(self._config.literal_offset)

    def _handle_display_end(self, body: str) -> Iterator[str]:
        self._state.stripping_leading_whitespace = self._config.strip_leading_whitespace
        self._state.in_code_block = False
        yield macro(Macro.DISPLAY_END)

    def _handle_literal_line(self, body: str) -> Iterator[str]:
        if is_display_close(body):
            yield from self._handle_display_end(body)
            return
        yield body + "\n"


class CommentHandlerMixin:
    """Mixin providing comment block suppression."""

    _state: ConversionState

    def _handle_comment_open(self, body: str) -> Iterable[str]:
        if COMMENT_CLOSE not in body[len(COMMENT_OPEN) :]:
            self._state.in_comment_block = True
        return ()

    def _handle_comment_line(self, body: str) -> Iterable[str]:
        if COMMENT_CLOSE in body:
            self._state.in_comment_block = False
        return ()

    def _handle_comment_close(self, body: str) -> Iterable[str]:
        self._state.in_comment_block = False
        return ()
