"""Inline scanner: rewrites span markup inside ordinary text.

Walks a bounded text span with an explicit cursor. Each special character
is either recognized as the start of a token or passed through unchanged.
Delimiters do not nest and are resolved greedily left to right.

Recognized markup:
    *text*    ->  .Sy text
    _text_    ->  .Em text
    `text`    ->  .Li text
    ^text^    ->  .Xr text       (sanitized)
    \\x        ->  x              (\\\\ is dropped; a final lone \\ is kept)

A , or . directly after any span stays on its macro line as a delimiter
argument (.Sy file .). Any other plain run that would start an output line
with . or ' is prefixed with \\& so roff keeps it as text.

A span whose closing marker is missing before the end of the text, or whose
captured text is empty, is not a span: its opening marker is emitted as is
and scanning resumes on the next character.

Thread Safety:
InlineScanner holds no state. One instance can be shared freely.
"""

from __future__ import annotations

from collections.abc import Iterator

from md2mdoc.charsets import (
    INLINE_SPECIAL,
    CONTROL_CHARACTERS,
    SPAN_TRAILING_PUNCTUATION,
    SPAN_TRAILING_SPACE,
    ZERO_WIDTH,
)
from md2mdoc.inline.tokens import DELIMITER_KINDS, InlineToken, TokenKind
from md2mdoc.macros import Macro, macro
from md2mdoc.sanitize import sanitize
from md2mdoc.utils.logger import get_logger

logger = get_logger(__name__)

_MACRO_FOR_KIND: dict[TokenKind, Macro] = {
    TokenKind.BOLD: Macro.SYMBOLIC,
    TokenKind.ITALIC: Macro.EMPHASIS,
    TokenKind.LITERAL: Macro.LITERAL,
    TokenKind.REFERENCE: Macro.CROSS_REFERENCE,
}


class InlineScanner:
    """Convert inline markup in a text span to mdoc.

    Usage:
        >>> scanner = InlineScanner()
        >>> "".join(scanner.scan("see *this* now\\n"))
        'see \\n.Sy this\\nnow\\n'

    """

    __slots__ = ()

    def scan(self, text: str) -> Iterator[str]:
        """Yield output fragments for text.

        Plain runs are yielded as slices of the input. Macro fragments always
        start on a fresh output line and end with a newline. A plain run that
        would start an output line with ``.`` or ``'`` is prefixed with
        ``\\&`` so roff does not read it as a request.

        Args:
            text: Span to convert (normally one line including its newline)

        Yields:
            Output fragments in order.
        """
        end = len(text)
        if not any(char in INLINE_SPECIAL for char in text):
            if text:
                if text[0] in CONTROL_CHARACTERS:
                    yield ZERO_WIDTH
                yield text
            return

        pos = 0
        run_start = 0
        at_line_start = True

        while pos < end:
            if text[pos] not in INLINE_SPECIAL:
                pos += 1
                continue

            token = self._next_token(text, pos, end)
            if token is None:
                pos += 1
                continue

            if run_start < pos:
                plain = text[run_start:pos]
                yield from self._plain(plain, at_line_start)
                at_line_start = plain.endswith("\n")

            if token.kind is TokenKind.ESCAPE:
                if token.text:
                    yield from self._plain(token.text, at_line_start)
                    at_line_start = token.text == "\n"
            else:
                if not at_line_start:
                    yield "\n"
                yield self._render(token)
                at_line_start = True

            pos += token.advance
            run_start = pos

        if run_start < end:
            yield from self._plain(text[run_start:end], at_line_start)

    def _plain(self, run: str, at_line_start: bool) -> Iterator[str]:
        """Yield a plain run, guarding a leading control character."""
        if at_line_start and run[0] in CONTROL_CHARACTERS:
            yield ZERO_WIDTH
        yield run

    def _next_token(self, text: str, pos: int, end: int) -> InlineToken | None:
        """Recognize a token starting at pos, or None to pass the char through."""
        if text[pos] == "\\":
            return self._escape_token(text, pos, end)
        return self._span_token(text, pos, end)

    def _escape_token(self, text: str, pos: int, end: int) -> InlineToken | None:
        """Backslash escape: \\x yields x, \\\\ yields nothing."""
        if pos + 1 >= end:
            # Lone trailing backslash stays literal
            return None
        escaped = text[pos + 1]
        if escaped == "\n":
            # Backslash ending the line is also a lone trailing backslash
            return None
        if escaped == "\\":
            return InlineToken(TokenKind.ESCAPE, "", 2)
        return InlineToken(TokenKind.ESCAPE, escaped, 2)

    def _span_token(self, text: str, pos: int, end: int) -> InlineToken | None:
        """Delimited span from pos to the next identical marker within end."""
        marker = text[pos]
        kind = DELIMITER_KINDS[marker]

        close = text.find(marker, pos + 1, end)
        if close == -1:
            logger.debug("unterminated %r span at column %d", marker, pos + 1)
            return None
        if close == pos + 1:
            return None

        inner = text[pos + 1 : close]
        after = close + 1
        trailing: list[str] = []

        if kind is TokenKind.REFERENCE:
            inner = sanitize(inner)
        while after < end and text[after] in SPAN_TRAILING_PUNCTUATION:
            trailing.append(text[after])
            after += 1

        if after < end and text[after] in SPAN_TRAILING_SPACE:
            after += 1

        return InlineToken(kind, inner, after - pos, tuple(trailing))

    def _render(self, token: InlineToken) -> str:
        """Macro line for a span token."""
        return macro(_MACRO_FOR_KIND[token.kind], token.text.strip(), *token.trailing)
