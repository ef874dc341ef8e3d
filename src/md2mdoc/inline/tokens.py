"""Typed inline tokens for the md2mdoc inline scanner.

Tokens are NamedTuples: immutable, cheap to build, and unpackable.
A token lives only between recognition and rendering inside one
InlineScanner.scan() call.

Usage:
    from md2mdoc.inline.tokens import InlineToken, TokenKind

    token = InlineToken(TokenKind.BOLD, "word", advance=7)
    match token:
        case InlineToken(kind=TokenKind.BOLD, text=text):
            print(f"bold span {text!r}")

"""

from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple


class TokenKind(Enum):
    """Kinds of inline spans recognized by the scanner."""

    BOLD = auto()  # *text*
    ITALIC = auto()  # _text_
    LITERAL = auto()  # `text`
    REFERENCE = auto()  # ^text^
    ESCAPE = auto()  # \x


class InlineToken(NamedTuple):
    """A recognized inline span.

    Attributes:
        kind: What was recognized
        text: Captured inner text (sanitized for references; the escaped
            character for escapes, empty when the escape is dropped)
        advance: Characters consumed from the opening marker onward,
            including any trailing punctuation and swallowed space
        trailing: Punctuation carried onto a cross-reference macro line

    """

    kind: TokenKind
    text: str
    advance: int
    trailing: tuple[str, ...] = ()


# Opening marker -> kind, for span delimiters
DELIMITER_KINDS: dict[str, TokenKind] = {
    "*": TokenKind.BOLD,
    "_": TokenKind.ITALIC,
    "`": TokenKind.LITERAL,
    "^": TokenKind.REFERENCE,
}
