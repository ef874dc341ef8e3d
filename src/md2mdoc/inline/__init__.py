"""Inline markup scanning for md2mdoc.

Provides the InlineScanner and its token types.
"""

from md2mdoc.inline.scanner import InlineScanner
from md2mdoc.inline.tokens import InlineToken, TokenKind

__all__ = ["InlineScanner", "InlineToken", "TokenKind"]
