"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from md2mdoc.charsets import SANITIZE_ALLOWED

    if char in SANITIZE_ALLOWED:  # O(1) lookup
        ...
"""

import string

# Characters kept by the sanitizer; everything else becomes a space.
SANITIZE_ALLOWED: frozenset[str] = frozenset(
    string.ascii_letters + string.digits + " \f\t\n_"
)

# Inline span delimiters (escape is handled separately)
SPAN_DELIMITERS: frozenset[str] = frozenset("*_`^")

# Characters that make the inline scanner leave its fast path
INLINE_SPECIAL: frozenset[str] = SPAN_DELIMITERS | frozenset("\\")

# Punctuation kept on a span macro line as trailing delimiter arguments
SPAN_TRAILING_PUNCTUATION: frozenset[str] = frozenset(",.")

# Output lines starting with these are roff requests, not text
CONTROL_CHARACTERS: frozenset[str] = frozenset(".'")

# Zero-width roff escape that keeps a control character as text
ZERO_WIDTH: str = "\\&"

# One of these is swallowed after a closing span delimiter
SPAN_TRAILING_SPACE: frozenset[str] = frozenset(" \n")

# Leading whitespace removed from plain text lines
LEADING_WHITESPACE: str = " \t"

# Line terminators accepted on input
LINE_TERMINATORS: str = "\r\n"
