"""Per-stream conversion state.

ConversionState carries everything the block dispatcher remembers from one
line to the next. One instance belongs to exactly one input stream for that
stream's whole lifetime.

Thread Safety:
Not synchronized. Lines of a document must be converted strictly in order,
and a state instance must never be shared between documents.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ConversionState:
    """Mutable block-level state threaded through every dispatch call.

    Attributes:
        stripping_leading_whitespace: Trim leading space/tab from plain text
            lines before inline scanning (cleared inside literal blocks)
        in_code_block: Inside a no-format (literal) block; lines pass verbatim
        in_list_block: A tag list has been opened and not yet closed
        in_comment_block: Inside an HTML-style comment; output is suppressed
        pending_name_description: Set by a NAME heading, consumed by the
            next text line which is read as ``name -- description``
        lineno: 1-based number of the line being converted
    """

    stripping_leading_whitespace: bool = True
    in_code_block: bool = False
    in_list_block: bool = False
    in_comment_block: bool = False
    pending_name_description: bool = False
    lineno: int = 0

    def reset(self, *, stripping_leading_whitespace: bool = True) -> None:
        """Return to the state of a fresh stream."""
        self.stripping_leading_whitespace = stripping_leading_whitespace
        self.in_code_block = False
        self.in_list_block = False
        self.in_comment_block = False
        self.pending_name_description = False
        self.lineno = 0
