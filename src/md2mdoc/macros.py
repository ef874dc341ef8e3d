"""mdoc macro names and line formatting.

Every structural fragment the converter emits is a complete macro line
built by macro(). Names follow mdoc(7).

Usage:
    >>> from md2mdoc.macros import Macro, macro
    >>> macro(Macro.SECTION, "DESCRIPTION")
    '.Sh DESCRIPTION\\n'
    >>> macro(Macro.OPTIONAL, "Fl", "v")
    '.Op Fl v\\n'
"""

from __future__ import annotations

from enum import StrEnum


class Macro(StrEnum):
    """mdoc macros produced by the converter.

    Organized by category:
    - Document prologue (DATE, TITLE, OS)
    - Sections and paragraphs
    - Lists and literal blocks
    - Inline (SYMBOLIC, EMPHASIS, LITERAL, CROSS_REFERENCE)

    """

    # Prologue
    DATE = "Dd"
    TITLE = "Dt"
    OS = "Os"
    AUTHOR = "An"

    # Sections and paragraphs
    SECTION = "Sh"
    PARAGRAPH = "Pp"
    NAME = "Nm"
    DESCRIPTION = "Nd"

    # Command-line syntax
    OPTIONAL = "Op"
    FLAG = "Fl"
    ARGUMENT = "Ar"

    # Lists
    LIST_BEGIN = "Bl"
    LIST_ITEM = "It"
    LIST_END = "El"

    # Literal (no-format) blocks
    DISPLAY_BEGIN = "Bd"
    DISPLAY_END = "Ed"

    # Inline
    SYMBOLIC = "Sy"
    EMPHASIS = "Em"
    LITERAL = "Li"
    CROSS_REFERENCE = "Xr"


def macro(name: Macro | str, *args: str) -> str:
    """Format one macro line.

    Empty arguments are skipped, so a macro with no text is emitted bare.

    Args:
        name: Macro name without the leading dot
        *args: Arguments, joined with single spaces

    Returns:
        The macro line, terminated with a newline.
    """
    parts = [f".{name}"]
    parts.extend(arg for arg in args if arg)
    return " ".join(parts) + "\n"


def list_begin(width: str) -> str:
    """Tag list opener, e.g. ``.Bl -tag -width Ds``."""
    return macro(Macro.LIST_BEGIN, "-tag", "-width", width)


def display_begin(offset: str) -> str:
    """Literal display opener, e.g. ``.Bd -literal -offset indent``."""
    return macro(Macro.DISPLAY_BEGIN, "-literal", "-offset", offset)
