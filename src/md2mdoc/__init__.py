"""
md2mdoc: Simple Markdown to mdoc(7) Converter

Converts a small, line-oriented markdown dialect into mdoc manual page
macros, one line at a time. Zero runtime dependencies.

Quick Start:
    >>> from md2mdoc import convert
    >>> print(convert("# NAME\\nwidget -- does a thing\\n"), end="")
    .Sh NAME
    .Nm widget
    .Nd does a thing

    >>> # Streaming, one document per Converter
    >>> from md2mdoc import Converter
    >>> converter = Converter()
    >>> converter.convert_line("*bold*\\n")
    ['.Sy bold\\n']

Input syntax:
    author: / date: / title:    prologue (.An / .Dd / .Dt + .Os)
    # Heading                   .Sh
    [-f file]                   .Op Fl f Ar file
    -f file                     list item (.Bl opened on first item)
    - alone, or ~               .El
    < ... >  or ``` ... ```     literal block (.Bd -literal / .Ed)
    <!-- ... -->                dropped
    *b* _i_ `l` ^ref 1^ \\x     .Sy .Em .Li .Xr, escaped character

Conversion is one-way: mdoc output is not valid input, so converting the
output again does not reproduce it.
"""

from collections.abc import Iterable, Iterator

from md2mdoc.config import ConvertConfig
from md2mdoc.converter import Converter, iter_lines
from md2mdoc.errors import Md2MdocError, ResourceUnavailableError
from md2mdoc.inline import InlineScanner, InlineToken, TokenKind
from md2mdoc.macros import Macro
from md2mdoc.sanitize import sanitize
from md2mdoc.state import ConversionState
from md2mdoc.stringbuilder import StringBuilder

__version__ = "0.1.0"


def convert_lines(
    lines: Iterable[str],
    config: ConvertConfig | None = None,
) -> Iterator[str]:
    """Convert a stream of lines with a fresh Converter.

    Args:
        lines: Input lines (any iterable, e.g. an open file)
        config: Conversion options

    Yields:
        Output fragments as soon as each line is converted.
    """
    yield from Converter(config).convert(lines)


def convert(source: str, config: ConvertConfig | None = None) -> str:
    """Convert a whole document held in a string.

    Args:
        source: Markdown-like source text
        config: Conversion options

    Returns:
        The mdoc document.

    Example:
        >>> convert("title: WIDGET 1\\n")
        '.Dt WIDGET 1\\n.Os\\n'
    """
    sb = StringBuilder()
    sb.extend(convert_lines(iter_lines(source), config))
    return sb.build()


__all__ = [  # noqa: RUF022 grouped by category
    # Version
    "__version__",
    # Core API
    "convert",
    "convert_lines",
    "Converter",
    "ConversionState",
    "ConvertConfig",
    # Inline
    "InlineScanner",
    "InlineToken",
    "TokenKind",
    # Helpers
    "Macro",
    "StringBuilder",
    "sanitize",
    # Errors
    "Md2MdocError",
    "ResourceUnavailableError",
]
