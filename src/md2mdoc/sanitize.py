"""Allow-list sanitization for macro arguments.

A reference target or heading is written onto a macro line, where a stray
backslash, quote or leading dot would be interpreted by roff. sanitize()
reduces the text to a safe alphabet before it is embedded.

Example:
    >>> from md2mdoc.sanitize import sanitize
    >>> sanitize("ls(1)")
    'ls 1 '
"""

from md2mdoc.charsets import SANITIZE_ALLOWED


def sanitize(text: str) -> str:
    """Replace every character outside the allow-list with a single space.

    The allow-list is ASCII letters, digits, space, form feed, tab,
    newline and underscore. Length is preserved.

    Args:
        text: Span to sanitize

    Returns:
        Sanitized span of the same length.
    """
    if not text:
        return ""
    return "".join(char if char in SANITIZE_ALLOWED else " " for char in text)

