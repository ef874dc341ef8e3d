"""Exception classes for md2mdoc.

The conversion engine never raises for any input line; malformed markup
degrades to literal output. Only the I/O layer can fail, and it does so
with ResourceUnavailableError, which aborts the whole conversion run.
"""

from __future__ import annotations


class Md2MdocError(Exception):
    """Base exception for all md2mdoc errors.

    Subclass this for specific error categories.
    """

    pass


class ResourceUnavailableError(Md2MdocError):
    """A line source or output sink could not be opened, read or written.

    Raised by md2mdoc.io; never by the engine itself.
    """

    def __init__(self, path: str, reason: str) -> None:
        """Initialize with the offending path and a short reason.

        Args:
            path: File path ("-" for stdin/stdout)
            reason: Description of the failure (usually from OSError.strerror)
        """
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
