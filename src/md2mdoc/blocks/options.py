"""Synopsis optional-argument handler: ``[-f file]`` lines."""

from __future__ import annotations

from collections.abc import Iterator

from md2mdoc.macros import Macro, macro
from md2mdoc.utils.logger import get_logger

logger = get_logger(__name__)


def optional_macro(content: str) -> str:
    """Build the ``.Op`` line for one bracket group.

    ``-f``        -> ``.Op Fl f``
    ``-f file``   -> ``.Op Fl f Ar file``
    ``file``      -> ``.Op Ar file``
    """
    content = content.strip()
    if content.startswith("-"):
        flag, _, argument = content[1:].partition(" ")
        argument = argument.strip()
        if argument:
            return macro(Macro.OPTIONAL, Macro.FLAG, flag, Macro.ARGUMENT, argument)
        return macro(Macro.OPTIONAL, Macro.FLAG, flag)
    return macro(Macro.OPTIONAL, Macro.ARGUMENT, content)


class OptionHandlerMixin:
    """Mixin providing ``[...]`` optional-argument conversion.

    Each bracket group on the line becomes its own ``.Op`` line, so a
    synopsis like ``[-v] [-o file]`` can be written on one input line.
    An unterminated group runs to the end of the line.

    """

    def _handle_optional(self, body: str) -> Iterator[str]:
        pos = 0
        end = len(body)
        while pos < end:
            open_pos = body.find("[", pos)
            if open_pos == -1:
                self._drop(body[pos:])
                break
            self._drop(body[pos:open_pos])

            close = body.find("]", open_pos + 1)
            if close == -1:
                logger.debug("unterminated option group: %r", body[open_pos:])
                yield optional_macro(body[open_pos + 1 :])
                break
            yield optional_macro(body[open_pos + 1 : close])
            pos = close + 1

    def _drop(self, stray: str) -> None:
        if stray.strip():
            logger.debug("ignoring text outside option brackets: %r", stray)
