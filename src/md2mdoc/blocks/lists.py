"""Tag list handlers: ``-item`` lines, a lone ``-`` and ``~``."""

from __future__ import annotations

from collections.abc import Iterator

from md2mdoc.config import ConvertConfig
from md2mdoc.macros import Macro, list_begin, macro
from md2mdoc.state import ConversionState


def list_item_macro(rest: str) -> str:
    """Build the ``.It`` line for the text after the dash.

    A letter right after the dash marks a flag item; a word after the
    flag becomes its argument:

    ``-v``          -> ``.It Fl v``
    ``-o file``     -> ``.It Fl o Ar file``
    ``- plain``     -> ``.It plain``
    """
    if rest[0].isalpha():
        flag, _, argument = rest.partition(" ")
        argument = argument.strip()
        if argument:
            return macro(Macro.LIST_ITEM, Macro.FLAG, flag, Macro.ARGUMENT, argument)
        return macro(Macro.LIST_ITEM, Macro.FLAG, flag)
    return macro(Macro.LIST_ITEM, rest.strip())


class ListHandlerMixin:
    """Mixin providing list open, item and close conversion.

    The first item opens a ``.Bl -tag`` list. A line holding only a dash,
    or a line starting with ``~``, closes it.

    """

    _state: ConversionState
    _config: ConvertConfig

    def _handle_list_item(self, body: str) -> Iterator[str]:
        rest = body[1:]
        if not rest.strip():
            yield from self._handle_list_end(body)
            return

        if not self._state.in_list_block:
            self._state.in_list_block = True
            yield list_begin(self._config.list_width)
        yield list_item_macro(rest)

    def _handle_list_end(self, body: str) -> Iterator[str]:
        self._state.in_list_block = False
        yield macro(Macro.LIST_END)
