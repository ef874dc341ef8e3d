"""Section heading handler."""

from __future__ import annotations

from collections.abc import Iterator

from md2mdoc.config import ConvertConfig
from md2mdoc.macros import Macro, list_begin, macro
from md2mdoc.sanitize import sanitize
from md2mdoc.state import ConversionState

NAME_SECTION = "NAME"
OPTIONS_SECTION = "OPTIONS"


class HeadingHandlerMixin:
    """Mixin providing ``#`` heading conversion.

    Leading hashes are removed and the rest is sanitized into a ``.Sh``
    line. Two section names carry extra behavior:

    - NAME arms the one-shot name/description flag for the next text line.
    - OPTIONS opens a tag list so the ``-f`` items that follow are listed.

    """

    _state: ConversionState
    _config: ConvertConfig

    def _handle_heading(self, body: str) -> Iterator[str]:
        title = sanitize(body.lstrip("#")).strip()
        yield macro(Macro.SECTION, title)

        section = title.upper()
        if section == NAME_SECTION:
            self._state.pending_name_description = True
        elif section == OPTIONS_SECTION and not self._state.in_list_block:
            self._state.in_list_block = True
            yield list_begin(self._config.list_width)
