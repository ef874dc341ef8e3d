"""Line-conversion engine: markdown-like lines in, mdoc fragments out.

The Converter is the block dispatcher. For each line it picks the first
matching rule from md2mdoc.blocks.rules.RULES, lets the rule's handler
update the ConversionState, and returns the fragments the handler produced.
Plain text is handed to the InlineScanner.

A NAME heading arms a one-shot ``name -- description`` reading for the next
text line. Any structural line (a rule with ``structural=True``: metadata,
heading, option, list or display marker) seen before that text line
cancels it, so a NAME section with no text cannot turn a later paragraph
into ``.Nm``. Blank and comment lines leave it armed.

Output is not valid input: feeding mdoc back through a Converter does not
reproduce it, so conversion is not idempotent.

Thread Safety:
A Converter owns its ConversionState and must be used by one thread at a
time, for one document. Create one Converter per document; converters
share nothing but their (immutable) config.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from md2mdoc.blocks import (
    RULES,
    CommentHandlerMixin,
    HeadingHandlerMixin,
    ListHandlerMixin,
    LiteralBlockHandlerMixin,
    MetadataHandlerMixin,
    OptionHandlerMixin,
    Rule,
    TextHandlerMixin,
)
from md2mdoc.charsets import LINE_TERMINATORS
from md2mdoc.config import DEFAULT_CONFIG, ConvertConfig
from md2mdoc.inline import InlineScanner
from md2mdoc.state import ConversionState
from md2mdoc.utils.logger import get_logger

logger = get_logger(__name__)


class Converter(
    MetadataHandlerMixin,
    HeadingHandlerMixin,
    OptionHandlerMixin,
    ListHandlerMixin,
    LiteralBlockHandlerMixin,
    CommentHandlerMixin,
    TextHandlerMixin,
):
    """Convert one document, line by line, to mdoc.

    Usage:
            >>> converter = Converter()
            >>> converter.convert_line("# NAME\\n")
            ['.Sh NAME\\n']
            >>> converter.convert_line("widget -- does a thing\\n")
            ['.Nm widget\\n', '.Nd does a thing\\n']

    Thread Safety:
        Single document, single thread. State is instance-local.

    """

    __slots__ = ("_config", "_state", "_scanner", "_rules")

    def __init__(
        self,
        config: ConvertConfig | None = None,
        state: ConversionState | None = None,
        rules: tuple[Rule, ...] = RULES,
    ) -> None:
        """Initialize a converter for a new document.

        Args:
            config: Conversion options (defaults to ConvertConfig())
            state: Existing state to continue from (a fresh one if None)
            rules: Dispatch table, tried in order; the last rule must match
                every line
        """
        self._config = config or DEFAULT_CONFIG
        if state is None:
            state = ConversionState(
                stripping_leading_whitespace=self._config.strip_leading_whitespace
            )
        self._state = state
        self._scanner = InlineScanner()
        self._rules = rules

    @property
    def config(self) -> ConvertConfig:
        return self._config

    @property
    def state(self) -> ConversionState:
        return self._state

    def convert_line(self, line: str) -> list[str]:
        """Convert one input line.

        State is updated before this returns, so fragments may be written
        whenever the caller likes.

        Args:
            line: One line of input, with or without its terminator

        Returns:
            Output fragments for the line, possibly none.
        """
        state = self._state
        state.lineno += 1
        body = line.rstrip(LINE_TERMINATORS)

        for rule in self._rules:
            if not rule.matches(body, state):
                continue
            if rule.structural and state.pending_name_description:
                logger.debug("line %d: %s line cancels NAME description", state.lineno, rule.name)
                state.pending_name_description = False
            logger.debug("line %d: %s", state.lineno, rule.name)
            return list(rule.handler(self, body))

        # Only reachable with a custom rule table lacking a catch-all
        logger.debug("line %d: no rule matched", state.lineno)
        return []

    def convert(self, lines: Iterable[str]) -> Iterator[str]:
        """Convert a stream of lines, yielding fragments as they are produced."""
        for line in lines:
            yield from self.convert_line(line)

    def reset(self) -> None:
        """Forget all block state, as if starting a new document."""
        self._state.reset(stripping_leading_whitespace=self._config.strip_leading_whitespace)


def iter_lines(source: str) -> Iterator[str]:
    """Split source into lines on ``\\n`` only, keeping the terminators.

    Unlike str.splitlines(), form feeds and other separators stay inside
    their line.
    """
    pos = 0
    source_len = len(source)
    while pos < source_len:
        idx = source.find("\n", pos)
        end = idx + 1 if idx != -1 else source_len
        yield source[pos:end]
        pos = end
