"""Ordered dispatch rules for the block dispatcher.

Each input line is tested against RULES from top to bottom; the first rule
whose predicate matches handles the line. Order matters:

- Open comment and literal blocks capture every line before anything else.
- Metadata keywords are tried before first-character dispatch, so a line
  like ``date: today`` is not plain text but ``data:`` is.
- ``-->`` is tried before ``-`` and ``<!--`` before ``<``.
- The text rule matches everything and always comes last.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from md2mdoc.blocks.headings import HeadingHandlerMixin
from md2mdoc.blocks.lists import ListHandlerMixin
from md2mdoc.blocks.literal import (
    COMMENT_CLOSE,
    COMMENT_OPEN,
    DISPLAY_CLOSE,
    DISPLAY_OPEN,
    FENCE,
    CommentHandlerMixin,
    LiteralBlockHandlerMixin,
)
from md2mdoc.blocks.metadata import (
    AUTHOR_PREFIX,
    DATE_PREFIX,
    TITLE_PREFIX,
    MetadataHandlerMixin,
    has_prefix,
)
from md2mdoc.blocks.options import OptionHandlerMixin
from md2mdoc.blocks.text import TextHandlerMixin

if TYPE_CHECKING:
    from md2mdoc.state import ConversionState


@dataclass(frozen=True, slots=True)
class Rule:
    """One (predicate, handler) dispatch entry.

    Attributes:
        name: Rule name, used in debug logs
        matches: Predicate over the line body (terminator removed) and state
        handler: Unbound handler method, called as handler(converter, body)
        structural: A structural line cancels a pending NAME description

    """

    name: str
    matches: Callable[[str, ConversionState], bool]
    handler: Callable[[Any, str], Iterable[str]]
    structural: bool = True


def _starts_with(prefix: str) -> Callable[[str, ConversionState], bool]:
    def predicate(body: str, state: ConversionState) -> bool:
        return body.startswith(prefix)

    return predicate


def _keyword(prefix: str) -> Callable[[str, ConversionState], bool]:
    def predicate(body: str, state: ConversionState) -> bool:
        return has_prefix(body, prefix)

    return predicate


RULES: tuple[Rule, ...] = (
    Rule(
        "comment",
        lambda body, state: state.in_comment_block,
        CommentHandlerMixin._handle_comment_line,
        structural=False,
    ),
    Rule(
        "literal",
        lambda body, state: state.in_code_block,
        LiteralBlockHandlerMixin._handle_literal_line,
        structural=False,
    ),
    Rule(
        "blank",
        lambda body, state: not body.strip(),
        TextHandlerMixin._handle_blank,
        structural=False,
    ),
    Rule("author", _keyword(AUTHOR_PREFIX), MetadataHandlerMixin._handle_author),
    Rule("date", _keyword(DATE_PREFIX), MetadataHandlerMixin._handle_date),
    Rule("title", _keyword(TITLE_PREFIX), MetadataHandlerMixin._handle_title),
    Rule("heading", _starts_with("#"), HeadingHandlerMixin._handle_heading),
    Rule("optional", _starts_with("["), OptionHandlerMixin._handle_optional),
    Rule(
        "comment_close",
        _starts_with(COMMENT_CLOSE),
        CommentHandlerMixin._handle_comment_close,
        structural=False,
    ),
    Rule("list_item", _starts_with("-"), ListHandlerMixin._handle_list_item),
    Rule("list_end", _starts_with("~"), ListHandlerMixin._handle_list_end),
    Rule(
        "comment_open",
        _starts_with(COMMENT_OPEN),
        CommentHandlerMixin._handle_comment_open,
        structural=False,
    ),
    Rule("display_begin", _starts_with(DISPLAY_OPEN), LiteralBlockHandlerMixin._handle_display_begin),
    Rule("display_end", _starts_with(DISPLAY_CLOSE), LiteralBlockHandlerMixin._handle_display_end),
    Rule("fence", _starts_with(FENCE), LiteralBlockHandlerMixin._handle_display_begin),
    Rule(
        "text",
        lambda body, state: True,
        TextHandlerMixin._handle_text,
        structural=False,
    ),
)
