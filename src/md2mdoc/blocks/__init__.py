"""Block-level handlers for the md2mdoc converter.

Each handler mixin covers one family of leading syntax; rules.RULES
decides which handler sees a line.

Architecture:
blocks/
├── __init__.py      # Re-exports RULES, Rule and the handler mixins
├── rules.py         # Ordered (predicate, handler) dispatch table
├── metadata.py      # author: / date: / title:
├── headings.py      # # headings, NAME and OPTIONS sections
├── options.py       # [-f arg] optional arguments
├── lists.py         # -item, lone -, ~
├── literal.py       # < > ``` literal blocks, <!-- --> comments
└── text.py          # blank lines, NAME description, inline text
"""

from md2mdoc.blocks.headings import HeadingHandlerMixin
from md2mdoc.blocks.lists import ListHandlerMixin
from md2mdoc.blocks.literal import CommentHandlerMixin, LiteralBlockHandlerMixin
from md2mdoc.blocks.metadata import MetadataHandlerMixin
from md2mdoc.blocks.options import OptionHandlerMixin
from md2mdoc.blocks.rules import RULES, Rule
from md2mdoc.blocks.text import TextHandlerMixin

__all__ = [
    "RULES",
    "CommentHandlerMixin",
    "HeadingHandlerMixin",
    "ListHandlerMixin",
    "LiteralBlockHandlerMixin",
    "MetadataHandlerMixin",
    "OptionHandlerMixin",
    "Rule",
    "TextHandlerMixin",
]
