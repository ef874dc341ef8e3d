"""Tests for the top-level convert API and the translation table."""

from __future__ import annotations

import io

import pytest

from md2mdoc import ConvertConfig, convert, convert_lines
from md2mdoc.converter import iter_lines


class TestTranslationTable:
    """Every construct of the input dialect, end to end."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("\n", ".Pp\n"),
            ("#text\n", ".Sh text\n"),
            ("# NAME\nproj -- desc\n", ".Sh NAME\n.Nm proj\n.Nd desc\n"),
            ("author:text\n", ".An text\n"),
            ("date:text\n", ".Dd text\n"),
            ("title:text\n", ".Dt text\n.Os\n"),
            ("[text]\n", ".Op Ar text\n"),
            ("[-f text]\n", ".Op Fl f Ar text\n"),
            ("-item\n", ".Bl -tag -width Ds\n.It Fl item\n"),
            ("-\n", ".El\n"),
            ("~\n", ".El\n"),
            ("<\n", ".Bd -literal -offset indent\n"),
            ("```\n", ".Bd -literal -offset indent\n"),
            (">\n", ".Ed\n"),
            ("```\n```\n", ".Bd -literal -offset indent\n.Ed\n"),
            ("*text*\n", ".Sy text\n"),
            ("_text_\n", ".Em text\n"),
            ("`text`\n", ".Li text\n"),
            ("^text^\n", ".Xr text\n"),
            ("<!-- ... -->\n", ""),
            ("\\x\n", "x\n"),
        ],
    )
    def test_construct(self, source: str, expected: str) -> None:
        assert convert(source) == expected


class TestConvert:
    def test_empty_source(self) -> None:
        assert convert("") == ""

    def test_last_line_without_newline(self) -> None:
        assert convert("a\nb") == "a\nb\n"

    def test_config_passed_through(self) -> None:
        assert convert("  x\n", ConvertConfig(strip_leading_whitespace=False)) == "  x\n"

    def test_form_feed_stays_in_line(self) -> None:
        assert convert("a\fb\n") == "a\fb\n"

    def test_not_idempotent(self) -> None:
        once = convert("<\n  indented\n>\n")
        assert convert(once) != once


class TestConvertLines:
    def test_streams_from_file_object(self) -> None:
        source = io.StringIO("# NAME\nw -- d\n")
        assert list(convert_lines(source)) == [".Sh NAME\n", ".Nm w\n", ".Nd d\n"]

    def test_is_lazy(self) -> None:
        def lines():
            yield "# A\n"
            raise AssertionError("read too far")

        fragments = convert_lines(lines())
        assert next(fragments) == ".Sh A\n"


class TestIterLines:
    @pytest.mark.parametrize(
        "source,expected",
        [
            ("", []),
            ("a", ["a"]),
            ("a\n", ["a\n"]),
            ("a\n\nb", ["a\n", "\n", "b"]),
            ("a\x0cb\x1cc\n", ["a\x0cb\x1cc\n"]),
        ],
    )
    def test_split(self, source: str, expected: list[str]) -> None:
        assert list(iter_lines(source)) == expected
