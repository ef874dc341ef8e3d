"""Error types and graceful degradation of malformed input.

The engine never raises; only the I/O layer reports failures.
"""

import pytest

from md2mdoc import Converter, Md2MdocError, ResourceUnavailableError


class TestResourceUnavailableError:
    def test_message(self) -> None:
        err = ResourceUnavailableError("in.md", "No such file or directory")
        assert str(err) == "in.md: No such file or directory"
        assert err.path == "in.md"
        assert err.reason == "No such file or directory"

    def test_hierarchy(self) -> None:
        assert issubclass(ResourceUnavailableError, Md2MdocError)
        assert issubclass(Md2MdocError, Exception)


class TestMalformedInput:
    """Malformed markup produces output instead of errors."""

    @pytest.mark.parametrize(
        "line",
        [
            "*unterminated\n",
            "[-o file\n",
            "[\n",
            "]\n",
            "#\n",
            "title:\n",
            "^^^\n",
            "\\",
            "<!--",
            "```",
        ],
    )
    def test_never_raises(self, line: str) -> None:
        Converter().convert_line(line)

    def test_dangling_blocks_at_end(self) -> None:
        converter = Converter()
        for line in ("-v\n", "<\n", "text\n"):
            converter.convert_line(line)
        assert converter.state.in_code_block is True
        assert converter.state.in_list_block is True

    def test_empty_heading(self) -> None:
        assert Converter().convert_line("#\n") == [".Sh\n"]
