"""Tests for the file and stream layer."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from md2mdoc import ConvertConfig, ResourceUnavailableError, StringBuilder
from md2mdoc.io import (
    ConversionResult,
    convert_file,
    convert_files,
    convert_stream,
    open_sink,
    open_source,
    output_path_for,
)

PAGE = "title: WIDGET 1\n# NAME\nwidget -- does a thing\n"
PAGE_MDOC = ".Dt WIDGET 1\n.Os\n.Sh NAME\n.Nm widget\n.Nd does a thing\n"


class TestConvertStream:
    def test_counts(self) -> None:
        sink = StringBuilder()
        lines, fragments = convert_stream(io.StringIO(PAGE), sink)
        assert (lines, fragments) == (3, 5)
        assert sink.build() == PAGE_MDOC

    def test_read_failure_wrapped(self) -> None:
        def broken():
            yield "# A\n"
            raise OSError(5, "Input/output error")

        with pytest.raises(ResourceUnavailableError, match="in.md: Input/output error"):
            convert_stream(broken(), io.StringIO(), source_name="in.md")

    def test_write_failure_wrapped(self) -> None:
        class FullSink:
            def write(self, text: str) -> int:
                raise OSError(28, "No space left on device")

        with pytest.raises(ResourceUnavailableError) as exc_info:
            convert_stream(["# A\n"], FullSink(), sink_name="out.1")
        assert exc_info.value.path == "out.1"
        assert exc_info.value.reason == "No space left on device"

    def test_each_stream_gets_fresh_state(self) -> None:
        sink = io.StringIO()
        convert_stream(["-v\n"], sink)
        convert_stream(["-q\n"], sink)
        assert sink.getvalue().count(".Bl") == 2


class TestConvertFile:
    def test_file_to_file(self, tmp_path: Path) -> None:
        src = tmp_path / "widget.md"
        dst = tmp_path / "widget.1"
        src.write_text(PAGE, encoding="utf-8")
        result = convert_file(src, dst)
        assert dst.read_text(encoding="utf-8") == PAGE_MDOC
        assert result == ConversionResult(str(src), str(dst), 3, 5)

    def test_file_to_stdout(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        src = tmp_path / "widget.md"
        src.write_text(PAGE, encoding="utf-8")
        convert_file(src)
        assert capsys.readouterr().out == PAGE_MDOC

    def test_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("*b*\n"))
        convert_file("-", "-")
        assert capsys.readouterr().out == ".Sy b\n"

    def test_missing_source(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.md"
        with pytest.raises(ResourceUnavailableError) as exc_info:
            convert_file(missing, tmp_path / "out.1")
        assert exc_info.value.path == str(missing)
        assert not (tmp_path / "out.1").exists()

    def test_refuses_to_overwrite_source(self, tmp_path: Path) -> None:
        src = tmp_path / "widget.md"
        src.write_text(PAGE, encoding="utf-8")
        with pytest.raises(ResourceUnavailableError, match="overwrite the input"):
            convert_file(src, tmp_path / "." / "widget.md")
        assert src.read_text(encoding="utf-8") == PAGE

    def test_unwritable_destination(self, tmp_path: Path) -> None:
        src = tmp_path / "widget.md"
        src.write_text(PAGE, encoding="utf-8")
        with pytest.raises(ResourceUnavailableError):
            convert_file(src, tmp_path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        src = tmp_path / "latin1.md"
        src.write_bytes(b"caf\xe9\n")
        with pytest.raises(ResourceUnavailableError, match="not valid UTF-8"):
            convert_file(src, tmp_path / "out.1")


class TestOpenHelpers:
    def test_open_source_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceUnavailableError):
            with open_source(tmp_path / "nope.md"):
                pass

    def test_open_sink_creates_file(self, tmp_path: Path) -> None:
        target = tmp_path / "out.1"
        with open_sink(target) as sink:
            sink.write(".Pp\n")
        assert target.read_text(encoding="utf-8") == ".Pp\n"


class TestConvertFiles:
    def _write(self, directory: Path, *names: str) -> list[Path]:
        paths = []
        for name in names:
            path = directory / name
            path.write_text(f"# NAME\n{path.stem} -- page\n", encoding="utf-8")
            paths.append(path)
        return paths

    def test_output_next_to_sources(self, tmp_path: Path) -> None:
        sources = self._write(tmp_path, "a.md", "b.md")
        results = convert_files(sources, jobs=2)
        assert [r.destination for r in results] == [str(tmp_path / "a.1"), str(tmp_path / "b.1")]
        assert (tmp_path / "b.1").read_text(encoding="utf-8") == ".Sh NAME\n.Nm b\n.Nd page\n"

    def test_output_dir_created(self, tmp_path: Path) -> None:
        sources = self._write(tmp_path, "a.md", "b.md")
        out = tmp_path / "man" / "man8"
        convert_files(sources, out, config=ConvertConfig(section="8"))
        assert sorted(p.name for p in out.iterdir()) == ["a.8", "b.8"]

    def test_results_in_input_order(self, tmp_path: Path) -> None:
        sources = self._write(tmp_path, *(f"p{i}.md" for i in range(12)))
        results = convert_files(sources, tmp_path / "out", jobs=4)
        assert [r.source for r in results] == [str(p) for p in sources]

    def test_one_failure_aborts(self, tmp_path: Path) -> None:
        sources = self._write(tmp_path, "a.md")
        sources.append(tmp_path / "missing.md")
        with pytest.raises(ResourceUnavailableError, match="missing.md"):
            convert_files(sources, tmp_path / "out")

    def test_refuses_to_overwrite_input(self, tmp_path: Path) -> None:
        sources = self._write(tmp_path, "page.1")
        with pytest.raises(ResourceUnavailableError, match="overwrite"):
            convert_files(sources)

    def test_same_stem_in_two_directories(self, tmp_path: Path) -> None:
        (tmp_path / "a").mkdir()
        (tmp_path / "b").mkdir()
        sources = self._write(tmp_path / "a", "x.md") + self._write(tmp_path / "b", "x.md")
        out = tmp_path / "out"
        with pytest.raises(ResourceUnavailableError, match="more than one input") as exc_info:
            convert_files(sources, out, jobs=2)
        assert exc_info.value.path == str(out / "x.1")
        assert not out.exists()

    def test_same_stem_next_to_each_other(self, tmp_path: Path) -> None:
        sources = self._write(tmp_path, "x.md", "x.txt")
        with pytest.raises(ResourceUnavailableError, match="more than one input"):
            convert_files(sources)
        assert not (tmp_path / "x.1").exists()


class TestOutputPathFor:
    def test_next_to_source(self) -> None:
        assert output_path_for("docs/widget.md", None, "1") == Path("docs/widget.1")

    def test_into_directory(self) -> None:
        assert output_path_for("docs/widget.md", "man", "8") == Path("man/widget.8")
