"""File and stream plumbing around the conversion engine.

Opens sources and sinks, drives a Converter over them, and converts
several documents in parallel. Every failure to obtain or use a file is
raised as ResourceUnavailableError, which aborts the whole run.

Thread Safety:
convert_files() gives every document its own Converter (and so its own
ConversionState). Worker tasks share only the immutable config and return
a ConversionResult; nothing else crosses threads.
"""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from md2mdoc.config import DEFAULT_CONFIG, ConvertConfig
from md2mdoc.converter import Converter
from md2mdoc.errors import ResourceUnavailableError
from md2mdoc.protocols import LineSource, TextSink
from md2mdoc.utils.logger import get_logger

logger = get_logger(__name__)

STDIO = "-"


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of converting one document.

    Attributes:
        source: Input path ("-" for stdin)
        destination: Output path ("-" for stdout)
        lines: Number of input lines read
        fragments: Number of output fragments written
    """

    source: str
    destination: str
    lines: int
    fragments: int


def _check_not_input(source: str | Path, destination: str | Path) -> None:
    """Refuse a destination that is the source file itself.

    Opening the sink truncates it, so this must run before open_sink().
    """
    if STDIO in (str(source), str(destination)):
        return
    if Path(source).resolve() == Path(destination).resolve():
        raise ResourceUnavailableError(str(source), "output would overwrite the input")


def _reason(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    if isinstance(exc, UnicodeDecodeError):
        return "input is not valid UTF-8"
    return str(exc)


@contextmanager
def open_source(path: str | Path) -> Iterator[TextIO]:
    """Open a line source; "-" is stdin and is not closed afterwards.

    Raises:
        ResourceUnavailableError: If the file cannot be opened.
    """
    name = str(path)
    if name == STDIO:
        yield sys.stdin
        return
    try:
        handle = open(name, encoding="utf-8")
    except OSError as exc:
        raise ResourceUnavailableError(name, _reason(exc)) from exc
    logger.info("reading %s", name)
    with handle:
        yield handle


@contextmanager
def open_sink(path: str | Path) -> Iterator[TextIO]:
    """Open an output sink; "-" is stdout and is flushed, not closed.

    Raises:
        ResourceUnavailableError: If the file cannot be created.
    """
    name = str(path)
    if name == STDIO:
        yield sys.stdout
        sys.stdout.flush()
        return
    try:
        handle = open(name, "w", encoding="utf-8")
    except OSError as exc:
        raise ResourceUnavailableError(name, _reason(exc)) from exc
    logger.info("writing %s", name)
    with handle:
        yield handle


def convert_stream(
    source: LineSource,
    sink: TextSink,
    config: ConvertConfig | None = None,
    *,
    source_name: str = "<source>",
    sink_name: str = "<sink>",
) -> tuple[int, int]:
    """Convert every line of source into sink with a fresh Converter.

    Args:
        source: Line source
        sink: Output sink
        config: Conversion options
        source_name: Name used in error messages for read failures
        sink_name: Name used in error messages for write failures

    Returns:
        (lines read, fragments written)

    Raises:
        ResourceUnavailableError: If reading or writing fails.
    """
    converter = Converter(config or DEFAULT_CONFIG)
    lines = 0
    fragments = 0
    iterator = iter(source)
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            break
        except (OSError, UnicodeDecodeError) as exc:
            raise ResourceUnavailableError(source_name, _reason(exc)) from exc
        lines += 1
        for fragment in converter.convert_line(line):
            try:
                sink.write(fragment)
            except OSError as exc:
                raise ResourceUnavailableError(sink_name, _reason(exc)) from exc
            fragments += 1
    return lines, fragments


def convert_file(
    source: str | Path,
    destination: str | Path = STDIO,
    config: ConvertConfig | None = None,
) -> ConversionResult:
    """Convert one file (or stdin) into another file (or stdout).

    Raises:
        ResourceUnavailableError: If a file cannot be used, or destination
            is the source itself.
    """
    _check_not_input(source, destination)
    with open_source(source) as src, open_sink(destination) as dst:
        lines, fragments = convert_stream(
            src,
            dst,
            config,
            source_name=str(source),
            sink_name=str(destination),
        )
    return ConversionResult(str(source), str(destination), lines, fragments)


def output_path_for(
    source: str | Path,
    output_dir: str | Path | None,
    section: str,
) -> Path:
    """Destination for source in batch mode: ``<stem>.<section>``.

    The file goes into output_dir when given, else next to the source.
    """
    source = Path(source)
    directory = Path(output_dir) if output_dir is not None else source.parent
    return directory / f"{source.stem}.{section}"


def convert_files(
    sources: Sequence[str | Path],
    output_dir: str | Path | None = None,
    *,
    jobs: int | None = None,
    config: ConvertConfig | None = None,
) -> list[ConversionResult]:
    """Convert several documents concurrently, one Converter each.

    Args:
        sources: Input paths (stdin is not allowed here)
        output_dir: Directory for the outputs (created if missing);
            None writes each output next to its source
        jobs: Worker threads (None lets the executor decide)
        config: Conversion options shared by all documents

    Returns:
        One ConversionResult per source, in input order.

    Raises:
        ResourceUnavailableError: If two sources map to the same output or
            an output is a source (nothing is written), or for the first
            document that fails (the run is aborted).
    """
    config = config or DEFAULT_CONFIG
    pairs = [(src, output_path_for(src, output_dir, config.section)) for src in sources]

    # Checked before any file is created or truncated
    writers = Counter(dst.resolve() for _, dst in pairs)
    for src, dst in pairs:
        _check_not_input(src, dst)
        if writers[dst.resolve()] > 1:
            raise ResourceUnavailableError(
                str(dst), "output would be written by more than one input"
            )

    if output_dir is not None:
        try:
            Path(output_dir).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ResourceUnavailableError(str(output_dir), _reason(exc)) from exc

    def task(pair: tuple[str | Path, Path]) -> ConversionResult:
        return convert_file(pair[0], pair[1], config)

    with ThreadPoolExecutor(max_workers=jobs) as executor:
        results = list(executor.map(task, pairs))

    logger.info("converted %d documents", len(results))
    return results
