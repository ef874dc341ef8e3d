"""Benchmark md2mdoc conversion.

Run with:
    pytest benchmarks/benchmark_convert.py -v --benchmark-only
or as a script for a quick timing:
    python benchmarks/benchmark_convert.py
"""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from md2mdoc import Converter, convert
from md2mdoc.converter import iter_lines


@pytest.mark.benchmark(group="convert-large-doc")
def test_benchmark_large_document(benchmark, large_document):
    """Convert one large document."""
    benchmark(convert, large_document)


@pytest.mark.benchmark(group="convert-large-doc")
def test_benchmark_large_document_streaming(benchmark, large_document):
    """Convert one large document without joining the output."""
    lines = list(iter_lines(large_document))

    def stream():
        for _ in Converter().convert(lines):
            pass

    benchmark(stream)


@pytest.mark.benchmark(group="convert-real-world")
def test_benchmark_real_world(benchmark, real_world_docs):
    """Convert a set of short pages."""

    def convert_all():
        for doc in real_world_docs:
            convert(doc)

    benchmark(convert_all)


@pytest.mark.benchmark(group="convert-threaded")
def test_benchmark_threaded(benchmark, real_world_docs):
    """Convert many pages on a thread pool, one converter per page."""
    docs = real_world_docs * 50

    def convert_parallel():
        with ThreadPoolExecutor(max_workers=4) as ex:
            list(ex.map(convert, docs))

    benchmark(convert_parallel)


def main() -> None:
    """Time a large document conversion."""
    import sys

    from conftest import make_large_document

    doc = make_large_document()
    iterations = 20

    print("md2mdoc Conversion Benchmark")
    print("=" * 60)
    print(f"Python {sys.version.split()[0]}")
    print(f"Document: {len(doc) / 1024:.1f}KB\n")

    # Warmup
    convert(doc)

    start = time.perf_counter()
    for _ in range(iterations):
        convert(doc)
    elapsed = (time.perf_counter() - start) / iterations

    print(f"{elapsed * 1000:.2f}ms/doc ({len(doc) / elapsed / 1024 / 1024:.1f} MB/s)")


if __name__ == "__main__":
    main()
