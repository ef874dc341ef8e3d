"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


def make_large_document() -> str:
    """Generate a large manual page source (~100KB)."""
    sections = []
    for i in range(100):
        sections.append(f"""# SECTION{i}

This is paragraph {i} with *bold*, _italic_ and `code`.
See ^ls 1^, ^cat 1^.

[-v] [-o file]

-v
Verbose output for item {i}.
-o file
Write to *file*.
-

<
  $ widget -v {i}
  $ widget -o out{i}
>

<!--
hidden note {i}
-->
""")
    return "title: WIDGET 1\ndate: today\nauthor: someone\n" + "\n".join(sections)


@pytest.fixture
def large_document() -> str:
    return make_large_document()


@pytest.fixture
def real_world_docs() -> list[str]:
    """Collection of short manual page sources."""
    return [
        # Minimal page
        "# NAME\nhello -- print a greeting\n",
        # Synopsis with options
        """title: LS 1
# NAME
ls -- list directory contents
# SYNOPSIS
[-a] [-l] [file ...]
# OPTIONS
-a
Include entries starting with a dot.
-l
Use the *long* format.
""",
        # Literal example
        """# EXAMPLES
List everything:

```
$ ls -la /tmp
```
""",
        # Cross references
        "# SEE ALSO\n^cat 1^, ^ls 1^, ^mdoc 7^.\n",
    ]
