"""Convert a small manual page to mdoc in 3 lines, zero config."""

from md2mdoc import convert

print(convert("# NAME\nhello -- print a *friendly* greeting\n"), end="")
