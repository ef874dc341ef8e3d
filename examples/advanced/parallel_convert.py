"""Thread safe: convert 1000 pages in parallel, one converter each."""

from concurrent.futures import ThreadPoolExecutor

from md2mdoc import convert

docs = ["# NAME\ntool" + str(i) + " -- tool number " + str(i) + "\n" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(convert, docs))

print(f"Converted {len(results)} pages in parallel")
print("First page:", results[0].splitlines())
print("Last page:", results[-1].splitlines())
