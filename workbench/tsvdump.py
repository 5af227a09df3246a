"""Print every field of a tab-separated file, one per line."""

from __future__ import annotations

import csv
import sys
from collections.abc import Iterator
from typing import TextIO


def iter_fields(stream: TextIO) -> Iterator[str]:
    """Yield every field of every tab-separated record in ``stream``.

    Quotes inside unquoted fields are kept literally. Blank lines are
    skipped. Every record must have as many fields as the first one;
    otherwise ``ValueError`` is raised.
    """
    reader = csv.reader(stream, delimiter="\t", quotechar='"', strict=False)
    expected: int | None = None
    for record in reader:
        if not record:
            continue
        if expected is None:
            expected = len(record)
        elif len(record) != expected:
            raise ValueError(
                f"record on line {reader.line_num}: wrong number of fields "
                f"({len(record)} instead of {expected})"
            )
        yield from record


def main(argv: list[str] | None = None) -> int:
    """Dump the fields of the file named first in ``argv``, or of standard input."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        with open(args[0], encoding="utf-8", newline="") as stream:
            for value in iter_fields(stream):
                print(value)
    else:
        for value in iter_fields(sys.stdin):
            print(value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())