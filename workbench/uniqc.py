"""Count runs of identical consecutive lines, like ``uniq -c`` with the count last."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from itertools import groupby
from typing import TextIO


def _scan_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines without their trailing newline (and a carriage return before it)."""
    for line in stream:
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def count_runs(lines: Iterable[str]) -> Iterator[tuple[str, int]]:
    """Yield ``(line, count)`` for each run of equal consecutive lines.

    An empty input yields a single ``("", 0)`` run, so that output always
    ends with one summary line.
    """
    seen_any = False
    for value, group in groupby(lines):
        seen_any = True
        yield value, sum(1 for _ in group)
    if not seen_any:
        yield "", 0


def format_runs(runs: Iterable[tuple[str, int]]) -> Iterator[str]:
    """Render runs as ``line<TAB>count`` strings."""
    for value, count in runs:
        yield f"{value}\t{count}"


def _emit(stream: TextIO) -> None:
    for line in format_runs(count_runs(_scan_lines(stream))):
        print(line)


def main(argv: list[str] | None = None) -> int:
    """Read the file named first in ``argv`` (or standard input) and print run counts."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        with open(args[0], encoding="utf-8") as stream:
            _emit(stream)
    else:
        _emit(sys.stdin)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())