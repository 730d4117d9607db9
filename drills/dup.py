"""Report lines that occur more than once, counted per input file."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, MutableMapping, Sequence
from typing import IO

__all__ = ["count_lines", "find_duplicates", "main"]

_STDIN_NAME = "/dev/stdin"


def count_lines(
    stream: Iterable[bytes | str], name: str, counts: MutableMapping[str, int]
) -> None:
    """Add one to counts["name/line"] for every line of stream."""
    for raw in stream:
        line = raw.decode("utf-8", "surrogateescape") if isinstance(raw, bytes) else raw
        line = line.removesuffix("\n").removesuffix("\r")
        key = f"{name}/{line}"
        counts[key] = counts.get(key, 0) + 1


def find_duplicates(
    paths: Sequence[str], stdin: IO[bytes] | IO[str] | None = None
) -> dict[str, int]:
    """Count lines in the named files, or in stdin if none; keep those seen twice or more.

    Files that cannot be opened are reported on standard error and skipped.
    """
    counts: Counter[str] = Counter()
    if not paths:
        count_lines(sys.stdin.buffer if stdin is None else stdin, _STDIN_NAME, counts)
    for path in paths:
        try:
            handle = open(path, "rb")
        except OSError as exc:
            print(f"os.Open: {exc}", file=sys.stderr)
            continue
        with handle:
            count_lines(handle, path, counts)
    return {line: n for line, n in counts.items() if n > 1}


def main(argv: Sequence[str] | None = None) -> int:
    """Print each duplicated line with its count, tab separated."""
    paths = sys.argv[1:] if argv is None else list(argv)
    for line, n in find_duplicates(paths).items():
        print(f"{n}\t{line}")
    return 0


if __name__ == "__main__":
    sys.exit(main())