"""Echo command-line arguments, plainly or with their positions."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

__all__ = ["join_args", "indexed_lines", "indexed_text", "main"]


def _describe(args: Iterable[str]) -> list[str]:
    return [f"index: {i}, value: {arg}" for i, arg in enumerate(args)]


def join_args(args: Iterable[str]) -> str:
    """Join the arguments with single spaces."""
    return " ".join(args)


def indexed_lines(args: Iterable[str]) -> str:
    """List each argument with its index, every line ending in a newline."""
    return "".join(f"{line}\n" for line in _describe(args))


def indexed_text(args: Iterable[str]) -> str:
    """List each argument with its index, lines separated by newlines."""
    return "\n".join(_describe(args))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the arguments separated by spaces."""
    args = sys.argv[1:] if argv is None else list(argv)
    print(join_args(args))
    return 0


if __name__ == "__main__":
    sys.exit(main())