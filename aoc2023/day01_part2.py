"""Trebuchet calibration, part two: spelled-out digits count as well."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from pathlib import Path

# Each word advances the scan by all but its last letter, so overlapping
# words such as "eightwo" are both recognised.
_WORDS = (
    ("one", 1, 2),
    ("two", 2, 2),
    ("three", 3, 4),
    ("four", 4, 3),
    ("five", 5, 3),
    ("six", 6, 2),
    ("seven", 7, 4),
    ("eight", 8, 4),
    ("nine", 9, 3),
)
_NONZERO_DIGITS = "123456789"


def _lines(text: str) -> Iterator[str]:
    """Yield the lines of ``text``, split on newlines, without a trailing empty line."""
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part.removesuffix("\r")


def _digits(line: str) -> Iterator[int]:
    """Yield the non-zero digits of ``line``, written or spelled out, in order."""
    pos = 0
    while pos < len(line):
        for word, value, skip in _WORDS:
            if line.startswith(word, pos):
                yield value
                pos += skip
                break
        else:
            if line[pos] in _NONZERO_DIGITS:
                yield int(line[pos])
            pos += 1


def calibration_value(line: str) -> int:
    """Combine the first and last digit of ``line`` into a two-digit number."""
    digits = list(_digits(line))
    if not digits:
        raise ValueError(f"first digit expected in line {line!r}")
    return int(f"{digits[0]}{digits[-1]}")


def process(text: str) -> str:
    """Sum the calibration values of every line in ``text``."""
    return str(sum(calibration_value(line) for line in _lines(text)))


def main(argv: list[str] | None = None) -> int:
    """Print the part two answer for an input file."""
    parser = argparse.ArgumentParser(description="Day 1, part 2")
    parser.add_argument(
        "input",
        nargs="?",
        default="input2.txt",
        type=Path,
        help="puzzle input file (default: input2.txt)",
    )
    args = parser.parse_args(argv)
    text = args.input.read_text(encoding="utf-8")
    try:
        result = process(text)
    except ValueError as exc:
        raise SystemExit(f"process part 2: {exc}") from exc
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())