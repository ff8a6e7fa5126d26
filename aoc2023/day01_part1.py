"""Trebuchet calibration, part one: only literal digits count."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from pathlib import Path

_DIGITS = "0123456789"


def _lines(text: str) -> Iterator[str]:
    """Yield the lines of ``text``, split on newlines, without a trailing empty line."""
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part.removesuffix("\r")


def calibration_value(line: str) -> int:
    """Combine the first and last digit of ``line`` into a two-digit number."""
    digits = [int(ch) for ch in line if ch in _DIGITS]
    if not digits:
        raise ValueError(f"first digit expected in line {line!r}")
    return int(f"{digits[0]}{digits[-1]}")


def process(text: str) -> str:
    """Sum the calibration values of every line in ``text``."""
    return str(sum(calibration_value(line) for line in _lines(text)))


def main(argv: list[str] | None = None) -> int:
    """Print the part one answer for an input file."""
    parser = argparse.ArgumentParser(description="Day 1, part 1")
    parser.add_argument(
        "input",
        nargs="?",
        default="input1.txt",
        type=Path,
        help="puzzle input file (default: input1.txt)",
    )
    args = parser.parse_args(argv)
    text = args.input.read_text(encoding="utf-8")
    try:
        result = process(text)
    except ValueError as exc:
        raise SystemExit(f"process part 1: {exc}") from exc
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())