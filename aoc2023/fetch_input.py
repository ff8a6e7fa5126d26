"""Download a day's puzzle input and store it as input1.txt and input2.txt."""

from __future__ import annotations

import argparse
import os
import re
from pathlib import Path

import requests

BASE_URL = "https://adventofcode.com"
INPUT_FILES = ("input1.txt", "input2.txt")
_U32_MAX = 2**32 - 1
_LEADING_DIGITS = re.compile(r"[0-9]+")


def parse_prefixed_u32(prefix: str, text: str) -> tuple[str, int]:
    """Parse ``prefix`` followed by an unsigned 32-bit number.

    Returns the unparsed remainder and the number; raises ValueError if the
    prefix or the number is missing or the number does not fit in 32 bits.
    """
    if not text.startswith(prefix):
        raise ValueError(f"expected {prefix!r} at the start of {text!r}")
    rest = text[len(prefix):]
    match = _LEADING_DIGITS.match(rest)
    if match is None:
        raise ValueError(f"expected a number after {prefix!r} in {text!r}")
    value = int(match.group())
    if value > _U32_MAX:
        raise ValueError(f"number {match.group()} does not fit in 32 bits")
    return rest[match.end():], value


def parse_day(text: str) -> tuple[str, int]:
    """Parse a day name such as ``day-01``."""
    return parse_prefixed_u32("day-", text)


def input_url(year: int, day: int) -> str:
    """Return the address of the puzzle input for ``year`` and ``day``."""
    return f"{BASE_URL}/{year}/day/{day}/input"


def fetch_input(year: int, day: int, session: str) -> str:
    """Download the puzzle input using the given session cookie."""
    try:
        response = requests.get(
            input_url(year, day),
            headers={"Cookie": f"session={session}"},
            timeout=30,
        )
    except requests.RequestException as exc:
        raise RuntimeError("Failed to send request") from exc
    return response.text


def write_inputs(directory: str | os.PathLike[str], day_name: str, data: str) -> list[Path]:
    """Write ``data`` to both input files under ``directory/day_name``.

    Returns the paths written, in order.
    """
    dir_path = Path(directory) / day_name
    try:
        dir_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise RuntimeError(f"Failed to create directory {dir_path}") from exc
    payload = data.encode("utf-8")
    written = []
    for filename in INPUT_FILES:
        file_path = dir_path / filename
        try:
            file_path.write_bytes(payload)
        except OSError as exc:
            raise RuntimeError(f"Should create file {file_path}") from exc
        written.append(file_path)
    return written


def _u32(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid year: {value!r}") from None
    if not 0 <= number <= _U32_MAX:
        raise argparse.ArgumentTypeError(f"invalid year: {value!r}")
    return number


def main(argv: list[str] | None = None) -> int:
    """Fetch the input for one day and write it into the day's directory."""
    session = os.environ.get("SESSION")
    if session is None:
        raise SystemExit("Should have a session token set")

    parser = argparse.ArgumentParser(description="Fetch a day's puzzle input.")
    parser.add_argument(
        "-y", "--year", type=_u32, required=True,
        help="Years may pass, but the pursuit of skill mastery continues.",
    )
    parser.add_argument(
        "-d", "--day", required=True,
        help='Day is expected to be formatted as "day-01".',
    )
    parser.add_argument(
        "--current-working-directory", type=Path, required=True,
        help="Directory in which the day's directory is created.",
    )
    args = parser.parse_args(argv)

    try:
        _, day = parse_day(args.day)
    except ValueError:
        parser.error(f"Day `{args.day}` must be formatted as `day-01`")

    url = input_url(args.year, day)
    print(f"Getting input from `{url}`")
    print(f"session={session}")

    data = fetch_input(args.year, day, session)
    for path in write_inputs(args.current_working_directory, args.day, data):
        print(f"Wrote {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())