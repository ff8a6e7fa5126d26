# aoc2023

Solutions to day 1 of Advent of Code 2023, plus a small tool that downloads
your personal puzzle input.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Fetching puzzle input

The downloader needs your Advent of Code session cookie in the `SESSION`
environment variable; without it the command stops with an error.

```
export SESSION=token
aoc2023-fetch-input --year 2023 --day day-01 --current-working-directory .
```

Options:

- `-y`, `--year`: the puzzle year.
- `-d`, `--day`: the day, written as `day-01`, `day-02` and so on. Any other
  form is rejected with a usage error.
- `--current-working-directory`: the directory under which the day's
  directory is created.

The command prints the address it downloads from and the session value it
uses, then saves the input twice, as `day-01/input1.txt` and
`day-01/input2.txt` under the given directory, printing each path written.

The pieces are also available as functions in `aoc2023.fetch_input`:
`parse_day`, `parse_prefixed_u32`, `input_url`, `fetch_input` and
`write_inputs`.

## Solving day 1

Each part reads a puzzle input file and prints the answer. The file is given
as the only argument; without one, part 1 reads `input1.txt` and part 2 reads
`input2.txt` from the current directory.

```
cd day-01
aoc2023-day01-part1
aoc2023-day01-part2 input2.txt
```

A line without any digit stops the command with an error.

Both parts can also be used as a library:

```python
from aoc2023 import day01_part1, day01_part2

print(day01_part1.process("1abc2\npqr3stu8vwx\n"))    # "50"
print(day01_part2.process("two1nine\n"))              # "29"
print(day01_part2.calibration_value("xtwone3four"))   # 24
```

`process` returns the answer as a string; `calibration_value` returns the
value of a single line and raises `ValueError` when the line has no digit.

Part 1 takes the first and last digit of every line. Part 2 also counts
spelled-out digits (`one` to `nine`), including overlapping ones such as
`eightwo`.

## What it does not do

Only day 1 is solved. The downloader fetches input for any day, but there is
no solver for days after the first.