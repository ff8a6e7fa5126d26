[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2023"
version = "0.1.0"
description = "Advent of Code 2023 day 1 solutions and a puzzle input downloader"
requires-python = ">=3.10"
keywords = ["advent-of-code", "puzzles", "aoc", "2023"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
aoc2023-day01-part1 = "aoc2023.day01_part1:main"
aoc2023-day01-part2 = "aoc2023.day01_part2:main"
aoc2023-fetch-input = "aoc2023.fetch_input:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2023"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
