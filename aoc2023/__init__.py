"""Advent of Code 2023 day 1 solutions and a puzzle input downloader."""

__version__ = "0.1.0"
__all__ = ["day01_part1", "day01_part2", "fetch_input"]