"""Bitcoin price lookups against a historical exchange-rate database."""

from __future__ import annotations

import math
import re
import struct
import sys
from bisect import bisect_right
from pathlib import Path

DATABASE_FILE = "data.csv"

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_VALUE_CHARS = frozenset("0123456789.")

_INVALID_DATE = "Error: Invalid Date!"
_INVALID_NUMBER = "Error: Provided value is not a valid number!"


def _to_float32(number: float) -> float:
    """Round a Python float to single precision."""
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def _atoi(text: str) -> int:
    """Parse a leading integer the way C's atoi does; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _strtof(text: str) -> float:
    """Parse a leading decimal number as a single-precision float; 0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return 0.0
    return _to_float32(float(match.group(0)))


def _is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def check_date(date: str) -> str:
    """Validate a YYYY-MM-DD date and return it unchanged."""
    if len(date) < 8 or date[4] != "-" or date[7] != "-":
        raise ValueError("Error: Invalid Date Format! Use YYYY-MM-DD")
    year = _atoi(date[0:4])
    if year < 2009:
        raise ValueError(_INVALID_DATE)
    month = _atoi(date[5:7])
    if not 1 <= month <= 12:
        raise ValueError(_INVALID_DATE)
    day = _atoi(date[8:10])
    days = 29 if month == 2 and _is_leap(year) else _DAYS_IN_MONTH[month - 1]
    if not 1 <= day <= days:
        raise ValueError(_INVALID_DATE)
    if (year, month, day) == (2009, 1, 1):
        raise ValueError(_INVALID_DATE)
    return date


def check_value(value: str) -> float:
    """Validate a non-negative amount of at most 1000 and return it."""
    if not set(value) <= _VALUE_CHARS or value.count(".") > 1:
        raise ValueError(_INVALID_NUMBER)
    number = _strtof(value)
    if number > 1000:
        raise ValueError("Error: too large a number!")
    return number


def _read_lines(path: str) -> list[str]:
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            content = handle.read()
    except OSError as exc:
        raise RuntimeError(f"Error: Could not open file {path}") from exc
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class BitcoinExchange:
    """Holds exchange rates by date and values amounts against them."""

    def __init__(self) -> None:
        self._prices: dict[str, float] = {}
        self._dates: list[str] = []

    def load_database(self, path: str | Path) -> None:
        """Load a CSV of `date,rate` rows, skipping the header line."""
        path = str(path)
        if not path:
            raise ValueError("Error: CSV Filename not given!")
        for line in _read_lines(path)[1:]:
            if not line:
                continue
            if len(line) < 11:
                raise ValueError(f"Error: malformed database line => {line}")
            self._prices[line[:10]] = _strtof(line[11:])
        self._dates = sorted(self._prices)

    def search_prices(self, path: str | Path) -> list[str]:
        """Evaluate every line of an input file after its header.

        Returns one output line per non-empty input line: either the
        valuation or the error message for that line.
        """
        path = str(path)
        if not path:
            raise ValueError("Error: Input Filename not given!")
        results = []
        for line in _read_lines(path)[1:]:
            if not line:
                continue
            try:
                results.append(self.evaluate_line(line))
            except ValueError as exc:
                results.append(str(exc))
        return results

    def evaluate_line(self, line: str) -> str:
        """Value a `YYYY-MM-DD | amount` line at the closest earlier rate."""
        if len(line) < 14 or line[11] != "|" or line[10] != " " or line[12] != " ":
            raise ValueError(f"Error: bad input => {line}")
        date = check_date(line[:10])
        value = check_value(line[13:])
        position = bisect_right(self._dates, date)
        if position == 0:
            raise ValueError(f"Error: no exchange rate known for {date}")
        rate = self._prices[self._dates[position - 1]]
        total = _to_float32(value * rate)
        return f"{date} => {value:g} => {total:g}"


def main(argv: list[str] | None = None) -> int:
    """Value every line of the input file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Provide an argument <input_file>!")
        return 0
    exchange = BitcoinExchange()
    try:
        exchange.load_database(DATABASE_FILE)
        for output in exchange.search_prices(args[0]):
            print(output)
    except (ValueError, RuntimeError) as exc:
        print(exc, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())