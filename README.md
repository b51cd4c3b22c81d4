# ninetools

This package provides three small command-line tools. Each tool can also be used from Python.

- **btc** (`ninetools.bitcoin`) values bitcoin amounts on given dates, using a price database.
- **RPN** (`ninetools.rpn`) evaluates reverse Polish notation expressions that use single digits.
- **PmergeMe** (`ninetools.pmerge`) sorts non-negative integers by merge-insertion and counts the comparisons it makes.

## Installation

```
pip install .
```

## btc

```
btc input.txt
```

The price database is always read from `data.csv` in the current directory. Its first line is a header and is skipped. Each data line has the form `YYYY-MM-DD,price`.

The input file also begins with a header line, which is skipped. Empty lines are skipped too. Every other line must have the form `YYYY-MM-DD | value`. The tool checks each line:

- The date must be a real calendar date. Leap years are taken into account. The date must be in 2009 or later, but not 2009-01-01.
- The value may contain only digits and at most one dot. It must not be greater than 1000.

For a valid line the tool prints `date => value => value * rate`. The rate is the one for that date. If the database has no rate for that date, the tool uses the rate of the closest earlier date. If the database has no date on or before that date, the line gets an error message. An invalid line also gets an error message, for example `Error: bad input => ...`, `Error: Invalid Date!` or `Error: too large a number!`. Any other argument count prints a usage hint instead.

From Python:

```python
from ninetools.bitcoin import BitcoinExchange, check_date, check_value

exchange = BitcoinExchange()
exchange.load_database("data.csv")
for line in exchange.search_prices("input.txt"):
    print(line)

exchange.evaluate_line("2011-01-03 | 3")  # "2011-01-03 => 3 => ..."
check_date("2012-02-29")                  # returns the date unchanged
check_value("12.5")                       # 12.5
```

Here is how each method behaves:

- `search_prices` returns one string for each non-empty input line. The string is either the valuation or the error message for that line.
- `evaluate_line` and the check functions raise `ValueError` when given bad input.
- A file that cannot be opened raises `RuntimeError`.

## RPN

```
RPN "8 9 * 9 - 9 - 9 - 4 - 1 +"
```

Tokens are separated by whitespace. Each token must be a single digit or one of `+ - * /`. The tool prints the result. If the expression is invalid, it prints an error message instead: `Error: invalid input!`, `Error: invalid sequence!`, `Error: empty input!` or `Error: dividing by zero!`.

From Python:

```python
from ninetools.rpn import evaluate

evaluate("1 2 + 3 *")  # 9.0
```

`evaluate` raises `ValueError` for bad input. It raises `ZeroDivisionError` for a division by zero.

## PmergeMe

```
PmergeMe 3 5 9 7 4
```

Every argument must be a non-negative integer no larger than 2147483647. The numbers are sorted twice, once in a list and once in a deque. For each run the tool prints:

- the numbers before sorting, showing at most ten of them, and the container size;
- the numbers after sorting, shown the same way;
- the processing time in microseconds;
- the number of comparisons made.

If no numbers are given, the tool prints an error and exits with status 1.

From Python:

```python
from collections import deque
from ninetools.pmerge import PmergeMe, parse_numbers, jacobsthal_order, format_preview

sorter = PmergeMe()
sorter.sort(parse_numbers(["3", "5", "9", "7", "4"]))  # [3, 4, 5, 7, 9]
sorter.comparisons                                     # comparisons made by the last sort
sorter.sort(deque([2, 1]))                             # deque([1, 2])

jacobsthal_order(6)  # [0, 1, 3, 2, 5, 4]
```

`parse_numbers` raises `ValueError` for an argument that is not made of digits. It raises `OverflowError` for a number that is too large.

## Tests

```
pip install .[test]
pytest
```