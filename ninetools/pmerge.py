"""Merge-insertion (Ford-Johnson style) sorting of positive integers."""

from __future__ import annotations

import sys
import time
from collections import deque
from collections.abc import Iterable, MutableSequence, Sequence

_INT_MAX = 2**31 - 1
_PREVIEW_LIMIT = 10


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Turn command-line arguments into non-negative 32-bit integers."""
    numbers = []
    for arg in args:
        if not arg or not all(ch in "0123456789" for ch in arg):
            raise ValueError(f"Invalid input => {arg}")
        number = int(arg)
        if number > _INT_MAX:
            raise OverflowError(f"Int Overflow => {arg}")
        numbers.append(number)
    return numbers


def jacobsthal_order(size: int) -> list[int]:
    """Return the indices below `size` in Jacobsthal insertion order.

    The order is 0 1 3 2 5 4 11 10 9 8 7 6 21 20 ...: each Jacobsthal
    number followed by the indices down to the previous one.
    """
    jacobsthal = [0, 1]
    while jacobsthal[-1] < size:
        jacobsthal.append(jacobsthal[-1] + 2 * jacobsthal[-2])

    order = [0] if size > 0 else []
    previous = 1
    for current in jacobsthal[3:]:
        order.extend(index for index in range(current, previous, -1) if index < size)
        previous = current
    if size > 1:
        order.insert(1, 1)
    return order


def format_preview(numbers: Sequence[int]) -> str:
    """Show up to ten numbers followed by the container size."""
    text = "".join(f"{number} " for number in list(numbers)[:_PREVIEW_LIMIT])
    if len(numbers) > _PREVIEW_LIMIT:
        text += "[...]\n"
    return f"{text}\nContainer Size: {len(numbers)}"


class PmergeMe:
    """Sorts lists or deques by merge-insertion, counting comparisons."""

    def __init__(self) -> None:
        self.comparisons = 0

    def sort(self, numbers: Iterable[int]) -> MutableSequence[int]:
        """Return the numbers sorted, as a deque if given one, else a list."""
        self.comparisons = 0
        kind = deque if isinstance(numbers, deque) else list
        return self._merge_insertion(kind(numbers), kind)

    def _merge_insertion(self, items: MutableSequence[int], kind: type) -> MutableSequence[int]:
        if len(items) <= 1:
            return kind(items)
        leftover = items[-1] if len(items) % 2 == 1 else None

        values = iter(items)
        pairs = [(min(a, b), max(a, b)) for a, b in zip(values, values)]
        chain = self._merge_insertion(kind(big for _, big in pairs), kind)

        for index in jacobsthal_order(len(pairs)):
            small, big = pairs[index]
            self._binary_insert(chain, small, _first_index(chain, big))
        if leftover is not None:
            self._binary_insert(chain, leftover, len(chain))
        return chain

    def _binary_insert(self, chain: MutableSequence[int], value: int, bound: int) -> None:
        low, high = 0, bound
        while low != high:
            middle = low + (high - low) // 2
            if value < chain[middle]:
                high = middle
            else:
                low = middle + 1
            self.comparisons += 1
        chain.insert(low, value)


def _first_index(chain: MutableSequence[int], value: int) -> int:
    try:
        return chain.index(value)
    except ValueError:
        return len(chain)


def _report(args: list[str], kind: type, label: str, gap: str) -> None:
    numbers = kind(parse_numbers(args))
    sys.stdout.write("\nBefore: " + format_preview(numbers))
    merger = PmergeMe()
    start = time.process_time()
    ordered = merger.sort(numbers)
    elapsed = (time.process_time() - start) * 1_000_000
    sys.stdout.write("\nAfter: " + format_preview(ordered))
    sys.stdout.write(
        f"\nTime to process the range of {len(numbers)} with {label} : "
        f"{elapsed:g} microsecs\n"
    )
    sys.stdout.write(f"{gap}Number of comparisons: {merger.comparisons}\n")


def main(argv: list[str] | None = None) -> int:
    """Sort the numbers given on the command line with a list and a deque."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Error: PROVIDE SOME POSITIVE NUMBERS!")
        return 1
    for kind, label, gap in ((list, "list", ""), (deque, "deque", "\n")):
        try:
            _report(args, kind, label, gap)
        except (ValueError, OverflowError) as exc:
            print(exc)
    return 0


if __name__ == "__main__":
    sys.exit(main())