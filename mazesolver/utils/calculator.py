"""Elementary arithmetic helpers."""

import math
from typing import List, Sequence


def power(base: float, exponent: float) -> float:
    """Raise ``base`` to ``exponent`` as a float."""
    return math.pow(base, exponent)


def find_max(values: Sequence[int]) -> int:
    """Largest element of a non-empty sequence."""
    if not values:
        raise ValueError("find_max() requires at least one value")
    largest = values[0]
    for value in values[1:]:
        if value > largest:
            largest = value
    return largest


def find_factors(n: int) -> List[int]:
    """
    Proper divisors of ``n`` in ascending order.
    ``n`` itself is excluded, so 1 and anything smaller yield an empty list.
    """
    return [i for i in range(1, n) if n % i == 0]
