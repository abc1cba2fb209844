from typing import Callable, Optional, Sequence

DuplicateFinder = Callable[[Sequence[int]], Optional[int]]


def find_duplicate_full(values: Sequence[int]) -> Optional[int]:
    """
    Finds the duplicate value by comparing every element against every other element.

    For each position i, all positions j != i are visited in both directions, so
    each pair is compared twice. This is the most obvious brute force and the
    baseline the other scanners are measured against.

    Args:
        values: Integers containing zero or one duplicate pair.

    Returns:
        The duplicated value, or None if every value is unique.
    """
    n = len(values)
    if n < 2:
        return None
    for i in range(n):
        current = values[i]
        for j in range(n):
            if j != i and values[j] == current:
                return current
    return None


def find_duplicate_triangular(values: Sequence[int]) -> Optional[int]:
    """
    Finds the duplicate value comparing each element only against later elements.

    Args:
        values: Integers containing zero or one duplicate pair.

    Returns:
        The duplicated value, or None if every value is unique.
    """
    n = len(values)
    if n < 2:
        return None
    for i in range(n - 1):
        current = values[i]
        for j in range(i + 1, n):
            if values[j] == current:
                return current
    return None


def find_duplicate_triangular_backward(values: Sequence[int]) -> Optional[int]:
    """
    Triangular scan driven from the second-to-last element down to the first.

    The comparison window of each i is still every j > i; only the order of
    the outer loop changes. The window of the first outer steps is short and
    stays hot in cache, which shows up in wall-clock timings even though the
    comparison count matches ``find_duplicate_triangular``.
    """
    n = len(values)
    if n < 2:
        return None
    for i in range(n - 2, -1, -1):
        current = values[i]
        for j in range(i + 1, n):
            if values[j] == current:
                return current
    return None
