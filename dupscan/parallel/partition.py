from typing import List, Sequence, TypeVar

SeqT = TypeVar("SeqT", bound=Sequence[int])


class PartitionError(ValueError):
    """Raised when an input cannot be split evenly for every round of a search."""


def fan_out_schedule(fan_out: int) -> List[int]:
    """
    Fan-outs visited by a parallel search, coarsening by halves down to a single partition.

    >>> fan_out_schedule(4)
    [4, 2, 1]
    >>> fan_out_schedule(6)
    [6, 3, 1]
    """
    if isinstance(fan_out, bool) or not isinstance(fan_out, int):
        raise PartitionError(f"fan_out must be an integer, got {type(fan_out).__name__}.")
    if fan_out < 1:
        raise PartitionError(f"fan_out must be positive, got {fan_out}.")
    schedule = []
    while fan_out > 1:
        schedule.append(fan_out)
        fan_out //= 2
    schedule.append(1)
    return schedule


def validate_fan_out(length: int, fan_out: int) -> List[int]:
    """
    Checks that every round of a search starting at ``fan_out`` splits ``length`` evenly.

    Returns:
        The validated fan-out schedule.

    Raises:
        PartitionError: if ``fan_out`` is not a positive integer or any fan-out of
            the schedule does not divide ``length``.
    """
    schedule = fan_out_schedule(fan_out)
    uneven = [f for f in schedule if length % f]
    if uneven:
        raise PartitionError(
            f"Input length {length} is not divisible by fan-out(s) {uneven} "
            f"of schedule {schedule}."
        )
    return schedule


def partition(values: SeqT, fan_out: int) -> List[SeqT]:
    """Splits ``values`` into ``fan_out`` contiguous slices of equal length."""
    length = len(values)
    if fan_out < 1 or length % fan_out:
        raise PartitionError(f"Cannot split {length} values into {fan_out} equal partitions.")
    size = length // fan_out
    return [values[k * size : (k + 1) * size] for k in range(fan_out)]
