import pytest

from dupscan import PartitionError, fan_out_schedule, partition, validate_fan_out


@pytest.mark.parametrize(
    "fan_out, expected",
    [(1, [1]), (2, [2, 1]), (4, [4, 2, 1]), (8, [8, 4, 2, 1]), (6, [6, 3, 1]), (5, [5, 2, 1])],
)
def test_fan_out_schedule(fan_out, expected):
    assert fan_out_schedule(fan_out) == expected


@pytest.mark.parametrize("fan_out", [0, -4, 2.0, "4", True])
def test_fan_out_schedule_rejects_invalid(fan_out):
    with pytest.raises(PartitionError):
        fan_out_schedule(fan_out)


def test_partition_error_is_value_error():
    assert issubclass(PartitionError, ValueError)


def test_validate_fan_out_accepts_even_lengths():
    assert validate_fan_out(10_000, 4) == [4, 2, 1]
    assert validate_fan_out(12, 6) == [6, 3, 1]


@pytest.mark.parametrize("length, fan_out", [(9_999, 4), (6, 4), (15, 5)])
def test_validate_fan_out_rejects_uneven_lengths(length, fan_out):
    with pytest.raises(PartitionError, match="not divisible"):
        validate_fan_out(length, fan_out)


def test_partition_is_contiguous_and_complete():
    values = [1, 2, 3, 4, 5, 6, 2, 7]
    parts = partition(values, 4)
    assert parts == [[1, 2], [3, 4], [5, 6], [2, 7]]
    assert [v for part in parts for v in part] == values

    assert partition(values, 2) == [[1, 2, 3, 4], [5, 6, 2, 7]]
    assert partition(values, 1) == [values]


def test_partition_does_not_mutate_input():
    values = list(range(16))
    partition(values, 4)
    assert values == list(range(16))


def test_partition_rejects_uneven_split():
    with pytest.raises(PartitionError):
        partition([1, 2, 3], 2)
