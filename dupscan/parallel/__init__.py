from .coordinator import build_executor, find_duplicate_parallel, search_round
from .partition import PartitionError, fan_out_schedule, partition, validate_fan_out

__all__ = [
    "find_duplicate_parallel",
    "search_round",
    "build_executor",
    "PartitionError",
    "fan_out_schedule",
    "partition",
    "validate_fan_out",
]
