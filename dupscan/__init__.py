from . import config
from .data import generate_values, inject_duplicate
from .parallel import (
    PartitionError,
    build_executor,
    fan_out_schedule,
    find_duplicate_parallel,
    partition,
    search_round,
    validate_fan_out,
)
from .scan import (
    DuplicateFinder,
    find_duplicate_full,
    find_duplicate_triangular,
    find_duplicate_triangular_backward,
    full_scan,
    kernel_finder,
    partitioned_scan_backward,
    to_device_values,
    to_optional,
    triangular_scan,
    triangular_scan_backward,
)

# Display names used by the benchmark report, in the order they are timed.
STRATEGIES = {
    "brute force": find_duplicate_full,
    "slightly optimized brute force": find_duplicate_triangular,
    "slightly optimized brute force backwards": find_duplicate_triangular_backward,
    "slightly optimized brute force backwards parallelized": find_duplicate_parallel,
}

KERNEL_STRATEGIES = {
    "brute force (jit)": kernel_finder(full_scan),
    "slightly optimized brute force (jit)": kernel_finder(triangular_scan),
    "slightly optimized brute force backwards (jit)": kernel_finder(triangular_scan_backward),
}

__all__ = [
    # scan/sequential.py
    "DuplicateFinder",
    "find_duplicate_full",
    "find_duplicate_triangular",
    "find_duplicate_triangular_backward",
    # scan/kernels.py
    "full_scan",
    "triangular_scan",
    "triangular_scan_backward",
    "partitioned_scan_backward",
    "to_optional",
    "to_device_values",
    "kernel_finder",
    # parallel
    "find_duplicate_parallel",
    "search_round",
    "build_executor",
    "PartitionError",
    "fan_out_schedule",
    "partition",
    "validate_fan_out",
    # data.py
    "generate_values",
    "inject_duplicate",
    "config",
    "STRATEGIES",
    "KERNEL_STRATEGIES",
]
