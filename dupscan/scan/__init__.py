from .kernels import (
    full_scan,
    kernel_finder,
    partitioned_scan_backward,
    to_device_values,
    to_optional,
    triangular_scan,
    triangular_scan_backward,
)
from .sequential import (
    DuplicateFinder,
    find_duplicate_full,
    find_duplicate_triangular,
    find_duplicate_triangular_backward,
)

__all__ = [
    "DuplicateFinder",
    "find_duplicate_full",
    "find_duplicate_triangular",
    "find_duplicate_triangular_backward",
    "full_scan",
    "triangular_scan",
    "triangular_scan_backward",
    "partitioned_scan_backward",
    "to_optional",
    "to_device_values",
    "kernel_finder",
]
