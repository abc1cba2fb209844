"""Environment knobs for the parallel coordinator."""
from __future__ import annotations

import os
from typing import Optional

PARALLEL_BACKENDS = ("process", "thread", "vmap")
DEFAULT_PARALLEL_BACKEND = "process"
DEFAULT_FAN_OUT = 4


def _parse_int_env(name: str, default: Optional[int]) -> Optional[int]:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"", "none", "auto"}:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer.") from exc
    if parsed <= 0:
        raise ValueError(f"{name} must be positive.")
    return parsed


# Backend semantics:
# - "process" (default): one worker process per partition, scans run truly in parallel.
# - "thread": one worker thread per partition; cheap to start, serialized by the GIL.
# - "vmap": partitions are searched as one batched XLA computation.
#
# Read on every call (not at import time) so callers can switch backends per run.
def get_parallel_backend() -> str:
    backend = os.environ.get("DUPSCAN_PARALLEL_BACKEND", DEFAULT_PARALLEL_BACKEND)
    backend = backend.strip().lower()
    if backend not in PARALLEL_BACKENDS:
        raise ValueError(
            "Invalid DUPSCAN_PARALLEL_BACKEND. Expected one of: " + ", ".join(PARALLEL_BACKENDS)
        )
    return backend


def get_fan_out() -> int:
    return _parse_int_env("DUPSCAN_FAN_OUT", DEFAULT_FAN_OUT)


def get_max_workers(fan_out: int) -> int:
    """Worker count for an executor serving a round of ``fan_out`` partitions."""
    return _parse_int_env("DUPSCAN_MAX_WORKERS", None) or fan_out
