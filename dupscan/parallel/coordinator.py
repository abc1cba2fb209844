import multiprocessing
from concurrent.futures import (
    Executor,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    as_completed,
)
from typing import Optional, Sequence

import jax.numpy as jnp
from absl import logging

from .. import config
from ..scan.kernels import partitioned_scan_backward, to_device_values, to_optional
from ..scan.sequential import find_duplicate_triangular_backward
from .partition import fan_out_schedule, partition, validate_fan_out


def build_executor(backend: str, fan_out: int) -> Executor:
    """Creates an executor sized for rounds of ``fan_out`` partitions."""
    max_workers = config.get_max_workers(fan_out)
    if backend == "process":
        # Forking a process that already initialized JAX is unsafe; start clean workers.
        return ProcessPoolExecutor(
            max_workers=max_workers, mp_context=multiprocessing.get_context("spawn")
        )
    if backend == "thread":
        return ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="dupscan")
    raise ValueError(f"Backend {backend!r} does not use an executor.")


def search_round(values: Sequence[int], fan_out: int, executor: Executor) -> Optional[int]:
    """
    Runs one round: a backward triangular scan per partition, first hit wins.

    Every task returns its own result and only this function looks at them, in
    completion order. Once a partition reports a value, tasks that have not
    started yet are cancelled; running ones finish and are ignored.

    Args:
        values: Host sequence whose length is divisible by ``fan_out``.
        fan_out: Number of partitions searched concurrently.
        executor: Executor the partition scans are submitted to.

    Returns:
        The duplicated value if both occurrences fall inside one partition, else None.
    """
    partitions = partition(values, fan_out)
    if fan_out == 1:
        return find_duplicate_triangular_backward(partitions[0])

    futures = [executor.submit(find_duplicate_triangular_backward, part) for part in partitions]
    try:
        for future in as_completed(futures):
            result = future.result()
            if result is not None:
                return result
    finally:
        for future in futures:
            future.cancel()
    return None


def _vmap_round(values: jnp.ndarray, fan_out: int) -> Optional[int]:
    return to_optional(*partitioned_scan_backward(values, fan_out))


def find_duplicate_parallel(
    values: Sequence[int],
    fan_out: Optional[int] = None,
    executor: Optional[Executor] = None,
    backend: Optional[str] = None,
) -> Optional[int]:
    """
    Finds the duplicate value by searching partitions concurrently, coarsening on a miss.

    A duplicate pair can straddle a partition boundary, in which case a round
    misses it. Each miss halves the fan-out and searches the original input
    again; the final round has a single partition covering the whole input, so
    its answer is authoritative.

    Args:
        values: Integers containing zero or one duplicate pair.
        fan_out: Starting number of partitions. Defaults to ``DUPSCAN_FAN_OUT`` (4).
            Every fan-out of the schedule must divide ``len(values)``.
        executor: Executor for partition scans. When given it is reused and left
            running; otherwise one is created per call and shut down afterwards.
        backend: "process", "thread" or "vmap". Defaults to ``DUPSCAN_PARALLEL_BACKEND``.

    Returns:
        The duplicated value, or None if every value is unique.

    Raises:
        PartitionError: if the input cannot be split evenly for every round.
    """
    fan_out = config.get_fan_out() if fan_out is None else fan_out
    backend = (backend or config.get_parallel_backend()).strip().lower()
    if backend not in config.PARALLEL_BACKENDS:
        raise ValueError(
            f"Invalid backend {backend!r}. Expected one of: " + ", ".join(config.PARALLEL_BACKENDS)
        )

    length = len(values)
    fan_out_schedule(fan_out)
    if length < 2:
        return None
    schedule = validate_fan_out(length, fan_out)

    if backend == "vmap":
        device_values = to_device_values(values)
        for round_fan_out in schedule:
            result = _vmap_round(device_values, round_fan_out)
            logging.debug("vmap round fan_out=%d result=%s", round_fan_out, result)
            if result is not None:
                return result
        return None

    if hasattr(values, "tolist"):
        values = values.tolist()

    owns_executor = executor is None and fan_out > 1
    if owns_executor:
        executor = build_executor(backend, fan_out)
    try:
        for round_fan_out in schedule:
            result = search_round(values, round_fan_out, executor)
            logging.debug("%s round fan_out=%d result=%s", backend, round_fan_out, result)
            if result is not None:
                return result
        logging.info("No duplicate found after %d rounds (schedule=%s)", len(schedule), schedule)
        return None
    finally:
        if owns_executor:
            executor.shutdown(wait=False, cancel_futures=True)
