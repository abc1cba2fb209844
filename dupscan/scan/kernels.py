"""Jitted duplicate scans.

Each kernel walks the outer index with a ``lax.while_loop`` and compares the
current element against its whole comparison window in one vectorized step,
stopping as soon as a step reports a hit. Kernels return device scalars
``(found, value)`` so they compose under ``jax.vmap``; ``to_optional`` brings
the pair back to the host.
"""
from functools import partial
from typing import Callable, Optional, Sequence, Tuple

import chex
import jax
import jax.numpy as jnp
import numpy as np
from jax import lax

from .sequential import DuplicateFinder

INDEX_DTYPE = jnp.int32

ScanKernel = Callable[[chex.Array], Tuple[chex.Array, chex.Array]]


def _scan(values: chex.Array, backward: bool, triangular: bool) -> Tuple[chex.Array, chex.Array]:
    if values.ndim != 1:
        raise ValueError("values must be a 1-D array.")
    n = values.shape[0]
    positions = jnp.arange(n, dtype=INDEX_DTYPE)

    if backward:
        start, step, stop = n - 2, -1, -1
    else:
        start, step, stop = 0, 1, n - 1 if triangular else n

    def cond_fn(state):
        i, found, _ = state
        in_range = i > stop if backward else i < stop
        return jnp.logical_and(in_range, jnp.logical_not(found))

    def body_fn(state):
        i, _, value = state
        current = values[i]
        window = positions > i if triangular else positions != i
        hit = jnp.any(jnp.logical_and(window, values == current))
        return i + step, hit, jnp.where(hit, current, value)

    init = (INDEX_DTYPE(start), jnp.bool_(False), jnp.zeros((), dtype=values.dtype))
    _, found, value = lax.while_loop(cond_fn, body_fn, init)
    return found, value


@jax.jit
def full_scan(values: chex.Array) -> Tuple[chex.Array, chex.Array]:
    """Compares each element against every other position."""
    return _scan(values, backward=False, triangular=False)


@jax.jit
def triangular_scan(values: chex.Array) -> Tuple[chex.Array, chex.Array]:
    """Compares each element against later positions, first to last."""
    return _scan(values, backward=False, triangular=True)


@jax.jit
def triangular_scan_backward(values: chex.Array) -> Tuple[chex.Array, chex.Array]:
    """Compares each element against later positions, second-to-last to first."""
    return _scan(values, backward=True, triangular=True)


@partial(jax.jit, static_argnums=(1,))
def partitioned_scan_backward(values: chex.Array, fan_out: int) -> Tuple[chex.Array, chex.Array]:
    """
    Searches ``fan_out`` contiguous partitions of ``values`` as one batched computation.

    Each partition is scanned independently and reports its own ``(found, value)``;
    the first partition that found something supplies the round's value.

    Args:
        values: 1-D array whose length is divisible by ``fan_out``.
        fan_out: Number of equal partitions.

    Returns:
        A tuple of device scalars ``(found, value)``.
    """
    partitions = values.reshape(fan_out, -1)
    found, found_values = jax.vmap(triangular_scan_backward)(partitions)
    first = jnp.argmax(found)
    return jnp.any(found), found_values[first]


def to_optional(found: chex.Array, value: chex.Array) -> Optional[int]:
    found, value = jax.device_get((found, value))
    return int(value) if bool(found) else None


def to_device_values(values: Sequence[int]) -> jax.Array:
    """
    Moves a host sequence to the device without narrowing any value.

    JAX stores integers as int32 unless x64 is enabled, so a wider value would
    wrap around and could collide with another value. Such inputs are rejected
    instead of scanned.

    Raises:
        ValueError: if ``values`` is not a 1-D integer sequence or holds a value
            outside the device integer range.
    """
    if isinstance(values, jax.Array):
        return values
    host = np.asarray(values)
    target = jax.dtypes.canonicalize_dtype(jnp.int_)
    if host.ndim != 1:
        raise ValueError("values must be a 1-D sequence.")
    if host.size == 0:
        return jnp.asarray(host, dtype=target)
    if not np.issubdtype(host.dtype, np.integer):
        raise ValueError(f"values must be integers, got dtype {host.dtype}.")
    info = np.iinfo(target)
    low, high = host.min(), host.max()
    if low < info.min or high > info.max:
        raise ValueError(
            f"values span [{low}, {high}], outside the {np.dtype(target).name} range "
            f"[{info.min}, {info.max}]; enable jax_enable_x64 to scan them on device."
        )
    return jnp.asarray(host, dtype=target)


def kernel_finder(kernel: ScanKernel) -> DuplicateFinder:
    """Adapts a scan kernel to the ``Sequence[int] -> Optional[int]`` strategy shape."""

    def find(values: Sequence[int]) -> Optional[int]:
        if len(values) < 2:
            return None
        return to_optional(*kernel(to_device_values(values)))

    find.__name__ = getattr(kernel, "__name__", "kernel_finder")
    return find
