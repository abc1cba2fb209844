from typing import Optional

import jax
import jax.numpy as jnp

VALUE_DTYPE = jnp.int32
DUPLICATE_VALUE = 6
FALLBACK_DUPLICATE_VALUE = 7


def generate_values(
    size: int = 10_000, key: Optional[jax.Array] = None, duplicate: bool = True
) -> jax.Array:
    """
    Builds a shuffled input with at most one duplicate pair.

    The values are a random permutation of ``0 .. size - 1``. When ``duplicate``
    is set, one random position is overwritten with 6 (or with 7 if it already
    holds 6), so exactly one value appears twice and the rest stay unique.

    Args:
        size: Number of values to generate.
        key: PRNG key. Defaults to ``jax.random.PRNGKey(size)``.
        duplicate: Whether to inject the duplicate pair.

    Returns:
        A 1-D int32 array of length ``size``.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}.")
    if duplicate and size <= FALLBACK_DUPLICATE_VALUE:
        raise ValueError(
            f"size must exceed {FALLBACK_DUPLICATE_VALUE} to inject a duplicate, got {size}."
        )
    if key is None:
        key = jax.random.PRNGKey(size)
    perm_key, index_key = jax.random.split(key)
    values = jax.random.permutation(perm_key, jnp.arange(size, dtype=VALUE_DTYPE))
    if not duplicate:
        return values

    index = jax.random.randint(index_key, (), 0, size)
    return inject_duplicate(values, index)


def inject_duplicate(values: jax.Array, index) -> jax.Array:
    """Overwrites ``values[index]`` with 6, or with 7 if that slot already holds 6."""
    replacement = jnp.where(
        values[index] == DUPLICATE_VALUE, FALLBACK_DUPLICATE_VALUE, DUPLICATE_VALUE
    ).astype(values.dtype)
    return values.at[index].set(replacement)
