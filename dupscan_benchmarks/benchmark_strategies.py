import argparse
import functools
import json
from pathlib import Path
from typing import Any, Dict, Optional

import jax
from absl import logging

from dupscan import (
    KERNEL_STRATEGIES,
    STRATEGIES,
    build_executor,
    config,
    find_duplicate_parallel,
    generate_values,
    validate_fan_out,
)
from dupscan_benchmarks.common import (
    format_result_line,
    print_results_table,
    time_strategy,
    validate_results_schema,
)

DEFAULT_OUTPUT = Path(__file__).parent / "results" / "strategies_results.json"


def run_benchmarks(
    iterations: int = 10,
    size: int = 10_000,
    fan_out: int = config.DEFAULT_FAN_OUT,
    backend: Optional[str] = None,
    duplicate: bool = True,
    seed: int = 0,
    include_kernels: bool = False,
    output_path: Optional[Path] = DEFAULT_OUTPUT,
) -> Dict[str, Any]:
    """Times every registered strategy on fresh inputs and reports the averages."""
    backend = backend or config.get_parallel_backend()
    validate_fan_out(size, fan_out)
    base_key = jax.random.PRNGKey(seed)

    def make_device_input(i: int) -> jax.Array:
        return generate_values(size, key=jax.random.fold_in(base_key, i), duplicate=duplicate)

    def make_host_input(i: int):
        return jax.device_get(make_device_input(i)).tolist()

    results: Dict[str, Any] = {
        "size": size,
        "iterations": iterations,
        "fan_out": fan_out,
        "backend": backend,
        "strategies": {},
    }

    print("Running duplicate search benchmarks...")
    print(f"JAX backend: {jax.default_backend()}")

    executor = None if backend == "vmap" else build_executor(backend, fan_out)
    try:
        for name, finder in STRATEGIES.items():
            warmup = False
            if finder is find_duplicate_parallel:
                # Spawned workers and vmap compilation are paid once, outside the timings.
                warmup = True
                finder = functools.partial(
                    find_duplicate_parallel, fan_out=fan_out, executor=executor, backend=backend
                )
            logging.info("Timing %s over %d iterations", name, iterations)
            entry = time_strategy(finder, make_host_input, iterations=iterations, warmup=warmup)
            results["strategies"][name] = entry
            print(format_result_line(name, entry["result"], entry["mean_ms"]))
    finally:
        if executor is not None:
            executor.shutdown(wait=True, cancel_futures=True)

    if include_kernels:
        for name, finder in KERNEL_STRATEGIES.items():
            logging.info("Timing %s over %d iterations", name, iterations)
            entry = time_strategy(finder, make_device_input, iterations=iterations, warmup=True)
            results["strategies"][name] = entry
            print(format_result_line(name, entry["result"], entry["mean_ms"]))

    validate_results_schema(results)
    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            json.dump(results, f, indent=4)
        print(f"Benchmark results saved to {output_path}")

    print_results_table(results, f"Duplicate Search ({size:,} values, {iterations} iterations)")
    return results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Duplicate search benchmarks")
    parser.add_argument("--iterations", type=int, default=10)
    parser.add_argument("--size", type=int, default=10_000)
    parser.add_argument("--fan-out", type=int, default=None)
    parser.add_argument(
        "--backend",
        choices=list(config.PARALLEL_BACKENDS),
        default=None,
        help="Parallel backend (defaults to DUPSCAN_PARALLEL_BACKEND or 'process')",
    )
    parser.add_argument(
        "--no-duplicate",
        action="store_true",
        help="Generate inputs without a duplicate pair (worst case for every strategy)",
    )
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument(
        "--kernels", action="store_true", help="Also time the jitted scan kernels"
    )
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT)
    args = parser.parse_args()

    run_benchmarks(
        iterations=args.iterations,
        size=args.size,
        fan_out=args.fan_out if args.fan_out is not None else config.get_fan_out(),
        backend=args.backend,
        duplicate=not args.no_duplicate,
        seed=args.seed,
        include_kernels=args.kernels,
        output_path=args.output,
    )
