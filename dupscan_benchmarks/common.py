import time
from typing import Any, Callable, Dict, Optional, Sequence

import jax
import numpy as np
from rich.console import Console
from rich.table import Table

NOT_FOUND_TEXT = "No duplicate found"


def human_format(num, pos=None):
    num = float("{:.3g}".format(num))
    magnitude = 0
    while abs(num) >= 1000:
        magnitude += 1
        num /= 1000.0
    return "{}{}".format(
        "{:f}".format(num).rstrip("0").rstrip("."), ["", "K", "M", "B", "T"][magnitude]
    )


def format_result_line(name: str, value: Optional[int], milliseconds: float) -> str:
    shown = NOT_FOUND_TEXT if value is None else str(value)
    return (
        f"The duplicate value using {name} is {shown} "
        f"which took {int(milliseconds)} milliseconds to find."
    )


def validate_results_schema(results: Dict[str, Any]) -> None:
    """
    Validates the saved benchmark results.

    Requirements:
      - keys: size, iterations, fan_out, backend, strategies
      - every strategy entry is a dict with numeric mean_ms and iqr_ms
        and a result that is an int or None
    Raises AssertionError on violation.
    """
    assert isinstance(results, dict), "results must be a dict"
    for key in ("size", "iterations", "fan_out", "backend"):
        assert key in results, f"results must contain '{key}'"
    assert isinstance(results["iterations"], int) and results["iterations"] > 0, (
        "iterations must be a positive int"
    )
    assert "strategies" in results and isinstance(
        results["strategies"], dict
    ), "results must contain dict 'strategies'"

    for name, entry in results["strategies"].items():
        assert isinstance(entry, dict), f"'{name}' entry must be a dict"
        for field in ("mean_ms", "iqr_ms"):
            assert isinstance(entry.get(field), (int, float)), f"'{name}' needs numeric '{field}'"
        assert "result" in entry and (
            entry["result"] is None or isinstance(entry["result"], int)
        ), f"'{name}' result must be an int or None"


def time_strategy(
    finder: Callable[[Sequence[int]], Optional[int]],
    make_input: Callable[[int], Sequence[int]],
    iterations: int = 10,
    warmup: bool = False,
) -> Dict[str, Any]:
    """
    Times a duplicate finder over freshly generated inputs.

    Only the finder call is inside the timed region; input generation happens
    before the timer starts.

    Args:
        finder: The strategy to time.
        make_input: Builds the input for iteration ``i``.
        iterations: Number of timed runs.
        warmup: Run once untimed first (jitted kernels compile on first call).

    Returns:
        Dict with ``mean_ms``, ``iqr_ms`` and the ``result`` of the last run.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}.")
    if warmup:
        finder(make_input(0))

    times = []
    result = None
    for i in range(iterations):
        values = make_input(i)
        if isinstance(values, jax.Array):
            # Device inputs are generated asynchronously; keep that work out of the timing.
            jax.block_until_ready(values)
        start_time = time.perf_counter()
        result = finder(values)
        end_time = time.perf_counter()
        times.append(end_time - start_time)

    times = np.array(times) * 1000.0
    q75, q25 = np.percentile(times, [75, 25])
    return {
        "mean_ms": float(np.mean(times)),
        "iqr_ms": float(q75 - q25),
        "result": None if result is None else int(result),
    }


def print_results_table(results: Dict[str, Any], title: str):
    """
    Displays benchmark results in a formatted table using the rich library.
    """
    console = Console()
    table = Table(title=title, show_header=True, header_style="bold magenta")

    table.add_column("Strategy", style="green")
    table.add_column("Result", justify="right", style="yellow")
    table.add_column("Mean (ms)", justify="right", style="bold blue")
    table.add_column("IQR (ms)", justify="right", style="dim blue")
    table.add_column("Values/Sec", justify="right", style="cyan")

    size = results.get("size", 0)
    for name, entry in results.get("strategies", {}).items():
        mean_ms = entry["mean_ms"]
        result = entry["result"]
        table.add_row(
            name,
            NOT_FOUND_TEXT if result is None else str(result),
            f"{mean_ms:.3f}",
            f"±{entry['iqr_ms']:.3f}",
            human_format(size / (mean_ms / 1000.0)) if mean_ms > 0 else "-",
        )

    console.print(table)
