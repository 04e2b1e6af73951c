import os
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from core.priority_queue import PriorityQueue
from utilities.status_logger import StatusLogger, TimedStatusLogger

DEFAULT_SIZES = [1000, 2000, 4000, 8000, 16000, 32000, 64000]
DEFAULT_ITERATIONS = 5
CSV_HEADER = "Size,Insert(us),Extract(us),Peek(us),Decrease(us)"


@dataclass
class BenchmarkResult:
    size: int
    avg_insert: float
    avg_extract: float
    avg_peek: float
    avg_decrease: float


def _elapsed_us(start_ns: int, end_ns: int) -> float:
    return (end_ns - start_ns) / 1e3


def filter_avg(times: List[float]) -> float:
    """
    Average of the samples without the single largest one, which is usually disturbed by warm-up.
    With fewer than two samples, nothing is dropped.
    """
    if len(times) == 0:
        return 0.0
    if len(times) == 1:
        return float(times[0])
    samples = np.array(times, dtype=float)
    samples = np.delete(samples, np.argmax(samples))
    return float(np.mean(samples))


def run_benchmark(
    n: int, iterations: int = DEFAULT_ITERATIONS, rng: Optional[np.random.Generator] = None
) -> BenchmarkResult:
    """
    Times the queue operations on n distinct values with random priorities in [1, 10n].
    Insert and extract are timed over the whole fill / drain, peek and decrease-key for a single call.
    """
    if n < 1:
        raise ValueError("The benchmark size has to be positive.")
    if iterations < 1:
        raise ValueError("At least one iteration is required.")
    if rng is None:
        rng = np.random.default_rng()

    values: List[int] = rng.permutation(n).tolist()
    priorities: List[int] = rng.integers(1, 10 * n, size=n, endpoint=True).tolist()

    insert_times: List[float] = []
    extract_times: List[float] = []
    peek_times: List[float] = []
    decrease_times: List[float] = []

    for _ in range(iterations):
        queue: PriorityQueue[int] = PriorityQueue()

        start = time.perf_counter_ns()
        for value, priority in zip(values, priorities):
            queue.enqueue(value, priority)
        insert_times.append(_elapsed_us(start, time.perf_counter_ns()))

        start = time.perf_counter_ns()
        queue.peek()
        peek_times.append(_elapsed_us(start, time.perf_counter_ns()))

        idx = int(rng.integers(0, n))
        new_priority = priorities[idx] // 2
        start = time.perf_counter_ns()
        queue.decrease_priority(values[idx], new_priority)
        decrease_times.append(_elapsed_us(start, time.perf_counter_ns()))

        start = time.perf_counter_ns()
        while not queue.is_empty():
            queue.dequeue()
        extract_times.append(_elapsed_us(start, time.perf_counter_ns()))

    return BenchmarkResult(
        size=n,
        avg_insert=filter_avg(insert_times),
        avg_extract=filter_avg(extract_times),
        avg_peek=filter_avg(peek_times),
        avg_decrease=filter_avg(decrease_times),
    )


def run_benchmarks(
    sizes: Sequence[int] = DEFAULT_SIZES,
    iterations: int = DEFAULT_ITERATIONS,
    seed: Optional[int] = None,
    suppress_log: bool = False,
) -> List[BenchmarkResult]:
    rng = np.random.default_rng(seed)
    results = []
    for n in sizes:
        if suppress_log:
            results.append(run_benchmark(n, iterations, rng))
            continue
        with TimedStatusLogger(f"Benchmarking n = {n}...", f"Benchmarked n = {n}."):
            results.append(run_benchmark(n, iterations, rng))
    return results


def write_results(path: str, results: List[BenchmarkResult]) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    table = np.array(
        [
            [r.size, r.avg_insert, r.avg_extract, r.avg_peek, r.avg_decrease]
            for r in results
        ],
        dtype=float,
    ).reshape(-1, 5)
    np.savetxt(
        path,
        table,
        delimiter=",",
        header=CSV_HEADER,
        comments="",
        fmt=["%d", "%.3f", "%.3f", "%.3f", "%.3f"],
    )


def benchmark_to_csv(
    path: str,
    sizes: Sequence[int] = DEFAULT_SIZES,
    iterations: int = DEFAULT_ITERATIONS,
    seed: Optional[int] = None,
    suppress_log: bool = False,
) -> List[BenchmarkResult]:
    results = run_benchmarks(sizes, iterations, seed, suppress_log)
    if suppress_log:
        write_results(path, results)
    else:
        with StatusLogger(f"Writing results to {path}...", f"Results saved to {path}"):
            write_results(path, results)
    return results
