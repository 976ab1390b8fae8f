"""Cache-thrashing benchmarks: strided writes over large buffers, timed per step size."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Sequence

import numpy as np

from .components import UIComponent

DEFAULT_ELEMENTS = 1 << 26
DEFAULT_SAMPLES = 12
MIN_SAMPLES = 3
STEP_SIZES = tuple(1 << k for k in range(11))  # 1, 2, 4, ... 1024
RESULT_DIVISOR = 10.0

PLOT_WIDTH = 300.0
PLOT_HEIGHT = 80.0

_IDENTITY = np.eye(4, dtype=np.float32).ravel()

_OBJECT_DTYPE = np.dtype([("transform", np.float32, (16,)), ("ID", np.int32)])
_OBJECT_ALT_DTYPE = np.dtype([("transform", np.intp), ("ID", np.int32)])


@dataclass
class BenchmarkResult:
    """Average time in milliseconds for each step size."""

    step_sizes: list[float] = field(default_factory=list)
    results: list[float] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.results


def trimmed_mean(timings: Iterable[float], divisor: Optional[float] = None) -> float:
    """Sum the timings without the smallest and largest, divided by divisor.

    Without a divisor the sum is divided by the number of timings kept.
    """
    ordered = sorted(timings)
    if len(ordered) < MIN_SAMPLES:
        raise ValueError(f"at least {MIN_SAMPLES} timings are needed, got {len(ordered)}")
    kept = ordered[1:-1]
    if divisor is None:
        divisor = len(kept)
    return sum(kept) / divisor


def _check_sizes(num_samples: int, num_elements: int) -> None:
    if num_samples < MIN_SAMPLES:
        raise ValueError(f"at least {MIN_SAMPLES} samples are needed, got {num_samples}")
    if num_elements < 1:
        raise ValueError(f"the buffer needs at least one element, got {num_elements}")


def _time_strides(
    num_samples: int, touch: Callable[[int], None], divisor: Optional[float]
) -> BenchmarkResult:
    result = BenchmarkResult()
    for step in STEP_SIZES:
        timings = []
        for _ in range(num_samples):
            start = time.perf_counter_ns()
            touch(step)
            end = time.perf_counter_ns()
            elapsed_us = (end - start) // 1000
            timings.append(elapsed_us / 1000.0)
        result.results.append(trimmed_mean(timings, divisor))
        result.step_sizes.append(float(step))
    return result


def _int_buffer(num_elements: int) -> np.ndarray:
    return np.ones(num_elements, dtype=np.int32)


def _object_buffer(num_elements: int) -> np.ndarray:
    buffer = np.zeros(num_elements, dtype=_OBJECT_DTYPE)
    buffer["transform"] = _IDENTITY
    return buffer


def _object_alt_buffers(num_elements: int) -> tuple[np.ndarray, np.ndarray]:
    """Objects that refer to their transforms stored elsewhere."""
    transforms = np.tile(_IDENTITY, (num_elements, 1))
    buffer = np.zeros(num_elements, dtype=_OBJECT_ALT_DTYPE)
    buffer["transform"] = np.arange(num_elements, dtype=np.intp)
    buffer["ID"] = np.arange(num_elements, dtype=np.int64).astype(np.int32)
    return buffer, transforms


def run_int_benchmark(num_samples: int, num_elements: int = DEFAULT_ELEMENTS) -> BenchmarkResult:
    """Double every step-th int in a buffer, for each step size."""
    _check_sizes(num_samples, num_elements)
    buffer = _int_buffer(num_elements)

    def touch(step: int) -> None:
        buffer[::step] *= 2

    return _time_strides(num_samples, touch, RESULT_DIVISOR)


def run_object_benchmark(num_samples: int, num_elements: int = DEFAULT_ELEMENTS) -> BenchmarkResult:
    """Double the ID of every step-th object that holds its transform inline."""
    _check_sizes(num_samples, num_elements)
    ids = _object_buffer(num_elements)["ID"]

    def touch(step: int) -> None:
        ids[::step] *= 2

    return _time_strides(num_samples, touch, RESULT_DIVISOR)


def run_object_alt_benchmark(
    num_samples: int, num_elements: int = DEFAULT_ELEMENTS
) -> BenchmarkResult:
    """Double the ID of every step-th object that refers to an external transform."""
    _check_sizes(num_samples, num_elements)
    buffer, _transforms = _object_alt_buffers(num_elements)
    ids = buffer["ID"]

    def touch(step: int) -> None:
        ids[::step] *= 2

    return _time_strides(num_samples, touch, RESULT_DIVISOR)


def _run_object_alt_with_transforms(num_samples: int, num_elements: int) -> BenchmarkResult:
    _check_sizes(num_samples, num_elements)
    buffer, transforms = _object_alt_buffers(num_elements)
    ids = buffer["ID"]
    refs = buffer["transform"]

    def touch(step: int) -> None:
        ids[::step] *= 2
        transforms[refs[::step]] *= 2.0

    return _time_strides(num_samples, touch, None)


def format_row(step_size: int, average: float) -> str:
    """One line of the console report: step size padded to 12, then milliseconds."""
    return f"{step_size:<12}{average:.3f} ms"


def _parse(argv: Optional[Sequence[str]], prog: str, description: str) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("--samples", type=int, default=DEFAULT_SAMPLES, help="timings per step size")
    parser.add_argument("--elements", type=int, default=DEFAULT_ELEMENTS, help="buffer length")
    args = parser.parse_args(argv)
    try:
        _check_sizes(args.samples, args.elements)
    except ValueError as error:
        parser.error(str(error))
    return args


def _print_report(result: BenchmarkResult) -> None:
    for step, average in zip(result.step_sizes, result.results):
        print(format_row(int(step), average), flush=True)


def main_ints(argv: Optional[Sequence[str]] = None) -> int:
    """Time strided writes over an int buffer and print one row per step size."""
    args = _parse(argv, "cache-ints", "Strided writes over a buffer of ints.")
    buffer = _int_buffer(args.elements)

    def touch(step: int) -> None:
        buffer[::step] *= 2

    _print_report(_time_strides(args.samples, touch, None))
    return 0


def main_objects(argv: Optional[Sequence[str]] = None) -> int:
    """Time strided updates of objects with external transforms and print the report."""
    args = _parse(argv, "cache-objects", "Strided updates of objects with external transforms.")
    _print_report(_run_object_alt_with_transforms(args.samples, args.elements))
    return 0


@dataclass(frozen=True)
class PlotLine:
    """A labelled polyline of benchmark results, scaled into the plot area."""

    label: str
    points: tuple[tuple[float, float], ...]


def _plot(label: str, values: Sequence[float]) -> PlotLine:
    top = max(values)
    scale = PLOT_HEIGHT / top if top > 0 else 0.0
    span = max(len(values) - 1, 1)
    points = tuple(
        (PLOT_WIDTH * index / span, PLOT_HEIGHT - value * scale)
        for index, value in enumerate(values)
    )
    return PlotLine(label, points)


class CacheBenchmarkUI(UIComponent):
    """Runs the three cache benchmarks and lays out their results as plots."""

    def __init__(self, owner: Any) -> None:
        super().__init__(owner)
        self._num_samples = MIN_SAMPLES
        self.num_samples = 0
        self.num_elements = DEFAULT_ELEMENTS
        self.int_results = BenchmarkResult()
        self.object_results = BenchmarkResult()
        self.object_alt_results = BenchmarkResult()
        self.plots: list[PlotLine] = []

    @property
    def num_samples(self) -> int:
        """Timings per step size; never fewer than three."""
        return self._num_samples

    @num_samples.setter
    def num_samples(self, value: int) -> None:
        self._num_samples = max(MIN_SAMPLES, int(value))

    def run_int_benchmark(self) -> BenchmarkResult:
        self.int_results = run_int_benchmark(self.num_samples, self.num_elements)
        return self.int_results

    def run_object_benchmark(self) -> BenchmarkResult:
        self.object_results = run_object_benchmark(self.num_samples, self.num_elements)
        return self.object_results

    def run_object_alt_benchmark(self) -> BenchmarkResult:
        self.object_alt_results = run_object_alt_benchmark(self.num_samples, self.num_elements)
        return self.object_alt_results

    def render_ui(self) -> list[PlotLine]:
        """Build a plot for every benchmark that has results."""
        self.num_samples = self._num_samples
        labelled = (
            ("Ints", self.int_results),
            ("GameObject3D", self.object_results),
            ("GameObject3DALT", self.object_alt_results),
        )
        self.plots = [_plot(label, result.results) for label, result in labelled if not result.empty]
        return self.plots