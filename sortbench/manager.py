"""Benchmark modes: sorting files, single runs, repeated series and studies."""

from __future__ import annotations

import statistics
import sys
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, MutableSequence

from sortbench.fileio import (
    append_history_entry,
    append_summary_entry,
    read_data,
    write_sorted_data,
)
from sortbench.generators import (
    DataType,
    generate_33_percent_sorted,
    generate_66_percent_sorted,
    generate_random,
    generate_reverse_sorted,
    generate_sorted,
)
from sortbench.sorting import (
    binary_insertion_sort,
    heap_sort,
    insertion_sort,
    is_sorted,
    quick_sort,
)
from sortbench.timer import measure_time_ms

STUDY_SIZES = (10000, 20000, 30000, 40000, 50000, 80000, 160000)
_TIMESTAMP_FORMAT = "%Y.%m.%d_%H-%M-%S"


class Algorithm(Enum):
    """Sorting algorithms selectable by command-line flag."""

    INSERTION = ("--is", "Insertion Sort")
    BINARY_INSERTION = ("--bi", "Binary Insertion Sort")
    HEAP = ("--hs", "Heap Sort")
    QUICK = ("--qs", "Quick Sort")

    def __init__(self, flag: str, label: str) -> None:
        self.flag = flag
        self.label = label

    @classmethod
    def from_flag(cls, flag: str) -> "Algorithm":
        """Return the algorithm selected by a flag such as ``--qs``."""
        for member in cls:
            if member.flag == flag:
                return member
        raise ValueError(f"Invalid algorithm flag: {flag}")


class SortOrder(Enum):
    """Orderings of generated input data."""

    RANDOM = ("--rand", "Random Order")
    ASCENDING = ("--asc", "Ascending Order")
    DESCENDING = ("--desc", "Descending Order")
    SORTED_33 = ("--33", "33% Sorted")
    SORTED_66 = ("--66", "66% Sorted")

    def __init__(self, flag: str, label: str) -> None:
        self.flag = flag
        self.label = label

    @classmethod
    def from_flag(cls, flag: str) -> "SortOrder":
        """Return the ordering selected by a flag such as ``--asc``."""
        for member in cls:
            if member.flag == flag:
                return member
        raise ValueError(f"Invalid sort order flag: {flag}")


DISTRIBUTION_ORDERS = tuple(SortOrder)

_SORTERS: dict[Algorithm, Callable[[MutableSequence[Any]], None]] = {
    Algorithm.INSERTION: insertion_sort,
    Algorithm.BINARY_INSERTION: binary_insertion_sort,
    Algorithm.HEAP: heap_sort,
    Algorithm.QUICK: quick_sort,
}

_GENERATORS = {
    SortOrder.RANDOM: generate_random,
    SortOrder.ASCENDING: generate_sorted,
    SortOrder.DESCENDING: generate_reverse_sorted,
    SortOrder.SORTED_33: generate_33_percent_sorted,
    SortOrder.SORTED_66: generate_66_percent_sorted,
}


@dataclass(frozen=True)
class SeriesSummary:
    """Outcome of a repeated benchmark series."""

    timestamp: str
    algorithm: Algorithm
    data_type: DataType
    order: SortOrder
    length: int
    times: tuple[int, ...]
    min_time: int
    max_time: int
    average: float
    median: float
    history_file: Path
    summary_file: Path
    sorted_folder: Path | None


def sort_with(data: MutableSequence[Any], algorithm: Algorithm) -> None:
    """Sort ``data`` in place with the chosen algorithm."""
    _SORTERS[algorithm](data)


def select_data(
    order: SortOrder,
    length: int,
    data_type: DataType,
    min_value: int | float,
    max_value: int | float,
) -> list:
    """Generate ``length`` values in ``[min_value, max_value]`` arranged by ``order``."""
    return _GENERATORS[order](length, data_type, min_value, max_value)


def _sort_and_report(data: list, algorithm: Algorithm) -> int:
    elapsed = measure_time_ms(lambda: sort_with(data, algorithm))
    verdict = "Yes" if is_sorted(data) else "No"
    print(f"Sorted = {verdict}, Time = {elapsed} milliseconds.")
    return elapsed


def file_input_mode(
    algorithm: Algorithm,
    data_type: DataType,
    input_file: str | Path,
    output_file: str | Path,
) -> list | None:
    """Sort the values of ``input_file`` and write them to ``output_file``.

    Returns the sorted values, or None when the file holds no data.
    """
    data = read_data(input_file, data_type)
    if not data:
        print("No data read. Exiting.", file=sys.stderr)
        return None
    print(f"Chosen algorithm: {algorithm.label}")
    print(f"Chosen data type: {data_type.label}")
    print(f"Data read from file with {len(data)} elements.")
    _sort_and_report(data, algorithm)
    write_sorted_data(data, output_file)
    return data


def benchmark_mode(
    algorithm: Algorithm,
    data_type: DataType,
    length: int,
    min_value: int | float,
    max_value: int | float,
    output_file: str | Path,
) -> list:
    """Sort ``length`` random values once and write the result to ``output_file``."""
    data = generate_random(length, data_type, min_value, max_value)
    print(f"Chosen algorithm: {algorithm.label}")
    print(f"Chosen data type: {data_type.label}")
    print(f"Data generated with {length} elements.")
    _sort_and_report(data, algorithm)
    write_sorted_data(data, output_file)
    return data


def serial_benchmark(
    algorithm: Algorithm,
    data_type: DataType,
    length: int,
    min_value: int | float,
    max_value: int | float,
    repeat_count: int,
    write_sorted: bool = False,
    order: SortOrder = SortOrder.RANDOM,
    directory: str | Path = ".",
) -> SeriesSummary:
    """Run ``repeat_count`` timed sorts and append history and summary records.

    History and summary files, and the folder of sorted runs when
    ``write_sorted`` is set, are placed in ``directory``.
    """
    if repeat_count < 1:
        raise ValueError("repeat_count must be at least 1")

    base = Path(directory)
    timestamp = datetime.now().strftime(_TIMESTAMP_FORMAT)
    history_file = base / f"benchmark_series_history_{algorithm.label}.txt"
    summary_file = base / f"benchmark_summary_history_{algorithm.label}.txt"

    sorted_folder: Path | None = None
    if write_sorted:
        sorted_folder = base / f"sorted_runs_{timestamp}"
        sorted_folder.mkdir(parents=True, exist_ok=True)

    times: list[int] = []
    for repetition in range(1, repeat_count + 1):
        data = select_data(order, length, data_type, min_value, max_value)
        elapsed = _sort_and_report(data, algorithm)
        times.append(elapsed)
        if sorted_folder is not None:
            write_sorted_data(data, sorted_folder / f"{repetition - 1}.txt")
        append_history_entry(
            history_file,
            timestamp,
            order.label,
            repetition,
            length,
            algorithm.label,
            data_type.label,
            elapsed,
        )

    min_time = min(times)
    max_time = max(times)
    average = sum(times) / repeat_count
    median = float(statistics.median(times))

    append_summary_entry(
        summary_file,
        timestamp,
        length,
        order.label,
        algorithm.label,
        data_type.label,
        repeat_count,
        min_time,
        max_time,
        average,
        median,
        data_type.convert(min_value),
        data_type.convert(max_value),
    )

    print(f"Summary written to {summary_file}")
    print(f"History appended to {history_file}")
    if sorted_folder is not None:
        print(f"Sorted data files in folder: {sorted_folder}")

    return SeriesSummary(
        timestamp=timestamp,
        algorithm=algorithm,
        data_type=data_type,
        order=order,
        length=length,
        times=tuple(times),
        min_time=min_time,
        max_time=max_time,
        average=average,
        median=median,
        history_file=history_file,
        summary_file=summary_file,
        sorted_folder=sorted_folder,
    )


def study_vary_sizes(
    algorithm: Algorithm,
    data_type: DataType,
    repeat_count: int,
    write_sorted: bool = False,
    directory: str | Path = ".",
) -> list[SeriesSummary]:
    """Run a random-order series for each size in ``STUDY_SIZES``."""
    if data_type.is_integral:
        low, high = data_type.lowest, data_type.highest
    else:
        low, high = -1000.0, 1000.0
    return [
        serial_benchmark(
            algorithm, data_type, size, low, high, repeat_count, write_sorted,
            SortOrder.RANDOM, directory,
        )
        for size in STUDY_SIZES
    ]


def study_vary_distributions(
    algorithm: Algorithm,
    data_type: DataType,
    length: int,
    repeat_count: int,
    write_sorted: bool = False,
    directory: str | Path = ".",
) -> list[SeriesSummary]:
    """Run a series of fixed ``length`` for every input ordering.

    A failing ordering is reported on stderr and the study carries on.
    """
    results: list[SeriesSummary] = []
    for order in DISTRIBUTION_ORDERS:
        print(f"[Study2] Mode = {order.flag}")
        try:
            results.append(
                serial_benchmark(
                    algorithm, data_type, length, data_type.lowest, data_type.highest,
                    repeat_count, write_sorted, order, directory,
                )
            )
        except (ValueError, OSError, ArithmeticError) as exc:
            print(f"Error for {order.flag}: {exc}", file=sys.stderr)
    return results


def study_vary_types(
    algorithm: Algorithm,
    repeat_count: int,
    write_sorted: bool = False,
    directory: str | Path = ".",
) -> list[SeriesSummary]:
    """Run the size study for integers, floats and doubles in turn."""
    results: list[SeriesSummary] = []
    for data_type in (DataType.INT, DataType.FLOAT, DataType.DOUBLE):
        results.extend(study_vary_sizes(algorithm, data_type, repeat_count, write_sorted, directory))
    return results