"""Reading input data and writing sorted output, history and summary files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from sortbench.generators import DataType


def _format_value(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:.6g}"


def read_data(path: str | Path, data_type: DataType) -> list:
    """Read a count followed by that many whitespace-separated values."""
    tokens = Path(path).read_text().split()
    if not tokens:
        raise ValueError(f"{path}: missing element count")
    try:
        size = int(tokens[0])
    except ValueError:
        raise ValueError(f"{path}: invalid element count {tokens[0]!r}") from None
    values = tokens[1 : 1 + max(size, 0)]
    if len(values) < size:
        raise ValueError(f"{path}: expected {size} values, found {len(values)}")
    parse = int if data_type.is_integral else float
    try:
        return [data_type.convert(parse(token)) for token in values]
    except ValueError as exc:
        raise ValueError(f"{path}: {exc}") from None


def write_sorted_data(data: Iterable[int | float], path: str | Path) -> None:
    """Write the element count and then one value per line."""
    items = list(data)
    lines = [str(len(items)), *(_format_value(v) for v in items)]
    Path(path).write_text("".join(f"{line}\n" for line in lines))


def _append_line(path: str | Path, fields: Iterable[object]) -> None:
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(";".join(str(f) for f in fields) + "\n")


def append_history_entry(
    path: str | Path,
    timestamp: str,
    sorting_order: str,
    repetition: int,
    data_length: int,
    algorithm_name: str,
    data_type_name: str,
    time_ms: int,
) -> None:
    """Append one run: timestamp;rep;length;order;algorithm;type;time."""
    _append_line(
        path,
        [timestamp, repetition, data_length, sorting_order, algorithm_name, data_type_name, time_ms],
    )


def append_summary_entry(
    path: str | Path,
    timestamp: str,
    data_length: int,
    sorting_order: str,
    algorithm_name: str,
    data_type_name: str,
    repeat_count: int,
    min_time: int,
    max_time: int,
    average: float,
    median: float,
    min_value: int | float,
    max_value: int | float,
) -> None:
    """Append a series summary: ...;reps;min;max;avg;median;[min,max]."""
    _append_line(
        path,
        [
            timestamp,
            data_length,
            sorting_order,
            algorithm_name,
            data_type_name,
            repeat_count,
            min_time,
            max_time,
            _format_value(float(average)),
            _format_value(float(median)),
            f"[{_format_value(min_value)},{_format_value(max_value)}]",
        ],
    )