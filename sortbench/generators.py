"""Generation of benchmark input data in several orderings."""

from __future__ import annotations

import math
import random
import struct
import sys
from enum import Enum

from sortbench.sorting import quick_sort

_FLOAT32_MAX = 3.4028234663852886e38
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class DataType(Enum):
    """Element types the benchmark can work with."""

    INT = ("--i", "Integer")
    FLOAT = ("--f", "Float")
    DOUBLE = ("--d", "Double")

    def __init__(self, flag: str, label: str) -> None:
        self.flag = flag
        self.label = label

    @classmethod
    def from_flag(cls, flag: str) -> "DataType":
        """Return the type selected by a command-line flag such as ``--i``."""
        for member in cls:
            if member.flag == flag:
                return member
        raise ValueError(f"Invalid type flag: {flag}")

    @property
    def is_integral(self) -> bool:
        return self is DataType.INT

    @property
    def lowest(self) -> int | float:
        """The lowest finite value of the type."""
        if self is DataType.INT:
            return _INT32_MIN
        if self is DataType.FLOAT:
            return -_FLOAT32_MAX
        return -sys.float_info.max

    @property
    def highest(self) -> int | float:
        """The largest finite value of the type."""
        if self is DataType.INT:
            return _INT32_MAX
        if self is DataType.FLOAT:
            return _FLOAT32_MAX
        return sys.float_info.max

    def convert(self, value: int | float) -> int | float:
        """Coerce ``value`` to this type (single precision for FLOAT)."""
        if self is DataType.INT:
            return int(value)
        if self is DataType.FLOAT:
            return _to_float32(float(value))
        return float(value)


def generate_random(
    length: int,
    data_type: DataType,
    min_value: int | float = 0,
    max_value: int | float = 1000,
    rng: random.Random | None = None,
) -> list:
    """Uniformly random values: integers in [min, max], reals in [min, max)."""
    rng = rng or random.Random()
    if data_type.is_integral:
        low, high = int(min_value), int(max_value)
        return [rng.randint(low, high) for _ in range(length)]
    low, high = float(min_value), float(max_value)
    return [data_type.convert(rng.uniform(low, high)) for _ in range(length)]


def generate_sorted(
    length: int,
    data_type: DataType,
    min_value: int | float = 0,
    max_value: int | float = 1000,
    rng: random.Random | None = None,
) -> list:
    """Random values in ascending order."""
    result = generate_random(length, data_type, min_value, max_value, rng)
    quick_sort(result)
    return result


def generate_reverse_sorted(
    length: int,
    data_type: DataType,
    min_value: int | float = 0,
    max_value: int | float = 1000,
    rng: random.Random | None = None,
) -> list:
    """Random values in descending order."""
    result = generate_sorted(length, data_type, min_value, max_value, rng)
    result.reverse()
    return result


def generate_partially_sorted(
    length: int,
    data_type: DataType,
    min_value: int | float,
    max_value: int | float,
    sorted_fraction: float,
    rng: random.Random | None = None,
) -> list:
    """Random values whose first ``int(length * sorted_fraction)`` are sorted."""
    result = generate_random(length, data_type, min_value, max_value, rng)
    sorted_count = int(length * sorted_fraction)
    if sorted_count > 0:
        prefix = result[:sorted_count]
        quick_sort(prefix)
        result[:sorted_count] = prefix
    return result


def generate_33_percent_sorted(
    length: int,
    data_type: DataType,
    min_value: int | float = 0,
    max_value: int | float = 1000,
    rng: random.Random | None = None,
) -> list:
    """Random values with the first 33% sorted."""
    return generate_partially_sorted(length, data_type, min_value, max_value, 0.33, rng)


def generate_66_percent_sorted(
    length: int,
    data_type: DataType,
    min_value: int | float = 0,
    max_value: int | float = 1000,
    rng: random.Random | None = None,
) -> list:
    """Random values with the first 66% sorted."""
    return generate_partially_sorted(length, data_type, min_value, max_value, 0.66, rng)