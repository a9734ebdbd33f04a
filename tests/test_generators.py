import random

import pytest

from sortbench.generators import (
    DataType,
    generate_33_percent_sorted,
    generate_66_percent_sorted,
    generate_partially_sorted,
    generate_random,
    generate_reverse_sorted,
    generate_sorted,
)
from sortbench.sorting import is_sorted


@pytest.mark.parametrize(
    "flag, expected",
    [("--i", DataType.INT), ("--f", DataType.FLOAT), ("--d", DataType.DOUBLE)],
)
def test_from_flag(flag, expected):
    assert DataType.from_flag(flag) is expected


def test_from_flag_rejects_unknown():
    with pytest.raises(ValueError):
        DataType.from_flag("--x")


def test_labels():
    labels = [DataType.from_flag(flag).label for flag in ("--i", "--f", "--d")]
    assert labels == ["Integer", "Float", "Double"]
    assert [t.label for t in DataType] == labels


def test_float_convert_is_idempotent_and_lossy():
    once = DataType.FLOAT.convert(0.1)
    assert DataType.FLOAT.convert(once) == once
    assert once != 0.1
    assert DataType.DOUBLE.convert(0.1) == 0.1


def test_int_convert_truncates():
    assert DataType.INT.convert(7.9) == 7


def test_limits_are_ordered():
    for data_type in DataType:
        assert is_sorted([data_type.lowest, 0, data_type.highest])
        assert data_type.lowest < 0 < data_type.highest
        assert data_type.lowest == -data_type.highest or data_type.is_integral


@pytest.mark.parametrize("data_type", list(DataType))
def test_random_values_in_range(data_type):
    values = generate_random(200, data_type, -50, 50, random.Random(3))
    assert len(values) == 200
    assert all(-50 <= v <= 50 for v in values)


def test_default_range_and_int_type():
    values = generate_random(100, DataType.INT, rng=random.Random(5))
    assert all(isinstance(v, int) and 0 <= v <= 1000 for v in values)


def test_float_values_are_single_precision():
    values = generate_random(50, DataType.FLOAT, 0, 1, random.Random(9))
    assert all(DataType.FLOAT.convert(v) == v for v in values)


def test_zero_length():
    assert generate_random(0, DataType.DOUBLE) == []


def test_sorted_is_sorted_permutation_of_random():
    raw = generate_random(150, DataType.INT, 0, 100, random.Random(11))
    ordered = generate_sorted(150, DataType.INT, 0, 100, random.Random(11))
    assert ordered == sorted(raw)


def test_reverse_sorted():
    raw = generate_random(150, DataType.DOUBLE, 0, 100, random.Random(12))
    values = generate_reverse_sorted(150, DataType.DOUBLE, 0, 100, random.Random(12))
    assert values == sorted(raw, reverse=True)


def test_partially_sorted_prefix_and_untouched_suffix():
    raw = generate_random(100, DataType.INT, 0, 1000, random.Random(21))
    values = generate_partially_sorted(100, DataType.INT, 0, 1000, 0.5, random.Random(21))
    assert values[:50] == sorted(raw[:50])
    assert values[50:] == raw[50:]


@pytest.mark.parametrize(
    "generator, fraction",
    [(generate_33_percent_sorted, 0.33), (generate_66_percent_sorted, 0.66)],
)
def test_percent_sorted_prefix(generator, fraction):
    length = 300
    raw = generate_random(length, DataType.INT, 0, 1000, random.Random(33))
    values = generator(length, DataType.INT, 0, 1000, random.Random(33))
    count = int(length * fraction)
    assert is_sorted(values[:count])
    assert values[count:] == raw[count:]
    assert sorted(values) == sorted(raw)