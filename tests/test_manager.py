import re

import pytest

from sortbench.fileio import read_data
from sortbench.generators import DataType
from sortbench.manager import (
    DISTRIBUTION_ORDERS,
    STUDY_SIZES,
    Algorithm,
    SortOrder,
    benchmark_mode,
    file_input_mode,
    select_data,
    serial_benchmark,
    sort_with,
    study_vary_distributions,
    study_vary_sizes,
)


@pytest.mark.parametrize(
    "flag, member, label",
    [
        ("--is", Algorithm.INSERTION, "Insertion Sort"),
        ("--bi", Algorithm.BINARY_INSERTION, "Binary Insertion Sort"),
        ("--hs", Algorithm.HEAP, "Heap Sort"),
        ("--qs", Algorithm.QUICK, "Quick Sort"),
    ],
)
def test_algorithm_from_flag(flag, member, label):
    algorithm = Algorithm.from_flag(flag)
    assert algorithm is member
    assert algorithm.label == label


def test_algorithm_from_unknown_flag_raises():
    with pytest.raises(ValueError):
        Algorithm.from_flag("--xx")


@pytest.mark.parametrize(
    "flag, label",
    [
        ("--rand", "Random Order"),
        ("--asc", "Ascending Order"),
        ("--desc", "Descending Order"),
        ("--33", "33% Sorted"),
        ("--66", "66% Sorted"),
    ],
)
def test_sort_order_from_flag(flag, label):
    assert SortOrder.from_flag(flag).label == label


def test_sort_order_from_unknown_flag_raises():
    with pytest.raises(ValueError):
        SortOrder.from_flag("--50")


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_sort_with_sorts_in_place(algorithm):
    data = [5, -3, 9, 0, 5, 2, -3, 11]
    expected = sorted(data)
    sort_with(data, algorithm)
    assert data == expected


def test_select_data_ascending_and_descending():
    ascending = select_data(SortOrder.ASCENDING, 200, DataType.INT, 0, 1000)
    descending = select_data(SortOrder.DESCENDING, 200, DataType.INT, 0, 1000)
    assert ascending == sorted(ascending)
    assert descending == sorted(descending, reverse=True)
    assert all(0 <= v <= 1000 for v in ascending + descending)


@pytest.mark.parametrize("order, fraction", [(SortOrder.SORTED_33, 0.33), (SortOrder.SORTED_66, 0.66)])
def test_select_data_partial_prefix_sorted(order, fraction):
    data = select_data(order, 300, DataType.DOUBLE, -5.0, 5.0)
    prefix = data[: int(300 * fraction)]
    assert len(data) == 300
    assert prefix == sorted(prefix)


def test_select_data_random_length_and_range():
    data = select_data(SortOrder.RANDOM, 100, DataType.INT, 3, 7)
    assert len(data) == 100
    assert set(data) <= {3, 4, 5, 6, 7}


def test_file_input_mode_sorts_file(tmp_path, capsys):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("5\n4\n2\n9\n1\n7\n")
    result = file_input_mode(Algorithm.HEAP, DataType.INT, source, target)
    assert result == [1, 2, 4, 7, 9]
    assert read_data(target, DataType.INT) == [1, 2, 4, 7, 9]
    out = capsys.readouterr().out
    assert "Chosen algorithm: Heap Sort" in out
    assert "Sorted = Yes" in out


def test_file_input_mode_empty_file_reports(tmp_path, capsys):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("0\n")
    assert file_input_mode(Algorithm.QUICK, DataType.INT, source, target) is None
    assert "No data read" in capsys.readouterr().err
    assert not target.exists()


def test_file_input_mode_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        file_input_mode(Algorithm.QUICK, DataType.INT, tmp_path / "nope.txt", tmp_path / "o.txt")


def test_benchmark_mode_writes_sorted_output(tmp_path):
    target = tmp_path / "bench.txt"
    result = benchmark_mode(Algorithm.BINARY_INSERTION, DataType.DOUBLE, 150, 0.0, 10.0, target)
    written = read_data(target, DataType.DOUBLE)
    assert len(written) == 150
    assert written == sorted(written)
    assert result == sorted(result)


def test_serial_benchmark_records_history_and_summary(tmp_path):
    summary = serial_benchmark(
        Algorithm.QUICK, DataType.INT, 100, 0, 1000, 3, False, SortOrder.RANDOM, tmp_path
    )
    assert len(summary.times) == 3
    assert summary.min_time <= summary.median <= summary.max_time
    assert summary.sorted_folder is None
    assert re.fullmatch(r"\d{4}\.\d{2}\.\d{2}_\d{2}-\d{2}-\d{2}", summary.timestamp)

    history = summary.history_file.read_text().splitlines()
    assert summary.history_file.name == "benchmark_series_history_Quick Sort.txt"
    assert [line.split(";")[1] for line in history] == ["1", "2", "3"]
    for line in history:
        fields = line.split(";")
        assert fields[0] == summary.timestamp
        assert fields[2:6] == ["100", "Random Order", "Quick Sort", "Integer"]

    lines = summary.summary_file.read_text().splitlines()
    assert summary.summary_file.name == "benchmark_summary_history_Quick Sort.txt"
    assert len(lines) == 1
    fields = lines[0].split(";")
    assert len(fields) == 11
    assert fields[5] == "3"
    assert fields[10] == "[0,1000]"


def test_serial_benchmark_appends_to_existing_files(tmp_path):
    first = serial_benchmark(Algorithm.HEAP, DataType.INT, 20, 0, 10, 2, False, SortOrder.ASCENDING, tmp_path)
    serial_benchmark(Algorithm.HEAP, DataType.INT, 20, 0, 10, 1, False, SortOrder.ASCENDING, tmp_path)
    assert len(first.history_file.read_text().splitlines()) == 3
    assert len(first.summary_file.read_text().splitlines()) == 2


def test_serial_benchmark_writes_sorted_runs(tmp_path):
    summary = serial_benchmark(
        Algorithm.INSERTION, DataType.FLOAT, 40, -1.0, 1.0, 2, True, SortOrder.DESCENDING, tmp_path
    )
    folder = summary.sorted_folder
    assert folder is not None
    assert folder.name == f"sorted_runs_{summary.timestamp}"
    assert sorted(p.name for p in folder.iterdir()) == ["0.txt", "1.txt"]
    run = read_data(folder / "0.txt", DataType.FLOAT)
    assert len(run) == 40
    assert run == sorted(run)


def test_serial_benchmark_rejects_zero_repetitions(tmp_path):
    with pytest.raises(ValueError):
        serial_benchmark(Algorithm.QUICK, DataType.INT, 10, 0, 10, 0, False, SortOrder.RANDOM, tmp_path)


def test_study_vary_distributions_covers_every_order(tmp_path):
    results = study_vary_distributions(Algorithm.QUICK, DataType.INT, 60, 1, False, tmp_path)
    assert [r.order for r in results] == list(DISTRIBUTION_ORDERS)
    assert all(r.length == 60 for r in results)
    summary_file = results[0].summary_file
    orders = [line.split(";")[2] for line in summary_file.read_text().splitlines()]
    assert orders == [o.label for o in DISTRIBUTION_ORDERS]


def test_study_vary_sizes_runs_every_size(tmp_path):
    results = study_vary_sizes(Algorithm.QUICK, DataType.INT, 1, False, tmp_path)
    assert tuple(r.length for r in results) == STUDY_SIZES
    assert all(r.order is SortOrder.RANDOM for r in results)
    lines = results[0].summary_file.read_text().splitlines()
    assert len(lines) == len(STUDY_SIZES)