"""Command-line entry point for the sorting benchmark."""

from __future__ import annotations

import sys
from typing import Sequence

from sortbench.generators import DataType
from sortbench.manager import (
    Algorithm,
    benchmark_mode,
    file_input_mode,
    serial_benchmark,
    study_vary_distributions,
    study_vary_sizes,
    study_vary_types,
)

_HELP = (
    "Usage:\n"
    "  FILE INPUT MODE:\n"
    "    ./ProjectPath --file <algorithmFlag> <typeFlag> <inputFile> <outputFile>\n"
    "      <algorithmFlag> : --is for Insertion Sort, --bi for Binary Insertion Sort, "
    "--hs for Heap Sort, --qs for Quick Sort\n"
    "      <typeFlag>      : --i for int, --f for float, --d for double\n"
    "      <inputFile>     : Input file containing the data to be sorted\n"
    "      <outputFile>    : Output file for the sorted data\n\n"
    "  BENCHMARK MODE:\n"
    "     ./ProjectPath --benchmark <algorithmFlag> <typeFlag> <size> [minValue maxValue] <outputFile>\n"
    "      <algorithmFlag> : --is for Insertion Sort, --bi for Binary Insertion Sort, "
    "--hs for Heap Sort, --qs for Quick Sort\n"
    "      <typeFlag>      : --i for int, --f for float, --d for double\n"
    "      <size>          : Number of elements to generate\n"
    "      [minValue maxValue] : (Optional) Range for generating random numbers (default: 0 and 1000)\n"
    "      <outputFile>    : File where benchmark result (sorted output) will be saved\n\n"
    "  SERIES MODE:\n"
    "    ./ProjectPath --series <algorithmFlag> <typeFlag> <size> <repetitionCount> "
    "[minValue maxValue] <outputFile> <individualOutputFlag>\n"
    "      <algorithmFlag>     : --is for Insertion Sort, --bi for Binary Insertion Sort, "
    "--hs for Heap Sort, --qs for Quick Sort\n"
    "      <typeFlag>          : --i for int, --f for float, --d for double\n"
    "      <size>       : Number of elements to generate for each test run\n"
    "      <repetitionCount>  : Number of test repetitions to run the benchmark\n"
    "      [minValue maxValue] : (Optional) Range for generating random numbers (default: 0 and 1000)\n"
    "      <outputFile>    : File where benchmark results (metrics) will be saved\n\n"
    "      <individualOutputFlag>   : --t for creating separate folder with .txt files of each "
    "repetition sorted data, --f for not creating such folder\n\n"
    "  STUDY1 MODE (VARY SIZES):\n"
    "    ./ProjectPath --study1 <algorithmFlag> <typeFlag> <repeatCount> <individualOutputFlag> <outputFile>\n"
    "      Runs benchmarks with sizes {10000,20000,30000,40000,50000,80000,160000} "
    "and with random data input order\n"
    "      <repeatCount>       : Number of repetitions per size\n"
    "      <individualOutputFlag> : --t to save each run's sorted data files, --f to skip\n\n"
    "  STUDY2 MODE (VARY DISTRIBUTIONS):\n"
    "    ./ProjectPath --study2 <algorithmFlag> <typeFlag> <size> <repeatCount> "
    "<individualOutputFlag> <outputFile>\n"
    "      Runs benchmarks on same size but different input orderings:\n"
    "      random, ascending, descending, 33% sorted, 66% sorted\n\n"
    "  STUDY3 MODE (VARY TYPES):\n"
    "    ./ProjectPath --study3 <algorithmFlag> <repeatCount> <individualOutputFlag> <outputFile>\n"
    "      Runs benchmarks on int, float, and double for the same sizes as in study 1 "
    "and random data input order\n\n"
    "  HELP MODE:\n"
    "    ./ProjectPath --help\n"
    "      Displays this help message\n\n"
    "Notes:\n"
    "  - If no arguments are provided, the help message is shown.\n"
    "  - The --file and --benchmark modes are mutually exclusive.\n"
)

_DEFAULT_MIN = 0
_DEFAULT_MAX = 1000


class UsageError(Exception):
    """Invalid command-line arguments; the help text should be shown."""


def print_help() -> None:
    """Print the usage message to standard output."""
    print(_HELP)


def _parse_int(text: str, what: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"Invalid {what}: {text}") from None


def _parse_value(text: str, data_type: DataType) -> int | float:
    try:
        return int(text) if data_type.is_integral else float(text)
    except ValueError:
        raise ValueError(f"Invalid range value: {text}") from None


def _data_type(flag: str) -> DataType:
    try:
        return DataType.from_flag(flag)
    except ValueError as exc:
        raise UsageError(str(exc)) from None


def _lenient_type(flag: str) -> DataType:
    """Study modes treat any flag other than --i and --f as double."""
    return {"--i": DataType.INT, "--f": DataType.FLOAT}.get(flag, DataType.DOUBLE)


def _require(args: Sequence[str], count: int, mode: str) -> None:
    if len(args) < count:
        raise UsageError(f"Not enough arguments for {mode} mode.")


def _run_file(args: Sequence[str]) -> None:
    _require(args, 4, "--file")
    alg_flag, type_flag, input_file, output_file = args[:4]
    data_type = _data_type(type_flag)
    file_input_mode(Algorithm.from_flag(alg_flag), data_type, input_file, output_file)


def _run_benchmark(args: Sequence[str]) -> None:
    _require(args, 4, "--benchmark")
    alg_flag, type_flag, length_text = args[:3]
    data_type = _data_type(type_flag)
    length = _parse_int(length_text, "size")
    if len(args) >= 5:
        if len(args) < 6:
            raise UsageError("Not enough arguments for --benchmark mode with specified range.")
        low = _parse_value(args[3], data_type)
        high = _parse_value(args[4], data_type)
        output_file = args[5]
    else:
        low, high = _DEFAULT_MIN, _DEFAULT_MAX
        output_file = args[3]
    benchmark_mode(Algorithm.from_flag(alg_flag), data_type, length, low, high, output_file)


def _run_series(args: Sequence[str]) -> None:
    if len(args) not in (6, 8):
        raise UsageError("Invalid number of arguments for --series mode.")
    alg_flag, type_flag, length_text, reps_text = args[:4]
    data_type = _data_type(type_flag)
    length = _parse_int(length_text, "size")
    repetitions = _parse_int(reps_text, "repetition count")
    if len(args) == 8:
        low = _parse_value(args[4], data_type)
        high = _parse_value(args[5], data_type)
        write_flag = args[7]
    else:
        low, high = _DEFAULT_MIN, _DEFAULT_MAX
        write_flag = args[5]
    serial_benchmark(
        Algorithm.from_flag(alg_flag),
        data_type,
        length,
        low,
        high,
        repetitions,
        write_flag == "--t",
    )


def _run_study1(args: Sequence[str]) -> None:
    _require(args, 5, "--study1")
    alg_flag, type_flag, reps_text, write_flag = args[:4]
    study_vary_sizes(
        Algorithm.from_flag(alg_flag),
        _lenient_type(type_flag),
        _parse_int(reps_text, "repeat count"),
        write_flag == "--t",
    )


def _run_study2(args: Sequence[str]) -> None:
    _require(args, 6, "--study2")
    alg_flag, type_flag, length_text, reps_text, write_flag = args[:5]
    study_vary_distributions(
        Algorithm.from_flag(alg_flag),
        _lenient_type(type_flag),
        _parse_int(length_text, "size"),
        _parse_int(reps_text, "repeat count"),
        write_flag == "--t",
    )


def _run_study3(args: Sequence[str]) -> None:
    _require(args, 4, "--study3")
    alg_flag, reps_text, write_flag = args[:3]
    study_vary_types(
        Algorithm.from_flag(alg_flag),
        _parse_int(reps_text, "repeat count"),
        write_flag == "--t",
    )


_MODES = {
    "--file": _run_file,
    "--benchmark": _run_benchmark,
    "--series": _run_series,
    "--study1": _run_study1,
    "--study2": _run_study2,
    "--study3": _run_study3,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark command; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] == "--help":
        print_help()
        return 0

    mode, rest = args[0], args[1:]
    handler = _MODES.get(mode)
    if handler is None:
        print(f"Error: Unknown mode: {mode}", file=sys.stderr)
        print_help()
        return 1

    try:
        handler(rest)
    except UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print_help()
        return 1
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())