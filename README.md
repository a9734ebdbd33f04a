# sortbench

Time classic sorting algorithms (insertion sort, binary insertion sort,
heap sort and randomized quick sort) on integer, float or double data, and
record the results in plain-text history and summary files.

## Installation

```
pip install .
```

This installs the `sortbench` command. The same entry point can be run with
`python -m sortbench.cli`.

## Command line

Every mode takes an algorithm flag and, where relevant, a type flag:

| Algorithm flag | Algorithm             |
|----------------|-----------------------|
| `--is`         | Insertion Sort        |
| `--bi`         | Binary Insertion Sort |
| `--hs`         | Heap Sort             |
| `--qs`         | Quick Sort            |

| Type flag | Data type |
|-----------|-----------|
| `--i`     | int       |
| `--f`     | float (single precision) |
| `--d`     | double    |

Sort a file whose first value is the element count, followed by the elements
(whitespace separated); the sorted values are written as the count followed by
one value per line:

```
sortbench --file --qs --i input.txt sorted.txt
```

Sort freshly generated random data (range defaults to 0..1000):

```
sortbench --benchmark --hs --d 50000 sorted.txt
sortbench --benchmark --hs --i 50000 -500 500 sorted.txt
```

Run a series of repetitions and append timings to history and summary files;
`--t` as the last argument also writes each run's sorted data into a
`sorted_runs_<timestamp>` folder, anything else skips that:

```
sortbench --series --bi --i 20000 10 results.txt --f
sortbench --series --bi --f 20000 10 -1 1 results.txt --t
```

Studies, each a set of series:

```
sortbench --study1 --qs --i 5 --f results.txt        # vary sizes
sortbench --study2 --qs --i 40000 5 --f results.txt  # vary input order
sortbench --study3 --qs 5 --f results.txt            # vary data types
```

- `--study1` runs random-order series of sizes 10000, 20000, 30000, 40000,
  50000, 80000 and 160000; integers span the full 32-bit range, floats and
  doubles -1000..1000.
- `--study2` runs one size in random, ascending, descending, 33% sorted and
  66% sorted order, over the full range of the data type. A failing ordering
  is reported and the study continues.
- `--study3` runs the size study for int, float and double in turn. In the
  study modes any type flag other than `--i` or `--f` means double.

`sortbench --help` (or no arguments) prints the full usage text. Invalid
arguments print an error and the usage text, and the command exits with
status 1.

Series and studies write to the current directory:
`benchmark_series_history_<Algorithm>.txt` gets one line per run
(`timestamp;repetition;length;order;algorithm;type;time_ms`) and
`benchmark_summary_history_<Algorithm>.txt` one line per series
(`timestamp;length;order;algorithm;type;reps;min;max;average;median;[min,max]`).
Times are whole milliseconds.

## Library use

```python
from sortbench.sorting import heap_sort, is_sorted
from sortbench.timer import measure_time_ms

data = [5, 3, 9, 1]
elapsed = measure_time_ms(lambda: heap_sort(data))
assert is_sorted(data)
```

- `sortbench.sorting`: `insertion_sort`, `binary_insertion_sort`, `heap_sort`,
  `quick_sort` (all in place) and `is_sorted`.
- `sortbench.timer`: `Timer` stopwatch and `measure_time_ms`.
- `sortbench.generators`: `DataType` and the `generate_random`,
  `generate_sorted`, `generate_reverse_sorted`, `generate_partially_sorted`,
  `generate_33_percent_sorted` and `generate_66_percent_sorted` generators,
  each taking an optional `random.Random`.
- `sortbench.fileio`: `read_data`, `write_sorted_data`,
  `append_history_entry`, `append_summary_entry`.
- `sortbench.manager`: `Algorithm`, `SortOrder`, `sort_with`, `select_data`,
  `file_input_mode`, `benchmark_mode`, `serial_benchmark` (returns a
  `SeriesSummary` and accepts a `directory` for its output files) and the
  `study_vary_sizes`, `study_vary_distributions`, `study_vary_types` studies.
- `sortbench.graphs`: directed weighted graphs as an adjacency list
  (`GraphList`) or an incidence matrix (`GraphMatrix`), with `render()` text
  output and a `demo()` that prints a small sample graph in both forms.

## Limitations

- The `<outputFile>` argument of the series and study modes is accepted but
  not used; their results go only to the history and summary files above.
- The graph classes only store and display graphs; there are no graph
  algorithms (searches, shortest paths, spanning trees) and no graph command.