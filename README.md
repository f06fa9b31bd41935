# sortbench

Two classic sorting algorithms, plus small command-line tools that sort a
file of integers or time the sorts on random data.

- **Insertion sort** (`sortbench.insertion.insertion_sort`): returns a new
  list in ascending order. It is stable.
- **Bottom-up merge sort** (`sortbench.merge.merge_sort`): merges runs of
  width 1, 2, 4, … until the list is sorted, and returns a new list. Pass
  `descending=True` to sort largest first. `merge_runs` performs one merge
  step of two adjacent sorted runs into a target list.

Neither function changes the list it is given.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
import random

from sortbench.insertion import insertion_sort
from sortbench.merge import merge_sort
from sortbench.vectors import format_vector, random_vector

print(insertion_sort([5, 3, 9, 1]))            # [1, 3, 5, 9]
print(merge_sort([4, 8, 2], descending=True))  # [8, 4, 2]

sample = random_vector(10, random.Random(1))   # ten integers from 0 to 10000
print(format_vector(sample))
```

`sortbench.vectors` also provides:

- `load_vector(path)`: reads whitespace-separated integers from a file,
  stopping at the first token that is not an integer. A file that cannot
  be opened gives an empty list.
- `format_vector(values)`: renders each value followed by a single space.
- `write_vector(values, path)`: writes the values in that same form.

`sortbench.cli` holds the helpers behind the commands: `time_sort(sort,
values)` returns the sorted list and the CPU time in milliseconds,
`sort_file(...)` loads, prints, sorts and saves a file, and
`timing_loop(...)` runs the interactive timing prompt.

## Command-line tools

Sort the integers in `data.txt` with insertion sort. The tool prints the
list before and after sorting and writes the sorted list to `insert.out`:

```
sortbench-insertsort
```

Sort the integers in `input.txt` with merge sort, largest first. The
result also goes to `insert.out`:

```
sortbench-mergesort
```

Both accept `--input PATH` and `--output PATH` to use other files.

Time the sorts on random lists. Each tool asks how many integers to
generate, sorts that many random values between 0 and 10000 (ascending),
and reports the CPU time in milliseconds. Enter `0`, anything that is not
an integer, or end of input to quit:

```
sortbench-insert-time
sortbench-merge-time
```