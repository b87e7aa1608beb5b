# stdtour

stdtour is a set of small, self-contained Python modules. Each covers one common programming topic, and none needs a third-party library.

## Modules

- `stdtour.linkedlist`
  - `LinkedList` and `DoubleLinkedList` keep their elements sorted on `insert`. The order is ascending by default, or descending with `descending=True`. Equal values keep their insertion order.
  - Both lists support `push_front`, `push_back`, `pop_head`, `len()`, iteration, and reading or assigning by index. Negative indices count from the end.
  - `pop_head` on an empty list raises `EmptyListError`, which is a subclass of `IndexError`.
  - `DoubleLinkedList` can also be walked from the tail with `reversed()`.
- `stdtour.traverse`
  - `traverse(container, op)` calls `op` on each element from front to back.
  - `traverse_reverse(container, op)` does the same from back to front.
  - `transform(container, func)` replaces each element of a mutable sequence with `func(element)`.
- `stdtour.fsinfo`
  - `describe_path` reports whether a path is a regular file (with its size), a directory (with its entries), a special file, or missing.
  - `permissions_string` renders a mode as an `rwxr-x---` style string.
  - `file_time_string` formats a timestamp as local calendar time.
  - `directory_size(root)` returns the number of entries below `root` and the total size of its regular files.
  - `lexical_relative` computes a relative path from the path text alone. It returns `""` when there is none.
  - `create_sample_tree` creates `tmp/test/data.txt` and a directory link `tmp/slink`.
  - `list_tree` yields every path below a directory and follows directory links.
  - `symlink_demo` builds a small tree with a link and returns report lines that contrast lexical and filesystem relative paths.
- `stdtour.geometry`
  - `Coord` is an immutable integer point. It supports `+`, `-` and unary `-`, and prints as `(x,y)`.
  - `Line`, `Circle`, `Polygon` (at most 100 points) and `Rectangle` derive from `GeoObj`. Each can `move`, `describe`, `draw` and `clone`.
  - `create_figure()` returns a line, a circle and a rectangle.
- `stdtour.geobench`
  - Helpers that build, shuffle and move, sort, copy, clone and clear collections of geometric objects: `init_coll`, `iterate`, `iterate_down`, `shuffle_and_mod`, `sort_coll`, `copy_coll`, `clone_all` and `clean_coll`.
  - `run_benchmark` times each of these steps and returns the mean milliseconds per step.
- `stdtour.numeric`
  - Folds and scans: `accumulate`, `squared_sum`, `inclusive_scan`, `exclusive_scan`, `transform_reduce`, `transform_reduce_pairs`, `transform_inclusive_scan` and `transform_exclusive_scan`.
  - `clamp` limits a value to a range.
  - Integer parsing: `parse_int_prefix` is strict and reads digits at the very start. `parse_int_lenient` allows leading whitespace and a sign. Both return `None` when there is no number or it does not fit a 32-bit int.
  - `float_roundtrip` writes a float as its shortest text and reads it back.
  - `describe_float` shows a float in decimal and hexadecimal float notation.
  - Sequence helpers: `for_each_n`, `last_five` and `every_second`. `repeated_sequence` builds test data.
- `stdtour.timer`
  - `Timer` reports the milliseconds elapsed since the previous reading, through `diff()` or `print_diff()`. It accepts any clock callable.
- `stdtour.searching`
  - `naive_search` finds a subsequence.
  - `BoyerMooreSearcher` and `HorspoolSearcher` are reusable searchers. Each returns `(start, end)` of the first match, or `(len, len)` when there is no match.
  - `build_text` and `build_int_sequence` generate test data.
  - `run_measurements` times every strategy.
- `stdtour.tree`
  - `TreeNode` is a tree with any number of children and indented `render()`.
  - `BinaryNode` is walked with `traverse_path(node, "left", "right", ...)`.
- `stdtour.records`
  - `Customer` unpacks into first name, last name and value.
  - `Name` has an optional middle name.
- `stdtour.utilities`
  - `CountCalls` counts calls to a callback.
  - `is_homogeneous` checks whether all arguments have exactly the same type.
  - `format_with_sep` joins values with a separator.
  - `Request` is a context manager. It commits on a normal exit and rolls back on an exception.
  - Duration rounding: `duration_abs`, `duration_trunc`, `duration_floor`, `duration_ceil` and `duration_round`. `duration_round` rounds halves to even.

## Install

```
pip install .
```

Add the `test` extra to get the test dependencies:

```
pip install .[test]
```

## Examples

```python
from stdtour.linkedlist import DoubleLinkedList
from stdtour.numeric import inclusive_scan, clamp

items = DoubleLinkedList([5, 1, 3])
list(items)            # [1, 3, 5]
list(reversed(items))  # [5, 3, 1]

inclusive_scan([3, 1, 7, 0])  # [3, 4, 11, 11]
clamp(15, 5, 13)              # 13
```

## Commands

### stdtour-checkpath

Describe a path. With no argument, the command prints a usage line and exits with status 1.

```
stdtour-checkpath <path>
```

### stdtour-geobench

Run the geometric-object benchmark over ten rounds. The optional argument sets how many objects to create; the default is 10000.

```
stdtour-geobench 3000
```

### stdtour-search

Time the search strategies on a generated text. The optional argument sets the length of the longest run; the default is 1000. Add `--ints` to search a generated integer sequence instead.

```
stdtour-search 200
stdtour-search --ints 200
```

## Tests

```
pytest
```