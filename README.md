# dsbasics

Teaching material in plain Python: two classic data structures and a set of
introductory programming exercises. Every exercise is a function or class
that returns its result.

The package has no dependencies beyond the standard library and supports
Python 3.10 and later.

## Data structures

### `dsbasics.array.Array`

A fixed-length array of integers. Its length is set when it is created and
every slot starts at zero. A negative length raises `ValueError`.

- `len(arr)` and iteration give the length and the stored values.
- `arr[i]` and `arr[i] = value` are bounds-checked: an index outside
  `0 .. len - 1` raises `IndexError`. Negative indices are not accepted.
- `arr.slice(start, end)` returns a new `Array` with the values from `start`
  up to, not including, `end`; a range outside the array raises `IndexError`.
- `arr.describe()` returns a multi-line text listing the length and values.

```python
from dsbasics.array import Array

arr = Array(5)
for i in range(len(arr)):
    arr[i] = i * 2

list(arr)            # [0, 2, 4, 6, 8]
part = arr.slice(2, 5)
list(part)           # [4, 6, 8]
print(arr.describe())
```

### `dsbasics.linked_list.LinkedList`

A singly linked list made of `Node` objects (each with `data` and `next`).
It is built from an optional iterable of values and grows at its head.

- `insert_head(value)` puts a new node in front and returns it.
- `node_at(index)`, `get(index)` and `set(index, value)` walk from the head;
  an index past the end or below zero raises `IndexError`. `set` returns the
  node it changed.
- `len()` and iteration count and yield the values from head to tail.
- `describe()` returns each node's value and the value of the node after it
  (`None` for the last node).

```python
from dsbasics.linked_list import LinkedList

items = LinkedList([1, 2])
items.insert_head(0)
list(items)          # [0, 1, 2]
items.set(1, 100)
items.get(1)         # 100
node = items.node_at(2)
print(items.describe())
```

## Exercises

### `dsbasics.basics`

- `add(a, b)`, `multiply(a, b)`
- `compound_interest(principal, rate, time)` — interest earned at `rate`
  percent over `time` periods
- `fahrenheit_to_celsius(temp_f)`
- `is_prime(num)` (trial division up to `num // 2`) and `is_prime_sqrt(num)`
  (trial division up to the square root). Numbers below 2 have no candidate
  divisors and so count as prime in both.
- `primes_up_to(limit)` — every number from 1 to `limit` that `is_prime`
  accepts, so the list starts with 1
- `ascii_value(text)` — the code of the first character; empty text raises
  `ValueError`
- `type_sizes()` — native sizes in bytes of short int, int, char, signed char,
  float and double
- `greeting()` — `"Hello world!"`
- `Rectangle(length, width)` with `area()` and `perimeter()`
- `ComplexInt(real, img)`, which adds with `+` and prints as `"2 + 3i"`

### `dsbasics.control_flow`

- `sum_natural(n)` and `sum_natural_recursive(n)`; the recursive form raises
  `ValueError` for `n` below 1
- `is_vowel(char)` — raises `ValueError` unless given exactly one character
- `is_leap_year(year)`, `sign_of(num)` (`"positive"`, `"zero"` or
  `"negative"`)
- `factorial(n)` — raises `ValueError` for `n` below 1
- `multiplication_table(num, limit)` — lines such as `"5 * 1 = 5"`
- `alphabet_lines()` — the upper- and lower-case alphabets, space separated
- `swap(a, b)` — returns `(b, a)`

### `dsbasics.grids`

- `average(values)`, `min_max(values)`, `largest(values)`; each raises
  `ValueError` when given no values
- `format_grid(rows)` — all cells, row by row, on one space-separated line
- `paired_cells(rows)` — one line per row showing each cell next to a second
  view of the same cell

```python
from dsbasics.basics import Rectangle, is_prime
from dsbasics.control_flow import factorial, is_leap_year
from dsbasics.grids import min_max

Rectangle(2, 6).area()        # 12
is_prime(71)                  # True
factorial(5)                  # 120
is_leap_year(2000)            # True
min_max([1, 4, 2, 3, 33, -1]) # (-1, 33)
```

## What it does not do

The package installs no commands and does not prompt for input or print
anything itself: the exercises are library functions, and reading values
from a user or printing their results is left to the caller.

## Running the tests

Install the package with its `test` extra, then run `pytest` from the
project directory.