# drillkit

drillkit holds worked solutions to a course of small programming drills,
written as plain Python functions and classes and grouped by topic, plus
a couple of helpers for printing coloured status lines in a terminal.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Status lines: `drillkit.ui`

- `no_emoji()` is true when the `NO_EMOJI` environment variable is set.
- `warn(message)` prints a red warning line and returns it.
- `success(message)` prints a green success line and returns it.

The marks are emoji (`⚠️`, `✅`) unless `NO_EMOJI` is set, in which case
they are `!` and `✓`. Colour codes are added only when standard output
is a terminal.

```python
from drillkit.ui import success
success("Successfully ran quiz1")
```

## Worked solutions: `drillkit.exercises`

### `basics`

Variables, functions, conditions and strings:
`calculate_apple_price` (2 per apple, 1 per apple above 40),
`times_two`, `bigger`, `fizz_if_foo`, `call_me`, `is_even`,
`sale_price`, `square`, `current_favorite_color`, `is_a_color_word`
and `describe_ten`.

### `errors`

Error handling with exceptions:

- `generate_nametag_text(name)` raises `ValueError` for an empty name.
- `total_cost(item_quantity)` parses a 32-bit integer quantity strictly
  and raises `ValueError` (for example `"invalid digit found in string"`).
- `spend_tokens(tokens, item_quantity)` buys if affordable and returns
  the tokens left.
- `PositiveNonzeroInteger(value)` raises `CreationError` for zero or
  negative values; `read_and_validate(stream)` reads one line into one.
- `divide(a, b)` raises `DivideByZeroError` or `NotDivisibleError`, both
  subclasses of `DivisionError`; `result_with_list()` and
  `list_of_results()` apply it to a fixed list of numbers.
- `option_numbers()` and `drain_optionals(values)` cover optional values.

```python
from drillkit.exercises.errors import divide, NotDivisibleError
divide(81, 9)        # 9
divide(81, 6)        # raises NotDivisibleError
```

### `primitives`

`greetings`, `classify_char`, `describe_array`, `nice_slice`,
`describe_cat`, `second`, `floats_differ` (compares with a 0.0001
tolerance) and `add_optional`.

### `containers`

Dictionaries, lists, iterators and threads: the `Fruit` and `Progress`
enums, `fruit_basket`, `fill_fruit_basket`, `array_and_vec`, `vec_loop`,
`favourite_fruits`, `capitalize_first`, `capitalize_words_vector`,
`capitalize_words_string`, `factorial` (raises `OverflowError` past
64 bits), `count_for`, `count_iterator`, `count_collection_for`,
`count_collection_iterator` and `offset_sums`, which sums every n-th
number from each offset on a thread pool.

### `structures`

Data types and behaviour: `Point`, `Message` and `MachineState`
(`process` applies a message), `ColorClassic`, `Order` with
`create_order_template`, `Package` (rejects non-positive weights;
`is_international`, `get_fees`), `Wrapper`, `ReportCard` (`render`),
`append_bar` for strings and lists, the `Cons` list with
`create_empty_list` and `create_non_empty_list`, `favourite_snacks`,
`my_macro`, `fill_vec` and `run_jobs`, which completes jobs on a worker
thread while polling its progress.

## What drillkit does not do

drillkit has no command-line program. It does not read a course listing,
compile, run or test exercise files, track which exercises are finished,
show hints or watch files for changes. It provides only the status-line
helpers and the worked solutions described above.