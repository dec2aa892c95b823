# drillrunner

drillrunner is a small library for a collection of programming exercises. It has three parts:

- `drillrunner.drills`: worked solutions to the exercise topics, as plain Python functions and
  classes.
- `drillrunner.project`: builds a `rust-project.json` file so that an editor's language server
  treats every exercise file as its own crate.
- `drillrunner.ui`: coloured one-line status messages.

## Installing

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Drills

Each module in `drillrunner.drills` covers one topic.

| Module | What it holds |
| --- | --- |
| `basics` | string helpers (`trim_me`, `compose_me`, `replace_me`, `is_a_color_word`), `bigger`, `foo_if_fizz`, `is_even`, `sale_price`, `square`, `maybe_icecream`, list helpers (`array_and_vec`, `vec_loop`, `vec_map`, `fill_vec`), `longest`, `byte_counter`, `char_counter`, `num_sq` and the generic `Wrapper` |
| `quizzes` | `calculate_price_of_apples`, `transformer` with the `Uppercase`, `Trim` and `Append` commands, and `ReportCard` |
| `errors` | `generate_nametag_text`, `total_cost`, `spend_tokens`, `PositiveNonzeroInteger`, `CreationError` and `parse_pos_nonzero` |
| `iterators` | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide` with its `DivisionError` family, `result_with_list`, `list_of_results`, `factorial`, and `Progress` counting with `count_progress` and `count_collection` |
| `hashmaps` | `fruit_basket`, `fill_fruit_basket` with the `Fruit` enum, and `build_scores_table` returning `Team` records |
| `structs` | the `Order` template from `create_order_template`, and `Package` with `is_international` and `get_fees` |
| `traits` | `append_bar` for strings and lists of strings, the `Licensed` software classes with `compare_license_types`, and `some_func` over the `SomeTrait` and `OtherTrait` mix-ins |
| `enums` | a `State` driven by the `ChangeColor`, `Echo`, `Move` and `Quit` messages |
| `smart_pointers` | the cons list `Cons` / `Nil` and copy-on-write `abs_all` |
| `concurrency` | `run_workers`, `count_jobs` with the thread-safe `JobStatus`, `send_queue` / `receive_all` over a `WorkQueue`, and `offset_sums` |

Some examples:

```python
from drillrunner.drills.quizzes import Append, Trim, Uppercase, calculate_price_of_apples, transformer
from drillrunner.drills.iterators import DivideByZeroError, divide, factorial
from drillrunner.drills.errors import ParsePosNonzeroError, parse_pos_nonzero

calculate_price_of_apples(40)   # 80
calculate_price_of_apples(41)   # 41

transformer([("hello", Uppercase()), (" rome ", Trim()), ("foo", Append(2))])
# ['HELLO', 'rome', 'foobarbar']

factorial(4)                    # 24
divide(81, 9)                   # 9
try:
    divide(81, 0)
except DivideByZeroError:
    ...

parse_pos_nonzero("42")         # PositiveNonzeroInteger(value=42)
try:
    parse_pos_nonzero("0")
except ParsePosNonzeroError as err:
    err.creation.kind           # CreationErrorKind.ZERO
```

Where a drill fails, it raises: `ValueError` for bad input, `OverflowError` where a result
would not fit the integer width the drill works in, and the drill's own exception classes
where it defines them.

## Editor project file

`RustAnalyzerProject` describes a `rust-project.json` file.

```python
from drillrunner.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()          # runs `rustc --print sysroot` and prints the toolchain
project.exercises_to_json("exercises")
project.write_to_disk()            # writes ./rust-project.json
```

- `add_path(path)` adds a `Crate` when the text after the path's first dot is exactly `rs`.
  Each crate uses edition `2021`, has no dependencies, and sets the `test` cfg.
- `exercises_to_json(root)` calls `add_path` for every path below `root`, in sorted order.
- `to_json()` returns the project as compact JSON; `write_to_disk(path)` writes it, by default to
  `./rust-project.json`.

`get_sysroot_src` needs the `rustc` compiler on your `PATH`.

## Status lines

`drillrunner.ui.warn(message)` prints a red line and `drillrunner.ui.success(message)` a green
one, each led by an emoji marker. When the `NO_EMOJI` environment variable is set, plain `!` and
`✓` markers are used instead; `no_emoji()` reports whether it is set.

## What it does not do

drillrunner installs no command. It does not read an exercise list, compile or run exercises,
check whether an exercise is marked as finished, show hints, reset exercises, or watch a folder
for changes. It provides the drills, the project-file generator and the status-line helpers
only.