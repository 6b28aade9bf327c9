# lingsrunner

Building blocks for a terminal course of small programming exercises:

- `lingsrunner.ui`: coloured status messages for the terminal
- `lingsrunner.project`: generation of a `rust-project.json` file so that
  rust-analyzer treats every exercise file as its own crate
- `lingsrunner.solutions`: worked solutions to many of the exercises, written
  as ordinary Python functions and classes

The package has no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Terminal output: `lingsrunner.ui`

- `style(text, *styles)` returns `str(text)` wrapped in ANSI escape codes for
  the named styles: `"bold"`, `"red"`, `"green"` and `"blue"`. An unknown name
  raises `ValueError`. With no styles given, or when colours are off, the text
  comes back unchanged. Colours are on when `CLICOLOR_FORCE` is set to
  anything other than `0`; otherwise they are off when `CLICOLOR=0` or
  `TERM=dumb`, and on only when standard output is a terminal.
- `warn(message)` prints the message in red after a warning sign.
- `success(message)` prints the message in green after a check mark.
- `no_emoji()` is true when the `NO_EMOJI` environment variable is set; `warn`
  and `success` then print `!` and `✓` instead of emoji.

```python
from lingsrunner.ui import style, success, warn

print(style("Progress", "bold", "blue"))
success("Successfully ran exercises/intro/intro1.rs")
warn("Compiling of exercises/intro/intro2.rs failed!")
```

## rust-analyzer support: `lingsrunner.project`

`RustAnalyzerProject` holds the contents of `rust-project.json`: a
`sysroot_src` string and a list of `Crate` entries. Each `Crate` has a
`root_module`, `edition` (`"2021"`), empty `deps` and `cfg` of `["test"]`, so
that rust-analyzer also works inside test blocks.

- `add_path(path)` adds a crate for `path` when the text after its first dot
  is exactly `rs`.
- `exercises_to_json(root="exercises")` adds a crate for every matching file
  below `root`, in sorted order.
- `get_sysroot_src()` runs `rustc --print sysroot`, prints the toolchain it
  found, and sets `sysroot_src` to `<toolchain>/lib/rustlib/src/rust/library`.
  It needs `rustc` on the `PATH`.
- `to_dict()` returns the JSON-ready structure.
- `write_to_disk(path="./rust-project.json")` writes it as compact UTF-8 JSON.

```python
from lingsrunner.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("exercises")
if project.crates:
    project.write_to_disk()
```

## Worked solutions: `lingsrunner.solutions`

| Module | Contents |
| --- | --- |
| `quizzes` | `calculate_price_of_apples`, `transformer` with `Command` and `Append`, `ReportCard` |
| `basics` | `bigger`, `foo_if_fizz`, `is_even`, `sale_price`, `square`, `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`, `vec_loop`, `vec_map`, `longest` |
| `stdtypes` | cons lists (`Cons`, `Nil`, `create_empty_list`, `create_non_empty_list`), `Wrapper`, `abs_all` |
| `errors` | `generate_nametag_text`, `total_cost`, `afford`, `PositiveNonzeroInteger`, `parse_pos_nonzero` and their error classes |
| `hashmaps` | `fruit_basket`, `Fruit`, `fill_fruit_basket`, `Team`, `build_scores_table` |
| `options` | `maybe_icecream` |
| `enums` | `MachineState` processing `Quit`, `Echo`, `Move` and `ChangeColor` messages |
| `iterators` | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide`, `result_with_list`, `list_of_results`, `factorial`, `Progress` and the `count_*` functions |
| `structs` | `ColorClassic`, `ColorTuple`, `UnitLike`, `Order`, `create_order_template`, `Package` |
| `traits` | `append_bar`, `Licensed`, `SomeSoftware`, `OtherSoftware`, `compare_license_types` |

Failures are raised as exceptions:

```python
from lingsrunner.solutions.quizzes import Append, Command, transformer
from lingsrunner.solutions.iterators import NotDivisibleError, divide
from lingsrunner.solutions.errors import CreationErrorKind, ParsePosNonzeroError, parse_pos_nonzero

transformer([("hello", Command.UPPERCASE), ("foo", Append(1))])  # ["HELLO", "foobar"]

try:
    divide(81, 6)
except NotDivisibleError as err:
    print(err.dividend, err.divisor)  # 81 6

try:
    parse_pos_nonzero("0")
except ParsePosNonzeroError as err:
    assert err.creation is CreationErrorKind.ZERO
```

## What this package does not do

There is no command-line program. The package does not read an exercise list,
compile, run or test exercises, track which exercises are finished, watch files
for changes, reset exercises or print hints. It offers the output helpers, the
`rust-project.json` generator and the worked solutions described above.