# drillings

`drillings` is a library for working with a series of small programming
exercises. Each exercise is a Rust source file that starts out broken and
carries an `I AM NOT DONE` marker comment. `drillings` reads the exercise
list, tells you which exercises are done, compiles and runs or tests them,
and prints progress, hints and the lines around the marker.

It also ships a set of worked example modules in plain Python.

## Requirements

- Python 3.11 or newer. There are no third-party dependencies.
- To compile exercises: `rustc` on your `PATH`, and `cargo` with clippy for
  exercises in `clippy` mode.

## Installation

```console
pip install drillings
```

## The exercise list

Exercises are described in a TOML file (conventionally `info.toml`) as an
array of tables named `exercises`, each with string fields `name`, `path`,
`mode` (`compile`, `test` or `clippy`) and `hint`:

```toml
[[exercises]]
name = "intro1"
path = "exercises/intro1.rs"
mode = "compile"
hint = "Remove the marker comment to move on."
```

```python
from drillings.exercise import load_exercises, parse_exercises

exercises = load_exercises("info.toml")
```

`parse_exercises(text)` does the same from a string. Both raise `ValueError`
when the `exercises` list or a field is missing, a field is not a string, or
the mode is unknown.

## Exercises and their state

`drillings.exercise.Exercise` is a dataclass with `name`, `path`, `mode`
(a `Mode`: `COMPILE`, `TEST`, `CLIPPY`) and `hint`; `str(exercise)` is its
path.

- `exercise.state()` reads the source file. If no line matches the
  `I AM NOT DONE` marker (a `//` or `///` comment), the returned `State` is
  done. Otherwise `state.context` holds `ContextLine`s (`line`, 1-based
  `number`, `important`) for the marker line and up to two lines on each
  side; the marker line is the important one.
- `state.is_done()` and `exercise.looks_done()` report whether the marker
  is gone.

### Compiling and running

```python
from drillings.exercise import CompileError

try:
    with exercise.compile() as compiled:
        output = compiled.run()
except CompileError as error:
    print(error.output.stderr)
else:
    print(output.success, output.stdout)
```

`compile()` invokes `rustc` (with `--test` for test exercises) and writes the
binary to `./temp_<pid>_ThreadId<thread>` in the current directory; it raises
`CompileError`, whose `output` is an `ExerciseOutput`, if compilation fails.
For clippy exercises it writes `./exercises/clippy/Cargo.toml`, builds the
binary, runs `cargo clean` and then `cargo clippy` with warnings denied.
`CompiledExercise.run()` returns an `ExerciseOutput` (`stdout`, `stderr`,
`success`); test binaries are run with `--show-output`. Closing the compiled
exercise, directly or by leaving the `with` block, removes the binary.
`temp_file()` and `clean()` expose that path and its removal.

## Verifying

```python
from drillings.verify import ExerciseFailed, verify

try:
    verify(exercises, (0, len(exercises)), verbose=False, success_hints=True)
except ExerciseFailed as failure:
    print(failure.exercise.hint)
```

`verify(exercises, progress, verbose, success_hints)` checks the exercises in
order, where `progress` is `(number already done, total)`. Compile exercises
are compiled and run, test exercises compiled and tested, clippy exercises
linted. It raises `ExerciseFailed` at the first exercise that fails, or that
passes but still carries the marker; in the latter case
`prompt_for_completion` has printed a success message, the program output,
the hint (with `success_hints`) and the lines around the marker. With
`verbose`, test output is printed. When stderr is a terminal, a progress bar
and spinner are drawn on it.

`test(exercise, verbose)` compiles and runs one test exercise without
looking at the marker, raising `ExerciseFailed` on failure.
`separator()` returns the bold rule used around output and hints.

## Terminal output

`drillings.ui` provides `bold`, `red`, `green` and `blue`, which add ANSI
styling when stdout is a terminal (or `CLICOLOR_FORCE` is set to anything
but `0`, and not when `NO_COLOR` is set), and `warn` and `success`, which
print prefixed status lines. Set `NO_EMOJI` to any value to replace emoji
with plain characters; `no_emoji()` reports whether it is set.

## Worked example modules

- `drillings.basics` – `calculate_price_of_apples`, `is_even`, `sale_price`,
  `bigger`, `foo_if_fizz`, `animal_habitat`, `trim_me`, `compose_me`,
  `replace_me`, `maybe_icecream`, and the generic `Wrapper`.
- `drillings.structs` – `Order` and `create_order_template`, `Package`
  (at least 10 grams, `is_international`, `get_fees`), a message-driven
  `State` with `ChangeColor`, `Echo`, `Move` and `Quit`, `ReportCard`,
  `Rectangle`, and the cons list `Cons` with `create_empty_list` and
  `create_non_empty_list`.
- `drillings.tables` – `vec_loop`, `vec_map`, `Fruit` and `fruit_basket`,
  `Team` and `build_scores_table`, and `transformer` with the commands
  `Uppercase`, `Trim` and `Append`.
- `drillings.errors` – `generate_nametag_text`, `total_cost`,
  `PositiveNonzeroInteger`, `CreationError`, `parse_pos_nonzero` and
  `ParsePosNonzeroError`.
- `drillings.iterators` – `capitalize_first`, `capitalize_words_vector`,
  `capitalize_words_string`, `divide` with `DivisionError`,
  `NotDivisibleError` and `DivideByZeroError`, `result_with_list`,
  `list_of_results`, `factorial`, `Progress` and the counting functions.

```python
>>> from drillings.basics import calculate_price_of_apples
>>> calculate_price_of_apples(35), calculate_price_of_apples(41)
(70, 41)
>>> from drillings.iterators import divide
>>> divide(81, 9)
9
```

## What this package does not do

`drillings` is a library only. It installs no command: there is no
command-line front end, no watch mode that re-checks exercises when files
change, no listing or hint command, no single-exercise run or reset, and no
generation of an editor project file. Those have to be built on top of the
functions above.

## Running the tests

```console
pip install "drillings[test]"
pytest
```