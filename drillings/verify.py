"""Checking exercises: compile, run or test them and report progress."""

from __future__ import annotations

import itertools
import sys
import threading
from collections.abc import Iterable

from . import ui
from .exercise import CompiledExercise, CompileError, Exercise, Mode

_SEPARATOR = "===================="


class ExerciseFailed(Exception):
    """Raised when an exercise does not compile, run or pass its tests."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} failed")
        self.exercise = exercise


class _Spinner:
    """A one-line spinner drawn on stderr while a step is in progress."""

    _FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"

    def __init__(self, message: str) -> None:
        self.message = message
        self._enabled = sys.stderr.isatty()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._finished = False

    def __enter__(self) -> _Spinner:
        if self._enabled:
            self._thread = threading.Thread(target=self._tick, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish_and_clear()

    def _tick(self) -> None:
        for frame in itertools.cycle(self._FRAMES):
            sys.stderr.write(f"\r\x1b[2K{frame} {self.message}")
            sys.stderr.flush()
            if self._stop.wait(0.1):
                break

    def finish_and_clear(self) -> None:
        if self._finished:
            return
        self._finished = True
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            sys.stderr.write("\r\x1b[2K")
            sys.stderr.flush()


class _ProgressBar:
    """A progress bar drawn on stderr when it is a terminal."""

    _WIDTH = 60

    def __init__(self, total: int, position: int) -> None:
        self.total = total
        self.position = position
        self.message = ""
        self._enabled = sys.stderr.isatty()

    def update(self, position: int, message: str) -> None:
        self.position = position
        self.message = message
        self._draw()

    def _draw(self) -> None:
        if not self._enabled:
            return
        if self.total:
            filled = min(self._WIDTH, self._WIDTH * self.position // self.total)
        else:
            filled = self._WIDTH
        if filled < self._WIDTH:
            bar = ui.green("#" * filled + ">") + ui.red("-" * (self._WIDTH - filled - 1))
        else:
            bar = ui.green("#" * self._WIDTH)
        sys.stderr.write(
            f"\rProgress: [{bar}] {self.position}/{self.total} {self.message}\n"
        )
        sys.stderr.flush()


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int],
    verbose: bool = False,
    success_hints: bool = False,
) -> None:
    """Check each exercise in turn; raise ExerciseFailed at the first failure."""
    num_done, total = progress
    percentage = num_done / total * 100.0 if total else 0.0
    step = 100.0 / total if total else 0.0
    bar = _ProgressBar(total, num_done)
    position = num_done
    bar.update(position, f"({percentage:.1f} %)")

    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            ok = _compile_and_test(exercise, True, verbose, success_hints)
        elif exercise.mode is Mode.COMPILE:
            ok = _compile_and_run_interactively(exercise, success_hints)
        else:
            ok = _compile_only(exercise, success_hints)
        if not ok:
            raise ExerciseFailed(exercise)
        percentage += step
        position += 1
        bar.update(position, f"({percentage:.1f} %)")


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the test harness; raise ExerciseFailed on failure."""
    if not _compile_and_test(exercise, False, verbose, False):
        raise ExerciseFailed(exercise)


def _compile(exercise: Exercise, spinner: _Spinner) -> CompiledExercise | None:
    try:
        return exercise.compile()
    except CompileError as error:
        spinner.finish_and_clear()
        ui.warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(error.output.stderr)
        return None


def _compile_only(exercise: Exercise, success_hints: bool) -> bool:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        compiled = _compile(exercise, spinner)
        if compiled is None:
            return False
        compiled.close()
    return prompt_for_completion(exercise, None, success_hints)


def _compile_and_run_interactively(exercise: Exercise, success_hints: bool) -> bool:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        compiled = _compile(exercise, spinner)
        if compiled is None:
            return False
        with compiled:
            spinner.message = f"Running {exercise}..."
            output = compiled.run()

    if not output.success:
        ui.warn(f"Ran {exercise} with errors")
        print(output.stdout)
        print(output.stderr)
        return False
    return prompt_for_completion(exercise, output.stdout, success_hints)


def _compile_and_test(
    exercise: Exercise, interactive: bool, verbose: bool, success_hints: bool
) -> bool:
    with _Spinner(f"Testing {exercise}...") as spinner:
        compiled = _compile(exercise, spinner)
        if compiled is None:
            return False
        with compiled:
            output = compiled.run()

    if not output.success:
        ui.warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
        print(output.stdout)
        return False
    if verbose:
        print(output.stdout)
    if interactive:
        return prompt_for_completion(exercise, None, success_hints)
    return True


def prompt_for_completion(
    exercise: Exercise, prompt_output: str | None, success_hints: bool
) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is."""
    state = exercise.state()
    if state.is_done():
        return True

    if exercise.mode is Mode.COMPILE:
        ui.success(f"Successfully ran {exercise}!")
    elif exercise.mode is Mode.TEST:
        ui.success(f"Successfully tested {exercise}!")
    else:
        ui.success(f"Successfully compiled {exercise}!")

    no_emoji = ui.no_emoji()
    if exercise.mode is Mode.COMPILE:
        success_msg = "The code is compiling!"
    elif exercise.mode is Mode.TEST:
        success_msg = "The code is compiling, and the tests pass!"
    elif no_emoji:
        success_msg = "The code is compiling, and Clippy is happy!"
    else:
        success_msg = "The code is compiling, and 📎 Clippy 📎 is happy!"

    print()
    if no_emoji:
        print(f"~*~ {success_msg} ~*~")
    else:
        print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        print(separator())
        print(prompt_output)
        print(separator())
        print()
    if success_hints:
        print("Hints:")
        print(separator())
        print(exercise.hint)
        print(separator())
        print()

    print("You can keep working on this exercise,")
    print(f"or jump into the next one by removing the {ui.bold('`I AM NOT DONE`')} comment:")
    print()
    for context_line in state.context:
        line = ui.bold(context_line.line) if context_line.important else context_line.line
        number = ui.blue(ui.bold(f"{context_line.number:>2}"))
        print(f"{number} {ui.blue('|')}  {line}")

    return False


def separator() -> str:
    """The bold rule printed around output and hints."""
    return ui.bold(_SEPARATOR)