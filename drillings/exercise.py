"""Exercise descriptions, their completion state, and compiling them."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

from . import ui

_RUSTC_ARGS = ("--color", "always", "--edition", "2021", "-C", "strip=debuginfo")
_COLOR_ARGS = ("--color", "always")
_I_AM_DONE = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
_CONTEXT = 2
_CLIPPY_CARGO_TOML = Path("./exercises/clippy/Cargo.toml")


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_ThreadId{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, ignoring a missing file."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state; an empty context means the exercise is done."""

    context: tuple[ContextLine, ...] = ()

    def is_done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a compiler or exercise binary."""

    stdout: str
    stderr: str
    success: bool = True


class CompileError(Exception):
    """Raised when an exercise fails to compile."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _run(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True, check=False)


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class CompiledExercise:
    """A successfully compiled exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the compiled binary and capture its output."""
        arg = "--show-output" if self.exercise.mode is Mode.TEST else ""
        result = _run([temp_file(), arg])
        return ExerciseOutput(
            stdout=_decode(result.stdout),
            stderr=_decode(result.stderr),
            success=result.returncode == 0,
        )

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


@dataclass
class Exercise:
    """One exercise as listed in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise CompileError on failure."""
        source = str(self.path)
        if self.mode is Mode.COMPILE:
            result = _run(["rustc", source, "-o", temp_file(), *_RUSTC_ARGS])
        elif self.mode is Mode.TEST:
            result = _run(["rustc", "--test", source, "-o", temp_file(), *_RUSTC_ARGS])
        else:
            result = self._run_clippy()

        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompileError(
            ExerciseOutput(
                stdout=_decode(result.stdout),
                stderr=_decode(result.stderr),
                success=False,
            )
        )

    def _run_clippy(self) -> subprocess.CompletedProcess:
        name = self.name
        cargo_toml = (
            "[package]\n"
            f'name = "{name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{name}"\n'
            f'path = "{name}.rs"'
        )
        try:
            _CLIPPY_CARGO_TOML.write_text(cargo_toml, encoding="utf-8")
        except OSError as exc:
            message = (
                "Failed to write Clippy Cargo.toml file."
                if ui.no_emoji()
                else "Failed to write 📎 Clippy 📎 Cargo.toml file."
            )
            raise OSError(message) from exc
        # Build a binary as well so the exercise can be run afterwards.
        _run(["rustc", str(self.path), "-o", temp_file(), *_RUSTC_ARGS])
        # A clean build is needed for clippy to report every lint.
        _run(["cargo", "clean", "--manifest-path", str(_CLIPPY_CARGO_TOML), *_COLOR_ARGS])
        return _run(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                str(_CLIPPY_CARGO_TOML),
                *_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ]
        )

    def state(self) -> State:
        """Read the source and report whether the pending marker remains."""
        source = self.path.read_text(encoding="utf-8")
        if not _I_AM_DONE.search(source):
            return State()

        lines = _lines(source)
        index = next((i for i, line in enumerate(lines) if _I_AM_DONE.search(line)), None)
        if index is None:
            raise RuntimeError(f"pending marker in {self.path} spans several lines")

        low = max(index - _CONTEXT, 0)
        high = index + _CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == index)
                for i, line in enumerate(lines[low : high + 1], start=low)
            )
        )

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed from the source."""
        return self.state().is_done()

    def __str__(self) -> str:
        return str(self.path)


def _exercise_from_table(table: dict) -> Exercise:
    try:
        name, path, mode, hint = table["name"], table["path"], table["mode"], table["hint"]
    except KeyError as exc:
        raise ValueError(f"exercise entry is missing field {exc.args[0]!r}") from None
    for field_name, value in (("name", name), ("path", path), ("mode", mode), ("hint", hint)):
        if not isinstance(value, str):
            raise ValueError(f"exercise field {field_name!r} must be a string")
    return Exercise(name=name, path=Path(path), mode=Mode(mode), hint=hint)


def parse_exercises(text: str) -> list[Exercise]:
    """Parse the exercise list from info.toml text."""
    data = tomllib.loads(text)
    entries = data.get("exercises")
    if not isinstance(entries, list):
        raise ValueError("missing 'exercises' list")
    return [_exercise_from_table(entry) for entry in entries]


def load_exercises(path: str | os.PathLike) -> list[Exercise]:
    """Read and parse an info.toml file."""
    return parse_exercises(Path(path).read_text(encoding="utf-8"))