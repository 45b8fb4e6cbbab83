"""Step descriptors: what to do, and whether to do it."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Tuple

from react_kit.options.options import Options


def always(_options: Options) -> bool:
    return True


@dataclass(frozen=True)
class FlagGuard:
    """True when the named Options flag is set."""

    flag: str

    def __call__(self, options: Options) -> bool:
        return getattr(options, self.flag)


@dataclass(frozen=True)
class RunCommand:
    """Run an external command to completion in cwd."""

    command: str
    args: Tuple[str, ...]
    cwd: Path

    @property
    def argv(self):
        return [self.command, *self.args]

    def __str__(self):
        return " ".join(self.argv)


@dataclass(frozen=True)
class ChangeDirectory:
    """Switch the process working directory."""

    path: Path


@dataclass(frozen=True)
class InitRepository:
    """Create an empty Git repository at path."""

    path: Path


@dataclass(frozen=True)
class WriteFile:
    """Overwrite path with literal content, creating parent directories."""

    path: Path
    content: str


@dataclass(frozen=True)
class MergeJsonKey:
    """Set key to value in the JSON object stored at path."""

    path: Path
    key: str
    value: Any = field(hash=False)


@dataclass(frozen=True)
class Step:
    description: str
    action: object
    guard: Callable[[Options], bool] = always

    def enabled(self, options: Options) -> bool:
        return self.guard(options)
