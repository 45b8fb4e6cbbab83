"""Run external commands attached to the operator's terminal."""

import errno
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from react_kit.pipeline.errors import CommandFailedError


@dataclass
class CommandResult:
    returncode: int


def run_interactive(argv, cwd) -> CommandResult:
    """Run argv in cwd, inheriting stdin/stdout/stderr.

    The tools may prompt the operator (eslint --init, create vite), so
    nothing is captured.
    """
    result = subprocess.run(argv, cwd=cwd)
    return CommandResult(returncode=result.returncode)


class CommandRunner:
    """Runs a RunCommand action and raises CommandFailedError on failure."""

    def __init__(self, run_fn=run_interactive):
        self._run_fn = run_fn

    def run(self, action) -> CommandResult:
        cwd = Path(action.cwd)
        if not cwd.is_dir():
            raise FileNotFoundError(errno.ENOENT, "Working directory does not exist", str(cwd))
        executable = shutil.which(action.command) or action.command
        try:
            result = self._run_fn([executable, *action.args], str(cwd))
        except FileNotFoundError:
            raise CommandFailedError(action.command, action.args) from None
        if result.returncode != 0:
            raise CommandFailedError(action.command, action.args, result.returncode)
        return result
