"""Run setup steps in order, stopping at the first failure."""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from react_kit.pipeline.errors import StepError
from react_kit.pipeline.file_writer import merge_json_key, write_file
from react_kit.pipeline.git_init import init_repository
from react_kit.pipeline.process_runner import CommandRunner
from react_kit.pipeline.run_reporter import RunReporter
from react_kit.plan.step import (
    ChangeDirectory,
    InitRepository,
    MergeJsonKey,
    RunCommand,
    Step,
    WriteFile,
)


class RunState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class RunResult:
    """Terminal outcome of a run."""

    state: RunState
    steps_run: int
    reason: Optional[str] = None
    failed_step: Optional[Step] = None

    @property
    def succeeded(self) -> bool:
        return self.state is RunState.COMPLETED


@dataclass
class StepCollaborators:
    """Side-effecting collaborators the executor delegates to."""

    command_runner: CommandRunner = field(default_factory=CommandRunner)
    init_repository: Callable = init_repository
    change_directory: Callable = os.chdir


class StepExecutor:
    """Executes steps strictly in order; no retries, no rollback.

    State moves NOT_STARTED -> RUNNING -> COMPLETED or ABORTED. step_index
    counts the steps that finished successfully.
    """

    def __init__(self, collaborators: StepCollaborators = None, reporter: RunReporter = None):
        self._collaborators = collaborators or StepCollaborators()
        self._reporter = reporter or RunReporter()
        self.state = RunState.NOT_STARTED
        self.step_index = 0
        self._handlers = {
            RunCommand: self._run_command,
            ChangeDirectory: self._change_directory,
            InitRepository: self._init_repository,
            WriteFile: self._write_file,
            MergeJsonKey: self._merge_json_key,
        }

    def run(self, steps: List[Step]) -> RunResult:
        if self.state is not RunState.NOT_STARTED:
            raise RuntimeError(f"Executor already used (state: {self.state.value})")
        self.state = RunState.RUNNING

        for step in steps:
            self._reporter.step_started(step)
            try:
                self._perform(step.action)
            except (StepError, OSError) as exc:
                return self._abort(step, exc)
            self.step_index += 1

        self.state = RunState.COMPLETED
        result = RunResult(state=self.state, steps_run=self.step_index)
        self._reporter.completed(result)
        return result

    def _abort(self, step, exc):
        self.state = RunState.ABORTED
        result = RunResult(
            state=self.state,
            steps_run=self.step_index,
            reason=str(exc),
            failed_step=step,
        )
        self._reporter.aborted(result)
        return result

    def _perform(self, action):
        handler = self._handlers.get(type(action))
        if handler is None:
            raise TypeError(f"Unknown step action: {action!r}")
        handler(action)

    def _run_command(self, action: RunCommand):
        self._collaborators.command_runner.run(action)

    def _change_directory(self, action: ChangeDirectory):
        self._collaborators.change_directory(action.path)

    def _init_repository(self, action: InitRepository):
        self._collaborators.init_repository(action.path)

    def _write_file(self, action: WriteFile):
        write_file(action.path, action.content)

    def _merge_json_key(self, action: MergeJsonKey):
        merge_json_key(action.path, action.key, action.value)
