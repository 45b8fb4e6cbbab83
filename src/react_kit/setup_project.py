"""Run a whole project setup: ask, plan, execute, release the prompt."""

import os
from dataclasses import dataclass, field
from typing import Callable

from react_kit.options.option_collector import collect_options
from react_kit.options.prompt_session import PromptSession
from react_kit.pipeline.git_init import init_repository
from react_kit.pipeline.process_runner import CommandRunner
from react_kit.pipeline.run_reporter import RunReporter
from react_kit.pipeline.step_executor import RunResult, StepCollaborators, StepExecutor
from react_kit.plan.plan_builder import build_plan
from react_kit.project_target import resolve_project_target


@dataclass
class SetupDeps:
    """Injectable dependencies for a setup run."""

    session: PromptSession = field(default_factory=PromptSession)
    command_runner: CommandRunner = field(default_factory=CommandRunner)
    init_repository: Callable = init_repository
    change_directory: Callable = os.chdir
    reporter: RunReporter = field(default_factory=RunReporter)


def run_setup(project_name=None, deps: SetupDeps = None, cwd=None) -> RunResult:
    """Set up a new project named project_name under cwd.

    The prompt session is closed exactly once, whatever the outcome.
    """
    if deps is None:
        deps = SetupDeps()

    with deps.session as session:
        target = resolve_project_target(project_name, cwd)
        options = collect_options(session)
        steps = build_plan(options, target)
        executor = StepExecutor(
            StepCollaborators(
                command_runner=deps.command_runner,
                init_repository=deps.init_repository,
                change_directory=deps.change_directory,
            ),
            deps.reporter,
        )
        return executor.run(steps)
