"""Turn resolved Options into the ordered list of setup steps."""

from typing import List

from react_kit.options.options import Options
from react_kit.plan import artifacts
from react_kit.plan.step import (
    ChangeDirectory,
    FlagGuard,
    InitRepository,
    MergeJsonKey,
    RunCommand,
    Step,
    WriteFile,
)
from react_kit.project_target import ProjectTarget

VITE_PACKAGE = "vite@latest"
VITE_TEMPLATE = "react"


def _scaffold_steps(options, target):
    return [
        Step(
            f"Creating Vite project in {target.path}...",
            RunCommand(
                options.pm,
                ("create", VITE_PACKAGE, target.name, "--", "--template", VITE_TEMPLATE),
                target.launch_dir,
            ),
        ),
        Step(f"Entering {target.path}...", ChangeDirectory(target.path)),
    ]


def _tailwind_steps(options, target):
    return [
        Step(
            "Installing Tailwind CSS and dependencies...",
            RunCommand(options.pm, ("install", "-D", "tailwindcss", "postcss", "autoprefixer"), target.path),
        ),
        Step(
            "Initializing Tailwind CSS...",
            RunCommand("npx", ("tailwindcss", "init", "-p"), target.path),
        ),
        Step(
            "Configuring Tailwind CSS...",
            WriteFile(target.resolve(artifacts.TAILWIND_CONFIG_PATH), artifacts.TAILWIND_CONFIG),
        ),
        Step(
            "Writing Tailwind directives to src/index.css...",
            WriteFile(target.resolve(artifacts.STYLESHEET_PATH), artifacts.STYLESHEET),
        ),
    ]


def _git_steps(options, target):
    guard = FlagGuard("init_git")
    return [
        Step("Initializing Git repository...", InitRepository(target.path), guard),
        Step(
            "Creating .gitignore...",
            WriteFile(target.resolve(artifacts.GITIGNORE_PATH), artifacts.GITIGNORE),
            guard,
        ),
    ]


def _eslint_steps(options, target):
    guard = FlagGuard("setup_eslint")
    return [
        Step("Installing ESLint...", RunCommand(options.pm, ("install", "-D", "eslint"), target.path), guard),
        Step("Initializing ESLint...", RunCommand("npx", ("eslint", "--init"), target.path), guard),
    ]


def _prettier_steps(options, target):
    guard = FlagGuard("setup_prettier")
    return [
        Step("Installing Prettier...", RunCommand(options.pm, ("install", "-D", "prettier"), target.path), guard),
        Step(
            "Configuring Prettier...",
            WriteFile(target.resolve(artifacts.PRETTIER_CONFIG_PATH), artifacts.PRETTIER_CONFIG),
            guard,
        ),
    ]


def _library_step(description, flag_name, packages):
    def build(options, target):
        return [
            Step(description, RunCommand(options.pm, ("install", *packages), target.path), FlagGuard(flag_name)),
        ]
    return build


def _husky_steps(options, target):
    guard = FlagGuard("setup_husky")
    return [
        Step(
            "Installing husky for Git hooks...",
            RunCommand(options.pm, ("install", "husky", "-D"), target.path),
            guard,
        ),
        Step("Initializing husky...", RunCommand("npx", ("husky", "init"), target.path), guard),
        Step(
            "Configuring lint-staged...",
            MergeJsonKey(
                target.resolve(artifacts.MANIFEST_PATH),
                artifacts.LINT_STAGED_KEY,
                dict(artifacts.LINT_STAGED_CONFIG),
            ),
            guard,
        ),
    ]


def _jest_steps(options, target):
    guard = FlagGuard("setup_jest")
    packages = ("jest", "babel-jest", "@testing-library/react", "@testing-library/jest-dom")
    return [
        Step(
            "Installing Jest for testing...",
            RunCommand(options.pm, ("install", "-D", *packages), target.path),
            guard,
        ),
        Step(
            "Configuring Jest...",
            WriteFile(target.resolve(artifacts.JEST_CONFIG_PATH), artifacts.JEST_CONFIG),
            guard,
        ),
    ]


def _dotenv_steps(options, target):
    guard = FlagGuard("setup_dotenv")
    return [
        Step("Installing dotenv...", RunCommand(options.pm, ("install", "dotenv"), target.path), guard),
        Step(
            "Writing .env...",
            WriteFile(target.resolve(artifacts.DOTENV_PATH), artifacts.DOTENV),
            guard,
        ),
    ]


# Fixed order; enabling or disabling a feature never moves the others.
_STEP_GROUPS = [
    _scaffold_steps,
    _tailwind_steps,
    _git_steps,
    _eslint_steps,
    _prettier_steps,
    _library_step("Installing axios...", "setup_axios", ("axios",)),
    _library_step("Installing react-router-dom...", "setup_router", ("react-router-dom",)),
    _husky_steps,
    _library_step(
        "Installing redux and @reduxjs/toolkit...", "setup_redux", ("@reduxjs/toolkit", "react-redux"),
    ),
    _jest_steps,
    _dotenv_steps,
]


def all_steps(options: Options, target: ProjectTarget) -> List[Step]:
    """Every step, mandatory and optional, in execution order."""
    steps = []
    for group in _STEP_GROUPS:
        steps.extend(group(options, target))
    return steps


def build_plan(options: Options, target: ProjectTarget) -> List[Step]:
    """The steps that will actually run for these options."""
    return [step for step in all_steps(options, target) if step.enabled(options)]
