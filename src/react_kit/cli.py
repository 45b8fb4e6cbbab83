"""Click command for react-kit."""

import sys

import click

from react_kit.project_target import DEFAULT_PROJECT_NAME
from react_kit.setup_project import run_setup


@click.command("react-kit")
@click.argument("project_name", required=False, default=DEFAULT_PROJECT_NAME)
def main(project_name):
    """Create a Vite + React project with Tailwind CSS and optional tooling.

    PROJECT_NAME is the directory to create (default: my-react-app).
    """
    result = run_setup(project_name)
    if not result.succeeded:
        sys.exit(1)
