"""Progress and outcome messages for a setup run."""

from typing import TextIO

import click

SUCCESS_MESSAGE = "Project setup complete."
FAILURE_PREFIX = "Error setting up project: "


class RunReporter:
    """Writes one line per step, then one success or failure line."""

    def __init__(self, output: TextIO = None, error_output: TextIO = None):
        self._output = output
        self._error_output = error_output

    def step_started(self, step):
        click.secho(step.description, fg="cyan", file=self._output)

    def completed(self, result):
        click.secho(SUCCESS_MESSAGE, fg="green", file=self._output)

    def aborted(self, result):
        click.secho(f"{FAILURE_PREFIX}{result.reason}", fg="red", file=self._error_output, err=True)
