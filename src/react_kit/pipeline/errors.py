"""Expected step failures. Anything else raised during a run is a bug."""


class StepError(Exception):
    """A step could not be completed; the run must stop."""


class CommandFailedError(StepError):
    """An external command exited abnormally or could not be started."""

    def __init__(self, command, args=(), returncode=None, detail=None):
        self.command = command
        self.args_list = list(args)
        self.returncode = returncode
        self.detail = detail
        command_line = " ".join([command, *self.args_list])
        if returncode is None:
            message = f"Command not found: {command}"
        else:
            message = f"Command failed with exit code {returncode}: {command_line}"
        if detail:
            message += f"\n{detail}"
        super().__init__(message)


class ManifestMergeError(StepError):
    """The existing JSON manifest could not be parsed or is not an object."""

    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"Cannot update {path}: {reason}")
