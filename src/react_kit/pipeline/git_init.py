"""Initialize the project's Git repository."""

from react_kit.pipeline.errors import CommandFailedError


def init_repository(path):
    """Run git init in path.

    GitPython is imported here: it checks for a git executable at import
    time, and Git is only needed when the operator asked for it.
    """
    try:
        from git import Repo
        from git.exc import GitCommandError, GitCommandNotFound
    except ImportError as exc:
        raise CommandFailedError("git", ("init",), detail=str(exc)) from exc

    try:
        return Repo.init(str(path))
    except GitCommandNotFound as exc:
        raise CommandFailedError("git", ("init",)) from exc
    except GitCommandError as exc:
        detail = exc.stderr.strip() if isinstance(exc.stderr, str) else None
        raise CommandFailedError("git", ("init",), exc.status, detail=detail) from exc
