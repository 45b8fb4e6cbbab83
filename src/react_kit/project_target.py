"""Where the new project lives."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PROJECT_NAME = "my-react-app"


@dataclass(frozen=True)
class ProjectTarget:
    """The project name as given, the directory it was given in, and its absolute path."""

    name: str
    launch_dir: Path
    path: Path

    def resolve(self, relative_path: str) -> Path:
        return self.path / relative_path


def resolve_project_target(project_name=None, cwd=None) -> ProjectTarget:
    """Resolve project_name against cwd (defaults: my-react-app, the current directory)."""
    name = project_name or DEFAULT_PROJECT_NAME
    launch_dir = Path(cwd if cwd is not None else os.getcwd()).resolve()
    return ProjectTarget(name=name, launch_dir=launch_dir, path=(launch_dir / name).resolve())
