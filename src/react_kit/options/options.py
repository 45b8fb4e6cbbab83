"""Options record collected from the operator once per run."""

from dataclasses import dataclass
from enum import Enum


class PackageManager(Enum):
    NPM = "npm"
    PNPM = "pnpm"


DEFAULT_PACKAGE_MANAGER = PackageManager.NPM


@dataclass(frozen=True)
class Options:
    """All answers that decide which setup steps run."""

    package_manager: PackageManager = DEFAULT_PACKAGE_MANAGER
    init_git: bool = True
    setup_eslint: bool = True
    setup_prettier: bool = True
    setup_axios: bool = True
    setup_router: bool = True
    setup_husky: bool = True
    setup_redux: bool = True
    setup_jest: bool = True
    setup_dotenv: bool = True

    @property
    def pm(self) -> str:
        """Executable name of the chosen package manager."""
        return self.package_manager.value
