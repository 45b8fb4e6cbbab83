"""Ask the operator the setup questions and resolve their answers."""

import click

from react_kit.options.options import DEFAULT_PACKAGE_MANAGER, Options, PackageManager

PACKAGE_MANAGER_QUESTION = "Do you prefer npm or pnpm? (default: npm) "

_YES = "y"

# (Options field, question) in the order they are asked.
FLAG_QUESTIONS = [
    ("init_git", "Do you want to initialize a Git repository? (y/n) (default: y) "),
    ("setup_eslint", "Do you want to set up ESLint? (y/n) (default: y) "),
    ("setup_prettier", "Do you want to set up Prettier? (y/n) (default: y) "),
    ("setup_axios", "Do you want to install axios? (y/n) (default: y) "),
    ("setup_router", "Do you want to install react-router-dom? (y/n) (default: y) "),
    ("setup_husky", "Do you want to set up husky for Git hooks? (y/n) (default: y) "),
    ("setup_redux", "Do you want to install redux and @reduxjs/toolkit? (y/n) (default: y) "),
    ("setup_jest", "Do you want to set up Jest for testing? (y/n) (default: y) "),
    ("setup_dotenv", "Do you want to set up dotenv for environment variables? (y/n) (default: y) "),
]


def resolve_answer(raw: str, default: str) -> str:
    """Trim the raw answer and fall back to default when nothing is left."""
    return raw.strip() or default


def resolve_flag(raw: str) -> bool:
    """Empty means yes; otherwise only an exact "y" is yes."""
    return resolve_answer(raw, _YES) == _YES


def resolve_package_manager(raw: str) -> PackageManager:
    answer = resolve_answer(raw, DEFAULT_PACKAGE_MANAGER.value)
    for manager in PackageManager:
        if manager.value == answer:
            return manager
    click.echo(
        f"Unknown package manager '{answer}', using {DEFAULT_PACKAGE_MANAGER.value}.",
        err=True,
    )
    return DEFAULT_PACKAGE_MANAGER


def collect_options(session) -> Options:
    """Ask every question in order and build the Options record.

    Args:
        session: Object with ask(question) -> str (see PromptSession).
    """
    package_manager = resolve_package_manager(session.ask(PACKAGE_MANAGER_QUESTION))
    flags = {name: resolve_flag(session.ask(question)) for name, question in FLAG_QUESTIONS}
    return Options(package_manager=package_manager, **flags)
