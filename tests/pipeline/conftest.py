"""Shared fixtures for pipeline tests."""

import os
import sys

import pytest

# Put tests/pipeline/ on sys.path so the fakes import unambiguously.
sys.path.insert(0, os.path.dirname(__file__))

from fake_command_runner import FakeCommandRunner  # noqa: E402
from fake_prompt_session import FakePromptSession  # noqa: E402


@pytest.fixture
def command_runner():
    return FakeCommandRunner()


@pytest.fixture
def session():
    return FakePromptSession()
