"""Tests for option collection: question order, defaults and y/n resolution."""

import io

import pytest

from react_kit.options.option_collector import (
    FLAG_QUESTIONS,
    PACKAGE_MANAGER_QUESTION,
    collect_options,
    resolve_flag,
    resolve_package_manager,
)
from react_kit.options.options import Options, PackageManager
from react_kit.options.prompt_session import PromptSession

FLAG_NAMES = [name for name, _ in FLAG_QUESTIONS]


def _collect(answers):
    output = io.StringIO()
    text = "".join(f"{answer}\n" for answer in answers)
    session = PromptSession(input_stream=io.StringIO(text), output=output)
    return collect_options(session), output.getvalue()


@pytest.mark.unit
class TestResolveFlag:

    @pytest.mark.parametrize("raw", ["", "   ", "\t"])
    def test_empty_answer_defaults_to_yes(self, raw):
        assert resolve_flag(raw) is True

    def test_y_is_yes(self):
        assert resolve_flag("y") is True

    def test_surrounding_whitespace_is_trimmed(self):
        assert resolve_flag("  y ") is True

    @pytest.mark.parametrize("raw", ["n", "N", "Y", "yes", "no", "1", "maybe"])
    def test_anything_else_is_no(self, raw):
        assert resolve_flag(raw) is False


@pytest.mark.unit
class TestResolvePackageManager:

    def test_empty_defaults_to_npm(self):
        assert resolve_package_manager("") is PackageManager.NPM

    def test_pnpm(self):
        assert resolve_package_manager(" pnpm ") is PackageManager.PNPM

    def test_npm(self):
        assert resolve_package_manager("npm") is PackageManager.NPM

    def test_unknown_falls_back_to_npm_with_notice(self, capsys):
        assert resolve_package_manager("yarn") is PackageManager.NPM
        assert "yarn" in capsys.readouterr().err


@pytest.mark.unit
class TestCollectOptions:

    def test_all_empty_answers_give_defaults(self):
        options, _ = _collect([""] * 10)
        assert options == Options()

    def test_closed_input_gives_defaults(self):
        options, _ = _collect([])
        assert options == Options()

    def test_asks_questions_in_order(self):
        _, displayed = _collect([""] * 10)
        questions = [PACKAGE_MANAGER_QUESTION] + [q for _, q in FLAG_QUESTIONS]
        assert displayed == "".join(questions)

    def test_one_question_per_flag(self):
        assert len(FLAG_QUESTIONS) == 9

    def test_all_no(self):
        options, _ = _collect(["pnpm"] + ["n"] * 9)
        assert options.package_manager is PackageManager.PNPM
        assert not any(getattr(options, name) for name in FLAG_NAMES)

    @pytest.mark.parametrize("index", range(9))
    def test_each_answer_maps_to_its_own_flag(self, index):
        answers = [""] + ["y"] * 9
        answers[index + 1] = "n"
        options, _ = _collect(answers)
        for i, name in enumerate(FLAG_NAMES):
            assert getattr(options, name) is (i != index)

    def test_options_are_immutable(self):
        options, _ = _collect([])
        with pytest.raises(AttributeError):
            options.init_git = False
