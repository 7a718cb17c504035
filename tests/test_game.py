from collections.abc import Iterator

import pytest

from fightcord import game
from fightcord.models import Discipline, FightExperience, Personality


def _feed(monkeypatch: pytest.MonkeyPatch, answers: list[str]) -> None:
    replies: Iterator[str] = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(replies))


def _profile_answers(*, weight: str = "100", experience: str = "1", boxing: str = "n") -> list[str]:
    # height, weight, age, gender, athletic, experience, personality, Boxing/Wrestling/MMA
    return ["5'0", weight, "20", "1", "2", experience, "1", boxing, "n", "n"]


def test_prompt_profile_builds_profile_from_answers(monkeypatch: pytest.MonkeyPatch) -> None:
    _feed(monkeypatch, _profile_answers(experience="4", boxing="y"))

    profile = game._prompt_profile("Enter Your Details")

    assert profile.height == "5'0"
    assert profile.age == "20"
    assert profile.fight_experience is FightExperience.FIVE_PLUS
    assert profile.personality is Personality.LAID_BACK
    assert profile.fighting_disciplines == frozenset({Discipline.BOXING})


def test_prompt_profile_reprompts_for_bad_numbers(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    answers = _profile_answers()
    answers[1:2] = ["heavy", "100"]
    answers[3:4] = ["200", "20"]
    _feed(monkeypatch, answers)

    profile = game._prompt_profile("Enter Your Details")
    output = capsys.readouterr().out

    assert profile.weight == "100"
    assert "Please enter a number." in output
    assert "Value must be between 5 and 99." in output


def test_run_prints_analysis_and_quits(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _feed(monkeypatch, ["1", *_profile_answers(), *_profile_answers(), "2"])

    game.run()
    output = capsys.readouterr().out

    assert "Based on the info provided, It could go either way" in output
    assert "Mental Toughness" in output
    assert "Difference +0.00" in output
    assert output.rstrip().endswith("Goodbye.")


def test_main_exits_cleanly_on_end_of_input(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def _eof(_prompt: str = "") -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)

    game.main([])

    assert "Goodbye." in capsys.readouterr().out
