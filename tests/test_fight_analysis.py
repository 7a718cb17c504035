import pytest

from fightcord.models import FighterProfile
from fightcord.modules.fight_analysis import analyze_fight, format_stat_value, stat_lines
from fightcord.modules.fighter_form import build_profile


def _profile(**overrides: object) -> FighterProfile:
    fields: dict[str, object] = {
        "height": "5'10",
        "weight": "170",
        "age": "25",
        "gender": "Male",
        "athletic": "Yes",
        "fight_experience": "One",
        "personality": "Laid back/Chill",
    }
    fields.update(overrides)
    return build_profile(**fields)


def test_identical_fighters_could_go_either_way() -> None:
    analysis = analyze_fight(_profile(), _profile())

    assert analysis.score_difference == pytest.approx(0.0)
    assert analysis.verdict == "It could go either way"
    assert analysis.headline == "Based on the info provided, It could go either way"


def test_experienced_fighter_beats_novice() -> None:
    veteran = _profile(
        fight_experience="5+ Fights",
        personality="Aggressive/Outspoken",
        fighting_disciplines=["Boxing", "MMA"],
    )
    novice = _profile(fight_experience="None", personality="Pacifist/Non-confrontational")

    analysis = analyze_fight(veteran, novice)

    assert analysis.user_score > analysis.opponent_score
    assert analysis.verdict == "You would win easily"
    assert analysis.headline == "Based on the information provided, You would win easily"
    assert analyze_fight(novice, veteran).verdict == "You will get destroyed, do not fight them"


def test_comparison_rows_follow_chart_order() -> None:
    analysis = analyze_fight(_profile(), _profile(age="40"))
    rows = analysis.comparison_rows()

    assert [label for label, _, _ in rows] == [
        "Strength",
        "Speed",
        "Technique",
        "Experience",
        "Endurance",
        "Agility",
        "Power",
        "Mental Toughness",
    ]
    speed_row = rows[1]
    assert speed_row[1] == pytest.approx(analysis.user_stats.speed)
    assert speed_row[2] == pytest.approx(analysis.opponent_stats.speed)
    assert speed_row[1] > speed_row[2]


def test_stat_lines_render_one_decimal() -> None:
    analysis = analyze_fight(_profile(), _profile())
    lines = stat_lines(analysis.user_stats)

    assert lines[0] == "Strength: 68.0"
    assert lines[-1] == "Bmi: 24.4"
    assert format_stat_value(62.26) == "62.3"
