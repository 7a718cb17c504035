import math

import pytest

from fightcord.modules.body_metrics import compute_bmi, height_in_inches, parse_height


def test_compute_bmi_matches_reference_height_and_weight() -> None:
    assert compute_bmi("5'10", "170") == pytest.approx(24.39, abs=0.01)


def test_parse_height_defaults_missing_inches_to_zero() -> None:
    assert parse_height("6") == (6.0, 0.0)
    assert parse_height("5'") == (5.0, 0.0)
    assert height_in_inches("6") == 72.0


def test_parse_height_treats_unparseable_inches_as_zero() -> None:
    assert parse_height("5'10\"") == (5.0, 0.0)


def test_compute_bmi_propagates_nan_for_malformed_input() -> None:
    assert math.isnan(compute_bmi("tall", "170"))
    assert math.isnan(compute_bmi("5'10", "heavy"))


def test_compute_bmi_zero_height_divides_without_raising() -> None:
    assert compute_bmi("0'0", "170") == math.inf
    assert math.isnan(compute_bmi("0", "0"))
