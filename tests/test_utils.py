import math

import pytest

from fightcord.utils import parse_leading_int, parse_number, round_half_up


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("170", 170.0),
        (" 170.5 ", 170.5),
        ("-2", -2.0),
        ("1.", 1.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("0x1A", 26.0),
        ("0b101", 5.0),
        ("0o17", 15.0),
        ("", 0.0),
        ("   ", 0.0),
    ],
)
def test_parse_number_accepts_plain_numerals(raw: str, expected: float) -> None:
    assert parse_number(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["1_000", "１７０", "170,5", "12kg", "inf", "nan", "-", "1e", ".", "-0x1A", "0b2"],
)
def test_parse_number_rejects_what_float_alone_would_take(raw: str) -> None:
    assert math.isnan(parse_number(raw))


def test_parse_number_reads_signed_infinity() -> None:
    assert parse_number("Infinity") == math.inf
    assert parse_number("+Infinity") == math.inf
    assert parse_number("-Infinity") == -math.inf


def test_parse_leading_int_only_reads_ascii_digits() -> None:
    assert parse_leading_int("170.9") == 170.0
    assert parse_leading_int(" -12kg") == -12.0
    assert math.isnan(parse_leading_int("１７０"))
    assert math.isnan(parse_leading_int("kg12"))


def test_round_half_up_rounds_exact_ties_away_from_zero() -> None:
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(-0.125, 2) == -0.13
    assert round_half_up(24.375, 2) == 24.38
    assert round(0.125, 2) == 0.12


def test_round_half_up_uses_the_stored_binary_value() -> None:
    # 1.005 is stored as 1.00499999999999989...
    assert round_half_up(1.005, 2) == 1.0
    assert round_half_up(24.3953, 2) == 24.4


def test_round_half_up_passes_non_finite_values_through() -> None:
    assert math.isnan(round_half_up(math.nan, 2))
    assert round_half_up(math.inf, 2) == math.inf
    assert round_half_up(1e300, 2) == 1e300
