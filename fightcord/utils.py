"""Shared numeric helpers used across fightcord modules.

Form values arrive as strings and are never rejected by the engines, so
these primitives parse leniently and let ``nan`` flow through arithmetic
instead of raising.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INFINITY = re.compile(r"([+-]?)Infinity")
_RADIX_INT = re.compile(r"0([xXoObB])([0-9A-Fa-f]+)")
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}
# Every float at or above 2**52 is a whole number.
_INTEGRAL_FLOAT = 2.0**52


def cap(value: float, maximum: float) -> float:
    """Return ``min(value, maximum)``, keeping ``nan`` as ``nan``."""
    if math.isnan(value):
        return value
    return min(maximum, value)


def floor(value: float, minimum: float) -> float:
    """Return ``max(value, minimum)``, keeping ``nan`` as ``nan``."""
    if math.isnan(value):
        return value
    return max(minimum, value)


def parse_number(raw: object) -> float:
    """Parse a whole numeric string the way a JavaScript ``Number()`` call does.

    Surrounding whitespace is ignored and blank strings parse as ``0.0``.
    Accepted forms are ASCII decimals with an optional sign and exponent,
    signed ``Infinity``, and unsigned ``0x``/``0o``/``0b`` integers.
    Anything else yields ``nan``, including ``"1_000"``, ``"inf"`` and
    non-ASCII digits that ``float()`` would accept.
    """
    if isinstance(raw, (int, float)):
        return float(raw)
    text = str(raw).strip()
    if not text:
        return 0.0
    if _DECIMAL.fullmatch(text):
        return float(text)
    match = _INFINITY.fullmatch(text)
    if match is not None:
        return -math.inf if match.group(1) == "-" else math.inf
    match = _RADIX_INT.fullmatch(text)
    if match is not None:
        prefix, digits = match.groups()
        try:
            return float(int(digits, _RADIX_BASES[prefix.lower()]))
        except ValueError:
            return math.nan
    return math.nan


def parse_leading_int(raw: object) -> float:
    """Parse the leading integer of *raw*, ignoring any trailing text.

    ``"170.9"`` gives ``170.0`` and ``"12kg"`` gives ``12.0``.  Returns
    ``nan`` when *raw* does not start with digits.
    """
    if isinstance(raw, (int, float)):
        if isinstance(raw, float) and not math.isfinite(raw):
            return math.nan
        return float(math.trunc(raw))
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return math.nan
    return float(int(match.group(1)))


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: ``x/0`` is ``±inf`` and ``0/0`` is ``nan``."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def round_half_up(value: float, decimals: int) -> float:
    """Round the exact binary value of *value*, sending ties away from zero.

    Matches JavaScript ``toFixed``: ``0.125`` gives ``0.13`` where
    ``round`` gives ``0.12``, while ``1.005`` (stored just below the tie)
    gives ``1.0``.  Non-finite values, and values too large to carry a
    fraction, are returned unchanged.
    """
    if not math.isfinite(value) or abs(value) >= _INTEGRAL_FLOAT:
        return value
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
