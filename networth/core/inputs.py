"""Normalisation of raw form values before they reach the projection engine."""

from __future__ import annotations

import math
from typing import Union

# Rate fields the form shows as percentages (0-100) instead of fractions.
PERCENT_FIELDS = (
    "savingsRate",
    "annualReturn",
    "salaryGrowthFast",
    "salaryGrowthStable",
    "inflationRate",
)


class InputParseError(ValueError):
    pass


def parse_decimal(value: Union[str, int, float]) -> float:
    """
    Convert a form value into a float.

    Strings may use a decimal comma ("3,5" -> 3.5). Only the first comma is
    swapped, so "1,000,000" is rejected rather than silently misread.
    """
    if isinstance(value, bool):
        raise InputParseError("expected a number, got a boolean")

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError as exc:
            raise InputParseError("number is too large") from exc
    elif isinstance(value, str):
        text = value.strip().replace(",", ".", 1)
        if not text:
            raise InputParseError("expected a number, got an empty string")
        try:
            number = float(text)
        except ValueError as exc:
            raise InputParseError(f"not a number: {value!r}") from exc
    else:
        raise InputParseError(f"expected a number, got {type(value).__name__}")

    if not math.isfinite(number):
        raise InputParseError(f"number must be finite: {value!r}")
    return number


def percent_to_fraction(value: float) -> float:
    return value / 100.0
