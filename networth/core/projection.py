from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Sequence, Tuple

MAX_YEARS = 70


# -----------------------------
# Input record
# -----------------------------


@dataclass(frozen=True)
class Assumptions:
    """
    Economic assumptions for one projection run.

    Rates are fractions (0.08 means 8%). Nothing is validated here: out-of-range
    values flow through the arithmetic the same way a spreadsheet would let them.
    """

    current_age: int
    current_net_worth: float
    annual_salary: float
    savings_rate: float
    annual_return: float
    salary_growth_fast: float
    growth_transition_years: int
    salary_growth_stable: float
    inflation_rate: float
    goal_net_worth: float


DEFAULT_ASSUMPTIONS = Assumptions(
    current_age=20,
    current_net_worth=0.0,
    annual_salary=12_000.0,
    savings_rate=0.25,
    annual_return=0.08,
    salary_growth_fast=0.10,
    growth_transition_years=10,
    salary_growth_stable=0.03,
    inflation_rate=0.035,
    goal_net_worth=1_000_000.0,
)


@dataclass(frozen=True)
class YearSnapshot:
    year: int
    age: int
    salary: float  # pre-growth salary for this year
    savings: float
    starting_net_worth: float
    ending_net_worth: float
    ending_net_worth_real: float


Projection = Tuple[YearSnapshot, ...]


# -----------------------------
# Salary growth regimes
# -----------------------------


class GrowthRegime(str, Enum):
    FAST = "fast"
    STABLE = "stable"


def regime_for_year(year: int, transition_years: int) -> GrowthRegime:
    """Regime whose rate takes salary INTO `year` (fast up to and including the transition year)."""
    if year <= transition_years:
        return GrowthRegime.FAST
    return GrowthRegime.STABLE


def rate_for_year(year: int, transition_years: int, fast_rate: float, stable_rate: float) -> float:
    regime = regime_for_year(year, transition_years)
    if regime == GrowthRegime.FAST:
        return fast_rate
    return stable_rate


# -----------------------------
# Recurrence
# -----------------------------


def _compound_factor(rate: float, years: int) -> float:
    """(1 + rate) ** years, saturating to a signed infinity instead of raising OverflowError."""
    base = 1.0 + rate
    try:
        return base ** years
    except OverflowError:
        if base < 0 and years % 2 == 1:
            return -math.inf
        return math.inf


def _deflate(nominal: float, factor: float) -> float:
    # factor is only 0 for inflation_rate == -1 and year > 0
    if factor == 0:
        if nominal == 0:
            return 0.0
        return math.copysign(math.inf, nominal)
    return nominal / factor


def generate_projection(assumptions: Assumptions) -> Projection:
    """
    Build the year-by-year table for years 0..MAX_YEARS (inclusive).

    Order of operations (per year):
      1) savings = salary * savings_rate
      2) contribute savings at START of year, then apply the year's return
      3) deflate the ending balance back to year-0 money
      4) record the row, then grow salary for next year (fast or stable regime)
    """
    rows = []
    salary = float(assumptions.annual_salary)
    starting_net_worth = float(assumptions.current_net_worth)

    for year in range(MAX_YEARS + 1):
        savings = salary * assumptions.savings_rate
        ending_net_worth = (starting_net_worth + savings) * (1 + assumptions.annual_return)
        inflation_factor = _compound_factor(assumptions.inflation_rate, year)

        rows.append(
            YearSnapshot(
                year=year,
                age=assumptions.current_age + year,
                salary=salary,
                savings=savings,
                starting_net_worth=starting_net_worth,
                ending_net_worth=ending_net_worth,
                ending_net_worth_real=_deflate(ending_net_worth, inflation_factor),
            )
        )

        starting_net_worth = ending_net_worth
        growth = rate_for_year(
            year + 1,
            assumptions.growth_transition_years,
            assumptions.salary_growth_fast,
            assumptions.salary_growth_stable,
        )
        salary = salary * (1 + growth)

    return tuple(rows)


# -----------------------------
# Goal search
# -----------------------------


@dataclass(frozen=True)
class GoalCrossing:
    year: int
    age: int


class GoalStatus(str, Enum):
    REACHED = "reached"
    NOT_REACHED = "not_reached"
    DISABLED = "disabled"


@dataclass(frozen=True)
class GoalSummary:
    status: GoalStatus
    goal_net_worth: float
    year: Optional[int] = None
    age: Optional[int] = None
    calendar_year: Optional[int] = None


def find_goal_crossing(projection: Sequence[YearSnapshot], goal_net_worth: float) -> Optional[GoalCrossing]:
    """
    First year whose nominal ending net worth is >= goal, or None.

    Linear scan on purpose: the series is not monotonic once returns or growth
    go negative, so the earliest match wins.
    """
    for row in projection:
        if row.ending_net_worth >= goal_net_worth:
            return GoalCrossing(year=row.year, age=row.age)
    return None


def summarize_goal(
    projection: Sequence[YearSnapshot],
    goal_net_worth: float,
    base_year: Optional[int] = None,
) -> GoalSummary:
    """Goal outcome for display. A non-positive goal means no goal was set."""
    if goal_net_worth <= 0:
        return GoalSummary(status=GoalStatus.DISABLED, goal_net_worth=goal_net_worth)

    crossing = find_goal_crossing(projection, goal_net_worth)
    if crossing is None:
        return GoalSummary(status=GoalStatus.NOT_REACHED, goal_net_worth=goal_net_worth)

    year0 = base_year if base_year is not None else datetime.now().year
    return GoalSummary(
        status=GoalStatus.REACHED,
        goal_net_worth=goal_net_worth,
        year=crossing.year,
        age=crossing.age,
        calendar_year=year0 + crossing.year,
    )


__all__ = [
    "MAX_YEARS",
    "Assumptions",
    "DEFAULT_ASSUMPTIONS",
    "YearSnapshot",
    "Projection",
    "GrowthRegime",
    "regime_for_year",
    "rate_for_year",
    "generate_projection",
    "GoalCrossing",
    "GoalStatus",
    "GoalSummary",
    "find_goal_crossing",
    "summarize_goal",
]
