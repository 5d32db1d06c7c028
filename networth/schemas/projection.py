"""Data contracts for the projection endpoints."""

from __future__ import annotations

import math
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from networth.core.inputs import PERCENT_FIELDS, parse_decimal, percent_to_fraction
from networth.core.projection import Assumptions, GoalSummary, YearSnapshot


class AssumptionsIn(BaseModel):
    """Form values for one projection. Rates are fractions unless the request says otherwise."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    currentAge: int = Field(ge=0)
    currentNetWorth: float
    annualSalary: float = Field(ge=0)
    savingsRate: float
    annualReturn: float
    salaryGrowthFast: float
    growthTransitionYears: int = Field(ge=0)
    salaryGrowthStable: float
    inflationRate: float
    goalNetWorth: float

    @field_validator(
        "currentNetWorth",
        "annualSalary",
        "savingsRate",
        "annualReturn",
        "salaryGrowthFast",
        "salaryGrowthStable",
        "inflationRate",
        "goalNetWorth",
        mode="before",
    )
    @classmethod
    def _accept_decimal_comma(cls, value):
        return parse_decimal(value)

    @classmethod
    def from_assumptions(cls, assumptions: Assumptions) -> "AssumptionsIn":
        return cls(
            currentAge=assumptions.current_age,
            currentNetWorth=assumptions.current_net_worth,
            annualSalary=assumptions.annual_salary,
            savingsRate=assumptions.savings_rate,
            annualReturn=assumptions.annual_return,
            salaryGrowthFast=assumptions.salary_growth_fast,
            growthTransitionYears=assumptions.growth_transition_years,
            salaryGrowthStable=assumptions.salary_growth_stable,
            inflationRate=assumptions.inflation_rate,
            goalNetWorth=assumptions.goal_net_worth,
        )

    def to_assumptions(self, percent_inputs: bool = False) -> Assumptions:
        values = self.model_dump()
        if percent_inputs:
            for field in PERCENT_FIELDS:
                values[field] = percent_to_fraction(values[field])

        return Assumptions(
            current_age=values["currentAge"],
            current_net_worth=values["currentNetWorth"],
            annual_salary=values["annualSalary"],
            savings_rate=values["savingsRate"],
            annual_return=values["annualReturn"],
            salary_growth_fast=values["salaryGrowthFast"],
            growth_transition_years=values["growthTransitionYears"],
            salary_growth_stable=values["salaryGrowthStable"],
            inflation_rate=values["inflationRate"],
            goal_net_worth=values["goalNetWorth"],
        )


class ProjectionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    assumptions: AssumptionsIn
    percentInputs: bool = False
    baseYear: Optional[int] = Field(default=None, ge=1900, le=3000)


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


class YearRow(BaseModel):
    """Single row of the projection table."""

    year: int = Field(..., ge=0)
    age: int
    salary: float
    savings: float
    startingNetWorth: float
    endingNetWorth: float
    endingNetWorthReal: float

    # degenerate rates can produce inf/nan, which JSON cannot carry
    @field_serializer(
        "salary",
        "savings",
        "startingNetWorth",
        "endingNetWorth",
        "endingNetWorthReal",
    )
    def _serialize_amount(self, value: float) -> Optional[float]:
        return _finite_or_none(value)

    @classmethod
    def from_snapshot(cls, snapshot: YearSnapshot) -> "YearRow":
        return cls(
            year=snapshot.year,
            age=snapshot.age,
            salary=snapshot.salary,
            savings=snapshot.savings,
            startingNetWorth=snapshot.starting_net_worth,
            endingNetWorth=snapshot.ending_net_worth,
            endingNetWorthReal=snapshot.ending_net_worth_real,
        )


class GoalOut(BaseModel):
    status: Literal["reached", "not_reached", "disabled"]
    goalNetWorth: float
    yearsToGoal: Optional[int] = None
    ageAtGoal: Optional[int] = None
    calendarYear: Optional[int] = None

    @classmethod
    def from_summary(cls, summary: GoalSummary) -> "GoalOut":
        return cls(
            status=summary.status.value,
            goalNetWorth=summary.goal_net_worth,
            yearsToGoal=summary.year,
            ageAtGoal=summary.age,
            calendarYear=summary.calendar_year,
        )


class ProjectionResponse(BaseModel):
    """Projected table plus the goal outcome."""

    rows: List[YearRow]
    goal: GoalOut
