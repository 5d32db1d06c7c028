from __future__ import annotations

from dataclasses import replace

from networth.core.projection import (
    DEFAULT_ASSUMPTIONS,
    GoalCrossing,
    GoalStatus,
    YearSnapshot,
    find_goal_crossing,
    generate_projection,
    summarize_goal,
)


def make_rows(ending_values: list, start_age: int = 30) -> list:
    rows = []
    starting = 0.0
    for year, ending in enumerate(ending_values):
        rows.append(
            YearSnapshot(
                year=year,
                age=start_age + year,
                salary=0.0,
                savings=0.0,
                starting_net_worth=starting,
                ending_net_worth=ending,
                ending_net_worth_real=ending,
            )
        )
        starting = ending
    return rows


def test_first_year_at_or_above_goal_wins():
    rows = generate_projection(DEFAULT_ASSUMPTIONS)
    assert rows[30].ending_net_worth < rows[31].ending_net_worth

    goal = (rows[30].ending_net_worth + rows[31].ending_net_worth) / 2
    crossing = find_goal_crossing(rows, goal)

    assert crossing == GoalCrossing(year=31, age=51)


def test_exact_match_counts_as_crossing():
    rows = make_rows([100.0, 200.0, 300.0])

    assert find_goal_crossing(rows, 200.0) == GoalCrossing(year=1, age=31)


def test_non_monotonic_series_returns_earliest_match():
    """
    A dip after the first crossing must not move the answer.
    """
    rows = make_rows([10.0, 50.0, 20.0, 60.0])

    assert find_goal_crossing(rows, 40.0) == GoalCrossing(year=1, age=31)
    assert find_goal_crossing(rows, 55.0) == GoalCrossing(year=3, age=33)


def test_goal_above_horizon_maximum_is_not_reached():
    rows = generate_projection(DEFAULT_ASSUMPTIONS)
    goal = max(row.ending_net_worth for row in rows) + 1.0

    assert find_goal_crossing(rows, goal) is None


def test_non_positive_goal_is_matched_literally():
    rows = generate_projection(DEFAULT_ASSUMPTIONS)

    assert find_goal_crossing(rows, 0.0) == GoalCrossing(year=0, age=20)
    assert find_goal_crossing(rows, -1000.0) == GoalCrossing(year=0, age=20)


def test_nan_values_never_match():
    rows = make_rows([float("nan"), 10.0])

    assert find_goal_crossing(rows, 5.0) == GoalCrossing(year=1, age=31)
    assert find_goal_crossing(rows, float("nan")) is None


def test_summary_reached_includes_calendar_year():
    rows = generate_projection(DEFAULT_ASSUMPTIONS)
    crossing = find_goal_crossing(rows, DEFAULT_ASSUMPTIONS.goal_net_worth)
    summary = summarize_goal(rows, DEFAULT_ASSUMPTIONS.goal_net_worth, base_year=2025)

    assert crossing is not None
    assert summary.status == GoalStatus.REACHED
    assert summary.year == crossing.year
    assert summary.age == crossing.age
    assert summary.calendar_year == 2025 + crossing.year


def test_summary_not_reached_is_distinct_from_year_zero():
    rows = generate_projection(replace(DEFAULT_ASSUMPTIONS, annual_salary=0.0))
    summary = summarize_goal(rows, 1_000_000.0, base_year=2025)

    assert summary.status == GoalStatus.NOT_REACHED
    assert summary.year is None
    assert summary.age is None
    assert summary.calendar_year is None


def test_summary_disables_non_positive_goal():
    rows = generate_projection(DEFAULT_ASSUMPTIONS)

    for goal in (0.0, -250.0):
        summary = summarize_goal(rows, goal, base_year=2025)
        assert summary.status == GoalStatus.DISABLED
        assert summary.year is None
        assert summary.goal_net_worth == goal


def test_default_goal_of_one_million_returns_earliest_year():
    rows = generate_projection(DEFAULT_ASSUMPTIONS)
    crossing = find_goal_crossing(rows, 1_000_000)

    assert crossing is not None
    year = crossing.year
    assert year > 0
    assert rows[year - 1].ending_net_worth < 1_000_000 <= rows[year].ending_net_worth
    assert all(row.ending_net_worth < 1_000_000 for row in rows[:year])
    assert crossing.age == DEFAULT_ASSUMPTIONS.current_age + year
