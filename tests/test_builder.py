"""Tests for build_schedule, the extractor helpers and the CP-SAT engine."""

import pandas as pd
import pytest

from conftest import START, day
from core.constraints import BinaryDateConstraint, UnaryDateConstraint
from exceptions.custom_errors import NoFeasibleSolutionError, UnsupportedOperatorError
from scheduler.builder import build_schedule, solve_schedule
from scheduler.cpsat import solve_with_cp_sat
from scheduler.extractor import (
    check_assignment,
    extract_day_view,
    extract_schedule,
    extract_summary,
)


class TestBuildSchedule:
    def test_returns_a_table_and_metrics(self):
        schedule, metrics = build_schedule(2, START, day(4), [BinaryDateConstraint(0, 1, "!=")])
        assert isinstance(schedule, pd.DataFrame)
        assert list(schedule.columns) == ["Meeting", "Date", "Day"]
        assert schedule["Date"].tolist() == ["2025-07-07", "2025-07-08"]
        assert schedule["Day"].tolist() == ["Monday", "Tuesday"]
        assert metrics["Status"] == "solved"
        assert metrics["Engine"] == "backtracking"

    def test_metrics_report_filtered_domains(self):
        _, metrics = build_schedule(2, START, day(2), [BinaryDateConstraint(0, 1, "<")])
        assert metrics["Meetings"] == 2
        assert metrics["Range Days"] == 3
        assert metrics["Domain Sizes"] == [2, 2]

    def test_infeasible_raises(self):
        constraints = [UnaryDateConstraint(0, "==", day(3)), BinaryDateConstraint(0, 1, "<")]
        with pytest.raises(NoFeasibleSolutionError):
            build_schedule(2, START, day(3), constraints)

    def test_generator_input_is_read_once(self):
        constraints = (BinaryDateConstraint(0, 1, "<") for _ in range(1))
        schedule, _ = build_schedule(2, START, day(1), constraints)
        assert schedule["Date"].tolist() == ["2025-07-07", "2025-07-08"]

    def test_cp_sat_engine(self):
        constraints = [BinaryDateConstraint(0, 1, "<"), BinaryDateConstraint(1, 2, "<")]
        schedule, metrics = build_schedule(3, START, day(2), constraints, engine="cp-sat")
        assert schedule["Date"].tolist() == ["2025-07-07", "2025-07-08", "2025-07-09"]
        assert metrics["Engine"] == "cp-sat"

    def test_cp_sat_engine_infeasible(self):
        constraints = [BinaryDateConstraint(0, 1, "<"), BinaryDateConstraint(1, 0, "<")]
        with pytest.raises(NoFeasibleSolutionError):
            build_schedule(2, START, day(5), constraints, engine="cp-sat")

    def test_unknown_engine(self):
        with pytest.raises(ValueError):
            build_schedule(1, START, day(1), [], engine="annealing")

    def test_unknown_propagation(self):
        with pytest.raises(ValueError):
            solve_schedule(1, START, day(1), [], propagation="path")


class TestCpSat:
    def test_unary_constraints_outside_the_range(self):
        constraints = [UnaryDateConstraint(0, ">", day(-3)), UnaryDateConstraint(0, "<", day(1))]
        assert solve_with_cp_sat(1, START, day(4), constraints) == [day(0)]

    def test_reflexive_constraints(self):
        assert solve_with_cp_sat(1, START, day(2), [BinaryDateConstraint(0, 0, "!=")]) is None
        assert solve_with_cp_sat(1, START, day(0), [BinaryDateConstraint(0, 0, ">=")]) == [day(0)]

    def test_validates_input(self):
        with pytest.raises(UnsupportedOperatorError):
            solve_with_cp_sat(2, START, day(1), [BinaryDateConstraint(0, 1, "~")])


class TestExtractor:
    def test_check_assignment_lists_violations(self):
        constraints = [
            BinaryDateConstraint(0, 1, "<"),
            UnaryDateConstraint(1, "==", day(2)),
        ]
        violations = check_assignment([day(3), day(2)], constraints)
        assert len(violations) == 1
        assert violations[0].startswith("meeting0 < meeting1")

    def test_check_assignment_accepts_a_valid_schedule(self):
        assert check_assignment([day(0), day(1)], [BinaryDateConstraint(0, 1, "!=")]) == []

    def test_empty_schedule_table(self):
        schedule = extract_schedule([])
        assert schedule.empty
        assert list(schedule.columns) == ["Meeting", "Date", "Day"]

    def test_day_view_groups_meetings(self):
        view = extract_day_view([day(1), day(0), day(1)])
        assert view == {"Mon 2025-07-07": [1], "Tue 2025-07-08": [0, 2]}

    def test_summary_with_state(self):
        constraints = [BinaryDateConstraint(0, 1, "<")]
        result = solve_schedule(2, START, day(2), constraints)
        metrics = extract_summary(result, result.state)
        assert metrics["Status"] == "solved"
        assert metrics["Meetings"] == 2
        assert metrics["Range Days"] == 3
        assert metrics["Arc Pruned"] == 2
        # sizes after filtering, not the full three-day range
        assert metrics["Domain Sizes"] == [2, 2]
        assert metrics["Meetings Per Day"] == {"Mon 2025-07-07": 1, "Tue 2025-07-08": 1}
