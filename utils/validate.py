from datetime import date, datetime
from typing import Iterable, List

from exceptions.custom_errors import (
    InvalidConstraintDateError,
    InvalidDateRangeError,
    InvalidMeetingCountError,
    InvalidMeetingIndexError,
    UnsupportedArityError,
    UnsupportedOperatorError,
)
from utils.constants import OPERATORS


def validate_input_params(n_meetings: int, range_start: date, range_end: date):
    """
    Validate the problem size and the scheduling range.

    Raises:
        InvalidMeetingCountError: If the number of meetings is negative.
        InvalidDateRangeError: If the range ends before it starts.
    """
    if n_meetings < 0:
        raise InvalidMeetingCountError(
            f"❌ Number of meetings must be zero or more, got {n_meetings}."
        )
    if range_start > range_end:
        raise InvalidDateRangeError(
            f"❌ Range end {range_end} is before range start {range_start}."
        )


def validate_constraint(constraint, n_meetings: int):
    """
    Validate a single constraint against the number of meetings.

    Raises:
        UnsupportedArityError: If the constraint is neither unary nor binary.
        UnsupportedOperatorError: If the operator is not one of OPERATORS.
        InvalidMeetingIndexError: If a referenced meeting is outside [0, n_meetings).
        InvalidConstraintDateError: If a unary constraint's fixed value is not a date.
    """
    arity = getattr(constraint, "arity", None)
    if arity not in (1, 2):
        raise UnsupportedArityError(
            f"❌ Unsupported constraint arity {arity!r} in {constraint!r}"
        )

    if arity == 1:
        value = constraint.r_val
        if isinstance(value, datetime) or not isinstance(value, date):
            raise InvalidConstraintDateError(
                f"❌ Unary constraint on meeting {constraint.l_val!r} compares with {value!r}, "
                "expected a calendar date"
            )

    if constraint.op not in OPERATORS:
        raise UnsupportedOperatorError(
            f"❌ Unsupported operator '{constraint.op}' in {constraint}. "
            f"Expected one of {', '.join(OPERATORS)}"
        )

    indices = [constraint.l_val] if arity == 1 else [constraint.l_val, constraint.r_val]
    for idx in indices:
        if isinstance(idx, bool) or not isinstance(idx, int) or not 0 <= idx < n_meetings:
            raise InvalidMeetingIndexError(
                f"❌ Constraint {constraint} references meeting {idx!r}, "
                f"valid indices are 0..{n_meetings - 1}"
            )


def validate_constraints(constraints: Iterable, n_meetings: int) -> List:
    """Validate every constraint and return them as a list."""
    checked = []
    for constraint in constraints:
        validate_constraint(constraint, n_meetings)
        checked.append(constraint)
    return checked
