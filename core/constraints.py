import operator
from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, Optional, Sequence, Union

from exceptions.custom_errors import UnsupportedOperatorError

"""
Date constraints between meetings.

A constraint always reads as `left <op> right`. Unary constraints compare a
meeting with a fixed date, binary constraints compare two meetings.
"""

COMPARATORS: Dict[str, Callable[[date, date], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}


def compare_dates(first: date, second: date, op: str) -> bool:
    """Return True if `first <op> second` holds."""
    try:
        return COMPARATORS[op](first, second)
    except KeyError:
        raise UnsupportedOperatorError(f"Unsupported operator '{op}'")


@dataclass(frozen=True)
class UnaryDateConstraint:
    """`meeting[l_val] <op> r_val` where r_val is a fixed date."""

    l_val: int
    op: str
    r_val: date

    @property
    def arity(self) -> int:
        return 1

    def holds_for(self, value: date) -> bool:
        return compare_dates(value, self.r_val, self.op)

    def is_satisfied(self, assignment: Sequence[Optional[date]]) -> bool:
        value = assignment[self.l_val]
        return value is not None and self.holds_for(value)

    def __str__(self) -> str:
        return f"meeting{self.l_val} {self.op} {self.r_val.isoformat()}"


@dataclass(frozen=True)
class BinaryDateConstraint:
    """`meeting[l_val] <op> meeting[r_val]`."""

    l_val: int
    r_val: int
    op: str

    @property
    def arity(self) -> int:
        return 2

    @property
    def is_reflexive(self) -> bool:
        """Both sides refer to the same meeting."""
        return self.l_val == self.r_val

    def holds_for(self, left: date, right: date) -> bool:
        return compare_dates(left, right, self.op)

    def is_satisfied(self, assignment: Sequence[Optional[date]]) -> bool:
        left, right = assignment[self.l_val], assignment[self.r_val]
        if left is None or right is None:
            return False
        return self.holds_for(left, right)

    def __str__(self) -> str:
        return f"meeting{self.l_val} {self.op} meeting{self.r_val}"


DateConstraint = Union[UnaryDateConstraint, BinaryDateConstraint]


def constraint_sort_key(constraint) -> tuple:
    """Stable ordering for constraints coming from an unordered collection."""
    if getattr(constraint, "arity", None) == 1:
        return (1, constraint.l_val, constraint.op, constraint.r_val.toordinal())
    return (2, constraint.l_val, constraint.op, constraint.r_val)
