from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from core.constraints import BinaryDateConstraint, DateConstraint, UnaryDateConstraint


@dataclass
class Meeting:
    """
    A meeting-variable of the scheduling problem.
    """

    index: int
    """Position of the meeting in the assignment, in [0, N)."""
    domain: List[date]
    """Candidate dates still considered possible, in ascending order."""
    unary_constraints: List[UnaryDateConstraint] = field(default_factory=list)
    """Constraints comparing this meeting with a fixed date."""
    binary_constraints: List[BinaryDateConstraint] = field(default_factory=list)
    """Constraints where this meeting is the left or the right operand."""

    def is_left_of(self, constraint: BinaryDateConstraint) -> bool:
        return constraint.l_val == self.index

    def neighbour_of(self, constraint: BinaryDateConstraint) -> int:
        """Index of the meeting on the other side of the constraint."""
        return constraint.r_val if self.is_left_of(constraint) else constraint.l_val

    def remove_dates(self, dates) -> int:
        """Drop the given dates from the domain, keeping order. Returns how many were removed."""
        drop = set(dates)
        if not drop:
            return 0
        before = len(self.domain)
        self.domain = [d for d in self.domain if d not in drop]
        return before - len(self.domain)


@dataclass
class SolveState:
    """
    A dataclass to hold all the state relevant to solving one meeting
    scheduling problem. Built once per solve call and discarded afterwards.
    """

    meetings: List[Meeting]
    """One entry per meeting, indexed by meeting number."""
    range_start: date
    """The first date (inclusive) of every initial domain."""
    range_end: date
    """The last date (inclusive) of every initial domain."""
    constraints: List[DateConstraint]
    """All constraints in the order they were attached."""
    assignment: List[Optional[date]] = field(default_factory=list)
    """The assignment vector owned by the search; None marks an unassigned slot."""
    stats: Dict[str, Any] = field(
        default_factory=lambda: {
            "node_pruned": 0,
            "arc_pruned": 0,
            "nodes": 0,
            "backtracks": 0,
        }
    )
    """Counters collected while filtering and searching."""

    @property
    def num_meetings(self) -> int:
        return len(self.meetings)

    def empty_meetings(self) -> List[int]:
        """Indices of meetings whose domain has been emptied."""
        return [m.index for m in self.meetings if not m.domain]

    def domain_sizes(self) -> List[int]:
        return [len(m.domain) for m in self.meetings]
