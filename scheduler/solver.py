import time
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from core.state import Meeting, SolveState
from exceptions.custom_errors import SearchLimitExceededError
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class SolverResult:
    """
    Outcome of one solve.

    Attributes:
        status (str): "solved" or "no-solution".
        assignment (Optional[List[date]]): One date per meeting, or None.
        stats (Dict[str, Any]): Pruning and search counters.
        duration_ms (int): Wall time of the whole pipeline in milliseconds.
        message (str): Human readable outcome.
        state (Optional[SolveState]): The filtered state the search ran on, if any.
    """

    status: str
    assignment: Optional[List[date]]
    stats: Dict[str, Any] = field(default_factory=dict)
    duration_ms: int = 0
    message: str = ""
    state: Optional[SolveState] = field(default=None, repr=False)

    @property
    def solved(self) -> bool:
        return self.assignment is not None


def is_consistent(
    meeting: Meeting, value: date, assignment: List[Optional[date]]
) -> bool:
    """
    Check `value` for `meeting` against its unary constraints and against the
    binary constraints whose other meeting is already assigned. Constraints
    towards unassigned meetings are left for later.
    """
    for constraint in meeting.unary_constraints:
        if not constraint.holds_for(value):
            return False

    for constraint in meeting.binary_constraints:
        if constraint.is_reflexive:
            if not constraint.holds_for(value, value):
                return False
            continue
        other = assignment[meeting.neighbour_of(constraint)]
        if other is None:
            continue
        if meeting.is_left_of(constraint):
            ok = constraint.holds_for(value, other)
        else:
            ok = constraint.holds_for(other, value)
        if not ok:
            return False
    return True


def find_unassigned(assignment: List[Optional[date]], start: int = 0) -> Optional[int]:
    """Index of the first unassigned meeting at or after `start`, or None."""
    for i in range(start, len(assignment)):
        if assignment[i] is None:
            return i
    return None


def backtrack(state: SolveState, max_nodes: Optional[int] = None) -> Optional[List[date]]:
    """
    Chronological backtracking over the (already filtered) domains.

    Meetings are assigned in increasing index order and dates are tried in
    domain order, so the first solution found is always the same one. Each
    stack frame holds a meeting and the iterator over its remaining dates.
    Moving back to a frame resets that meeting to unassigned before its next
    date is tried.

    Returns:
        A new list with one date per meeting, or None if no assignment
        satisfies every constraint.

    Raises:
        SearchLimitExceededError: If more than `max_nodes` tentative
            assignments are made.
    """
    assignment = state.assignment
    stats = state.stats

    first = find_unassigned(assignment)
    if first is None:
        return list(assignment)

    stack = [(first, iter(state.meetings[first].domain))]
    while stack:
        idx, candidates = stack[-1]
        meeting = state.meetings[idx]
        assignment[idx] = None

        chosen = None
        for value in candidates:
            if is_consistent(meeting, value, assignment):
                chosen = value
                break

        if chosen is None:
            stack.pop()
            if stack:
                stats["backtracks"] += 1
            continue

        assignment[idx] = chosen
        stats["nodes"] += 1
        if max_nodes is not None and stats["nodes"] > max_nodes:
            raise SearchLimitExceededError(
                f"❌ Search stopped after {max_nodes} assignments without a result."
            )

        nxt = find_unassigned(assignment, idx + 1)
        if nxt is None:
            return list(assignment)
        stack.append((nxt, iter(state.meetings[nxt].domain)))

    return None


def run_search(state: SolveState, max_nodes: Optional[int] = None) -> SolverResult:
    """Run the backtracking search and wrap the outcome in a SolverResult."""
    logger.info("🚀 Searching over domain sizes %s", state.domain_sizes())
    start = time.perf_counter()
    solution = backtrack(state, max_nodes=max_nodes)
    duration_ms = int((time.perf_counter() - start) * 1000)

    logger.info(
        "⏱ Search finished in %d ms; %d nodes, %d backtracks",
        duration_ms,
        state.stats["nodes"],
        state.stats["backtracks"],
    )
    if solution is None:
        logger.info("⚠️ Search exhausted every candidate date.")
        return SolverResult(
            status="no-solution",
            assignment=None,
            stats=dict(state.stats),
            duration_ms=duration_ms,
            message="No assignment satisfies every constraint.",
            state=state,
        )

    logger.info("✅ Found a schedule for %d meetings.", len(solution))
    return SolverResult(
        status="solved",
        assignment=solution,
        stats=dict(state.stats),
        duration_ms=duration_ms,
        message="Solved successfully.",
        state=state,
    )
