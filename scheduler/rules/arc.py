from collections import deque
from datetime import date
from typing import List, Sequence

from core.constraints import BinaryDateConstraint
from core.state import Meeting, SolveState
from exceptions.custom_errors import UnsupportedOperatorError
from utils.logger import get_logger

"""
This module contains the arc consistency filters for the meeting scheduling problem.

`arc_consistency_rule` is a single sweep over the meetings in index order.
`ac3_rule` keeps revising arcs until nothing changes. Both only drop dates
without support, so neither removes a date that belongs to some solution.
"""

logger = get_logger(__name__)

# `u <op> d` holds exactly when `d <flipped op> u` holds
FLIPPED = {"==": "==", "!=": "!=", "<": ">", "<=": ">=", ">": "<", ">=": "<="}


def has_support(value: date, op: str, others: Sequence[date]) -> bool:
    """
    Return True if some `u` in `others` satisfies `value <op> u`.

    `others` must be sorted ascending, which every domain is.
    """
    if not others:
        return False
    if op == "==":
        return value in others
    if op == "!=":
        return others[0] != value or others[-1] != value
    if op == "<":
        return value < others[-1]
    if op == "<=":
        return value <= others[-1]
    if op == ">":
        return value > others[0]
    if op == ">=":
        return value >= others[0]
    raise UnsupportedOperatorError(f"Unsupported operator '{op}'")


def revise(
    state: SolveState, meeting: Meeting, constraint: BinaryDateConstraint
) -> List[date]:
    """
    Return the dates of `meeting` that have no supporting date in the other
    meeting of `constraint`, respecting which side `meeting` is on.
    """
    if constraint.is_reflexive:
        return [d for d in meeting.domain if not constraint.holds_for(d, d)]

    neighbour = state.meetings[meeting.neighbour_of(constraint)]
    op = constraint.op if meeting.is_left_of(constraint) else FLIPPED[constraint.op]
    others = neighbour.domain
    if op == "==":
        others = set(others)
        return [d for d in meeting.domain if d not in others]
    return [d for d in meeting.domain if not has_support(d, op, others)]


def arc_consistency_rule(state: SolveState):
    """
    One pass of arc consistency, meetings visited in index order.

    Each meeting is checked against the domains of its neighbours as they
    stand when the meeting is reached. Pruning a later meeting does not
    revisit meetings already processed.
    """
    pruned = 0
    for meeting in state.meetings:
        inconsistent = []
        for constraint in meeting.binary_constraints:
            inconsistent.extend(revise(state, meeting, constraint))
        pruned += meeting.remove_dates(inconsistent)
        if not meeting.domain:
            logger.info("Meeting %d has no supported date left", meeting.index)
            break

    state.stats["arc_pruned"] += pruned
    logger.info("Arc consistency (single pass) removed %d date(s)", pruned)


def ac3_rule(state: SolveState):
    """
    Arc consistency to a fixpoint with a propagation queue (AC-3).

    Whenever a meeting loses dates, every arc pointing at it is queued again.
    """
    queue = deque(
        (meeting.index, constraint)
        for meeting in state.meetings
        for constraint in meeting.binary_constraints
    )
    queued = set(queue)
    pruned = 0

    while queue:
        arc = queue.popleft()
        queued.discard(arc)
        idx, constraint = arc
        meeting = state.meetings[idx]

        removed = meeting.remove_dates(revise(state, meeting, constraint))
        if not removed:
            continue
        pruned += removed
        if not meeting.domain:
            logger.info("Meeting %d has no supported date left", idx)
            break

        for other in meeting.binary_constraints:
            if other is constraint or other.is_reflexive:
                continue
            neighbour_arc = (meeting.neighbour_of(other), other)
            if neighbour_arc not in queued:
                queue.append(neighbour_arc)
                queued.add(neighbour_arc)

    state.stats["arc_pruned"] += pruned
    logger.info("Arc consistency (AC-3) removed %d date(s)", pruned)
