from typing import Iterable, List

from core.constraints import DateConstraint, constraint_sort_key
from core.state import Meeting, SolveState
from utils.date_utils import date_range, normalise_date
from utils.validate import validate_constraints, validate_input_params
from utils.logger import get_logger

logger = get_logger(__name__)


def order_constraints(
    constraints: Iterable[DateConstraint], n_meetings: int
) -> List[DateConstraint]:
    """
    Validate the constraints and fix the order in which they are attached.

    Sequences keep their given order. Sets are sorted so that repeated solves
    over the same input behave identically.
    """
    checked = validate_constraints(constraints, n_meetings)
    if isinstance(constraints, (set, frozenset)):
        checked.sort(key=constraint_sort_key)
    return checked


def setup_state(
    n_meetings: int,
    range_start,
    range_end,
    constraints: Iterable[DateConstraint],
) -> SolveState:
    """
    Build the meetings, their initial domains and attached constraints.

    Every meeting starts with the whole inclusive date range. Unary constraints
    are attached to their meeting, binary constraints to both endpoints (once
    if both sides are the same meeting). All input checks run here, before any
    filtering.

    Args:
        n_meetings (int): Number of meetings, indexed 0..n_meetings-1.
        range_start: First allowed date (inclusive).
        range_end: Last allowed date (inclusive).
        constraints: Unary and binary date constraints.

    Returns:
        SolveState: The state with full domains and an all-unassigned assignment.
    """
    start, end = normalise_date(range_start), normalise_date(range_end)
    validate_input_params(n_meetings, start, end)
    checked = order_constraints(constraints, n_meetings)

    days = date_range(start, end)
    meetings = [Meeting(index=i, domain=list(days)) for i in range(n_meetings)]

    for c in checked:
        if c.arity == 1:
            meetings[c.l_val].unary_constraints.append(c)
        else:
            meetings[c.l_val].binary_constraints.append(c)
            if not c.is_reflexive:
                meetings[c.r_val].binary_constraints.append(c)

    n_unary = sum(1 for c in checked if c.arity == 1)
    logger.info(
        "📋 Built %d meetings over %d days (%s → %s) with %d unary and %d binary constraints",
        n_meetings,
        len(days),
        start,
        end,
        n_unary,
        len(checked) - n_unary,
    )

    return SolveState(
        meetings=meetings,
        range_start=start,
        range_end=end,
        constraints=checked,
        assignment=[None] * n_meetings,
    )
