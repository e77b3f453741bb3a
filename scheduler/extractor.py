from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Sequence

import pandas as pd

from core.constraints import DateConstraint
from core.state import SolveState
from scheduler.solver import SolverResult
from utils.constants import DATE_HEADER_FORMAT


def check_assignment(
    assignment: Sequence[Optional[date]], constraints: Iterable[DateConstraint]
) -> List[str]:
    """
    Return a description of every constraint the assignment violates.

    An empty list means every unary and binary constraint holds.
    """
    violations = []
    for c in constraints:
        if not c.is_satisfied(assignment):
            if c.arity == 1:
                got = assignment[c.l_val]
            else:
                got = (assignment[c.l_val], assignment[c.r_val])
            violations.append(f"{c} violated by {got}")
    return violations


def extract_schedule(assignment: Sequence[date]) -> pd.DataFrame:
    """Tabulate a solution as one row per meeting: Meeting, Date, Day."""
    return pd.DataFrame(
        {
            "Meeting": list(range(len(assignment))),
            "Date": [d.isoformat() for d in assignment],
            "Day": [d.strftime("%A") for d in assignment],
        },
        columns=["Meeting", "Date", "Day"],
    )


def extract_day_view(assignment: Sequence[date]) -> Dict[str, List[int]]:
    """Group meetings by the day they were scheduled on, in date order."""
    by_day: Dict[str, List[int]] = {}
    for idx, d in sorted(enumerate(assignment), key=lambda item: (item[1], item[0])):
        by_day.setdefault(d.strftime(DATE_HEADER_FORMAT), []).append(idx)
    return by_day


def extract_summary(result: SolverResult, state: Optional[SolveState] = None) -> Dict[str, Any]:
    """
    Collect metrics about a solve: outcome, pruning and search counters.
    """
    metrics: Dict[str, Any] = {
        "Status": result.status,
        "Duration (ms)": result.duration_ms,
        "Node Pruned": result.stats.get("node_pruned", 0),
        "Arc Pruned": result.stats.get("arc_pruned", 0),
        "Search Nodes": result.stats.get("nodes", 0),
        "Backtracks": result.stats.get("backtracks", 0),
    }
    if state is not None:
        metrics["Meetings"] = state.num_meetings
        metrics["Range Days"] = (state.range_end - state.range_start).days + 1
        metrics["Domain Sizes"] = state.domain_sizes()
    if result.assignment is not None:
        metrics["Meetings Per Day"] = {
            day: len(meetings) for day, meetings in extract_day_view(result.assignment).items()
        }
    return metrics
