import time
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Tuple

import pandas as pd

from core.constraint_manager import ConstraintManager
from core.constraints import DateConstraint
from exceptions.custom_errors import NoFeasibleSolutionError
from scheduler.cpsat import solve_with_cp_sat
from scheduler.extractor import check_assignment, extract_schedule, extract_summary
from scheduler.rules import ac3_rule, arc_consistency_rule, node_consistency_rule
from scheduler.setup import setup_state
from scheduler.solver import SolverResult, run_search
from utils.constants import CP_SAT_TIMEOUT, DEFAULT_ENGINE, DEFAULT_PROPAGATION, PROPAGATION_MODES
from utils.logger import get_logger

logger = get_logger(__name__)


# == Solve ==
def solve_schedule(
    n_meetings: int,
    range_start,
    range_end,
    constraints: Iterable[DateConstraint],
    propagation: str = DEFAULT_PROPAGATION,
    max_nodes: Optional[int] = None,
) -> SolverResult:
    """
    Run the full pipeline: build domains, filter them, search.

    If filtering empties any domain the search is skipped and the result
    reports no solution, exactly as an exhausted search would.
    """
    if propagation not in PROPAGATION_MODES:
        raise ValueError(
            f"Unknown propagation '{propagation}'. Expected one of {', '.join(PROPAGATION_MODES)}"
        )

    start = time.perf_counter()
    state = setup_state(n_meetings, range_start, range_end, constraints)

    cm = ConstraintManager(state)
    cm.add_rule(node_consistency_rule)
    cm.add_rule(arc_consistency_rule, condition=propagation == "single-pass")
    cm.add_rule(ac3_rule, condition=propagation == "ac3")

    if not cm.apply_all():
        duration_ms = int((time.perf_counter() - start) * 1000)
        logger.info("⚠️ No schedule possible: a meeting has no candidate date left.")
        return SolverResult(
            status="no-solution",
            assignment=None,
            stats=dict(state.stats),
            duration_ms=duration_ms,
            message="A meeting has no date left after filtering.",
            state=state,
        )

    result = run_search(state, max_nodes=max_nodes)
    result.duration_ms = int((time.perf_counter() - start) * 1000)
    return result


def solve(
    n_meetings: int,
    range_start,
    range_end,
    constraints: Iterable[DateConstraint],
    propagation: str = DEFAULT_PROPAGATION,
    max_nodes: Optional[int] = None,
) -> Optional[List[date]]:
    """
    Assign a date in [range_start, range_end] to each of `n_meetings`
    meetings so that every constraint holds.

    Returns:
        One date per meeting, indexed by meeting, or None if no valid
        schedule exists.
    """
    return solve_schedule(
        n_meetings,
        range_start,
        range_end,
        constraints,
        propagation=propagation,
        max_nodes=max_nodes,
    ).assignment


# == Build Schedule ==
def build_schedule(
    n_meetings: int,
    range_start,
    range_end,
    constraints: Iterable[DateConstraint],
    engine: str = DEFAULT_ENGINE,
    propagation: str = DEFAULT_PROPAGATION,
    max_nodes: Optional[int] = None,
    timeout: float = CP_SAT_TIMEOUT,
) -> Tuple[pd.DataFrame, Dict[str, Any]]:
    """
    Builds a meeting schedule satisfying every constraint.
    Returns a schedule DataFrame and a metrics dictionary.

    Raises:
        NoFeasibleSolutionError: If no valid schedule exists.
    """
    if not isinstance(constraints, (set, frozenset)):
        constraints = list(constraints)
    logger.info("📋 Building schedule with engine=%s, propagation=%s", engine, propagation)

    if engine == "cp-sat":
        start = time.perf_counter()
        assignment = solve_with_cp_sat(
            n_meetings, range_start, range_end, constraints, timeout=timeout
        )
        result = SolverResult(
            status="solved" if assignment is not None else "no-solution",
            assignment=assignment,
            duration_ms=int((time.perf_counter() - start) * 1000),
        )
    elif engine == "backtracking":
        result = solve_schedule(
            n_meetings,
            range_start,
            range_end,
            constraints,
            propagation=propagation,
            max_nodes=max_nodes,
        )
    else:
        raise ValueError(f"Unknown engine '{engine}'")

    if not result.solved:
        raise NoFeasibleSolutionError(
            "❌ No feasible schedule: the constraints cannot all be satisfied "
            f"between {range_start} and {range_end}."
        )

    violations = check_assignment(result.assignment, constraints)
    if violations:
        raise RuntimeError("Solver returned an invalid schedule:\n" + "\n".join(violations))

    metrics = extract_summary(result, result.state)
    metrics["Engine"] = engine
    return extract_schedule(result.assignment), metrics
