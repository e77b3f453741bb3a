from datetime import date, timedelta
from typing import Iterable, List, Optional

from ortools.sat.python import cp_model

from core.constraints import DateConstraint
from exceptions.custom_errors import SearchLimitExceededError
from scheduler.setup import order_constraints
from utils.constants import CP_SAT_SEED, CP_SAT_TIMEOUT
from utils.date_utils import compute_day_offset, normalise_date, num_days_between
from utils.validate import validate_input_params
from utils.logger import get_logger

logger = get_logger(__name__)


def configure_solver(timeout: float = CP_SAT_TIMEOUT, seed: int = CP_SAT_SEED) -> cp_model.CpSolver:
    """Configure the CP solver."""
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.random_seed = seed
    solver.parameters.num_workers = 1
    solver.parameters.log_search_progress = False
    return solver


def get_model_size(model: cp_model.CpModel) -> tuple[int, int]:
    """Get the number of constraints and variables in the model."""
    proto = model.Proto()
    return len(proto.constraints), len(proto.variables)


def add_relation(model: cp_model.CpModel, left, op: str, right):
    """Post `left <op> right` on the model."""
    if op == "==":
        model.Add(left == right)
    elif op == "!=":
        model.Add(left != right)
    elif op == "<":
        model.Add(left < right)
    elif op == "<=":
        model.Add(left <= right)
    elif op == ">":
        model.Add(left > right)
    elif op == ">=":
        model.Add(left >= right)


def solve_with_cp_sat(
    n_meetings: int,
    range_start,
    range_end,
    constraints: Iterable[DateConstraint],
    timeout: float = CP_SAT_TIMEOUT,
) -> Optional[List[date]]:
    """
    Solve the same problem with OR-Tools CP-SAT.

    Each meeting becomes an integer day offset from `range_start`. Any
    satisfying assignment may be returned, not necessarily the one the
    backtracking search would find first.

    Returns:
        One date per meeting, or None if the model is infeasible.
    """
    start, end = normalise_date(range_start), normalise_date(range_end)
    validate_input_params(n_meetings, start, end)
    checked = order_constraints(constraints, n_meetings)
    horizon = num_days_between(start, end) - 1

    model = cp_model.CpModel()
    offset = [model.NewIntVar(0, horizon, f"meeting_{i}") for i in range(n_meetings)]

    for c in checked:
        if c.arity == 1:
            add_relation(model, offset[c.l_val], c.op, compute_day_offset(c.r_val, start))
        elif c.is_reflexive:
            # d <op> d does not depend on d
            if not c.holds_for(start, start):
                logger.info("⚠️ %s can never hold.", c)
                return None
        else:
            add_relation(model, offset[c.l_val], c.op, offset[c.r_val])

    num_constraints, num_vars = get_model_size(model)
    logger.info(f"→ #constraints = {num_constraints},  #int_vars = {num_vars}")

    solver = configure_solver(timeout=timeout)
    status = solver.Solve(model)
    logger.info(f"⏱ Solve time: {solver.WallTime():.2f} seconds")

    if status == cp_model.UNKNOWN:
        raise SearchLimitExceededError(
            f"❌ CP-SAT reached the {timeout}s limit without a result."
        )
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        logger.info("⚠️ CP-SAT found no schedule (status %s).", solver.StatusName(status))
        return None

    return [start + timedelta(days=solver.Value(v)) for v in offset]
