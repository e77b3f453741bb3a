from core.state import SolveState
from utils.logger import get_logger

"""
This module contains the node consistency filter for the meeting scheduling problem.
"""

logger = get_logger(__name__)


def node_consistency_rule(state: SolveState):
    """
    Remove every date that violates one of the meeting's unary constraints.

    Each meeting is filtered on its own. The result is exact: afterwards every
    remaining date satisfies all unary constraints of its meeting.
    """
    pruned = 0
    for meeting in state.meetings:
        inconsistent = []
        for constraint in meeting.unary_constraints:
            for d in meeting.domain:
                if not constraint.holds_for(d):
                    inconsistent.append(d)
        pruned += meeting.remove_dates(inconsistent)

    state.stats["node_pruned"] += pruned
    logger.info("Node consistency removed %d date(s)", pruned)
