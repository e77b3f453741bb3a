from typing import Callable

from core.state import SolveState
from utils.logger import get_logger

logger = get_logger(__name__)


class ConstraintManager:
    def __init__(self, state: SolveState):
        self.state = state
        self.rules: list[Callable] = []

    def add_rule(self, rule_func: Callable, condition: bool = True):
        """Register a filter with optional enablement condition."""
        if condition:
            self.rules.append(rule_func)

    def apply_all(self) -> bool:
        """
        Apply all registered filters in order.

        Returns False as soon as a filter leaves some meeting without any
        candidate date, in which case the remaining filters are skipped.
        """
        for rule in self.rules:
            rule(self.state)
            empty = self.state.empty_meetings()
            if empty:
                logger.info(
                    "❌ %s emptied the domain of meeting(s) %s",
                    rule.__name__,
                    empty,
                )
                return False
        return True
