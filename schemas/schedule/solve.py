from pydantic import BaseModel, model_validator, Field, ConfigDict
from typing import List, Literal, Optional, Any
import datetime as dt
from core.constraints import BinaryDateConstraint, DateConstraint, UnaryDateConstraint
from exceptions.custom_errors import UnsupportedArityError
from utils.constants import *


# Define data models
class ConstraintIn(BaseModel):
    model_config = ConfigDict(extra="allow")

    arity: int
    op: str
    # unary: meeting <op> date
    meeting: Optional[int] = None
    date: Optional[dt.date] = None
    # binary: left <op> right
    left: Optional[int] = None
    right: Optional[int] = None

    @model_validator(mode="before")
    @classmethod
    def extract_operator(cls, values: Any) -> Any:
        """
        Accept "operator" or "operation" as the key for the comparison operator,
        so that payloads written as {"left": 0, "operator": "<", "right": 1} work too.
        """
        if isinstance(values, dict) and "op" not in values:
            for key in list(values.keys()):
                if key.lower().startswith("operat"):
                    values["op"] = values.pop(key)
                    break
        return values

    @model_validator(mode="after")
    def check_operands(self) -> "ConstraintIn":
        if self.arity == 1 and (self.meeting is None or self.date is None):
            raise ValueError("A unary constraint needs both 'meeting' and 'date'.")
        if self.arity == 2 and (self.left is None or self.right is None):
            raise ValueError("A binary constraint needs both 'left' and 'right'.")
        return self

    def to_constraint(self) -> DateConstraint:
        """Convert to a core constraint. Arity outside {1, 2} is rejected."""
        if self.arity == 1:
            return UnaryDateConstraint(self.meeting, self.op, self.date)
        if self.arity == 2:
            return BinaryDateConstraint(self.left, self.right, self.op)
        raise UnsupportedArityError(
            f"❌ Unsupported constraint arity {self.arity}; expected 1 (unary) or 2 (binary)."
        )


class ScheduleRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    numMeetings: int = Field(le=MAX_MEETINGS)
    startDate: dt.date
    endDate: dt.date
    constraints: List[ConstraintIn] = Field(default_factory=list)
    engine: Literal["backtracking", "cp-sat"] = DEFAULT_ENGINE
    propagation: Literal["single-pass", "ac3"] = DEFAULT_PROPAGATION
    maxNodes: Optional[int] = Field(default=None, ge=1)

    @model_validator(mode="after")
    def check_range_length(self) -> "ScheduleRequest":
        days = (self.endDate - self.startDate).days + 1
        if days > MAX_RANGE_DAYS:
            raise ValueError(
                f"Date range covers {days} days; at most {MAX_RANGE_DAYS} are allowed."
            )
        return self


class CheckRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    numMeetings: int = Field(ge=0, le=MAX_MEETINGS)
    constraints: List[ConstraintIn] = Field(default_factory=list)
    schedule: List[dt.date]

    @model_validator(mode="after")
    def check_schedule_length(self) -> "CheckRequest":
        if len(self.schedule) != self.numMeetings:
            raise ValueError(
                f"Schedule has {len(self.schedule)} dates for {self.numMeetings} meetings."
            )
        return self


class ScheduledMeeting(BaseModel):
    Meeting: int
    Date: dt.date
    Day: str


class ScheduleResponse(BaseModel):
    schedule: List[ScheduledMeeting]
    metrics: dict


class CheckResponse(BaseModel):
    valid: bool
    violations: List[str]
