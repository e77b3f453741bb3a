class NoFeasibleSolutionError(Exception):
    """Raised when no assignment of dates satisfies every constraint."""

    pass


class InvalidMeetingCountError(Exception):
    """Raised when the number of meetings is negative or above the allowed limit."""

    pass


class InvalidDateRangeError(Exception):
    """Raised when the scheduling range ends before it starts."""

    pass


class InvalidMeetingIndexError(Exception):
    """Raised when a constraint references a meeting outside [0, N)."""

    pass


class UnsupportedOperatorError(Exception):
    """Raised when a constraint uses an operator other than ==, !=, <, <=, >, >=."""

    pass


class UnsupportedArityError(Exception):
    """Raised when a constraint is neither unary nor binary."""

    pass


class InvalidConstraintDateError(Exception):
    """Raised when a unary constraint compares a meeting with something other than a calendar date."""

    pass


class SearchLimitExceededError(Exception):
    """Raised when the backtracking search runs past the caller's node budget."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    NoFeasibleSolutionError: 422,
    InvalidMeetingCountError: 400,
    InvalidDateRangeError: 400,
    InvalidMeetingIndexError: 400,
    UnsupportedOperatorError: 400,
    UnsupportedArityError: 400,
    InvalidConstraintDateError: 400,
    SearchLimitExceededError: 408,
}
