schedule_solve_description = """
Assign a date to every meeting so that all date constraints hold.

### Request Body

- `numMeetings`: Number of meetings to schedule. Meetings are indexed `0..numMeetings-1`.
- `startDate`: First allowed date (inclusive), `YYYY-MM-DD`.
- `endDate`: Last allowed date (inclusive), `YYYY-MM-DD`.
- `constraints`: List of constraints, each with an `arity` and an `op`
  (one of `==`, `!=`, `<`, `<=`, `>`, `>=`). A constraint reads as `left <op> right`.
    - Unary (`arity: 1`): `meeting` and a fixed `date`.
    ```json
    {"arity": 1, "meeting": 0, "op": ">=", "date": "2025-07-03"}
    ```
    - Binary (`arity: 2`): `left` and `right` meeting indices.
    ```json
    {"arity": 2, "left": 0, "op": "<", "right": 1}
    ```
- `engine` (Optional): `backtracking` (default) or `cp-sat`.
- `propagation` (Optional): `single-pass` (default) or `ac3`. Only used by the backtracking engine.
- `maxNodes` (Optional): Stop the backtracking search after this many tentative assignments.

### Response

- `schedule`: One row per meeting with `Meeting`, `Date` and `Day`.
- `metrics`: Outcome, pruning counts, search nodes, backtracks and meetings per day.

### Errors

- `400`: Malformed input (meeting index out of range, unsupported operator or arity, range end before start).
- `408`: The search limit was reached before an answer was found.
- `422`: No schedule satisfies every constraint, or the request body is invalid.
"""

schedule_check_description = """
Check a proposed schedule against a list of constraints.

### Request Body

- `numMeetings`: Number of meetings.
- `constraints`: Same format as for `/schedule/solve`.
- `schedule`: One date per meeting, indexed by meeting.

### Response

- `valid`: Whether every constraint holds.
- `violations`: A description of each violated constraint.
"""
