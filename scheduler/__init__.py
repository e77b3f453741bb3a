"""
scheduler
---------

Main scheduling module. Initializes key components:

- `setup`: Meetings, initial domains and constraint attachment.
- `rules`: Node and arc consistency filters.
- `solver`: Backtracking search and result handling.
- `cpsat`: The same problem solved with OR-Tools CP-SAT.
- `builder`: The top-level solve pipeline.

Provides high-level access to core scheduling functionality.
"""
from . import builder
from .builder import build_schedule, solve, solve_schedule
