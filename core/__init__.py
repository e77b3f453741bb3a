"""
core
----

Core scheduling engine components:

- UnaryDateConstraint, BinaryDateConstraint & compare_dates:
  Immutable date constraints between meetings and fixed dates.

- ConstraintManager:
  Register and apply consistency filters in a controlled sequence.

- Meeting & SolveState:
  Encapsulate the domains, attached constraints, assignment and counters
  needed to solve one meeting scheduling problem.
"""
