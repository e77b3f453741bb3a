"""
scheduler.rules
---------------

Exposes all consistency filters by importing from:

- `node`: Node consistency against unary constraints.
- `arc`: Arc consistency against binary constraints (single pass or AC-3).

Allows unified access to all filters via wildcard imports.
"""
from .node import *
from .arc import *
