import json
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Expose constants as variables
OPERATORS = tuple(_constants["OPERATORS"])
DATE_HEADER_FORMAT = _constants["DATE_HEADER_FORMAT"]

PROPAGATION_MODES = tuple(_constants["PROPAGATION_MODES"])
DEFAULT_PROPAGATION = _constants["DEFAULT_PROPAGATION"]

ENGINES = tuple(_constants["ENGINES"])
DEFAULT_ENGINE = _constants["DEFAULT_ENGINE"]
CP_SAT_TIMEOUT = _constants["CP_SAT_TIMEOUT"]
CP_SAT_SEED = _constants["CP_SAT_SEED"]

MAX_MEETINGS = _constants["MAX_MEETINGS"]
MAX_RANGE_DAYS = _constants["MAX_RANGE_DAYS"]
