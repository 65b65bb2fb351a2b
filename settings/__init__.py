"""Application settings.

Plain constants; per-legislature overrides go through the service constructors.
"""

from pathlib import Path

# Logging
LOG_DIR = Path("logs")
LOG_LEVEL = "INFO"

# Chamber
CHAMBER_SIZE = 350

# Ranking windows
TOP_CONSENSUS = 5
TOP_ANOMALIES = 3
TOP_PARTY_ABSENTEEISM = 5
TOP_DEPUTIES = 10

# Broken blocks
BLOCK_MIN_VOTES = 5
BLOCK_DOMINANCE = 0.8

# Affinity
DEFAULT_REFERENCE_CODE = "GS"

# Outcome keywords, checked in order
SUCCESS_KEYWORDS = ("Approved", "Ratified")
FAILURE_KEYWORDS = ("Rejected", "Repealed")
NEUTRAL_KEYWORDS = ("Withdrawn", "Lapsed")
GOVERNMENT_KEYWORD = "government"

# Deputies
MIXED_GROUP_KEYWORD = "mixed"
MIXED_GROUP_LABEL = "Mixed Group"
DEPUTY_LIST_FIELDS = ("no_vote_list", "missing_deputies")
